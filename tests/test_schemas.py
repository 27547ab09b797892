from __future__ import annotations

import json

import pytest

from natalwheel.chart.schemas import BirthChartPayload, load_chart, load_chart_file
from natalwheel.errors import InvalidChartData

from tests.helpers import EQUAL_HOUSES


def test_camel_case_payload_loads(payload):
    chart = load_chart(payload)

    assert chart.sun_sign == "aries"
    assert chart.rising_sign == "libra"
    assert set(chart.planets) >= {"north_node", "sun"}
    assert chart.planets["north_node"].retrograde is True
    assert chart.planets["sun"].house == 7
    assert chart.houses == EQUAL_HOUSES
    assert chart.aspects[3].point_b == "north_node"
    assert chart.dominant_planets == ("sun", "mars")
    assert chart.midheaven == 270.0


def test_plain_cusp_list_accepted(payload):
    payload["houses"] = list(EQUAL_HOUSES)
    assert load_chart(payload).houses == EQUAL_HOUSES


def test_house_objects_sorted_by_number(payload):
    payload["houses"] = list(reversed(payload["houses"]))
    assert load_chart(payload).houses == EQUAL_HOUSES


def test_declared_sign_must_match_longitude(payload):
    payload["planets"]["sun"]["sign"] = "taurus"

    with pytest.raises(InvalidChartData) as excinfo:
        load_chart(payload)
    assert excinfo.value.field == "planets.sun.sign"


def test_missing_required_field_wrapped(payload):
    del payload["sunSign"]

    with pytest.raises(InvalidChartData, match="malformed chart payload"):
        load_chart(payload)


def test_eleven_planets_rejected(payload):
    del payload["planets"]["chiron"]

    with pytest.raises(InvalidChartData):
        load_chart(payload)


def test_duplicate_planet_spelling_rejected(payload):
    payload["planets"]["north_node"] = dict(payload["planets"]["northNode"])

    with pytest.raises(InvalidChartData, match="twice"):
        load_chart(payload)


def test_snake_case_fields_accepted(payload):
    payload["sun_sign"] = payload.pop("sunSign")
    payload["rising_sign"] = payload.pop("risingSign")

    model = BirthChartPayload.model_validate(payload)
    assert model.sun_sign == "Aries"
    assert model.to_chart().rising_sign == "libra"


def test_load_chart_file(tmp_path, payload):
    target = tmp_path / "chart.json"
    target.write_text(json.dumps(payload), encoding="utf-8")

    assert load_chart_file(target).sun_sign == "aries"

    target.write_text("[]", encoding="utf-8")
    with pytest.raises(InvalidChartData):
        load_chart_file(target)
