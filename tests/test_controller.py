from __future__ import annotations

import itertools
import logging
from dataclasses import replace

import pytest

from natalwheel.chart.model import Aspect, CelestialPosition
from natalwheel.errors import InvalidChartData
from natalwheel.interaction.controller import InteractionController
from natalwheel.viz.core.geometry import angular_distance, project

from tests.helpers import SCENARIO_ASPECTS, SPACED_LONGITUDES, clustered_chart, make_chart


def test_render_is_deterministic(chart):
    controller = InteractionController()
    controller.on_planet_click("sun")
    controller.on_planet_hover_enter("moon")

    first = controller.render(chart)
    second = controller.render(chart)

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_two_controllers_agree(chart):
    assert InteractionController().render(chart) == InteractionController().render(chart)


def test_markers_follow_enumeration_order_and_projection(chart):
    model = InteractionController().render(chart)

    assert [marker.key for marker in model.markers][:2] == ["sun", "moon"]
    for marker in model.markers:
        assert marker.adjusted_longitude == SPACED_LONGITUDES[marker.key]
        assert (marker.x, marker.y) == project(marker.longitude, 140.0, 250.0)


def test_clustered_chart_keeps_minimum_separation():
    model = InteractionController().render(clustered_chart())

    for a, b in itertools.combinations(model.markers, 2):
        assert angular_distance(a.adjusted_longitude, b.adjusted_longitude) >= 8.0 - 1e-9


def test_selection_scenario_end_to_end(chart):
    controller = InteractionController()
    controller.on_chart_data_changed(chart)
    controller.on_planet_click("sun")

    model = controller.current()

    assert [(line.a, line.b) for line in model.aspect_lines] == [("sun", "moon"), ("sun", "mars")]
    assert all(line.emphasized for line in model.aspect_lines)
    sun = model.marker("sun")
    assert sun.selected and sun.emphasized
    assert not model.marker("venus").emphasized


def test_hovered_marker_shows_degree_label(chart):
    controller = InteractionController()
    controller.on_planet_hover_enter("sun")

    model = controller.render(chart)

    assert model.marker("sun").degree_label == "15° Aries"
    assert model.marker("sun").hovered
    assert model.marker("moon").degree_label is None


def test_toggles(chart):
    controller = InteractionController()

    hidden = controller.render(chart, show_aspects=False, show_houses=False)

    assert hidden.aspect_lines == ()
    assert hidden.house_wedges is None
    assert len(hidden.zodiac_wedges) == 12

    controller.on_chart_data_changed(chart)
    controller.on_toggle_houses(False)
    assert controller.current().house_wedges is None
    controller.on_toggle_houses(True)
    assert len(controller.current().house_wedges) == 12


def test_center_label(chart):
    model = InteractionController().render(chart)

    assert model.center_label.text == "♈ Aries"
    assert model.center_label.subtitle == "Rising: ♎"

    no_rising = InteractionController().render(make_chart(rising_sign=None))
    assert no_rising.center_label.subtitle is None


def test_placement_cached_across_interaction(chart):
    controller = InteractionController()
    controller.on_chart_data_changed(chart)

    for key in ("sun", "moon", "sun"):
        controller.on_planet_click(key)
        controller.on_planet_hover_enter("mars")
        controller.current()

    assert controller.placement_runs == 1


def test_placement_recomputed_when_planets_change(chart):
    controller = InteractionController()
    controller.on_chart_data_changed(chart)

    controller.on_chart_data_changed(make_chart())
    assert controller.placement_runs == 1

    moved = dict(chart.planets)
    moved["sun"] = CelestialPosition(longitude=20.0, speed=1.0)
    controller.on_chart_data_changed(replace(chart, planets=moved))

    assert controller.placement_runs == 2
    assert controller.current().marker("sun").longitude == 20.0


def test_current_without_chart_raises():
    with pytest.raises(InvalidChartData):
        InteractionController().current()


def test_invalid_chart_rejected_before_layout(chart):
    broken = dict(chart.planets)
    broken.pop("chiron")

    with pytest.raises(InvalidChartData):
        InteractionController().render(replace(chart, planets=broken))


def test_bad_aspects_dropped_with_diagnostic(chart, caplog):
    aspects = SCENARIO_ASPECTS + (
        Aspect("sun", "vulcan", "trine"),
        Aspect("moon", "sun", "trine"),
    )
    controller = InteractionController()

    with caplog.at_level(logging.WARNING, logger="natalwheel.chart.model"):
        model = controller.render(replace(chart, aspects=aspects))

    assert len(model.aspect_lines) == 3
    codes = {getattr(record, "err_code", None) for record in caplog.records}
    assert codes == {"ASPECT_UNKNOWN_POINT", "ASPECT_DUPLICATE"}


def test_render_model_serialises(chart):
    payload = InteractionController().render(chart).to_dict()

    assert payload["layout"]["planet_radius"] == 140.0
    assert len(payload["markers"]) == 12
    assert payload["house_wedges"][0]["heavy"] is True
    assert payload["center_label"]["text"] == "♈ Aries"


def test_aspects_for_lists_clean_aspects_touching_a_body(chart):
    controller = InteractionController()
    assert controller.aspects_for("mars") == ()

    noisy = replace(chart, aspects=SCENARIO_ASPECTS + (Aspect("mars", "mars", "conjunction"),))
    controller.on_chart_data_changed(noisy)

    assert [(a.point_a, a.point_b, a.type) for a in controller.aspects_for("mars")] == [
        ("sun", "mars", "square"),
        ("venus", "mars", "sextile"),
    ]
    assert controller.aspects_for("pluto") == ()
