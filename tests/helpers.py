"""Chart builders shared by the test-suite."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from natalwheel.chart import Aspect, BirthChartData, CelestialPosition
from natalwheel.chart.catalog import CELESTIAL_POINTS

# Twelve bodies at least 25° apart, none of which should ever be nudged.
SPACED_LONGITUDES: dict[str, float] = {
    "sun": 15.2,
    "moon": 135.0,
    "mercury": 40.0,
    "venus": 70.0,
    "mars": 105.0,
    "jupiter": 165.0,
    "saturn": 195.0,
    "uranus": 225.0,
    "neptune": 255.0,
    "pluto": 285.0,
    "north_node": 315.0,
    "chiron": 345.0,
}

EQUAL_HOUSES: tuple[float, ...] = tuple(float((180 + 30 * idx) % 360) for idx in range(12))

WRAPPING_HOUSES: tuple[float, ...] = (
    350.0, 20.0, 50.0, 80.0, 110.0, 140.0, 170.0, 200.0, 230.0, 260.0, 290.0, 320.0,
)

SCENARIO_ASPECTS: tuple[Aspect, ...] = (
    Aspect("sun", "moon", "trine", orb=0.2),
    Aspect("sun", "mars", "square", orb=0.2, applying=True),
    Aspect("venus", "mars", "sextile", orb=5.0),
)


def make_chart(
    longitudes: Mapping[str, float] | None = None,
    *,
    houses: Sequence[float] = EQUAL_HOUSES,
    aspects: Sequence[Aspect] = SCENARIO_ASPECTS,
    speeds: Mapping[str, float] | None = None,
    sun_sign: str = "aries",
    rising_sign: str | None = "libra",
    ascendant: float | None = 180.0,
) -> BirthChartData:
    values = dict(SPACED_LONGITUDES if longitudes is None else longitudes)
    speeds = dict(speeds or {})
    planets = {
        key: CelestialPosition(longitude=values[key], speed=speeds.get(key, 1.0))
        for key in CELESTIAL_POINTS
        if key in values
    }
    return BirthChartData(
        sun_sign=sun_sign,
        moon_sign="leo",
        rising_sign=rising_sign,
        planets=planets,
        houses=tuple(houses),
        aspects=tuple(aspects),
        ascendant=ascendant,
    )


def clustered_chart(longitude: float = 100.0) -> BirthChartData:
    return make_chart(
        {key: longitude for key in CELESTIAL_POINTS},
        aspects=(),
        sun_sign="cancer",
    )


def sample_payload() -> dict[str, Any]:
    """camelCase payload as produced by the ephemeris service."""

    planets: dict[str, Any] = {
        key: {"longitude": value, "speed": 1.0} for key, value in SPACED_LONGITUDES.items()
    }
    planets["northNode"] = planets.pop("north_node")
    planets["northNode"]["speed"] = -0.05
    planets["sun"]["sign"] = "Aries"
    planets["sun"]["house"] = 7
    return {
        "sunSign": "Aries",
        "moonSign": "Leo",
        "risingSign": "Libra",
        "planets": planets,
        "houses": [{"number": idx + 1, "cusp": cusp} for idx, cusp in enumerate(EQUAL_HOUSES)],
        "aspects": [
            {"planet1": "sun", "planet2": "moon", "type": "trine", "orb": 0.2},
            {"planet1": "sun", "planet2": "mars", "type": "square", "orb": 0.2, "applying": True},
            {"planet1": "venus", "planet2": "mars", "type": "sextile", "orb": 5.0},
            {"planet1": "sun", "planet2": "northNode", "type": "opposition", "orb": 0.2},
        ],
        "ascendant": 180.0,
        "midheaven": 270.0,
        "dominantPlanets": ["sun", "mars"],
    }
