"""Pydantic schemas for the chart payload produced by the ephemeris service.

The service speaks camelCase JSON (``sunSign``, ``planet1``, ``northNode``);
the schemas accept both spellings and convert the payload into the frozen
records of :mod:`natalwheel.chart.model`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from ..errors import InvalidChartData
from .catalog import canonical_point_key, sign_by_name
from .model import Aspect, BirthChartData, CelestialPosition, validate_chart

__all__ = [
    "AspectPayload",
    "BirthChartPayload",
    "HousePayload",
    "PositionPayload",
    "load_chart",
    "load_chart_file",
]


def _alias(*names: str) -> AliasChoices:
    return AliasChoices(*names)


class PositionPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    longitude: float
    latitude: float | None = None
    speed: float | None = None
    retrograde: bool | None = None
    sign: str | None = None
    sign_degree: float | None = Field(
        default=None, validation_alias=_alias("sign_degree", "signDegree")
    )
    house: int | None = None


class AspectPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    point_a: str = Field(validation_alias=_alias("point_a", "pointA", "planet1"))
    point_b: str = Field(validation_alias=_alias("point_b", "pointB", "planet2"))
    type: str
    orb: float = 0.0
    applying: bool = False
    angle: float | None = None


class HousePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    number: int | None = None
    cusp: float


class BirthChartPayload(BaseModel):
    """JSON representation of :class:`~natalwheel.chart.model.BirthChartData`."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "sunSign": "aries",
                "risingSign": "libra",
                "planets": {"sun": {"longitude": 15.2, "speed": 0.98}},
                "houses": [180.0, 210.0, 240.0, 270.0, 300.0, 330.0,
                           0.0, 30.0, 60.0, 90.0, 120.0, 150.0],
                "aspects": [{"planet1": "sun", "planet2": "moon", "type": "trine", "orb": 1.2}],
                "ascendant": 180.0,
            }
        },
    )

    sun_sign: str = Field(validation_alias=_alias("sun_sign", "sunSign"))
    moon_sign: str | None = Field(default=None, validation_alias=_alias("moon_sign", "moonSign"))
    rising_sign: str | None = Field(
        default=None, validation_alias=_alias("rising_sign", "risingSign")
    )
    planets: dict[str, PositionPayload]
    houses: list[float | HousePayload]
    aspects: list[AspectPayload] = Field(default_factory=list)
    ascendant: float | None = None
    midheaven: float | None = None
    dominant_planets: list[str] = Field(
        default_factory=list, validation_alias=_alias("dominant_planets", "dominantPlanets")
    )

    def _cusps(self) -> list[float]:
        entries = list(self.houses)
        if entries and all(isinstance(item, HousePayload) for item in entries):
            numbered = [item for item in entries if isinstance(item, HousePayload)]
            if all(item.number is not None for item in numbered):
                numbered.sort(key=lambda item: int(item.number or 0))
            return [item.cusp for item in numbered]
        return [item.cusp if isinstance(item, HousePayload) else float(item) for item in entries]

    def to_chart(self) -> BirthChartData:
        """Convert and validate; raises :class:`InvalidChartData` on bad input."""

        planets: dict[str, CelestialPosition] = {}
        for raw_key, entry in self.planets.items():
            key = canonical_point_key(raw_key) or raw_key
            if key in planets:
                raise InvalidChartData(f"planet '{raw_key}' supplied twice", field="planets")
            position = CelestialPosition(
                longitude=entry.longitude,
                speed=entry.speed,
                retrograde=entry.retrograde,
                house=entry.house,
                latitude=entry.latitude,
            )
            if entry.sign is not None:
                try:
                    declared = sign_by_name(entry.sign)
                except KeyError as exc:
                    raise InvalidChartData(str(exc.args[0]), field=f"planets.{key}.sign") from exc
                if 0.0 <= entry.longitude < 360.0 and declared != position.sign:
                    raise InvalidChartData(
                        f"planets.{key}.sign '{entry.sign}' does not match "
                        f"longitude {entry.longitude}",
                        field=f"planets.{key}.sign",
                    )
            planets[key] = position

        aspects = tuple(
            Aspect(
                point_a=canonical_point_key(item.point_a) or item.point_a,
                point_b=canonical_point_key(item.point_b) or item.point_b,
                type=item.type,
                orb=item.orb,
                applying=item.applying,
                angle=item.angle,
            )
            for item in self.aspects
        )
        chart = BirthChartData(
            sun_sign=self.sun_sign.lower(),
            moon_sign=self.moon_sign.lower() if self.moon_sign else None,
            rising_sign=self.rising_sign.lower() if self.rising_sign else None,
            planets=planets,
            houses=tuple(self._cusps()),
            aspects=aspects,
            ascendant=self.ascendant,
            midheaven=self.midheaven,
            dominant_planets=tuple(
                canonical_point_key(key) or key for key in self.dominant_planets
            ),
        )
        validate_chart(chart)
        return chart


def load_chart(payload: Mapping[str, Any]) -> BirthChartData:
    """Parse a decoded JSON payload into a validated :class:`BirthChartData`."""

    try:
        model = BirthChartPayload.model_validate(dict(payload))
    except ValidationError as exc:
        raise InvalidChartData(f"malformed chart payload: {exc}") from exc
    return model.to_chart()


def load_chart_file(path: str | Path) -> BirthChartData:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise InvalidChartData("chart file must contain a JSON object")
    return load_chart(data)
