"""Birth chart domain records and boundary validation.

The records defined here mirror the payload produced by the external
ephemeris service.  They are read-only as far as the wheel engine is
concerned: nothing in :mod:`natalwheel` mutates a :class:`BirthChartData`.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from ..errors import InvalidChartData
from .catalog import (
    CELESTIAL_POINTS,
    ZodiacSign,
    aspect_type,
    sign_by_name,
    sign_for_longitude,
)

LOG = logging.getLogger(__name__)

__all__ = [
    "Aspect",
    "BirthChartData",
    "CelestialPosition",
    "clean_aspects",
    "validate_chart",
]

_CUSP_SPAN_TOLERANCE = 1e-6


@dataclass(frozen=True)
class CelestialPosition:
    """Position of a single body as reported by the ephemeris service.

    ``sign`` and ``sign_degree`` are derived from ``longitude`` so they can
    never drift from it.  ``retrograde`` defaults to ``speed < 0`` and a
    contradicting explicit flag is rejected.
    """

    longitude: float
    speed: float | None = None
    retrograde: bool | None = None
    house: int | None = None
    latitude: float | None = None

    def __post_init__(self) -> None:
        derived = self.speed is not None and self.speed < 0
        if self.retrograde is None:
            object.__setattr__(self, "retrograde", derived)
        elif self.speed is not None and bool(self.retrograde) != derived:
            raise InvalidChartData(
                f"retrograde={self.retrograde} contradicts speed={self.speed}",
                field="retrograde",
            )
        else:
            object.__setattr__(self, "retrograde", bool(self.retrograde))

    @property
    def sign(self) -> ZodiacSign:
        return sign_for_longitude(self.longitude)

    @property
    def sign_degree(self) -> float:
        return self.longitude % 30.0

    def degree_label(self) -> str:
        """Return ``"12° Aries"`` style text for hover tooltips."""

        return f"{math.floor(self.sign_degree)}° {self.sign.label}"


@dataclass(frozen=True)
class Aspect:
    """Angular relationship between two celestial points (unordered pair)."""

    point_a: str
    point_b: str
    type: str
    orb: float = 0.0
    applying: bool = False
    angle: float | None = None

    @property
    def pair(self) -> frozenset[str]:
        return frozenset((self.point_a, self.point_b))

    def involves(self, key: str | None) -> bool:
        return key is not None and (self.point_a == key or self.point_b == key)

    def other(self, key: str) -> str:
        return self.point_b if self.point_a == key else self.point_a


@dataclass(frozen=True)
class BirthChartData:
    """Pre-computed chart handed to the engine by the caller."""

    sun_sign: str
    planets: Mapping[str, CelestialPosition]
    houses: Sequence[float]
    aspects: Sequence[Aspect] = field(default_factory=tuple)
    moon_sign: str | None = None
    rising_sign: str | None = None
    ascendant: float | None = None
    midheaven: float | None = None
    dominant_planets: tuple[str, ...] = ()

    @property
    def ascendant_deg(self) -> float:
        return 0.0 if self.ascendant is None else float(self.ascendant)

    def ordered_planets(self) -> list[tuple[str, CelestialPosition]]:
        """Return planets in the fixed enumeration order, sun first."""

        return [(key, self.planets[key]) for key in CELESTIAL_POINTS if key in self.planets]


def _check_longitude(value: object, field_name: str) -> float:
    try:
        numeric = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidChartData(
            f"{field_name} is not numeric: {value!r}", field=field_name
        ) from exc
    if not math.isfinite(numeric) or not 0.0 <= numeric < 360.0:
        raise InvalidChartData(
            f"{field_name} must be a finite longitude in [0, 360), got {value!r}",
            field=field_name,
        )
    return numeric


def _check_sign(value: str | None, field_name: str, *, required: bool) -> None:
    if value is None:
        if required:
            raise InvalidChartData(f"{field_name} is required", field=field_name)
        return
    try:
        sign_by_name(value)
    except KeyError as exc:
        raise InvalidChartData(str(exc.args[0]), field=field_name) from exc


def validate_chart(chart: BirthChartData) -> None:
    """Reject charts that cannot be laid out.

    Raises
    ------
    InvalidChartData
        When the planet map does not hold exactly the twelve known points,
        when there are not exactly twelve house cusps, when any longitude is
        NaN, infinite or outside ``[0, 360)``, or when the cusps do not run
        in ascending ecliptic order around the circle.
    """

    _check_sign(chart.sun_sign, "sun_sign", required=True)
    _check_sign(chart.moon_sign, "moon_sign", required=False)
    _check_sign(chart.rising_sign, "rising_sign", required=False)

    unknown = sorted(str(key) for key in chart.planets if key not in CELESTIAL_POINTS)
    if unknown:
        raise InvalidChartData(
            f"unknown celestial points: {', '.join(unknown)}",
            field="planets",
            context={"unknown": unknown},
        )
    missing = [key for key in CELESTIAL_POINTS if key not in chart.planets]
    if missing:
        raise InvalidChartData(
            f"expected {len(CELESTIAL_POINTS)} planets, missing: {', '.join(missing)}",
            field="planets",
            context={"missing": missing},
        )
    for key, position in chart.planets.items():
        _check_longitude(position.longitude, f"planets.{key}.longitude")
        if position.house is not None and not 1 <= int(position.house) <= 12:
            raise InvalidChartData(
                f"planets.{key}.house must be within 1..12, got {position.house}",
                field=f"planets.{key}.house",
            )

    cusps = list(chart.houses)
    if len(cusps) != 12:
        raise InvalidChartData(
            f"expected 12 house cusps, got {len(cusps)}", field="houses"
        )
    values = [_check_longitude(cusp, f"houses[{idx}]") for idx, cusp in enumerate(cusps)]
    span = sum((values[(idx + 1) % 12] - values[idx]) % 360.0 for idx in range(12))
    if abs(span - 360.0) > _CUSP_SPAN_TOLERANCE:
        raise InvalidChartData(
            "house cusps must be in ascending ecliptic order with a single wrap",
            field="houses",
            context={"cusps": values},
        )

    if chart.ascendant is not None:
        _check_longitude(chart.ascendant, "ascendant")


def clean_aspects(aspects: Iterable[Aspect]) -> tuple[Aspect, ...]:
    """Drop aspect rows that cannot be drawn, logging each one.

    A cosmetic inconsistency in the aspect list must not prevent the chart
    itself from displaying, so bad rows are skipped rather than raised.
    The original relative order of the surviving aspects is preserved.
    """

    kept: list[Aspect] = []
    seen: set[tuple[frozenset[str], str]] = set()
    for aspect in aspects:
        unknown = [p for p in (aspect.point_a, aspect.point_b) if p not in CELESTIAL_POINTS]
        if unknown:
            LOG.warning(
                "dropping aspect %s-%s: unknown point(s) %s",
                aspect.point_a,
                aspect.point_b,
                ", ".join(map(str, unknown)),
                extra={"err_code": "ASPECT_UNKNOWN_POINT"},
            )
            continue
        if aspect.point_a == aspect.point_b:
            LOG.warning(
                "dropping aspect %s-%s: a body cannot aspect itself",
                aspect.point_a,
                aspect.point_b,
                extra={"err_code": "ASPECT_SELF_PAIR"},
            )
            continue
        definition = aspect_type(aspect.type)
        if definition is None:
            LOG.warning(
                "dropping aspect %s-%s: unknown aspect type %r",
                aspect.point_a,
                aspect.point_b,
                aspect.type,
                extra={"err_code": "ASPECT_UNKNOWN_TYPE"},
            )
            continue
        orb = float(aspect.orb)
        if not math.isfinite(orb) or orb < 0.0:
            LOG.warning(
                "dropping aspect %s-%s: invalid orb %r",
                aspect.point_a,
                aspect.point_b,
                aspect.orb,
                extra={"err_code": "ASPECT_INVALID_ORB"},
            )
            continue
        identity = (aspect.pair, definition.name)
        if identity in seen:
            LOG.warning(
                "dropping duplicate %s between %s and %s",
                definition.name,
                aspect.point_a,
                aspect.point_b,
                extra={"err_code": "ASPECT_DUPLICATE"},
            )
            continue
        seen.add(identity)
        if definition.name != aspect.type:
            aspect = Aspect(
                point_a=aspect.point_a,
                point_b=aspect.point_b,
                type=definition.name,
                orb=orb,
                applying=aspect.applying,
                angle=aspect.angle,
            )
        kept.append(aspect)
    return tuple(kept)

