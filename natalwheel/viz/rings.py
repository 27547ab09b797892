"""Zodiac and house ring primitives."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from ..chart.catalog import ZODIAC_SIGNS
from .core.geometry import normalize_degrees, project
from .layout import WheelLayout

__all__ = [
    "ANGULAR_HOUSES",
    "HouseWedge",
    "ZodiacWedge",
    "build_house_ring",
    "build_zodiac_ring",
    "house_label_longitude",
]

Point = tuple[float, float]

# Houses 1, 4, 7 and 10 start on the chart angles and always draw heavier.
ANGULAR_HOUSES: Final[frozenset[int]] = frozenset({1, 4, 7, 10})


@dataclass(frozen=True)
class ZodiacWedge:
    """Closed annular sector covering one sign."""

    sign: str
    symbol: str
    start: float
    end: float
    path_points: tuple[Point, Point, Point, Point]
    path: str
    label_pos: Point
    label_longitude: float


@dataclass(frozen=True)
class HouseWedge:
    """Cusp line plus label position for one house."""

    house_number: int
    cusp: float
    line: tuple[Point, Point]
    label_pos: Point
    label_longitude: float
    heavy: bool

    @property
    def weight(self) -> int:
        return 2 if self.heavy else 1


def _fmt(value: float) -> str:
    return f"{value:.4f}"


def _sector_path(
    outer_start: Point,
    outer_end: Point,
    inner_end: Point,
    inner_start: Point,
    outer_radius: float,
    inner_radius: float,
) -> str:
    # Degrees increase clockwise on screen, which is SVG's positive sweep.
    return (
        f"M {_fmt(outer_start[0])} {_fmt(outer_start[1])} "
        f"A {_fmt(outer_radius)} {_fmt(outer_radius)} 0 0 1 "
        f"{_fmt(outer_end[0])} {_fmt(outer_end[1])} "
        f"L {_fmt(inner_end[0])} {_fmt(inner_end[1])} "
        f"A {_fmt(inner_radius)} {_fmt(inner_radius)} 0 0 0 "
        f"{_fmt(inner_start[0])} {_fmt(inner_start[1])} Z"
    )


def build_zodiac_ring(layout: WheelLayout, ascendant: float = 0.0) -> tuple[ZodiacWedge, ...]:
    """Build twelve 30° wedges rotated by ``ascendant``."""

    center = layout.center
    outer = layout.outer_radius
    inner = layout.zodiac_inner_radius
    label_radius = (outer + inner) / 2.0
    wedges: list[ZodiacWedge] = []
    for idx, sign in enumerate(ZODIAC_SIGNS):
        start = normalize_degrees(idx * 30.0 + ascendant)
        end = normalize_degrees((idx + 1) * 30.0 + ascendant)
        mid = normalize_degrees(start + 15.0)
        outer_start = project(start, outer, center)
        outer_end = project(end, outer, center)
        inner_end = project(end, inner, center)
        inner_start = project(start, inner, center)
        wedges.append(
            ZodiacWedge(
                sign=sign.name,
                symbol=sign.symbol,
                start=start,
                end=end,
                path_points=(outer_start, outer_end, inner_end, inner_start),
                path=_sector_path(outer_start, outer_end, inner_end, inner_start, outer, inner),
                label_pos=project(mid, label_radius, center),
                label_longitude=mid,
            )
        )
    return tuple(wedges)


def house_label_longitude(cusp: float, next_cusp: float) -> float:
    """Angular midpoint between two cusps, following the wrap through 0°.

    >>> house_label_longitude(350.0, 20.0)
    5.0
    """

    if next_cusp < cusp:
        return normalize_degrees((cusp + next_cusp + 360.0) / 2.0)
    return normalize_degrees((cusp + next_cusp) / 2.0)


def build_house_ring(layout: WheelLayout, cusps: Sequence[float]) -> tuple[HouseWedge, ...]:
    """Build one wedge per cusp; widths follow the cusps, not a fixed 30°."""

    values = [float(cusp) for cusp in cusps]
    if len(values) != 12:
        raise ValueError(f"expected 12 house cusps, got {len(values)}")
    center = layout.center
    outer = layout.house_outer_radius
    inner = layout.house_inner_radius
    label_radius = (outer + inner) / 2.0
    wedges: list[HouseWedge] = []
    for idx, cusp in enumerate(values):
        number = idx + 1
        mid = house_label_longitude(cusp, values[(idx + 1) % 12])
        wedges.append(
            HouseWedge(
                house_number=number,
                cusp=cusp,
                line=(project(cusp, outer, center), project(cusp, inner, center)),
                label_pos=project(mid, label_radius, center),
                label_longitude=mid,
                heavy=number in ANGULAR_HOUSES,
            )
        )
    return tuple(wedges)
