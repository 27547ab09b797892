"""Aspect selection and line styling for the current interaction state."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Final

from ..chart.catalog import aspect_type
from ..chart.model import Aspect
from .core.geometry import project
from .layout import WheelLayout
from .placement import PlacedMarker

__all__ = [
    "AspectLine",
    "EMPHASIS_WEIGHT",
    "NORMAL_WEIGHT",
    "aspect_weight",
    "build_aspect_lines",
    "filter_aspects",
    "line_style",
]

NORMAL_WEIGHT: Final[int] = 1
EMPHASIS_WEIGHT: Final[int] = 2

Point = tuple[float, float]


@dataclass(frozen=True)
class AspectLine:
    a: str
    b: str
    type: str
    start: Point
    end: Point
    style: str
    dash_array: str | None
    weight: int
    emphasized: bool
    color: str
    orb: float
    applying: bool

    def to_dict(self) -> dict[str, object]:
        return {
            "a": self.a,
            "b": self.b,
            "type": self.type,
            "from": list(self.start),
            "to": list(self.end),
            "style": self.style,
            "dash_array": self.dash_array,
            "weight": self.weight,
            "emphasized": self.emphasized,
            "color": self.color,
            "orb": self.orb,
            "applying": self.applying,
        }


def filter_aspects(
    aspects: Iterable[Aspect],
    *,
    selected: str | None = None,
    hovered: str | None = None,
    show_aspects: bool = True,
) -> tuple[Aspect, ...]:
    """Return the aspects to draw, preserving their original order.

    The ``show_aspects`` toggle gates everything.  A selection takes
    precedence over a hover; with neither, every aspect is drawn.
    """

    if not show_aspects:
        return ()
    focus = selected if selected is not None else hovered
    if focus is None:
        return tuple(aspects)
    return tuple(aspect for aspect in aspects if aspect.involves(focus))


def aspect_weight(selected: str | None, hovered: str | None) -> int:
    """Line weight depends only on whether anything is selected or hovered."""

    return EMPHASIS_WEIGHT if (selected is not None or hovered is not None) else NORMAL_WEIGHT


def line_style(type_name: str) -> tuple[str, str | None]:
    definition = aspect_type(type_name)
    if definition is None:
        return "solid", None
    return definition.style, definition.dash_array


def build_aspect_lines(
    aspects: Iterable[Aspect],
    markers: Mapping[str, PlacedMarker],
    layout: WheelLayout,
    *,
    selected: str | None = None,
    hovered: str | None = None,
    show_aspects: bool = True,
) -> tuple[AspectLine, ...]:
    """Project the filtered aspects onto the aspect circle.

    Endpoints use each marker's adjusted longitude so lines meet the
    markers where they are drawn, not where the bodies really are.
    """

    weight = aspect_weight(selected, hovered)
    emphasized = weight == EMPHASIS_WEIGHT
    radius = layout.aspect_radius
    center = layout.center
    lines: list[AspectLine] = []
    for aspect in filter_aspects(
        aspects, selected=selected, hovered=hovered, show_aspects=show_aspects
    ):
        marker_a = markers[aspect.point_a]
        marker_b = markers[aspect.point_b]
        definition = aspect_type(aspect.type)
        style, dash = line_style(aspect.type)
        lines.append(
            AspectLine(
                a=aspect.point_a,
                b=aspect.point_b,
                type=aspect.type,
                start=project(marker_a.adjusted_longitude, radius, center),
                end=project(marker_b.adjusted_longitude, radius, center),
                style=style,
                dash_array=dash,
                weight=weight,
                emphasized=emphasized,
                color=definition.color if definition else "#666666",
                orb=float(aspect.orb),
                applying=aspect.applying,
            )
        )
    return tuple(lines)
