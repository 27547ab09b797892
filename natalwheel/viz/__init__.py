"""Wheel geometry: marker placement, ring wedges and aspect lines.

Everything in this package is a pure function of chart data plus the
current selection; nothing here keeps state between calls.
"""

from .aspects import AspectLine, aspect_weight, build_aspect_lines, filter_aspects, line_style
from .layout import WheelLayout
from .placement import CollisionPlacer, PlacedMarker, place_markers
from .rings import (
    HouseWedge,
    ZodiacWedge,
    build_house_ring,
    build_zodiac_ring,
    house_label_longitude,
)

__all__ = [
    "AspectLine",
    "CollisionPlacer",
    "HouseWedge",
    "PlacedMarker",
    "WheelLayout",
    "ZodiacWedge",
    "aspect_weight",
    "build_aspect_lines",
    "build_house_ring",
    "build_zodiac_ring",
    "filter_aspects",
    "house_label_longitude",
    "line_style",
    "place_markers",
]
