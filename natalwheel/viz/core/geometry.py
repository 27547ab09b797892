"""Trigonometric helpers shared by the wheel builders.

Ecliptic degrees are drawn with 0° at the top of the wheel and increase
clockwise.  The rotation is a fixed constant of the chart design, not a
setting.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final

__all__ = [
    "ANGLE_OFFSET_DEG",
    "PolarPoint",
    "angular_distance",
    "normalize_degrees",
    "project",
    "to_radians",
]

ANGLE_OFFSET_DEG: Final[float] = 270.0


def to_radians(degree: float) -> float:
    return (ANGLE_OFFSET_DEG - degree) * math.pi / 180.0


def project(degree: float, radius: float, center: float) -> tuple[float, float]:
    """Project ``degree`` onto a ring of ``radius`` around ``(center, center)``.

    Screen coordinates grow downwards, so 0° lands at ``(center, center -
    radius)`` and 90° at ``(center + radius, center)``.  Total over all real
    ``degree``: values outside ``[0, 360)`` simply wrap.
    """

    theta = to_radians(degree)
    return center - math.cos(theta) * radius, center + math.sin(theta) * radius


def normalize_degrees(angle: float) -> float:
    wrapped = float(angle) % 360.0
    return 0.0 if wrapped >= 360.0 else wrapped


def angular_distance(a: float, b: float) -> float:
    """Shortest separation between two longitudes, in ``[0, 180]``."""

    diff = abs(a - b) % 360.0
    return min(diff, 360.0 - diff)


@dataclass(frozen=True)
class PolarPoint:
    longitude: float
    radius: float

    def project(self, center: float) -> tuple[float, float]:
        return project(self.longitude, self.radius, center)
