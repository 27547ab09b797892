"""Collision-aware marker placement on the planet ring.

Markers are processed in the order given.  Each one starts at its true
longitude and is nudged clockwise in fixed steps until it clears every
marker placed before it.  The result is order-dependent by construction;
callers feed bodies in the fixed enumeration order (sun first, chiron
last) so identical charts always produce identical layouts.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Final

from ..errors import PlacementError
from .core.geometry import angular_distance, normalize_degrees, project

LOG = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_MIN_SEPARATION",
    "DEFAULT_NUDGE_STEP",
    "CollisionPlacer",
    "PlacedMarker",
    "place_markers",
]

DEFAULT_MIN_SEPARATION: Final[float] = 8.0
DEFAULT_NUDGE_STEP: Final[float] = 8.0


@dataclass(frozen=True)
class PlacedMarker:
    """Final position of a body marker after collision resolution."""

    key: str
    x: float
    y: float
    adjusted_longitude: float
    longitude: float
    radius: float

    @property
    def displaced(self) -> bool:
        return self.adjusted_longitude != self.longitude


class CollisionPlacer:
    """Place markers on a single ring with a minimum angular separation."""

    def __init__(
        self,
        radius: float,
        center: float,
        *,
        min_separation: float = DEFAULT_MIN_SEPARATION,
        step: float = DEFAULT_NUDGE_STEP,
    ) -> None:
        if step <= 0.0:
            raise ValueError("nudge step must be positive")
        if min_separation < 0.0:
            raise ValueError("minimum separation cannot be negative")
        self.radius = radius
        self.center = center
        self.min_separation = min_separation
        self.step = step
        self.max_nudges = math.ceil(360.0 / step)

    def place(self, points: Iterable[tuple[str, float]]) -> tuple[PlacedMarker, ...]:
        placed: list[float] = []
        markers: list[PlacedMarker] = []
        for key, longitude in points:
            deg = self._resolve(key, float(longitude), placed)
            placed.append(deg)
            x, y = project(deg, self.radius, self.center)
            markers.append(
                PlacedMarker(
                    key=key,
                    x=x,
                    y=y,
                    adjusted_longitude=deg,
                    longitude=float(longitude),
                    radius=self.radius,
                )
            )
        return tuple(markers)

    # Internal helpers --------------------------------------------------
    def _collides(self, deg: float, placed: Sequence[float]) -> bool:
        return any(angular_distance(deg, other) < self.min_separation for other in placed)

    def _resolve(self, key: str, longitude: float, placed: Sequence[float]) -> float:
        deg = longitude
        nudges = 0
        while self._collides(deg, placed):
            if nudges >= self.max_nudges:
                raise PlacementError(
                    f"no free slot for '{key}' after {nudges} nudges "
                    f"({len(placed)} markers already placed)",
                    key=key,
                    placed=len(placed),
                )
            deg = normalize_degrees(deg + self.step)
            nudges += 1
        if nudges:
            LOG.debug(
                "nudged %s from %.3f to %.3f (%d step(s))", key, longitude, deg, nudges
            )
        return deg


def place_markers(
    points: Iterable[tuple[str, float]],
    radius: float,
    center: float,
    *,
    min_separation: float = DEFAULT_MIN_SEPARATION,
    step: float = DEFAULT_NUDGE_STEP,
) -> tuple[PlacedMarker, ...]:
    """Functional wrapper around :class:`CollisionPlacer`."""

    placer = CollisionPlacer(radius, center, min_separation=min_separation, step=step)
    return placer.place(points)
