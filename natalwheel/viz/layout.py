"""Concentric ring radii for a wheel of a given size."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..config.settings import Settings

__all__ = ["WheelLayout"]


@dataclass(frozen=True)
class WheelLayout:
    """Radii of the zodiac band, house band, planet ring and aspect circle.

    Rings are measured inwards from the outer edge: the zodiac band sits
    directly inside the rim, the house band inside the zodiac band, then a
    gap before the planet ring and a further inset to the aspect circle.
    """

    size: float = 500.0
    margin: float = 10.0
    zodiac_width: float = 40.0
    house_width: float = 30.0
    planet_gap: float = 30.0
    aspect_inset: float = 60.0

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("wheel size must be positive")
        if self.aspect_radius <= 0:
            raise ValueError(
                "ring widths leave no room for the aspect circle; "
                "increase size or reduce widths"
            )

    @property
    def center(self) -> float:
        return self.size / 2.0

    @property
    def outer_radius(self) -> float:
        return self.size / 2.0 - self.margin

    @property
    def zodiac_inner_radius(self) -> float:
        return self.outer_radius - self.zodiac_width

    @property
    def house_outer_radius(self) -> float:
        return self.zodiac_inner_radius

    @property
    def house_inner_radius(self) -> float:
        return self.house_outer_radius - self.house_width

    @property
    def planet_radius(self) -> float:
        return self.house_inner_radius - self.planet_gap

    @property
    def aspect_radius(self) -> float:
        return self.planet_radius - self.aspect_inset

    @classmethod
    def from_settings(cls, settings: "Settings") -> "WheelLayout":
        cfg = settings.layout
        return cls(
            size=cfg.size,
            margin=cfg.margin,
            zodiac_width=cfg.zodiac_width,
            house_width=cfg.house_width,
            planet_gap=cfg.planet_gap,
            aspect_inset=cfg.aspect_inset,
        )

    def to_dict(self) -> dict[str, float]:
        return {
            "size": self.size,
            "center": self.center,
            "outer_radius": self.outer_radius,
            "zodiac_inner_radius": self.zodiac_inner_radius,
            "house_inner_radius": self.house_inner_radius,
            "planet_radius": self.planet_radius,
            "aspect_radius": self.aspect_radius,
        }
