"""Geometry, SVG and theme primitives shared by the wheel renderers."""

from .geometry import PolarPoint, angular_distance, normalize_degrees, project, to_radians
from .svg import SvgDocument, SvgElement
from .theme import DARK_THEME, LIGHT_THEME, ThemeManager, WheelTheme, default_manager

__all__ = [
    "DARK_THEME",
    "LIGHT_THEME",
    "PolarPoint",
    "SvgDocument",
    "SvgElement",
    "ThemeManager",
    "WheelTheme",
    "angular_distance",
    "default_manager",
    "normalize_degrees",
    "project",
    "to_radians",
]
