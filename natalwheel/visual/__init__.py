"""Renderers that draw wheel render models to SVG and PNG."""

from .wheel import export_wheel, render_wheel_png, render_wheel_svg, resolve_theme

__all__ = ["export_wheel", "render_wheel_png", "render_wheel_svg", "resolve_theme"]
