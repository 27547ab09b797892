"""SVG and PNG drawing of a :class:`RenderModel`."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from io import BytesIO

from PIL import Image, ImageDraw, ImageFont

from ..chart.catalog import sign_by_name
from ..config.settings import Settings, default_settings
from ..interaction.controller import MarkerView, RenderModel
from ..viz.core.geometry import project
from ..viz.core.svg import SvgDocument, SvgElement
from ..viz.core.theme import WheelTheme, default_manager

LOG = logging.getLogger(__name__)

__all__ = ["export_wheel", "render_wheel_png", "render_wheel_svg", "resolve_theme"]

Point = tuple[float, float]

# Sample spacing, in degrees, for arcs rasterised as polygons.
_ARC_STEP = 2.0


def resolve_theme(theme: WheelTheme | str | None, settings: Settings) -> WheelTheme:
    if isinstance(theme, WheelTheme):
        return theme
    return default_manager().get(theme or settings.rendering.theme)


def _marker_radius(marker: MarkerView, settings: Settings) -> float:
    cfg = settings.rendering
    return cfg.marker_radius_emphasis if marker.emphasized else cfg.marker_radius


# ---------------------------------------------------------------------------
# SVG rendering


def _svg_marker(
    doc: SvgDocument,
    parent: SvgElement,
    marker: MarkerView,
    theme: WheelTheme,
    settings: Settings,
) -> None:
    radius = _marker_radius(marker, settings)
    group = doc.group(
        parent,
        id=f"marker-{marker.key}",
        data_key=marker.key,
        data_selected=marker.selected,
        data_hovered=marker.hovered,
    )
    doc.circle(
        marker.x,
        marker.y,
        radius,
        parent=group,
        fill=theme.color("marker_fill"),
        stroke=marker.color,
        stroke_width=theme.stroke("marker") * (1.5 if marker.emphasized else 1.0),
    )
    glyph_size = theme.size("planet_glyph_emphasis" if marker.emphasized else "planet_glyph")
    doc.text(
        marker.x,
        marker.y,
        marker.symbol,
        parent=group,
        fill=marker.color,
        font_size=glyph_size,
        text_anchor="middle",
        dominant_baseline="central",
    )
    if marker.retrograde:
        doc.text(
            marker.x + radius * 0.8,
            marker.y - radius * 0.8,
            "R",
            parent=group,
            fill=theme.color("retrograde"),
            font_size=theme.size("retrograde"),
            text_anchor="middle",
        )
    if marker.degree_label:
        doc.text(
            marker.x,
            marker.y + radius + theme.size("house_label") + 2,
            marker.degree_label,
            parent=group,
            fill=theme.color("foreground"),
            font_size=theme.size("house_label"),
            text_anchor="middle",
        )


def render_wheel_svg(
    model: RenderModel,
    theme: WheelTheme | str | None = None,
    settings: Settings | None = None,
) -> str:
    """Render ``model`` as a standalone SVG string."""

    settings = settings or default_settings()
    palette = resolve_theme(theme, settings)
    layout = model.layout
    center = layout.center
    doc = SvgDocument(layout.size, layout.size, background=palette.color("background"))

    zodiac = doc.group(id="zodiac")
    for wedge in model.zodiac_wedges:
        sign = sign_by_name(wedge.sign)
        doc.path(
            wedge.path,
            parent=zodiac,
            fill=sign.color,
            fill_opacity=0.25,
            stroke=palette.color("rim"),
            stroke_width=palette.stroke("wedge"),
        )
        doc.text(
            wedge.label_pos[0],
            wedge.label_pos[1],
            wedge.symbol,
            parent=zodiac,
            fill=sign.color,
            font_size=palette.size("sign_glyph"),
            text_anchor="middle",
            dominant_baseline="central",
        )

    rings = doc.group(id="rings", fill="none", stroke=palette.color("rim"))
    for radius in (layout.outer_radius, layout.zodiac_inner_radius, layout.aspect_radius):
        doc.circle(center, center, radius, parent=rings, stroke_width=palette.stroke("ring"))

    if model.house_wedges is not None:
        houses = doc.group(id="houses")
        doc.circle(
            center,
            center,
            layout.house_inner_radius,
            parent=houses,
            fill="none",
            stroke=palette.color("rim"),
            stroke_width=palette.stroke("ring"),
        )
        for wedge in model.house_wedges:
            (x1, y1), (x2, y2) = wedge.line
            doc.line(
                x1,
                y1,
                x2,
                y2,
                parent=houses,
                stroke=palette.color("foreground" if wedge.heavy else "muted"),
                stroke_width=palette.stroke("house_heavy" if wedge.heavy else "house"),
            )
            doc.text(
                wedge.label_pos[0],
                wedge.label_pos[1],
                str(wedge.house_number),
                parent=houses,
                fill=palette.color("muted"),
                font_size=palette.size("house_label"),
                text_anchor="middle",
                dominant_baseline="central",
            )

    aspects = doc.group(id="aspects")
    for line in model.aspect_lines:
        doc.line(
            line.start[0],
            line.start[1],
            line.end[0],
            line.end[1],
            parent=aspects,
            stroke=line.color,
            stroke_width=line.weight,
            stroke_dasharray=line.dash_array,
            stroke_opacity=0.9 if line.emphasized else 0.6,
            data_aspect=line.type,
        )

    markers = doc.group(id="markers")
    for marker in model.markers:
        _svg_marker(doc, markers, marker, palette, settings)

    label = doc.group(id="center", text_anchor="middle")
    subtitle = model.center_label.subtitle
    title_y = center - (palette.size("center_subtitle") / 2 if subtitle else 0.0)
    doc.text(
        center,
        title_y,
        model.center_label.text,
        parent=label,
        fill=palette.color("foreground"),
        font_size=palette.size("center_title"),
        dominant_baseline="central",
    )
    if subtitle:
        doc.text(
            center,
            title_y + palette.size("center_title") + 2,
            subtitle,
            parent=label,
            fill=palette.color("muted"),
            font_size=palette.size("center_subtitle"),
            dominant_baseline="central",
        )
    return doc.to_string()


# ---------------------------------------------------------------------------
# PNG rendering


def _font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    try:
        return ImageFont.truetype("DejaVuSans.ttf", size=size)
    except OSError:  # pragma: no cover - font availability varies
        return ImageFont.load_default(size=size)


def _measure(draw: ImageDraw.ImageDraw, text: str, font: ImageFont.ImageFont) -> tuple[float, float]:
    if not text:
        return 0.0, 0.0
    bbox = draw.textbbox((0, 0), text, font=font)
    return float(bbox[2] - bbox[0]), float(bbox[3] - bbox[1])


def _centered_text(
    draw: ImageDraw.ImageDraw, pos: Point, text: str, fill: str, font: ImageFont.ImageFont
) -> None:
    w, h = _measure(draw, text, font)
    draw.text((pos[0] - w / 2, pos[1] - h / 2), text, fill=fill, font=font)


def _arc_points(start: float, end: float, radius: float, center: float) -> list[Point]:
    span = (end - start) % 360.0 or 360.0
    steps = max(1, int(math.ceil(span / _ARC_STEP)))
    return [project(start + span * i / steps, radius, center) for i in range(steps + 1)]


def _dashed_line(
    draw: ImageDraw.ImageDraw,
    start: Point,
    end: Point,
    pattern: Sequence[float],
    fill: str,
    width: int,
) -> None:
    length = math.dist(start, end)
    if length == 0:
        return
    ux = (end[0] - start[0]) / length
    uy = (end[1] - start[1]) / length
    pos = 0.0
    idx = 0
    while pos < length:
        seg = pattern[idx % len(pattern)] * max(1, width)
        stop = min(length, pos + seg)
        if idx % 2 == 0:
            draw.line(
                (start[0] + ux * pos, start[1] + uy * pos, start[0] + ux * stop, start[1] + uy * stop),
                fill=fill,
                width=width,
            )
        pos = stop
        idx += 1


def render_wheel_png(
    model: RenderModel,
    theme: WheelTheme | str | None = None,
    settings: Settings | None = None,
) -> bytes:
    """Render ``model`` into a PNG buffer."""

    settings = settings or default_settings()
    palette = resolve_theme(theme, settings)
    layout = model.layout
    size = int(round(layout.size))
    center = layout.center
    img = Image.new("RGBA", (size, size), palette.color("background"))
    draw = ImageDraw.Draw(img, "RGBA")

    sign_font = _font(int(palette.size("sign_glyph")))
    for wedge in model.zodiac_wedges:
        sign = sign_by_name(wedge.sign)
        outline = _arc_points(wedge.start, wedge.end, layout.outer_radius, center)
        outline += list(reversed(_arc_points(wedge.start, wedge.end, layout.zodiac_inner_radius, center)))
        draw.polygon(outline, fill=sign.color + "40", outline=palette.color("rim"))
        _centered_text(draw, wedge.label_pos, wedge.symbol, sign.color, sign_font)

    ring_width = int(round(palette.stroke("ring")))
    for radius in (layout.outer_radius, layout.zodiac_inner_radius, layout.aspect_radius):
        draw.ellipse(
            (center - radius, center - radius, center + radius, center + radius),
            outline=palette.color("rim"),
            width=ring_width,
        )

    if model.house_wedges is not None:
        inner = layout.house_inner_radius
        draw.ellipse(
            (center - inner, center - inner, center + inner, center + inner),
            outline=palette.color("rim"),
            width=ring_width,
        )
        house_font = _font(int(palette.size("house_label")))
        for wedge in model.house_wedges:
            (x1, y1), (x2, y2) = wedge.line
            draw.line(
                (x1, y1, x2, y2),
                fill=palette.color("foreground" if wedge.heavy else "muted"),
                width=int(round(palette.stroke("house_heavy" if wedge.heavy else "house"))),
            )
            _centered_text(
                draw, wedge.label_pos, str(wedge.house_number), palette.color("muted"), house_font
            )

    for line in model.aspect_lines:
        if line.dash_array:
            pattern = [float(part) for part in line.dash_array.split(",")]
            _dashed_line(draw, line.start, line.end, pattern, line.color, line.weight)
        else:
            draw.line((*line.start, *line.end), fill=line.color, width=line.weight)

    label_font = _font(int(palette.size("house_label")))
    retro_font = _font(int(palette.size("retrograde")))
    for marker in model.markers:
        radius = _marker_radius(marker, settings)
        draw.ellipse(
            (marker.x - radius, marker.y - radius, marker.x + radius, marker.y + radius),
            fill=palette.color("marker_fill"),
            outline=marker.color,
            width=2 if marker.emphasized else 1,
        )
        glyph_font = _font(
            int(palette.size("planet_glyph_emphasis" if marker.emphasized else "planet_glyph"))
        )
        _centered_text(draw, (marker.x, marker.y), marker.symbol, marker.color, glyph_font)
        if marker.retrograde:
            _centered_text(
                draw,
                (marker.x + radius * 0.8, marker.y - radius * 0.8),
                "R",
                palette.color("retrograde"),
                retro_font,
            )
        if marker.degree_label:
            _centered_text(
                draw,
                (marker.x, marker.y + radius + palette.size("house_label")),
                marker.degree_label,
                palette.color("foreground"),
                label_font,
            )

    title_font = _font(int(palette.size("center_title")))
    subtitle = model.center_label.subtitle
    title_y = center - (palette.size("center_subtitle") / 2 if subtitle else 0.0)
    _centered_text(
        draw, (center, title_y), model.center_label.text, palette.color("foreground"), title_font
    )
    if subtitle:
        _centered_text(
            draw,
            (center, title_y + palette.size("center_title") + 2),
            subtitle,
            palette.color("muted"),
            _font(int(palette.size("center_subtitle"))),
        )

    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


# ---------------------------------------------------------------------------
# Export helper


def export_wheel(
    model: RenderModel,
    fmt: str = "svg",
    theme: WheelTheme | str | None = None,
    settings: Settings | None = None,
) -> bytes:
    """Export the render model as SVG or PNG bytes."""

    fmt_lower = fmt.lower()
    LOG.debug("exporting wheel as %s (%d markers)", fmt_lower, len(model.markers))
    if fmt_lower == "svg":
        return render_wheel_svg(model, theme, settings).encode("utf-8")
    if fmt_lower == "png":
        return render_wheel_png(model, theme, settings)
    raise ValueError(f"Unsupported export format '{fmt}'")
