from __future__ import annotations

import io

import pytest
from PIL import Image

from natalwheel.config.settings import RenderingCfg, Settings
from natalwheel.interaction.controller import InteractionController
from natalwheel.visual.wheel import export_wheel, render_wheel_png, render_wheel_svg, resolve_theme
from natalwheel.viz.core.theme import LIGHT_THEME

from tests.helpers import make_chart


@pytest.fixture
def model(chart):
    controller = InteractionController()
    controller.on_planet_click("sun")
    controller.on_planet_hover_enter("mars")
    return controller.render(chart)


def test_svg_contains_every_layer(model):
    svg = render_wheel_svg(model)

    assert svg.startswith("<svg")
    for group in ('id="zodiac"', 'id="houses"', 'id="aspects"', 'id="markers"', 'id="center"'):
        assert group in svg
    assert svg.count('data-key="') == 12
    assert 'stroke-dasharray="3,3"' in svg
    assert "♈ Aries" in svg
    assert "Rising: ♎" in svg


def test_svg_marks_selection_and_hover(model):
    svg = render_wheel_svg(model)

    assert 'data-hovered="false" data-key="sun" data-selected="true"' in svg
    assert 'data-hovered="true" data-key="mars" data-selected="false"' in svg
    # Only the hovered body carries a position label.
    assert "15° Cancer" in svg
    assert "15° Aries" not in svg


def test_svg_without_houses(chart):
    model = InteractionController().render(chart, show_houses=False)
    assert 'id="houses"' not in render_wheel_svg(model)


def test_svg_theme_background(model):
    dark = render_wheel_svg(model)
    light = render_wheel_svg(model, theme=LIGHT_THEME)

    assert 'fill="#0d1117"' in dark
    assert 'fill="#ffffff"' in light
    assert render_wheel_svg(model, theme="light") == light


def test_theme_follows_settings():
    settings = Settings(rendering=RenderingCfg(theme="light"))
    assert resolve_theme(None, settings) is not None
    assert resolve_theme(None, settings).identifier == "light"


def test_png_export(model):
    data = render_wheel_png(model)

    assert data.startswith(b"\x89PNG")
    with Image.open(io.BytesIO(data)) as img:
        assert img.size == (500, 500)


def test_retrograde_marker_drawn():
    chart = make_chart(speeds={"saturn": -0.1})
    model = InteractionController().render(chart)

    assert model.marker("saturn").retrograde
    svg = render_wheel_svg(model)
    assert ">R</text>" in svg


def test_export_wheel_formats(model):
    assert export_wheel(model, "SVG").startswith(b"<svg")
    assert export_wheel(model, "png").startswith(b"\x89PNG")
    with pytest.raises(ValueError):
        export_wheel(model, "pdf")
