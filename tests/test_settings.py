from __future__ import annotations

import itertools
import logging

import pytest
import yaml

from natalwheel.chart.catalog import CELESTIAL_POINTS
from natalwheel.config.settings import (
    CURRENT_SETTINGS_SCHEMA_VERSION,
    LayoutCfg,
    PlacementCfg,
    RenderingCfg,
    Settings,
    config_path,
    ensure_default_config,
    get_config_home,
    load_settings,
    save_settings,
)
from natalwheel.interaction.controller import InteractionController
from natalwheel.viz.core.geometry import angular_distance
from natalwheel.viz.layout import WheelLayout

from tests.helpers import clustered_chart, make_chart


def test_config_home_follows_environment(isolated_home):
    assert get_config_home() == isolated_home
    assert config_path() == isolated_home / "config.yaml"
    assert isolated_home.is_dir()


def test_load_creates_defaults(isolated_home):
    settings = load_settings()

    assert settings == Settings()
    assert (isolated_home / "config.yaml").exists()


def test_round_trip(tmp_path):
    target = tmp_path / "custom.yaml"
    original = Settings(
        layout=LayoutCfg(size=800),
        placement=PlacementCfg(min_separation=6, step=4),
        rendering=RenderingCfg(theme="light", show_houses=False),
    )

    save_settings(original, target)
    loaded = load_settings(target)

    assert loaded == original
    assert loaded.rendering.theme == "light"


def test_validators_clamp_values():
    cfg = PlacementCfg(min_separation=90, step=0)
    assert cfg.min_separation == 16.0
    assert cfg.step == 0.5
    assert LayoutCfg(size=10).size == 100.0
    assert RenderingCfg(marker_radius=100).marker_radius == 40.0


def test_old_schema_upgraded_on_load(tmp_path):
    target = tmp_path / "old.yaml"
    target.write_text(yaml.safe_dump({"schema_version": 0, "layout": {"size": 600}}))

    settings = load_settings(target)

    assert settings.schema_version == CURRENT_SETTINGS_SCHEMA_VERSION
    assert settings.layout.size == 600.0
    assert yaml.safe_load(target.read_text())["schema_version"] == CURRENT_SETTINGS_SCHEMA_VERSION


def test_malformed_file_falls_back_to_defaults(tmp_path):
    target = tmp_path / "broken.yaml"
    target.write_text("- just\n- a list\n")

    assert load_settings(target) == Settings()


def test_ensure_default_config_is_idempotent(isolated_home):
    first = ensure_default_config()
    first.write_text(yaml.safe_dump({"schema_version": 1, "rendering": {"theme": "light"}}))

    assert ensure_default_config() == first
    assert load_settings().rendering.theme == "light"


def test_layout_from_settings():
    settings = Settings(layout=LayoutCfg(size=600, zodiac_width=50))
    layout = WheelLayout.from_settings(settings)

    assert layout.center == 300.0
    assert layout.zodiac_inner_radius == 240.0
    assert InteractionController(settings).layout == layout


def test_controller_uses_placement_settings():
    settings = Settings(placement=PlacementCfg(min_separation=12, step=6))
    model = InteractionController(settings).render(clustered_chart())

    assert model.marker("moon").adjusted_longitude == 112.0


def test_step_shrinks_until_twelve_markers_fit(caplog):
    caplog.set_level(logging.WARNING, logger="natalwheel.config.settings")
    cfg = PlacementCfg(min_separation=16, step=30)

    assert cfg.step == pytest.approx(8.0 / 12)
    assert any(
        getattr(record, "err_code", None) == "SETTINGS_STEP_CLAMPED" for record in caplog.records
    )
    assert PlacementCfg(min_separation=8, step=8).step == 8.0


def test_tightest_accepted_placement_still_renders():
    settings = Settings(placement=PlacementCfg(min_separation=30, step=30))
    separation = settings.placement.min_separation
    # Eleven bodies packed edge to edge, chiron dropped on top of the last one.
    longitudes = {
        key: (index * 2 * separation) % 360.0 for index, key in enumerate(CELESTIAL_POINTS[:11])
    }
    longitudes["chiron"] = longitudes[CELESTIAL_POINTS[10]]

    model = InteractionController(settings).render(make_chart(longitudes, aspects=()))

    assert len(model.markers) == 12
    for a, b in itertools.combinations(model.markers, 2):
        assert angular_distance(a.adjusted_longitude, b.adjusted_longitude) >= separation - 1e-9
    assert 336.0 <= model.marker("chiron").adjusted_longitude <= 344.0
