"""Configuration helpers exposed at :mod:`natalwheel.config`."""

from __future__ import annotations

from .settings import (
    LayoutCfg,
    PlacementCfg,
    RenderingCfg,
    Settings,
    config_path,
    default_settings,
    ensure_default_config,
    get_config_home,
    load_settings,
    save_settings,
)

__all__ = [
    "LayoutCfg",
    "PlacementCfg",
    "RenderingCfg",
    "Settings",
    "config_path",
    "default_settings",
    "ensure_default_config",
    "get_config_home",
    "load_settings",
    "save_settings",
]
