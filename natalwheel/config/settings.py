"""Configuration models and helpers for natalwheel settings."""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

LOG = logging.getLogger(__name__)

CURRENT_SETTINGS_SCHEMA_VERSION = 1

# Bodies drawn on the planet ring.
MARKER_COUNT = 12
MIN_STEP = 0.5
# Keeps (360 - 22 * separation) / 12 above MIN_STEP.
MAX_MIN_SEPARATION = 16.0

# -------------------- Settings Schema --------------------


class LayoutCfg(BaseModel):
    """Wheel size and ring widths, in drawing units."""

    size: float = 500.0
    margin: float = 10.0
    zodiac_width: float = 40.0
    house_width: float = 30.0
    planet_gap: float = 30.0
    aspect_inset: float = 60.0

    @field_validator("size", mode="before")
    @classmethod
    def _cap_size(cls, value: float) -> float:
        return max(100.0, min(4000.0, float(value)))

    @field_validator(
        "margin", "zodiac_width", "house_width", "planet_gap", "aspect_inset", mode="before"
    )
    @classmethod
    def _non_negative(cls, value: float) -> float:
        return max(0.0, float(value))


class PlacementCfg(BaseModel):
    """Collision avoidance for planet markers, in degrees.

    With ``n`` markers on the ring, the first ``n - 1`` each block an arc of
    ``2 * min_separation``.  The last marker always finds a slot while the
    widest gap left over is at least one ``step`` wide, which holds whenever
    ``2 * (n - 1) * min_separation + (n - 1) * step < 360``.
    """

    min_separation: float = 8.0
    step: float = 8.0

    @field_validator("min_separation", mode="before")
    @classmethod
    def _cap_separation(cls, value: float) -> float:
        return max(0.0, min(MAX_MIN_SEPARATION, float(value)))

    @field_validator("step", mode="before")
    @classmethod
    def _cap_step(cls, value: float) -> float:
        return max(MIN_STEP, min(30.0, float(value)))

    @model_validator(mode="after")
    def _fit_full_ring(self) -> "PlacementCfg":
        blocked = 2 * (MARKER_COUNT - 1) * self.min_separation
        limit = (360.0 - blocked) / MARKER_COUNT
        if self.step > limit:
            LOG.warning(
                "Placement step %.3f cannot fit %d markers at %.3f separation; using %.3f",
                self.step,
                MARKER_COUNT,
                self.min_separation,
                limit,
                extra={"err_code": "SETTINGS_STEP_CLAMPED"},
            )
            object.__setattr__(self, "step", limit)
        return self


class RenderingCfg(BaseModel):
    """Chart rendering options."""

    theme: Literal["dark", "light"] = "dark"
    marker_radius: float = 14.0
    marker_radius_emphasis: float = 18.0
    show_aspects: bool = True
    show_houses: bool = True

    @field_validator("marker_radius", "marker_radius_emphasis", mode="before")
    @classmethod
    def _cap_marker_radius(cls, value: float) -> float:
        return max(4.0, min(40.0, float(value)))


class Settings(BaseModel):
    """Top-level settings model persisted on disk."""

    schema_version: int = Field(
        default=CURRENT_SETTINGS_SCHEMA_VERSION,
        ge=1,
        description="Version marker for persisted configuration payloads.",
    )
    layout: LayoutCfg = Field(default_factory=LayoutCfg)
    placement: PlacementCfg = Field(default_factory=PlacementCfg)
    rendering: RenderingCfg = Field(default_factory=RenderingCfg)


# -------------------- I/O Helpers --------------------

CONFIG_FILENAME = "config.yaml"


def get_config_home() -> Path:
    """Return the directory where settings should be stored."""

    return Path(os.environ.get("NATALWHEEL_HOME", str(Path.home() / ".natalwheel")))


def config_path() -> Path:
    """Return the full path to the configuration file, creating directories as needed."""

    home = get_config_home()
    home.mkdir(parents=True, exist_ok=True)
    return home / CONFIG_FILENAME


def default_settings() -> Settings:
    """Instantiate a Settings object populated with defaults."""

    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Persist the given settings to disk as YAML."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    data = settings.model_dump()
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=True)
    return target_path


def _coerce_schema_version(raw: object) -> int:
    try:
        value = int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 1
    return max(1, value)


def _upgrade_settings_payload(
    data: dict[str, object], *, schema_version: int
) -> tuple[dict[str, object], bool]:
    """Bring older payloads up to the current schema version."""

    upgraded = deepcopy(data)
    version = max(1, schema_version)
    changed = False

    if version < CURRENT_SETTINGS_SCHEMA_VERSION:
        version = CURRENT_SETTINGS_SCHEMA_VERSION
        changed = True

    if upgraded.get("schema_version") != version:
        upgraded["schema_version"] = version
        changed = True

    return upgraded, changed


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, creating defaults if missing."""

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        settings = default_settings()
        save_settings(settings, source_path)
        return settings
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        LOG.warning(
            "Ignoring malformed settings file %s",
            source_path,
            extra={"err_code": "SETTINGS_MALFORMED"},
        )
        raw = {}
    schema_version = _coerce_schema_version(raw.get("schema_version"))
    data, upgraded = _upgrade_settings_payload(raw, schema_version=schema_version)
    settings = Settings(**data)
    if upgraded:
        save_settings(settings, source_path)
    return settings


def ensure_default_config() -> Path:
    """Ensure a configuration file exists on disk and return its path."""

    target = config_path()
    if not target.exists():
        save_settings(default_settings(), target)
    return target


__all__ = [
    "CONFIG_FILENAME",
    "CURRENT_SETTINGS_SCHEMA_VERSION",
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
