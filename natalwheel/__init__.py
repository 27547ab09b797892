"""natalwheel: radial birth chart layout and interaction engine."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as _get_version

LOG = logging.getLogger(__name__)

try:
    __version__ = _get_version("natalwheel")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"

from .chart import (
    Aspect,
    BirthChartData,
    CelestialPosition,
    load_chart,
    load_chart_file,
    planet_detail,
    validate_chart,
)
from .config import Settings, default_settings, load_settings
from .errors import InvalidChartData, PlacementError
from .interaction import (
    InteractionController,
    InteractionState,
    RenderModel,
    SelectionStateMachine,
)
from .visual import export_wheel, render_wheel_png, render_wheel_svg


def get_version() -> str:
    """Return the resolved package version."""

    return __version__


__all__ = [
    "Aspect",
    "BirthChartData",
    "CelestialPosition",
    "InteractionController",
    "InteractionState",
    "InvalidChartData",
    "PlacementError",
    "RenderModel",
    "SelectionStateMachine",
    "Settings",
    "__version__",
    "default_settings",
    "export_wheel",
    "get_version",
    "load_chart",
    "load_chart_file",
    "load_settings",
    "planet_detail",
    "render_wheel_png",
    "render_wheel_svg",
    "validate_chart",
]
