"""Exception types raised by the chart wheel engine."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = ["InvalidChartData", "PlacementError"]


class InvalidChartData(ValueError):
    """Raised when a birth chart cannot be laid out.

    The engine refuses to produce a partial wheel: a layout with undefined
    marker positions is worse than no layout at all.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.context = dict(context or {})


class PlacementError(RuntimeError):
    """Internal consistency fault: a marker could not be placed without overlap."""

    def __init__(self, message: str, *, key: str | None = None, placed: int = 0) -> None:
        super().__init__(message)
        self.key = key
        self.placed = placed
