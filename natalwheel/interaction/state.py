"""Selection and hover tracking for wheel markers."""

from __future__ import annotations

import logging
from collections.abc import Collection
from dataclasses import dataclass
from enum import Enum

from ..chart.catalog import CELESTIAL_POINTS

LOG = logging.getLogger(__name__)

__all__ = ["InteractionPhase", "InteractionState", "SelectionStateMachine"]


class InteractionPhase(str, Enum):
    IDLE = "idle"
    HOVERING = "hovering"
    SELECTED = "selected"
    SELECTED_AND_HOVERING = "selected_and_hovering"


@dataclass
class InteractionState:
    """Engine-owned interaction state; never persisted."""

    selected: str | None = None
    hovered: str | None = None

    @property
    def phase(self) -> InteractionPhase:
        if self.selected is None:
            return InteractionPhase.IDLE if self.hovered is None else InteractionPhase.HOVERING
        if self.hovered is None:
            return InteractionPhase.SELECTED
        return InteractionPhase.SELECTED_AND_HOVERING

    @property
    def is_idle(self) -> bool:
        return self.selected is None and self.hovered is None

    @property
    def focus(self) -> str | None:
        """Key whose aspects are shown: the selection wins over the hover."""

        return self.selected if self.selected is not None else self.hovered

    def copy(self) -> "InteractionState":
        return InteractionState(selected=self.selected, hovered=self.hovered)


class SelectionStateMachine:
    """Event-driven transitions between idle, hovering and selected.

    Clicks are sticky and toggle; hovers are transient.  There are no
    timers: state only changes when an event arrives.
    """

    def __init__(self, keys: Collection[str] = CELESTIAL_POINTS) -> None:
        self._keys = frozenset(keys)
        self.state = InteractionState()

    def _check(self, key: str) -> str:
        if key not in self._keys:
            raise ValueError(f"Unknown celestial point '{key}'")
        return key

    @property
    def selected(self) -> str | None:
        return self.state.selected

    @property
    def hovered(self) -> str | None:
        return self.state.hovered

    @property
    def phase(self) -> InteractionPhase:
        return self.state.phase

    def on_marker_click(self, key: str) -> InteractionState:
        self._check(key)
        if self.state.selected == key:
            # Toggle-off returns to idle.
            self.state.selected = None
            self.state.hovered = None
        else:
            self.state.selected = key
        LOG.debug("click %s -> %s", key, self.state.phase.value)
        return self.state

    def on_marker_hover_enter(self, key: str) -> InteractionState:
        self.state.hovered = self._check(key)
        return self.state

    def on_marker_hover_exit(self, key: str) -> InteractionState:
        self._check(key)
        # A late exit for a marker that is no longer hovered is ignored.
        if self.state.hovered == key:
            self.state.hovered = None
        return self.state

    def reset(self) -> InteractionState:
        self.state = InteractionState()
        return self.state
