from __future__ import annotations

import pytest

from natalwheel.interaction.state import InteractionPhase, SelectionStateMachine


def test_click_twice_returns_to_idle():
    machine = SelectionStateMachine()

    machine.on_marker_click("sun")
    assert machine.phase is InteractionPhase.SELECTED
    machine.on_marker_click("sun")

    assert machine.phase is InteractionPhase.IDLE
    assert machine.state.is_idle


def test_switching_selection_keeps_hover():
    machine = SelectionStateMachine()
    machine.on_marker_click("sun")
    machine.on_marker_hover_enter("venus")

    state = machine.on_marker_click("moon")

    assert state.selected == "moon"
    assert state.hovered == "venus"
    assert state.phase is InteractionPhase.SELECTED_AND_HOVERING


def test_toggle_off_clears_hover_as_well():
    machine = SelectionStateMachine()
    machine.on_marker_click("mars")
    machine.on_marker_hover_enter("mars")

    machine.on_marker_click("mars")

    assert machine.selected is None
    assert machine.hovered is None


def test_hover_enter_and_exit():
    machine = SelectionStateMachine()

    machine.on_marker_hover_enter("moon")
    assert machine.phase is InteractionPhase.HOVERING
    machine.on_marker_hover_exit("moon")

    assert machine.phase is InteractionPhase.IDLE


def test_stale_hover_exit_is_ignored():
    machine = SelectionStateMachine()
    machine.on_marker_hover_enter("moon")
    machine.on_marker_hover_enter("sun")

    machine.on_marker_hover_exit("moon")

    assert machine.hovered == "sun"


def test_hover_does_not_touch_selection():
    machine = SelectionStateMachine()
    machine.on_marker_click("saturn")
    machine.on_marker_hover_enter("pluto")
    machine.on_marker_hover_exit("pluto")

    assert machine.selected == "saturn"
    assert machine.phase is InteractionPhase.SELECTED


def test_focus_prefers_selection():
    machine = SelectionStateMachine()
    machine.on_marker_hover_enter("moon")
    assert machine.state.focus == "moon"
    machine.on_marker_click("sun")
    assert machine.state.focus == "sun"


def test_unknown_key_rejected():
    machine = SelectionStateMachine()
    with pytest.raises(ValueError):
        machine.on_marker_click("vulcan")
    with pytest.raises(ValueError):
        machine.on_marker_hover_enter("")
    assert machine.state.is_idle


def test_reset_and_independent_instances():
    first = SelectionStateMachine()
    second = SelectionStateMachine()
    first.on_marker_click("sun")

    assert second.state.is_idle
    first.reset()
    assert first.state.is_idle
