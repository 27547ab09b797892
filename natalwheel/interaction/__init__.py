"""Selection state and the controller that turns charts into render models."""

from .controller import CenterLabel, InteractionController, MarkerView, RenderModel
from .state import InteractionPhase, InteractionState, SelectionStateMachine

__all__ = [
    "CenterLabel",
    "InteractionController",
    "InteractionPhase",
    "InteractionState",
    "MarkerView",
    "RenderModel",
    "SelectionStateMachine",
]
