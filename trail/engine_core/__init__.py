"""
Engine Core - Deterministic trail state management.

The engine:
1. Holds the TrailState for a run
2. Turns player commands into Actions
3. Applies actions via the reducer
4. Hands effects (printing, terminating) back to the driver
"""

from .state import TrailState
from .action import Action, ActionType, ActionPayload, ActionResult, Effect, EffectType
from .reducer import Reducer, apply_action, status_text, HELP_TEXT
from .store import Store, replay

__all__ = [
    "TrailState",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "Effect",
    "EffectType",
    "Reducer",
    "apply_action",
    "status_text",
    "HELP_TEXT",
    "Store",
    "replay",
]
