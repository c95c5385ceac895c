"""
Action System - Actions, effects, and results.

Actions represent one player command per turn:
1. Turn-spending actions (travel, rest, hunt)
2. Read-only actions (status, help, quit)

Read-only actions never touch state. Instead they return Effects that
the driver carries out, so the reducer itself never performs I/O.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActionType(Enum):
    """Types of actions in the system."""
    # Turn-spending actions
    TRAVEL = "travel"
    REST = "rest"
    HUNT = "hunt"

    # Read-only actions
    STATUS = "status"
    HELP = "help"
    QUIT = "quit"


@dataclass(frozen=True)
class ActionPayload:
    """
    Payload for an action - contains the action parameters.

    Hunt ignores both fields; its length comes from TrailConfig.hunt_days.
    """
    days: int | None = None
    miles: int | None = None


@dataclass(frozen=True)
class Action:
    """A complete action to be applied to the trail state."""
    action_type: ActionType
    payload: ActionPayload = field(default_factory=ActionPayload)

    @classmethod
    def travel(cls, days: int, miles: int) -> Action:
        """Factory for travel action."""
        return cls(
            action_type=ActionType.TRAVEL,
            payload=ActionPayload(days=days, miles=miles),
        )

    @classmethod
    def rest(cls, days: int) -> Action:
        """Factory for rest action."""
        return cls(action_type=ActionType.REST, payload=ActionPayload(days=days))

    @classmethod
    def hunt(cls) -> Action:
        return cls(action_type=ActionType.HUNT)

    @classmethod
    def status(cls) -> Action:
        return cls(action_type=ActionType.STATUS)

    @classmethod
    def help(cls) -> Action:
        return cls(action_type=ActionType.HELP)

    @classmethod
    def quit(cls) -> Action:
        return cls(action_type=ActionType.QUIT)


class EffectType(Enum):
    """Side effects the driver performs after a reducer call."""
    PRINT = "print"
    TERMINATE = "terminate"


@dataclass(frozen=True)
class Effect:
    """A side effect requested by the reducer."""
    effect_type: EffectType
    text: str | None = None

    @classmethod
    def print(cls, text: str) -> Effect:
        return cls(effect_type=EffectType.PRINT, text=text)

    @classmethod
    def terminate(cls) -> Effect:
        return cls(effect_type=EffectType.TERMINATE)


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - New state (if succeeded)
    - Errors (if failed)
    - Effects for the driver to perform
    """
    success: bool
    new_state: Any | None = None  # TrailState
    error: str | None = None
    error_code: str | None = None

    # Human-readable description of what changed
    changes: list[str] = field(default_factory=list)
    effects: list[Effect] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
        effects: list[Effect] | None = None,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(
            success=True,
            new_state=state,
            changes=changes or [],
            effects=effects or [],
        )
