"""
Reducer - Applies actions to trail state.

The reducer is the single point of state change.
All transitions must go through apply_action().

Design principles:
- Pure function: (state, action) -> new_state
- Validates before applying
- Returns ActionResult with success/failure
- Never prints; output is requested through Effects
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import timedelta

from ..config import TrailConfig
from .state import TrailState
from .action import Action, ActionType, ActionResult, Effect

logger = logging.getLogger(__name__)

HELP_TEXT = "\n".join([
    "Commands:",
    "  travel  - Move down the trail for a few days",
    "  rest    - Stop to recover one point of health",
    "  hunt    - Stop to gather 100 pounds of food",
    "  status  - Show the date, distance, food, and health",
    "  help    - Show this message",
    "  quit    - End the journey",
])

FAREWELL_TEXT = "You set up camp for good. Your journey ends here."

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def status_text(state: TrailState) -> str:
    """Render the state the way the status command shows it."""
    return "\n".join([
        f"Date: {MONTH_NAMES[state.date.month - 1]} {state.date.day:02d}, {state.date.year}",
        f"Miles remaining: {state.miles_remaining}",
        f"Food: {state.food} lbs",
        f"Health: {state.health}",
    ])


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class Reducer:
    """
    Reducer applies actions to trail state.

    Stateless - all state is in TrailState.
    Config provides the fixed rules (health cap, hunt length).
    """
    config: TrailConfig

    def apply(self, state: TrailState, action: Action) -> ActionResult:
        """
        Apply an action to the trail state.

        Returns ActionResult with new state or error.
        """
        state_error = self._validate_state(state)
        if state_error:
            return ActionResult.failure(state_error, error_code="INVALID_STATE")

        validation_error = self._validate_action(action)
        if validation_error:
            return ActionResult.failure(validation_error, error_code="INVALID_ACTION")

        handler = self._get_handler(action.action_type)
        if not handler:
            return ActionResult.failure(
                f"No handler for action type: {action.action_type}",
                error_code="NO_HANDLER",
            )

        try:
            result = handler(state, action)
        except Exception as e:
            logger.exception("Handler for %s failed", action.action_type.value)
            return ActionResult.failure(str(e), error_code="HANDLER_ERROR")

        logger.debug("%s: %s -> %s", action.action_type.value, state, result.new_state)
        return result

    def _validate_state(self, state: TrailState) -> str | None:
        """Check the bounds that depend on config."""
        if _is_int(state.health) and state.health > self.config.max_health:
            return f"Health {state.health} is above the cap of {self.config.max_health}"
        return None

    def _validate_action(self, action: Action) -> str | None:
        """
        Validate the action's payload.

        Returns error message if invalid, None if valid.
        """
        payload = action.payload
        if action.action_type in {ActionType.TRAVEL, ActionType.REST}:
            if payload.days is None:
                return f"{action.action_type.value} needs a number of days"
            if not _is_int(payload.days):
                return f"Days must be a whole number, got {payload.days!r}"
            if payload.days < 0:
                return f"Days must not be negative, got {payload.days}"

        if action.action_type == ActionType.TRAVEL:
            if payload.miles is None:
                return "travel needs a distance"
            if not _is_int(payload.miles):
                return f"Miles must be a whole number, got {payload.miles!r}"
            if payload.miles < 0:
                return f"Miles must not be negative, got {payload.miles}"

        return None

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.TRAVEL: self._handle_travel,
            ActionType.REST: self._handle_rest,
            ActionType.HUNT: self._handle_hunt,
            ActionType.STATUS: self._handle_status,
            ActionType.HELP: self._handle_help,
            ActionType.QUIT: self._handle_quit,
        }
        return handlers.get(action_type)

    def _handle_travel(self, state: TrailState, action: Action) -> ActionResult:
        """Handle travel action. Overshooting the trail stops at zero."""
        days = action.payload.days
        miles = action.payload.miles
        remaining = max(0, state.miles_remaining - miles)

        new_state = state._copy_with(
            date=state.date + timedelta(days=days),
            miles_remaining=remaining,
        )
        changes = [f"Traveled {state.miles_remaining - remaining} miles in {days} days"]
        if new_state.arrived:
            changes.append("Reached the end of the trail")
        return ActionResult.success_with_state(new_state, changes=changes)

    def _handle_rest(self, state: TrailState, action: Action) -> ActionResult:
        """Handle rest action."""
        days = action.payload.days
        health = min(state.health + 1, self.config.max_health)

        new_state = state._copy_with(
            date=state.date + timedelta(days=days),
            health=health,
        )
        return ActionResult.success_with_state(
            new_state,
            changes=[f"Rested {days} days, health is {health}"],
        )

    def _handle_hunt(self, state: TrailState, action: Action) -> ActionResult:
        """Handle hunt action. Payload days and miles are ignored."""
        new_state = state._copy_with(
            date=state.date + timedelta(days=self.config.hunt_days),
            food=state.food + self.config.food_per_hunt,
        )
        return ActionResult.success_with_state(
            new_state,
            changes=[
                f"Hunted for {self.config.hunt_days} days and brought back "
                f"{self.config.food_per_hunt} lbs of food"
            ],
        )

    def _handle_status(self, state: TrailState, action: Action) -> ActionResult:
        return ActionResult.success_with_state(
            state, effects=[Effect.print(status_text(state))]
        )

    def _handle_help(self, state: TrailState, action: Action) -> ActionResult:
        return ActionResult.success_with_state(state, effects=[Effect.print(HELP_TEXT)])

    def _handle_quit(self, state: TrailState, action: Action) -> ActionResult:
        return ActionResult.success_with_state(
            state,
            effects=[Effect.print(FAREWELL_TEXT), Effect.terminate()],
        )


def apply_action(config: TrailConfig, state: TrailState, action: Action) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer(config=config)
    return reducer.apply(state, action)
