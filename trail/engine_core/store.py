"""
Store - Holds the current trail state and dispatches actions to it.

The store is the only owner of the live state:
- dispatch() runs the reducer and swaps in the new state on success
- subscribers are called inline with every new state
- dispatched actions are kept in history so a run can be replayed
"""

from __future__ import annotations
import logging
from typing import Callable

from ..config import TrailConfig
from .state import TrailState
from .action import Action, ActionResult
from .reducer import Reducer

logger = logging.getLogger(__name__)

Subscriber = Callable[[TrailState], None]


class Store:
    """
    Usage:
        store = Store(config)
        unsubscribe = store.subscribe(print)

        result = store.dispatch(Action.travel(3, 30))
        if not result.success:
            ...
    """

    def __init__(self, config: TrailConfig, state: TrailState | None = None):
        self.config = config
        self.reducer = Reducer(config=config)
        self.state = state if state is not None else TrailState.initial(config)
        self.history: list[Action] = []
        self._subscribers: list[Subscriber] = []

    def dispatch(self, action: Action) -> ActionResult:
        """
        Apply an action to the current state.

        Failed actions leave state and history untouched.
        """
        result = self.reducer.apply(self.state, action)
        if not result.success:
            logger.warning(
                "Rejected %s action (%s): %s",
                action.action_type.value, result.error_code, result.error,
            )
            return result

        self.state = result.new_state
        self.history.append(action)
        for subscriber in list(self._subscribers):
            subscriber(self.state)
        return result

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback for new states. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe


def replay(
    config: TrailConfig,
    actions: list[Action],
    state: TrailState | None = None,
) -> TrailState:
    """Rebuild a state by dispatching actions in order."""
    store = Store(config, state=state)
    for action in actions:
        store.dispatch(action)
    return store.state
