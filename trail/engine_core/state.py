"""
Trail State - The per-turn record of a traveler's progress.

Design principles:
- Immutable: every transition returns a new state
- Comparable: equality is field-by-field, which the tests rely on
- Configuration-free: fixed parameters live in TrailConfig
"""

from __future__ import annotations
from copy import copy
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import TrailConfig


@dataclass(frozen=True)
class TrailState:
    """
    Complete trail state at a point in time.

    All state changes go through the reducer.
    """
    date: date
    miles_remaining: int
    food: int
    health: int

    def __post_init__(self):
        for name in ("miles_remaining", "food", "health"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")

    @classmethod
    def initial(cls, config: TrailConfig) -> TrailState:
        """Create the starting state for a run."""
        return cls(
            date=config.start_date,
            miles_remaining=config.total_miles,
            food=config.starting_food,
            health=config.max_health,
        )

    @property
    def arrived(self) -> bool:
        return self.miles_remaining == 0

    def _copy_with(self, **kwargs) -> TrailState:
        """Create a copy with some fields replaced."""
        return TrailState(
            date=kwargs.get("date", self.date),
            miles_remaining=kwargs.get("miles_remaining", self.miles_remaining),
            food=kwargs.get("food", self.food),
            health=kwargs.get("health", self.health),
        )

    def clone(self) -> TrailState:
        return copy(self)
