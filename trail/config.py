"""
Trail Config - Fixed parameters of a trail run.

These values never change during play, so they live apart from
TrailState and are passed to the reducer alongside it.
"""

from datetime import date

from pydantic import BaseModel, Field, field_validator


class TrailConfig(BaseModel):
    """Immutable settings for one trail run."""
    start_date: date = date(2020, 3, 1)
    total_miles: int = Field(2000, ge=0)
    starting_food: int = Field(500, ge=0)
    max_health: int = Field(5, ge=1, description="Health cap; travelers start at full health")

    hunt_days: int = Field(2, ge=0, description="Days spent on every hunt")
    food_per_hunt: int = Field(100, ge=0)

    # Half-open [low, high) ranges used by the driver's random travel
    travel_days_range: tuple[int, int] = (3, 7)
    travel_miles_range: tuple[int, int] = (30, 60)

    model_config = {"frozen": True}

    @field_validator("travel_days_range", "travel_miles_range")
    @classmethod
    def _check_range(cls, value: tuple[int, int]) -> tuple[int, int]:
        low, high = value
        if low < 0:
            raise ValueError("range must not start below zero")
        if low >= high:
            raise ValueError(f"empty range [{low}, {high})")
        return value


DEFAULT_CONFIG = TrailConfig()
