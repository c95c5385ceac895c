"""
Pytest fixtures for Trail tests.
"""

import pytest
from datetime import date

from ..config import TrailConfig
from ..engine_core.state import TrailState


@pytest.fixture
def config() -> TrailConfig:
    """Default trail configuration."""
    return TrailConfig()


@pytest.fixture
def start_state(config: TrailConfig) -> TrailState:
    """The state every run starts from."""
    return TrailState.initial(config)


@pytest.fixture
def tired_state() -> TrailState:
    """Start-of-trail state with one point of health missing."""
    return TrailState(
        date=date(2020, 3, 1),
        miles_remaining=2000,
        food=500,
        health=4,
    )
