"""
Tests for the reducer (state transitions).

Tests:
- Travel, rest and hunt arithmetic
- Read-only actions and their effects
- Validation
- Purity
"""

import pytest
from datetime import date

from ..config import TrailConfig
from ..engine_core.state import TrailState
from ..engine_core.action import Action, ActionType, ActionPayload, Effect, EffectType
from ..engine_core.reducer import Reducer, apply_action, status_text, HELP_TEXT


class TestInitialState:
    """Tests for the starting state."""

    def test_initial_values(self, start_state):
        """A run starts on March 1, 2020 with full supplies."""
        assert start_state == TrailState(
            date=date(2020, 3, 1),
            miles_remaining=2000,
            food=500,
            health=5,
        )

    def test_clone_is_equal(self, start_state):
        assert start_state.clone() == start_state

    @pytest.mark.parametrize("field, value", [
        ("miles_remaining", -1),
        ("food", -5),
        ("health", -1),
    ])
    def test_negative_fields_rejected(self, start_state, field, value):
        with pytest.raises(ValueError):
            start_state._copy_with(**{field: value})

    @pytest.mark.parametrize("field, value", [
        ("miles_remaining", 1997.5),
        ("health", True),
    ])
    def test_non_integer_fields_rejected(self, start_state, field, value):
        with pytest.raises(TypeError):
            start_state._copy_with(**{field: value})


class TestTravelAction:
    """Tests for travel action."""

    def test_travel_moves_date_and_distance(self, config, start_state):
        result = apply_action(config, start_state, Action.travel(3, 30))

        assert result.success
        assert result.new_state == TrailState(
            date=date(2020, 3, 4),
            miles_remaining=1970,
            food=500,
            health=5,
        )

    def test_longer_duration_only_changes_date(self, config, start_state):
        result = apply_action(config, start_state, Action.travel(4, 30))

        assert result.new_state == start_state._copy_with(
            date=date(2020, 3, 5), miles_remaining=1970
        )

    def test_longer_distance_only_changes_miles(self, config, start_state):
        result = apply_action(config, start_state, Action.travel(3, 40))

        assert result.new_state == start_state._copy_with(
            date=date(2020, 3, 4), miles_remaining=1960
        )

    def test_overshoot_clamps_to_zero(self, config, start_state):
        """Traveling past the end of the trail stops at zero miles."""
        near_end = start_state._copy_with(miles_remaining=20)
        result = apply_action(config, near_end, Action.travel(3, 45))

        assert result.success
        assert result.new_state.miles_remaining == 0
        assert result.new_state.arrived
        assert "Traveled 20 miles in 3 days" in result.changes

    def test_exact_distance_arrives(self, config, start_state):
        near_end = start_state._copy_with(miles_remaining=30)
        result = apply_action(config, near_end, Action.travel(3, 30))

        assert result.new_state.miles_remaining == 0
        assert "Reached the end of the trail" in result.changes

    def test_negative_miles_rejected(self, config, start_state):
        result = apply_action(config, start_state, Action.travel(3, -5))

        assert not result.success
        assert result.error_code == "INVALID_ACTION"
        assert result.new_state is None

    @pytest.mark.parametrize("action", [
        Action.travel(3, 2.5),
        Action.travel(1.5, 30),
        Action.travel(3, True),
    ])
    def test_non_integer_values_rejected(self, config, start_state, action):
        """Fractional or boolean days and miles are refused."""
        result = apply_action(config, start_state, action)

        assert not result.success
        assert result.error_code == "INVALID_ACTION"
        assert "whole number" in result.error

    def test_missing_distance_rejected(self, config, start_state):
        action = Action(action_type=ActionType.TRAVEL, payload=ActionPayload(days=3))
        result = apply_action(config, start_state, action)

        assert not result.success
        assert "distance" in result.error


class TestRestAction:
    """Tests for rest action."""

    def test_rest_restores_one_health(self, config, tired_state):
        result = apply_action(config, tired_state, Action.rest(2))

        assert result.success
        assert result.new_state == tired_state._copy_with(
            date=date(2020, 3, 3), health=5
        )

    def test_rest_at_full_health_is_capped(self, config, start_state):
        result = apply_action(config, start_state, Action.rest(2))

        assert result.new_state.health == 5
        assert result.new_state.date == date(2020, 3, 3)

    def test_rest_respects_configured_cap(self, start_state):
        config = TrailConfig(max_health=3)
        state = start_state._copy_with(health=3)

        result = apply_action(config, state, Action.rest(1))

        assert result.new_state.health == 3

    @pytest.mark.parametrize("days", [2.5, "2", False])
    def test_non_integer_days_rejected(self, config, tired_state, days):
        result = apply_action(config, tired_state, Action.rest(days))

        assert not result.success
        assert result.error_code == "INVALID_ACTION"

    def test_health_above_cap_rejected(self, config, start_state):
        """A state healthier than the config allows is refused."""
        overfull = start_state._copy_with(health=9)

        result = apply_action(config, overfull, Action.rest(2))

        assert not result.success
        assert result.error_code == "INVALID_STATE"

    def test_negative_days_rejected(self, config, tired_state):
        result = apply_action(config, tired_state, Action.rest(-1))

        assert not result.success
        assert result.error_code == "INVALID_ACTION"


class TestHuntAction:
    """Tests for hunt action."""

    def test_hunt_adds_food(self, config, start_state):
        result = apply_action(config, start_state, Action.hunt())

        assert result.new_state == start_state._copy_with(
            date=date(2020, 3, 3), food=600
        )

    def test_hunt_uses_configured_days(self, start_state):
        config = TrailConfig(hunt_days=3)
        result = apply_action(config, start_state, Action.hunt())

        assert result.new_state.date == date(2020, 3, 4)
        assert result.new_state.food == 600

    def test_hunt_ignores_payload(self, config, start_state):
        """Days and miles attached to a hunt have no effect."""
        action = Action(
            action_type=ActionType.HUNT,
            payload=ActionPayload(days=10, miles=99),
        )
        result = apply_action(config, start_state, action)

        assert result.new_state == apply_action(config, start_state, Action.hunt()).new_state


class TestReadOnlyActions:
    """Tests for status, help and quit."""

    def test_status_prints_state(self, config, start_state):
        result = apply_action(config, start_state, Action.status())

        assert result.new_state == start_state
        assert result.effects == [Effect.print(status_text(start_state))]
        assert "Miles remaining: 2000" in result.effects[0].text

    def test_status_text_format(self, start_state):
        """The month name does not depend on the process locale."""
        assert status_text(start_state).splitlines() == [
            "Date: March 01, 2020",
            "Miles remaining: 2000",
            "Food: 500 lbs",
            "Health: 5",
        ]

    def test_help_prints_commands(self, config, start_state):
        result = apply_action(config, start_state, Action.help())

        assert result.new_state == start_state
        assert result.effects == [Effect.print(HELP_TEXT)]

    def test_quit_terminates(self, config, start_state):
        result = apply_action(config, start_state, Action.quit())

        assert result.new_state == start_state
        assert [e.effect_type for e in result.effects] == [
            EffectType.PRINT,
            EffectType.TERMINATE,
        ]


class TestScenario:
    """A short run chaining several turns."""

    def test_travel_then_hunt(self, config, start_state):
        reducer = Reducer(config=config)

        after_travel = reducer.apply(start_state, Action.travel(3, 30)).new_state
        after_hunt = reducer.apply(after_travel, Action.hunt()).new_state

        assert after_hunt == TrailState(
            date=date(2020, 3, 6),
            miles_remaining=1970,
            food=600,
            health=5,
        )


class TestPurity:
    """The reducer never changes its input and always agrees with itself."""

    @pytest.mark.parametrize("action", [
        Action.travel(5, 45),
        Action.rest(2),
        Action.hunt(),
        Action.status(),
    ])
    def test_same_input_same_output(self, config, tired_state, action):
        before = tired_state.clone()

        first = apply_action(config, tired_state, action)
        second = apply_action(config, tired_state, action)

        assert first.new_state == second.new_state
        assert first.effects == second.effects
        assert tired_state == before

    def test_handler_errors_become_failures(self, config):
        """A broken state yields a HANDLER_ERROR result instead of raising."""
        broken = TrailState(date=None, miles_remaining=10, food=0, health=1)

        result = apply_action(config, broken, Action.rest(1))

        assert not result.success
        assert result.error_code == "HANDLER_ERROR"
