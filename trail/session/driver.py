"""
Driver - Reads one command, applies it, and prints the outcome.

The driver is the only place that touches stdin/stdout. It:
1. Prompts for and reads a single line
2. Maps the exact text "travel" to a randomly sized travel action
3. Dispatches it to the store, then dispatches a status action
4. Performs the effects the reducer hands back

Any other text is reported as an unimplemented action.
"""

from __future__ import annotations
import logging
import random
import sys
from typing import TextIO

from ..config import TrailConfig
from ..engine_core.action import Action, ActionResult, EffectType
from ..engine_core.store import Store

logger = logging.getLogger(__name__)

PROMPT = "What is your action?"

EXIT_OK = 0
EXIT_READ_ERROR = 1


def random_travel(config: TrailConfig, rng: random.Random) -> Action:
    """Build a travel action with days and miles drawn from the config's [low, high) ranges."""
    days = rng.randrange(*config.travel_days_range)
    miles = rng.randrange(*config.travel_miles_range)
    return Action.travel(days, miles)


def parse_command(
    line: str,
    config: TrailConfig,
    rng: random.Random,
) -> Action | None:
    """
    Map one line of input to an action.

    Only the line terminator is stripped; the rest must match exactly.
    Returns None for unrecognized input.
    """
    command = line.rstrip("\r\n")
    if command == "travel":
        return random_travel(config, rng)
    return None


class Driver:
    """
    One-shot command driver.

    Usage:
        driver = Driver(TrailConfig(), rng=random.Random(7))
        exit_code = driver.run()
    """

    def __init__(
        self,
        config: TrailConfig,
        rng: random.Random | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ):
        self.config = config
        self.rng = rng or random.Random()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.store = Store(config)
        self.terminated = False

    def run(self) -> int:
        """Process exactly one command and return the exit code."""
        self._print(PROMPT)

        try:
            line = self.stdin.readline()
        except (UnicodeDecodeError, OSError) as e:
            logger.error("Failed to read command: %s", e)
            self._print(f"That input could not be read as a command ({e}).")
            return EXIT_READ_ERROR

        action = parse_command(line, self.config, self.rng)
        if action is None:
            self._print(
                f"Sorry, the action {line!r} isn't something this trail knows how to do yet."
            )
            return EXIT_OK

        logger.info("Dispatching %s", action)
        self._perform(self.store.dispatch(action))
        self._perform(self.store.dispatch(Action.status()))
        return EXIT_OK

    def _perform(self, result: ActionResult) -> None:
        """Print a result's changes and carry out its effects."""
        if not result.success:
            self._print(f"Error: {result.error}")
            return

        for change in result.changes:
            self._print(change)

        for effect in result.effects:
            if effect.effect_type == EffectType.PRINT:
                self._print(effect.text)
            elif effect.effect_type == EffectType.TERMINATE:
                self.terminated = True

    def _print(self, text: str) -> None:
        print(text, file=self.stdout)
