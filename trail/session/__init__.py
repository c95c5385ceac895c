"""
Session Module - Runs a single command against a fresh trail.

A session is one process invocation:
- A new store is created at the starting state
- One line of input is read and turned into an action
- The resulting effects are printed
- The session ends; nothing is persisted
"""

from .driver import Driver, parse_command, random_travel, PROMPT

__all__ = [
    "Driver",
    "parse_command",
    "random_travel",
    "PROMPT",
]
