"""
Trail - A one-turn trail simulation.

A traveler works through a fixed-distance trail by spending turns on
travel, rest, or hunting. The package provides:
- Immutable trail state and configuration
- A pure reducer mapping (state, action) to the next state
- A store that dispatches actions and records history
- A one-command text driver
"""

__version__ = "0.1.0"
