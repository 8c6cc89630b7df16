"""
Models package for the Courtside Scoreboard.

This package contains the core data models used throughout the application.
"""
from .events import (
    Team, GameEvent, GameStarted, QuarterStarted, GamePaused, GameUnpaused,
    QuarterEnded, GameEnded
)
from .game_config import GameConfiguration, ConfigurationError
from .game_state import GameState

__all__ = [
    "Team", "GameEvent", "GameStarted", "QuarterStarted", "GamePaused",
    "GameUnpaused", "QuarterEnded", "GameEnded",
    "GameConfiguration", "ConfigurationError", "GameState"
]
