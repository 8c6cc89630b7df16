"""
Utilities package for the Courtside Scoreboard.

This package contains utility functions and constants used throughout the application.
"""
from .time_utils import fmt_mmss
from .constants import (
    APP_TITLE, DEFAULT_QUARTER_COUNT, DEFAULT_QUARTER_DURATION_SEC,
    DEFAULT_TIMEOUT_SEC, START_DELAY_SEC, TICK_INTERVAL_SEC
)

__all__ = [
    "fmt_mmss", "APP_TITLE", "DEFAULT_QUARTER_COUNT",
    "DEFAULT_QUARTER_DURATION_SEC", "DEFAULT_TIMEOUT_SEC",
    "START_DELAY_SEC", "TICK_INTERVAL_SEC"
]
