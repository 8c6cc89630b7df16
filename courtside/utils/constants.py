"""
Constants for the Courtside Scoreboard application.

This module contains configuration constants used throughout the application.
"""

# Application metadata
APP_TITLE = "Courtside Scoreboard"

# Game configuration defaults
DEFAULT_QUARTER_COUNT = 4
DEFAULT_QUARTER_DURATION_SEC = 600
DEFAULT_TIMEOUT_SEC = 120

# Accepted configuration ranges (inclusive)
MIN_QUARTER_COUNT = 1
MAX_QUARTER_COUNT = 12
MIN_QUARTER_DURATION_SEC = 1
MAX_QUARTER_DURATION_SEC = 2 * 60 * 60
MIN_TIMEOUT_SEC = 0
MAX_TIMEOUT_SEC = 60 * 60

# Timing
TICK_INTERVAL_SEC = 1
START_DELAY_SEC = 1

# Score buttons offered by the front ends
SCORE_INCREMENTS = (1, 2, 3)

# Operator-facing messages
PAUSED_MESSAGE = "Game is paused, score is frozen until game resumes!"
GAME_OVER_MESSAGE = "Game is over, wake up..."
NO_GAME_MESSAGE = "No game in progress, start a new game first."

# Result banner
RESULT_PENDING_TEXT = "AWAITING RESULT"
RESULT_DRAW_TEXT = "NO WINNER: DRAW"

# Web server
DEFAULT_WEB_HOST = "127.0.0.1"
DEFAULT_WEB_PORT = 7122
