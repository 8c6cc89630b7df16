"""
Courtside Scoreboard

An interactive scoreboard for timed games: two teams score points across a
fixed number of quarters separated by timeouts, ending with a winner or a
draw.

This package provides both desktop (Tkinter) and web (Flask) front ends
over the same game state machine and session clock.
"""
from .models import GameConfiguration, GameState, GameEvent, Team
from .services import GameSession, ManualScheduler, SessionPhase
from .utils import fmt_mmss, APP_TITLE

__version__ = "1.0.0"

__all__ = [
    "GameConfiguration", "GameState", "GameEvent", "Team",
    "GameSession", "ManualScheduler", "SessionPhase",
    "fmt_mmss", "APP_TITLE"
]
