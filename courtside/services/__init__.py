"""
Services package for the Courtside Scoreboard.

This package contains the session orchestration, the scheduling backends
and the presentation interface the session drives.
"""
from .scheduler import (
    Scheduler, ScheduleHandle, ManualScheduler, ThreadedScheduler, TkScheduler
)
from .presentation import Presentation
from .game_session import GameSession, SessionPhase, RejectionReason, ScoreUpdate

__all__ = [
    "Scheduler", "ScheduleHandle", "ManualScheduler", "ThreadedScheduler",
    "TkScheduler", "Presentation", "GameSession", "SessionPhase",
    "RejectionReason", "ScoreUpdate"
]
