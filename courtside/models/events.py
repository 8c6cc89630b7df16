"""
Game lifecycle events for the Courtside Scoreboard application.

Every notification a GameState can publish is one member of GameEvent, and
travels with a frozen payload dataclass bound to that member.
"""
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class Team(str, Enum):
    """The two sides of the scoreboard."""
    HOME = "home"
    GUEST = "guest"


class GameEvent(Enum):
    """Notifications published by a GameState."""
    GAME_STARTED = "gameStarted"
    QUARTER_STARTED = "quarterStarted"
    GAME_PAUSED = "gamePaused"
    GAME_UNPAUSED = "gameUnpaused"
    QUARTER_ENDED = "quarterEnded"
    GAME_ENDED = "gameEnded"


@dataclass(frozen=True)
class GameStarted:
    event: ClassVar[GameEvent] = GameEvent.GAME_STARTED


@dataclass(frozen=True)
class QuarterStarted:
    event: ClassVar[GameEvent] = GameEvent.QUARTER_STARTED
    quarter: int
    duration: int


@dataclass(frozen=True)
class GamePaused:
    event: ClassVar[GameEvent] = GameEvent.GAME_PAUSED


@dataclass(frozen=True)
class GameUnpaused:
    event: ClassVar[GameEvent] = GameEvent.GAME_UNPAUSED


@dataclass(frozen=True)
class QuarterEnded:
    event: ClassVar[GameEvent] = GameEvent.QUARTER_ENDED
    pause_duration: int


@dataclass(frozen=True)
class GameEnded:
    """Final result; ``winner`` is a Team value, or "" for a draw."""
    event: ClassVar[GameEvent] = GameEvent.GAME_ENDED
    winner: str

    @property
    def is_draw(self) -> bool:
        return not self.winner
