"""
GameState model for the Courtside Scoreboard application.

This module contains the GameState class which holds the authoritative data
of one game (scores, fouls, quarter, countdown, paused/over flags), performs
the state transitions, and publishes a GameEvent for each of them.
"""
import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Union

from .events import (
    GameEnded,
    GameEvent,
    GamePaused,
    GameStarted,
    GameUnpaused,
    QuarterEnded,
    QuarterStarted,
    Team,
)
from .game_config import GameConfiguration
from ..utils.constants import START_DELAY_SEC

if TYPE_CHECKING:
    from ..services.scheduler import ScheduleHandle, Scheduler

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any], None]


class GameState:
    """
    Represents the complete state of one game.

    A GameState lives for exactly one game: starting another game means
    building a new instance, never resetting this one.

    Attributes:
        config: Settings the game is played with
        current_quarter: Active quarter, 0 before the first one starts
        remaining_seconds: Countdown for the active quarter
        home_score: Points scored by the home team
        guest_score: Points scored by the guest team
        home_fouls: Fouls committed by the home team
        guest_fouls: Fouls committed by the guest team
        paused: False only while a quarter is running
        game_over: True once the final quarter has run out
    """

    def __init__(self, config: GameConfiguration, scheduler: Optional["Scheduler"] = None):
        self.config = config
        self._scheduler = scheduler
        self._subscribers: Dict[GameEvent, List[EventHandler]] = {}
        self._pending_start: Optional["ScheduleHandle"] = None
        self._reset_fields()

    def _reset_fields(self) -> None:
        self.current_quarter = 0
        self.remaining_seconds = 0
        self.home_score = 0
        self.guest_score = 0
        self.home_fouls = 0
        self.guest_fouls = 0
        self.paused = True
        self.game_over = False

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------
    def subscribe(self, event: Union[GameEvent, str], handler: EventHandler) -> None:
        """
        Register a handler for one event.

        Handlers for the same event run in registration order; registering
        the same handler twice makes it run twice.

        Raises:
            ValueError: If the event name is not a GameEvent
        """
        event = GameEvent(event)
        self._subscribers.setdefault(event, []).append(handler)

    def unsubscribe_all(self) -> None:
        """Drop every registered handler."""
        self._subscribers = {}

    def has_subscribers(self, event: GameEvent) -> bool:
        return bool(self._subscribers.get(event))

    def _emit(self, payload: Any) -> None:
        handlers = self._subscribers.get(payload.event)
        if not handlers:
            return
        logger.debug("Emitting %s: %s", payload.event.value, payload)
        for handler in list(handlers):
            # unsubscribe_all() from a handler stops delivery to the rest
            if self._subscribers.get(payload.event) is not handlers:
                break
            handler(payload)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def start(self) -> None:
        """Initialise the game, announce it, then begin quarter one after a short delay."""
        self.cancel_pending()
        self._reset_fields()
        self._emit(GameStarted())

        if self._scheduler is None:
            self.advance_quarter()
        else:
            self._pending_start = self._scheduler.call_later(
                START_DELAY_SEC, self._begin_first_quarter
            )

    def _begin_first_quarter(self, handle: "ScheduleHandle") -> None:
        if self._pending_start is handle:
            self._pending_start = None
        self.advance_quarter()

    def cancel_pending(self) -> None:
        """Cancel a start delay that has not fired yet."""
        if self._pending_start is not None and self._scheduler is not None:
            self._scheduler.cancel(self._pending_start)
        self._pending_start = None

    def advance_quarter(self) -> None:
        """Begin the next quarter, or end the game when none is left."""
        if self.current_quarter >= self.config.quarter_count:
            self.end()
            return

        self._set_paused(False)
        self.current_quarter += 1

        self.remaining_seconds = self.config.quarter_duration_seconds
        logger.info("Quarter %d started (%ds)", self.current_quarter, self.remaining_seconds)
        self._emit(
            QuarterStarted(
                quarter=self.current_quarter,
                duration=self.config.quarter_duration_seconds,
            )
        )

    def tick(self) -> int:
        """
        Count the running quarter down by one second.

        Returns:
            Seconds left in the quarter, never negative
        """
        if self.paused or self.game_over:
            return self.remaining_seconds

        self.remaining_seconds -= 1
        if self.remaining_seconds <= 0:
            self.remaining_seconds = 0
            if self.current_quarter < self.config.quarter_count:
                self._end_quarter()
            else:
                self.end()
        return self.remaining_seconds

    def _end_quarter(self) -> None:
        self._set_paused(True)
        logger.info("Quarter %d ended", self.current_quarter)
        self._emit(QuarterEnded(pause_duration=self.config.inter_quarter_pause_seconds))

    def end(self) -> None:
        """Finish the game and publish the winner."""
        self.game_over = True
        self._set_paused(True)
        winner = self.winner()
        logger.info(
            "Game over %d-%d, winner: %s",
            self.home_score, self.guest_score, winner or "draw",
        )
        if self.has_subscribers(GameEvent.GAME_ENDED):
            self._emit(GameEnded(winner=winner))

    def _set_paused(self, paused: bool) -> None:
        if self.paused == paused:
            return
        self.paused = paused
        self._emit(GamePaused() if paused else GameUnpaused())

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------
    def add_score(self, team: Union[Team, str], points: int) -> int:
        """
        Add points to a team's score.

        The paused/over guard belongs to the caller.

        Args:
            team: Either "home" or "guest"
            points: Positive number of points to add

        Returns:
            The team's new score
        """
        team = Team(team)
        if isinstance(points, bool) or not isinstance(points, int) or points <= 0:
            raise ValueError(f"Points must be a positive whole number, got {points!r}")

        if team is Team.HOME:
            self.home_score += points
            return self.home_score
        self.guest_score += points
        return self.guest_score

    def add_foul(self, team: Union[Team, str]) -> int:
        """Record a foul and return the team's new foul count."""
        team = Team(team)
        if team is Team.HOME:
            self.home_fouls += 1
            return self.home_fouls
        self.guest_fouls += 1
        return self.guest_fouls

    def score_of(self, team: Union[Team, str]) -> int:
        return self.home_score if Team(team) is Team.HOME else self.guest_score

    def winner(self) -> str:
        """Return "home", "guest" or "" on a draw, from the current scores."""
        if self.home_score > self.guest_score:
            return Team.HOME.value
        if self.guest_score > self.home_score:
            return Team.GUEST.value
        return ""

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_paused_now(self) -> bool:
        return self.paused

    def is_over_now(self) -> bool:
        return self.game_over

    def to_json(self) -> dict:
        """
        Convert GameState to JSON-serializable dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "config": self.config.to_json(),
            "quarter": self.current_quarter,
            "remaining_seconds": self.remaining_seconds,
            "home_score": self.home_score,
            "guest_score": self.guest_score,
            "home_fouls": self.home_fouls,
            "guest_fouls": self.guest_fouls,
            "paused": self.paused,
            "game_over": self.game_over,
        }
