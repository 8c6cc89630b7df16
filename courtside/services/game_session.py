"""Game session service for the Courtside Scoreboard application."""

import logging
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Optional, Union

from ..models import (
    GameConfiguration,
    GameEnded,
    GameEvent,
    GameStarted,
    GameState,
    QuarterEnded,
    QuarterStarted,
    Team,
)
from ..utils.constants import (
    GAME_OVER_MESSAGE,
    NO_GAME_MESSAGE,
    PAUSED_MESSAGE,
    TICK_INTERVAL_SEC,
)
from .presentation import Presentation
from .scheduler import ScheduleHandle, Scheduler

logger = logging.getLogger(__name__)


class SessionPhase(Enum):
    IDLE = "idle"
    STARTING = "starting"
    QUARTER_RUNNING = "quarter_running"
    INTER_QUARTER_PAUSE = "inter_quarter_pause"
    GAME_OVER = "game_over"


class RejectionReason(Enum):
    """Why a score request was refused; the value is the operator message."""
    NO_GAME = NO_GAME_MESSAGE
    GAME_OVER = GAME_OVER_MESSAGE
    PAUSED = PAUSED_MESSAGE

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class ScoreUpdate:
    """Outcome of a score request."""
    team: Team
    score: Optional[int]
    rejection: Optional[RejectionReason] = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None


class GameSession:
    """
    Runs the clock for the current game and relays its state to a Presentation.

    The session owns exactly one GameState at a time. Quarter countdowns and
    inter-quarter pauses are repeating schedules on the injected Scheduler;
    each repeating callback cancels its own handle when it reaches zero.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        presentation: Optional[Presentation] = None,
        tick_interval: float = TICK_INTERVAL_SEC,
    ):
        self.scheduler = scheduler
        self._presentation = presentation
        self.tick_interval = tick_interval
        self._state: Optional[GameState] = None
        self._quarter_timer: Optional[ScheduleHandle] = None
        self._pause_timer: Optional[ScheduleHandle] = None
        self._pause_remaining = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def state(self) -> Optional[GameState]:
        return self._state

    @property
    def presentation(self) -> Optional[Presentation]:
        return self._presentation

    @property
    def pause_remaining(self) -> int:
        return self._pause_remaining if self._pause_timer is not None else 0

    @property
    def phase(self) -> SessionPhase:
        state = self._state
        if state is None:
            return SessionPhase.IDLE
        if state.game_over:
            return SessionPhase.GAME_OVER
        if self._pause_timer is not None:
            return SessionPhase.INTER_QUARTER_PAUSE
        if not state.paused:
            return SessionPhase.QUARTER_RUNNING
        return SessionPhase.STARTING

    # ------------------------------------------------------------------
    # Input operations
    # ------------------------------------------------------------------
    def new_game(
        self,
        config: GameConfiguration,
        presentation: Optional[Presentation] = None,
    ) -> GameState:
        """
        Throw away the current game, if any, and start a fresh one.

        Args:
            config: Settings for the new game
            presentation: Display to drive; defaults to the current one

        Returns:
            The newly started GameState
        """
        with self.scheduler.lock:
            self._discard_state()
            if presentation is not None:
                self._presentation = presentation
            if self._presentation is None:
                raise ValueError("A presentation is required to start a game")

            state = GameState(config, scheduler=self.scheduler)
            state.subscribe(GameEvent.GAME_STARTED, self._on_game_started)
            state.subscribe(GameEvent.QUARTER_STARTED, self._on_quarter_started)
            state.subscribe(GameEvent.QUARTER_ENDED, self._on_quarter_ended)
            state.subscribe(GameEvent.GAME_ENDED, self._on_game_ended)
            self._state = state

            logger.info(
                "New game: %d quarters of %ds, %ds timeouts",
                config.quarter_count,
                config.quarter_duration_seconds,
                config.inter_quarter_pause_seconds,
            )
            state.start()
            return state

    def increment_score(self, team: Union[Team, str], points: int) -> ScoreUpdate:
        """
        Add points for a team, unless the game is over or paused.

        Rejections are reported to the presentation and returned, never raised.

        Raises:
            ValueError: If team is unknown or points is not a positive whole number
        """
        team = Team(team)
        with self.scheduler.lock:
            state = self._state
            if state is None:
                return self._reject(team, RejectionReason.NO_GAME)
            # an ended game is always paused too, so check this first
            if state.is_over_now():
                return self._reject(team, RejectionReason.GAME_OVER)
            if state.is_paused_now():
                return self._reject(team, RejectionReason.PAUSED)

            score = state.add_score(team, points)
            self._presentation.set_score(team.value, score)
            return ScoreUpdate(team=team, score=score)

    def shutdown(self) -> None:
        """Stop all timers and drop the current game."""
        with self.scheduler.lock:
            self._discard_state()

    def _reject(self, team: Team, reason: RejectionReason) -> ScoreUpdate:
        logger.debug("Score request for %s rejected: %s", team.value, reason.name)
        if self._presentation is not None:
            self._presentation.show_error(reason.message)
        score = self._state.score_of(team) if self._state is not None else None
        return ScoreUpdate(team=team, score=score, rejection=reason)

    def _discard_state(self) -> None:
        if self._state is not None:
            self._state.unsubscribe_all()
            self._state.cancel_pending()
        self.scheduler.cancel(self._quarter_timer)
        self._quarter_timer = None
        if self._pause_timer is not None:
            self.scheduler.cancel(self._pause_timer)
            self._pause_timer = None
            if self._presentation is not None:
                self._presentation.hide_pause_indicator()
        self._pause_remaining = 0
        self._state = None

    # ------------------------------------------------------------------
    # GameState event handlers
    # ------------------------------------------------------------------
    def _on_game_started(self, event: GameStarted) -> None:
        self._presentation.reset_display()

    def _on_quarter_started(self, event: QuarterStarted) -> None:
        self._presentation.clear_error()
        self._presentation.set_quarter_label(event.quarter)
        self._presentation.set_clock(event.duration)

        self.scheduler.cancel(self._quarter_timer)
        self._quarter_timer = self.scheduler.call_every(
            self.tick_interval, partial(self._quarter_tick, self._state)
        )

    def _quarter_tick(self, state: GameState, handle: ScheduleHandle) -> None:
        if state is not self._state:
            self.scheduler.cancel(handle)
            return

        remaining = state.tick()
        self._presentation.set_clock(remaining)
        if remaining <= 0:
            self.scheduler.cancel(handle)
            if self._quarter_timer is handle:
                self._quarter_timer = None

    def _on_quarter_ended(self, event: QuarterEnded) -> None:
        self.scheduler.cancel(self._pause_timer)
        self._pause_remaining = event.pause_duration
        if event.pause_duration <= 0:
            self._pause_timer = self.scheduler.call_later(
                0, partial(self._finish_pause, self._state)
            )
            return

        self._presentation.show_pause_indicator()
        self._presentation.set_pause_remaining(event.pause_duration)
        self._pause_timer = self.scheduler.call_every(
            self.tick_interval, partial(self._pause_tick, self._state)
        )

    def _pause_tick(self, state: GameState, handle: ScheduleHandle) -> None:
        if state is not self._state:
            self.scheduler.cancel(handle)
            return

        self._pause_remaining -= 1
        if self._pause_remaining > 0:
            self._presentation.set_pause_remaining(self._pause_remaining)
            return

        self.scheduler.cancel(handle)
        self._presentation.hide_pause_indicator()
        self._finish_pause(state, handle)

    def _finish_pause(self, state: GameState, handle: ScheduleHandle) -> None:
        if state is not self._state:
            return
        if self._pause_timer is handle:
            self._pause_timer = None
        self._pause_remaining = 0
        state.advance_quarter()

    def _on_game_ended(self, event: GameEnded) -> None:
        self._presentation.announce_winner(event.winner)
