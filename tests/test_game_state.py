"""
Unit tests for the GameState model.

Covers the quarter lifecycle, the countdown, scoring, winner selection and
the event subscription contract.
"""
import unittest

from courtside.models import (
    GameConfiguration, GameEnded, GameEvent, GameState, QuarterEnded, QuarterStarted, Team
)
from courtside.services import ManualScheduler


class EventRecorder:
    """Subscribes to every event of a GameState and keeps what it receives."""

    def __init__(self, state: GameState):
        self.events = []
        for event in GameEvent:
            state.subscribe(event, self.events.append)

    def kinds(self):
        return [payload.event for payload in self.events]

    def of(self, event: GameEvent):
        return [payload for payload in self.events if payload.event is event]

    def clear(self):
        self.events.clear()


class TestGameStateLifecycle(unittest.TestCase):
    """Start, quarter and end transitions."""

    def setUp(self) -> None:
        self.config = GameConfiguration(
            quarter_count=4, quarter_duration_seconds=600, inter_quarter_pause_seconds=120
        )

    def _running_state(self, config=None) -> GameState:
        state = GameState(config or self.config)
        state.start()
        return state

    def test_start_announces_game_then_first_quarter_after_delay(self) -> None:
        scheduler = ManualScheduler()
        state = GameState(self.config, scheduler=scheduler)
        recorder = EventRecorder(state)

        state.start()
        self.assertEqual(recorder.kinds(), [GameEvent.GAME_STARTED])
        self.assertEqual(state.current_quarter, 0)
        self.assertTrue(state.is_paused_now())

        scheduler.advance(1)
        self.assertEqual(
            recorder.kinds(),
            [GameEvent.GAME_STARTED, GameEvent.GAME_UNPAUSED, GameEvent.QUARTER_STARTED],
        )
        self.assertEqual(recorder.of(GameEvent.QUARTER_STARTED), [QuarterStarted(quarter=1, duration=600)])
        self.assertEqual(state.remaining_seconds, 600)
        self.assertFalse(state.is_paused_now())

    def test_start_without_scheduler_begins_first_quarter_immediately(self) -> None:
        state = GameState(self.config)
        recorder = EventRecorder(state)
        state.start()

        self.assertEqual(state.current_quarter, 1)
        self.assertEqual(recorder.of(GameEvent.QUARTER_STARTED), [QuarterStarted(quarter=1, duration=600)])

    def test_start_initialises_every_field(self) -> None:
        scheduler = ManualScheduler()
        state = GameState(self.config, scheduler=scheduler)
        state.start()

        self.assertEqual(state.current_quarter, 0)
        self.assertEqual(state.remaining_seconds, 0)
        self.assertEqual((state.home_score, state.guest_score), (0, 0))
        self.assertEqual((state.home_fouls, state.guest_fouls), (0, 0))
        self.assertTrue(state.paused)
        self.assertFalse(state.game_over)

    def test_cancel_pending_stops_first_quarter(self) -> None:
        scheduler = ManualScheduler()
        state = GameState(self.config, scheduler=scheduler)
        state.start()
        state.cancel_pending()

        scheduler.advance(5)
        self.assertEqual(state.current_quarter, 0)
        self.assertEqual(scheduler.pending(), 0)

    def test_last_tick_of_quarter_one_ends_the_quarter(self) -> None:
        state = self._running_state()
        recorder = EventRecorder(state)

        for _ in range(599):
            state.tick()
        self.assertEqual(recorder.of(GameEvent.QUARTER_ENDED), [])
        self.assertEqual(state.remaining_seconds, 1)

        self.assertEqual(state.tick(), 0)
        self.assertEqual(recorder.of(GameEvent.QUARTER_ENDED), [QuarterEnded(pause_duration=120)])
        self.assertEqual(recorder.of(GameEvent.GAME_ENDED), [])
        self.assertTrue(state.is_paused_now())
        self.assertFalse(state.is_over_now())

    def test_last_tick_of_final_quarter_ends_the_game(self) -> None:
        state = self._running_state()
        for _ in range(3):
            state.advance_quarter()
        self.assertEqual(state.current_quarter, 4)
        state.add_score(Team.HOME, 5)
        state.add_score(Team.GUEST, 3)
        recorder = EventRecorder(state)

        while state.remaining_seconds > 0:
            state.tick()

        self.assertEqual(recorder.of(GameEvent.GAME_ENDED), [GameEnded(winner="home")])
        self.assertEqual(recorder.of(GameEvent.QUARTER_ENDED), [])
        self.assertTrue(state.is_over_now())
        self.assertTrue(state.is_paused_now())

    def test_full_game_ends_exactly_once(self) -> None:
        config = GameConfiguration(
            quarter_count=3, quarter_duration_seconds=4, inter_quarter_pause_seconds=0
        )
        state = GameState(config)
        recorder = EventRecorder(state)
        state.start()

        for _ in range(config.quarter_count):
            while state.remaining_seconds > 0:
                state.tick()
                self.assertFalse(state.game_over and not state.paused)
            if not state.game_over:
                state.advance_quarter()

        self.assertEqual(len(recorder.of(GameEvent.QUARTER_STARTED)), 3)
        self.assertEqual(len(recorder.of(GameEvent.QUARTER_ENDED)), 2)
        self.assertEqual(len(recorder.of(GameEvent.GAME_ENDED)), 1)
        self.assertEqual(recorder.of(GameEvent.GAME_ENDED), [GameEnded(winner="")])

    def test_advance_past_last_quarter_ends_game(self) -> None:
        config = GameConfiguration(
            quarter_count=1, quarter_duration_seconds=10, inter_quarter_pause_seconds=0
        )
        state = self._running_state(config)
        recorder = EventRecorder(state)

        state.advance_quarter()

        self.assertEqual(state.current_quarter, 1)
        self.assertTrue(state.game_over)
        self.assertTrue(state.paused)
        self.assertEqual(recorder.of(GameEvent.QUARTER_STARTED), [])
        self.assertEqual(len(recorder.of(GameEvent.GAME_ENDED)), 1)

    def test_tick_is_ignored_when_no_quarter_is_running(self) -> None:
        state = GameState(self.config)
        recorder = EventRecorder(state)

        self.assertEqual(state.tick(), 0)
        self.assertEqual(state.remaining_seconds, 0)
        self.assertEqual(recorder.events, [])

    def test_tick_after_game_over_emits_nothing(self) -> None:
        config = GameConfiguration(
            quarter_count=1, quarter_duration_seconds=2, inter_quarter_pause_seconds=0
        )
        state = self._running_state(config)
        state.tick()
        state.tick()
        self.assertTrue(state.game_over)
        recorder = EventRecorder(state)

        self.assertEqual(state.tick(), 0)
        self.assertEqual(recorder.events, [])

    def test_game_without_subscribers_runs_silently(self) -> None:
        config = GameConfiguration(
            quarter_count=2, quarter_duration_seconds=3, inter_quarter_pause_seconds=1
        )
        state = self._running_state(config)
        for _ in range(3):
            state.tick()
        state.advance_quarter()
        for _ in range(5):
            state.tick()

        self.assertTrue(state.game_over)
        self.assertEqual(state.remaining_seconds, 0)
        self.assertEqual(state.current_quarter, 2)


class TestGameStateScoring(unittest.TestCase):
    """Scores, fouls and winner selection."""

    def setUp(self) -> None:
        self.state = GameState(GameConfiguration())
        self.state.start()

    def test_add_score_returns_new_total(self) -> None:
        self.assertEqual(self.state.add_score("home", 2), 2)
        self.assertEqual(self.state.add_score(Team.HOME, 3), 5)
        self.assertEqual(self.state.add_score("guest", 1), 1)
        self.assertEqual(self.state.score_of("home"), 5)

    def test_guest_wins_with_more_points(self) -> None:
        recorder = EventRecorder(self.state)
        self.state.add_score("home", 2)
        self.state.add_score("guest", 3)
        self.state.end()

        self.assertEqual(recorder.of(GameEvent.GAME_ENDED), [GameEnded(winner="guest")])

    def test_equal_scores_are_a_draw(self) -> None:
        self.state.add_score("home", 3)
        self.state.add_score("guest", 3)
        self.assertEqual(self.state.winner(), "")
        self.assertTrue(GameEnded(winner=self.state.winner()).is_draw)

    def test_rejects_invalid_points_and_teams(self) -> None:
        for points in (0, -2, 1.5, True):
            with self.assertRaises(ValueError):
                self.state.add_score("home", points)
        with self.assertRaises(ValueError):
            self.state.add_score("visitors", 2)
        self.assertEqual(self.state.home_score, 0)

    def test_add_foul_counts_per_team(self) -> None:
        self.assertEqual(self.state.add_foul("home"), 1)
        self.assertEqual(self.state.add_foul("home"), 2)
        self.assertEqual(self.state.add_foul(Team.GUEST), 1)
        self.assertEqual((self.state.home_fouls, self.state.guest_fouls), (2, 1))

    def test_scoring_emits_no_events(self) -> None:
        recorder = EventRecorder(self.state)
        self.state.add_score("home", 1)
        self.state.add_foul("guest")
        self.assertEqual(recorder.events, [])

    def test_to_json_snapshot(self) -> None:
        self.state.add_score("guest", 2)
        data = self.state.to_json()
        self.assertEqual(data["quarter"], 1)
        self.assertEqual(data["guest_score"], 2)
        self.assertEqual(data["config"], {"quarters": 4, "quarter_duration": 600, "timeout": 120})
        self.assertFalse(data["paused"])


class TestGameStateSubscriptions(unittest.TestCase):
    """Subscription registry behaviour."""

    def setUp(self) -> None:
        self.state = GameState(GameConfiguration(quarter_count=2))

    def test_handlers_run_in_registration_order_without_dedup(self) -> None:
        calls = []
        first = lambda event: calls.append("first")
        second = lambda event: calls.append("second")
        self.state.subscribe(GameEvent.GAME_STARTED, first)
        self.state.subscribe(GameEvent.GAME_STARTED, second)
        self.state.subscribe(GameEvent.GAME_STARTED, first)

        self.state.start()
        self.assertEqual(calls, ["first", "second", "first"])

    def test_subscribe_accepts_event_names(self) -> None:
        seen = []
        self.state.subscribe("quarterStarted", seen.append)
        self.state.start()
        self.assertEqual(seen, [QuarterStarted(quarter=1, duration=600)])

    def test_subscribe_rejects_unknown_events(self) -> None:
        with self.assertRaises(ValueError):
            self.state.subscribe("halftime", print)

    def test_unsubscribe_all_silences_state(self) -> None:
        seen = []
        self.state.subscribe(GameEvent.GAME_STARTED, seen.append)
        self.state.unsubscribe_all()
        self.state.start()
        self.assertEqual(seen, [])
        self.assertFalse(self.state.has_subscribers(GameEvent.GAME_STARTED))

    def test_unsubscribe_all_inside_handler_stops_delivery(self) -> None:
        calls = []

        def clearing(event):
            calls.append("clearing")
            self.state.unsubscribe_all()

        self.state.subscribe(GameEvent.GAME_STARTED, clearing)
        self.state.subscribe(GameEvent.GAME_STARTED, lambda event: calls.append("late"))
        self.state.start()
        self.assertEqual(calls, ["clearing"])


if __name__ == "__main__":
    unittest.main()
