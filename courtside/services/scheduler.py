"""
Scheduling service for the Courtside Scoreboard application.

Schedulers run one-shot and repeating callbacks. Every schedule is described
by a ScheduleHandle; the callback receives its own handle, so a repeating
callback can cancel exactly its own schedule from inside its last run.
"""
import heapq
import itertools
import logging
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)

ScheduledCallback = Callable[["ScheduleHandle"], None]


@dataclass(eq=False)
class ScheduleHandle:
    """
    Token for one scheduled callback.

    Attributes:
        handle_id: Unique id within the owning scheduler
        callback: Function called with this handle when due
        due: Scheduler time of the next run
        interval: Repeat interval in seconds, None for one-shot callbacks
        cancelled: Set once the schedule will never run again
        backend_id: Identifier used by the underlying event loop, if any
    """
    handle_id: int
    callback: ScheduledCallback = field(repr=False)
    due: float
    interval: Optional[float] = None
    cancelled: bool = False
    backend_id: Any = field(default=None, repr=False)

    @property
    def repeating(self) -> bool:
        return self.interval is not None

    @property
    def active(self) -> bool:
        return not self.cancelled


class Scheduler(ABC):
    """Base class for all schedulers."""

    def __init__(self):
        # Held while callbacks run; front ends take it around input handling.
        self.lock = threading.RLock()
        self._ids = itertools.count(1)

    @abstractmethod
    def now(self) -> float:
        """Current scheduler time in seconds."""

    @abstractmethod
    def _arm(self, handle: ScheduleHandle) -> None:
        """Arrange for ``handle`` to be fired at ``handle.due``."""

    def _disarm(self, handle: ScheduleHandle) -> None:
        """Release backend resources of a cancelled handle."""

    def call_later(self, delay: float, callback: ScheduledCallback) -> ScheduleHandle:
        """Run ``callback`` once, ``delay`` seconds from now."""
        handle = ScheduleHandle(
            handle_id=next(self._ids), callback=callback, due=self.now() + max(0.0, delay)
        )
        self._arm(handle)
        return handle

    def call_every(self, interval: float, callback: ScheduledCallback) -> ScheduleHandle:
        """
        Run ``callback`` every ``interval`` seconds, first run one interval from now.

        Raises:
            ValueError: If interval is not positive
        """
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval!r}")
        handle = ScheduleHandle(
            handle_id=next(self._ids),
            callback=callback,
            due=self.now() + interval,
            interval=interval,
        )
        self._arm(handle)
        return handle

    def cancel(self, handle: Optional[ScheduleHandle]) -> None:
        """Stop a schedule. Safe to repeat, and safe from inside its own callback."""
        if handle is None or handle.cancelled:
            return
        handle.cancelled = True
        self._disarm(handle)

    def _fire(self, handle: ScheduleHandle) -> None:
        """Run one due callback. A repeating schedule stays armed even if it raises."""
        if handle.cancelled:
            return
        if not handle.repeating:
            handle.cancelled = True
        try:
            handle.callback(handle)
        finally:
            if handle.repeating and not handle.cancelled:
                handle.due += handle.interval
                self._arm(handle)


class _HeapScheduler(Scheduler):
    """Scheduler keeping due handles in a heap ordered by (due, sequence)."""

    def __init__(self):
        super().__init__()
        self._queue: List[Tuple[float, int, ScheduleHandle]] = []
        self._sequence = itertools.count()

    def _arm(self, handle: ScheduleHandle) -> None:
        heapq.heappush(self._queue, (handle.due, next(self._sequence), handle))

    def _pop_due(self, until: float) -> Optional[ScheduleHandle]:
        while self._queue:
            due, _, handle = self._queue[0]
            if handle.cancelled:
                heapq.heappop(self._queue)
                continue
            if due > until:
                return None
            heapq.heappop(self._queue)
            return handle
        return None

    def pending(self) -> int:
        """Number of schedules that will still run."""
        return sum(1 for _, _, handle in self._queue if not handle.cancelled)

    def next_due(self) -> Optional[float]:
        live = [due for due, _, handle in self._queue if not handle.cancelled]
        return min(live) if live else None


class ManualScheduler(_HeapScheduler):
    """
    Scheduler driven by a virtual clock.

    Time only moves when ``advance`` is called, which makes countdowns
    deterministic for tests and for embedding without an event loop.
    """

    def __init__(self, start: float = 0.0):
        super().__init__()
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward, running every callback that falls due.

        Args:
            seconds: How far to move the clock

        Returns:
            Number of callbacks run
        """
        target = self._now + seconds
        fired = 0
        with self.lock:
            while True:
                handle = self._pop_due(target)
                if handle is None:
                    break
                self._now = max(self._now, handle.due)
                self._fire(handle)
                fired += 1
            self._now = target
        return fired


class ThreadedScheduler(_HeapScheduler):
    """
    Scheduler running callbacks on one background worker thread.

    Callbacks run while holding ``lock``, so code that takes the same lock
    never interleaves with them.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        super().__init__()
        self._clock = clock
        self._condition = threading.Condition(self.lock)
        self._thread: Optional[threading.Thread] = None
        self._running = False

    def now(self) -> float:
        return self._clock()

    def start(self) -> None:
        with self._condition:
            if self._running:
                return
            self._running = True
            self._thread = threading.Thread(
                target=self._run, name="courtside-scheduler", daemon=True
            )
            self._thread.start()
        logger.debug("Scheduler worker started")

    def stop(self, timeout: Optional[float] = 2.0) -> None:
        with self._condition:
            self._running = False
            self._condition.notify_all()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        logger.debug("Scheduler worker stopped")

    @property
    def running(self) -> bool:
        return self._running

    def _arm(self, handle: ScheduleHandle) -> None:
        with self._condition:
            super()._arm(handle)
            self._condition.notify()

    def _run(self) -> None:
        with self._condition:
            while self._running:
                handle = self._pop_due(self.now())
                if handle is None:
                    due = self.next_due()
                    wait = None if due is None else max(0.0, due - self.now())
                    self._condition.wait(wait)
                    continue
                try:
                    self._fire(handle)
                except Exception:
                    logger.exception("Scheduled callback %s failed", handle.handle_id)


class TkScheduler(Scheduler):
    """Scheduler backed by a Tk widget's ``after`` / ``after_cancel``."""

    def __init__(self, widget, clock: Callable[[], float] = time.monotonic):
        super().__init__()
        self._widget = widget
        self._clock = clock

    def now(self) -> float:
        return self._clock()

    def _arm(self, handle: ScheduleHandle) -> None:
        delay_ms = max(0, int(round((handle.due - self.now()) * 1000)))
        handle.backend_id = self._widget.after(delay_ms, lambda: self._run_handle(handle))

    def _run_handle(self, handle: ScheduleHandle) -> None:
        handle.backend_id = None
        with self.lock:
            self._fire(handle)

    def _disarm(self, handle: ScheduleHandle) -> None:
        if handle.backend_id is not None:
            self._widget.after_cancel(handle.backend_id)
            handle.backend_id = None
