"""
Debounced reflow scheduling.

Image loads and container resizes arrive in bursts. ``ReflowScheduler``
collapses each burst into a single layout call: every trigger cancels the
pending timer and arms a fresh one, so only the last trigger inside the
quiet interval ends up calling back.

The timer source is injected. ``threading_timer_factory`` is the real
clock; ``ManualClock`` is advanced explicitly and keeps tests and the
simulated demo deterministic.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal, Protocol

from photo_grid.config_defaults import DEFAULT_QUIET_INTERVAL_MS
from photo_grid.logging_utils import logger

SchedulerState = Literal["idle", "pending"]


class TimerHandle(Protocol):
    """Anything that can call back later and be cancelled before that."""

    def cancel(self) -> None:
        """Prevent the callback from running."""
        ...


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


def threading_timer_factory(
    delay_seconds: float,
    callback: Callable[[], None],
) -> TimerHandle:
    """Start a daemon ``threading.Timer``."""
    timer = threading.Timer(delay_seconds, callback)
    timer.daemon = True
    timer.start()
    return timer


@dataclass(slots=True)
class _ManualTimer:
    due: float
    callback: Callable[[], None]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass(slots=True)
class ManualClock:
    """A timer source that only moves when ``advance`` is called."""

    now: float = 0.0
    _timers: list[_ManualTimer] = field(default_factory=list)

    def __call__(
        self,
        delay_seconds: float,
        callback: Callable[[], None],
    ) -> TimerHandle:
        timer = _ManualTimer(self.now + delay_seconds, callback)
        self._timers.append(timer)
        return timer

    @property
    def pending(self) -> int:
        """Number of armed, uncancelled timers."""
        return sum(1 for t in self._timers if not t.cancelled)

    def advance(self, seconds: float) -> int:
        """Move time forward, firing due timers in order. Return count."""
        target = self.now + seconds
        fired = 0
        while True:
            due = [t for t in self._timers if not t.cancelled
                   and t.due <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.due)
            self._timers.remove(timer)
            self.now = max(self.now, timer.due)
            timer.callback()
            fired += 1
        self._timers = [t for t in self._timers if not t.cancelled]
        self.now = target
        return fired


class ReflowScheduler:
    """
    Debounce layout triggers into one callback per quiet period.

    States are ``idle`` and ``pending``. A trigger while pending cancels
    the armed timer before arming a new one, so at most one timer is ever
    outstanding.

    Callbacks never overlap. A trigger that arrives while a callback is
    still running arms a fresh timer as usual, and the run it schedules
    waits for the current one to finish, so the latest trigger always
    gets a pass of its own.
    """

    def __init__(
        self,
        callback: Callable[[], object],
        *,
        quiet_interval_ms: int = DEFAULT_QUIET_INTERVAL_MS,
        timer_factory: TimerFactory = threading_timer_factory,
    ) -> None:
        self._callback = callback
        self._quiet_interval = quiet_interval_ms / 1000
        self._timer_factory = timer_factory
        self._timer: TimerHandle | None = None
        # Identifies the armed timer; a cancelled one that fires late
        # finds a different token and does nothing
        self._token: object | None = None
        # Guards _timer and _token. Reentrant so a timer source that
        # fires synchronously while arming cannot deadlock.
        self._state_lock = threading.RLock()
        # Held for the duration of a callback
        self._run_lock = threading.RLock()
        self.invocations = 0

    @property
    def state(self) -> SchedulerState:
        """Return ``"pending"`` while a timer is armed, else ``"idle"``."""
        with self._state_lock:
            return "pending" if self._token is not None else "idle"

    @property
    def is_pending(self) -> bool:
        """Shorthand for ``state == "pending"``."""
        return self.state == "pending"

    def notify_layout_invalidated(self) -> None:
        """Record a trigger: cancel any pending run and re-arm."""
        with self._state_lock:
            if self._timer is not None:
                self._timer.cancel()
                logger.debug("Reflow timer reset")

            token = object()
            self._token = token
            self._timer = self._timer_factory(
                self._quiet_interval, lambda: self._fire(token),
            )

    def flush(self) -> bool:
        """Run the pending callback now. Return whether one was pending."""
        with self._state_lock:
            token = self._token
            if token is None:
                return False
            if self._timer is not None:
                self._timer.cancel()
        # A timer that won the race already claimed the token
        self._fire(token)
        return True

    def cancel(self) -> bool:
        """Drop the pending callback. Return whether one was pending."""
        with self._state_lock:
            if self._token is None:
                return False
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._token = None
            return True

    def _claim(self, token: object) -> bool:
        with self._state_lock:
            if token is not self._token:
                return False
            self._timer = None
            self._token = None
            return True

    def _fire(self, token: object) -> None:
        if not self._claim(token):
            return
        with self._run_lock:
            self.invocations += 1
            logger.debug("Reflow fired (#%d)", self.invocations)
            self._callback()
