"""
Event throttling

Leading-edge throttle with a trailing-edge guarantee. The first call in a quiet
period runs immediately; calls arriving inside the window overwrite a single
pending slot, and one trailing call runs at the end of the window with the
latest arguments.
"""

import logging
import threading
import time
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)

DEFAULT_WAIT_S = 0.3


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Runs a callback after a delay"""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class TimerScheduler:
    """Scheduler backed by ``threading.Timer`` (daemon timers)"""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


class Throttle:
    """
    Coalesce bursts of calls into at most one call per window

    Args:
        fn: Function to rate limit
        wait: Window length in seconds
        clock: Monotonic clock returning seconds
        scheduler: Scheduler for the trailing call

    ``fn`` runs outside the internal lock: on the caller's thread for a
    leading call, on the scheduler's thread (a daemon timer by default) for
    the trailing one. Callers are never blocked by a running ``fn``, so two
    runs can overlap when ``fn`` takes longer than ``wait``.

    Examples:
        >>> calls = []
        >>> throttled = Throttle(calls.append, wait=0.3)
        >>> throttled("a")   # runs now
        >>> throttled("b")   # pending
        >>> throttled("c")   # replaces "b"
        >>> throttled.flush()
        >>> calls
        ['a', 'c']
    """

    def __init__(
        self,
        fn: Callable[..., Any],
        wait: float = DEFAULT_WAIT_S,
        clock: Callable[[], float] = time.monotonic,
        scheduler: Scheduler | None = None,
    ):
        if wait < 0:
            raise ValueError(f"Throttle wait must be non-negative, got {wait}")
        self.fn = fn
        self.wait = wait
        self.clock = clock
        self.scheduler = scheduler or TimerScheduler()

        self._lock = threading.RLock()
        self._last_run: float | None = None
        self._pending: tuple[tuple, dict] | None = None
        self._timer: TimerHandle | None = None

    @property
    def pending(self) -> bool:
        """True while a trailing call is scheduled"""
        return self._pending is not None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            now = self.clock()
            if self._timer is not None:
                self._pending = (args, kwargs)
                return

            if self._last_run is not None and now - self._last_run < self.wait:
                self._pending = (args, kwargs)
                delay = max(self.wait - (now - self._last_run), 0.0)
                self._timer = self.scheduler.call_later(delay, self._fire)
                return

            self._last_run = now

        self.fn(*args, **kwargs)

    def flush(self) -> None:
        """Run the pending trailing call now, if any"""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
        self._fire()

    def cancel(self) -> None:
        """Drop the pending trailing call without running it"""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending = None

    def _fire(self) -> None:
        with self._lock:
            self._timer = None
            pending, self._pending = self._pending, None
            if pending is None:
                return
            self._last_run = self.clock()

        args, kwargs = pending
        self.fn(*args, **kwargs)
