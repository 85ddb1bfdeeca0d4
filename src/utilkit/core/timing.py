"""Time-windowed call wrappers — debounce, throttle, deferred call.

All durations are integer milliseconds. Timers come from a
:class:`Scheduler`; the default uses the monotonic clock and
``threading.Timer``, so callbacks run on a timer thread.

INVARIANT: Arguments are validated before any timer is armed.
"""

from __future__ import annotations

import functools
import logging
import threading
import time
from collections.abc import Callable
from typing import Any, Generic, ParamSpec, Protocol, TypeVar

from utilkit.core.errors import require
from utilkit.core.types import is_function, is_integer

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Clock plus one-shot timer facility."""

    def now(self) -> float:
        """Current time in milliseconds from an arbitrary monotonic origin."""
        ...

    def call_later(self, delay: int, callback: Callable[[], None]) -> TimerHandle:
        """Run *callback* once after *delay* milliseconds."""
        ...


class ThreadingScheduler:
    """Scheduler backed by :func:`time.monotonic` and daemon ``threading.Timer``."""

    def now(self) -> float:
        return time.monotonic() * 1000

    def call_later(self, delay: int, callback: Callable[[], None]) -> TimerHandle:
        timer = threading.Timer(delay / 1000, callback)
        timer.daemon = True
        timer.start()
        return timer


_default_scheduler = ThreadingScheduler()


def _validate(function_name: str, operation: Any, duration: Any, label: str) -> int:
    require(is_function(operation), function_name, "a function", operation)
    require(
        is_integer(duration) and duration >= 0,
        function_name,
        f"a non-negative integer {label}",
        duration,
    )
    return int(duration)


class Debouncer(Generic[P]):
    """Run *operation* only after *wait* ms pass without another call.

    Each call cancels the pending timer and re-arms it with the latest
    arguments, so a burst collapses into its trailing call.
    """

    def __init__(
        self,
        operation: Callable[P, Any],
        wait: int,
        *,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._wait = _validate("debounce", operation, wait, "wait")
        self._operation = operation
        self._scheduler = scheduler or _default_scheduler
        self._lock = threading.Lock()
        self._handle: TimerHandle | None = None
        self._generation = 0
        self._args: tuple[Any, ...] = ()
        self._kwargs: dict[str, Any] = {}

    @property
    def wait(self) -> int:
        return self._wait

    @property
    def pending(self) -> bool:
        """Whether a trailing call is armed."""
        with self._lock:
            return self._handle is not None

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
            self._generation += 1
            self._args, self._kwargs = args, kwargs
            self._handle = self._scheduler.call_later(
                self._wait, functools.partial(self._fire, self._generation)
            )
        logger.debug("debounce armed (wait=%dms)", self._wait)

    def cancel(self) -> bool:
        """Drop the pending call. Returns True if one was pending."""
        with self._lock:
            return self._take() is not None

    def flush(self) -> bool:
        """Run the pending call now. Returns True if one was pending."""
        with self._lock:
            taken = self._take()
        if taken is None:
            return False
        args, kwargs = taken
        self._operation(*args, **kwargs)
        return True

    def _take(self) -> tuple[tuple[Any, ...], dict[str, Any]] | None:
        # Caller holds the lock.
        if self._handle is None:
            return None
        self._handle.cancel()
        self._handle = None
        self._generation += 1
        taken = (self._args, self._kwargs)
        self._args, self._kwargs = (), {}
        return taken

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._handle is None:
                return  # superseded after the timer already started
            self._handle = None
            args, kwargs = self._args, self._kwargs
            self._args, self._kwargs = (), {}
        logger.debug("debounce firing")
        self._operation(*args, **kwargs)


class Throttler(Generic[P, R]):
    """Run *operation* at most once per *wait* ms; extra calls are dropped.

    The first call always runs. A later call runs only when at least
    *wait* ms have elapsed since the last executed call. Dropped calls are
    not queued and leave no trailing execution.
    """

    def __init__(
        self,
        operation: Callable[P, R],
        wait: int,
        *,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._wait = _validate("throttle", operation, wait, "wait")
        self._operation = operation
        self._scheduler = scheduler or _default_scheduler
        self._lock = threading.Lock()
        self._last_run: float | None = None

    @property
    def wait(self) -> int:
        return self._wait

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> R | None:
        """Return the operation's result, or None when the call was dropped."""
        with self._lock:
            now = self._scheduler.now()
            if self._last_run is not None and now - self._last_run < self._wait:
                logger.debug("throttle dropped call (%.1fms since last)", now - self._last_run)
                return None
            self._last_run = now
        return self._operation(*args, **kwargs)

    def reset(self) -> None:
        """Forget the last execution so the next call runs immediately."""
        with self._lock:
            self._last_run = None


def debounce(
    operation: Callable[P, Any],
    wait: int,
    *,
    scheduler: Scheduler | None = None,
) -> Debouncer[P]:
    """Wrap *operation* so that only the trailing call of a burst runs."""
    return Debouncer(operation, wait, scheduler=scheduler)


def throttle(
    operation: Callable[P, R],
    wait: int,
    *,
    scheduler: Scheduler | None = None,
) -> Throttler[P, R]:
    """Wrap *operation* so that it runs at most once per *wait* ms."""
    return Throttler(operation, wait, scheduler=scheduler)


def defer(
    operation: Callable[..., Any],
    delay: int,
    *args: Any,
    scheduler: Scheduler | None = None,
    **kwargs: Any,
) -> TimerHandle:
    """Schedule ``operation(*args, **kwargs)`` once after *delay* ms.

    Returns a handle whose ``cancel()`` stops the call if it has not run yet.
    """
    delay_ms = _validate("defer", operation, delay, "delay")
    logger.debug("deferred call scheduled (delay=%dms)", delay_ms)
    return (scheduler or _default_scheduler).call_later(
        delay_ms, functools.partial(operation, *args, **kwargs)
    )
