"""Shared pytest fixtures and test helpers for utilkit tests."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir so no stray utilkit.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.delenv("UTILKIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Virtual-time scheduler for timing wrapper tests
# ---------------------------------------------------------------------------


class ManualHandle:
    def __init__(self) -> None:
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler whose clock only moves when the test calls :meth:`advance`.

    Callbacks due within an advance run in time order, with the clock set
    to each callback's due time while it runs.
    """

    def __init__(self) -> None:
        self.time = 0.0
        self._queue: list[tuple[float, int, ManualHandle, Callable[[], None]]] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self.time

    def call_later(self, delay: int, callback: Callable[[], None]) -> ManualHandle:
        handle = ManualHandle()
        heapq.heappush(self._queue, (self.time + delay, next(self._seq), handle, callback))
        return handle

    def advance_to(self, target: float) -> None:
        while self._queue and self._queue[0][0] <= target:
            due, _, handle, callback = heapq.heappop(self._queue)
            self.time = due
            if not handle.cancelled:
                callback()
        self.time = target

    def advance(self, delta: float) -> None:
        self.advance_to(self.time + delta)

    @property
    def armed(self) -> int:
        """Number of timers still waiting to fire."""
        return sum(1 for _, _, handle, _ in self._queue if not handle.cancelled)


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()
