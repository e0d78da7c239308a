"""
hexview Test Configuration

Shared pytest fixtures for all tests.
"""

import pytest

from hexview.core.types import Viewport
from hexview.grid.h3_grid import H3Grid


class FakeClock:
    """Manually advanced monotonic clock"""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now


class FakeHandle:
    def __init__(self, due: float, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Scheduler that only fires when the fake clock is advanced"""

    def __init__(self, clock: FakeClock):
        self.clock = clock
        self.handles: list[FakeHandle] = []

    def call_later(self, delay, callback):
        handle = FakeHandle(self.clock.now + delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def scheduled(self) -> list[FakeHandle]:
        return [h for h in self.handles if not h.cancelled]

    def advance(self, seconds: float) -> None:
        self.clock.now += seconds
        due = [h for h in self.handles if not h.cancelled and h.due <= self.clock.now]
        for handle in sorted(due, key=lambda h: h.due):
            self.handles.remove(handle)
            handle.callback()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return FakeScheduler(clock)


@pytest.fixture
def grid():
    return H3Grid()


@pytest.fixture
def sample_cell():
    """Resolution 10 cell in central Paris"""
    return "8a1fb46622dffff"


@pytest.fixture
def sf_viewport():
    """800x600 viewport over San Francisco at zoom 11"""
    return Viewport(latitude=37.7, longitude=-122.4, zoom=11, width=800, height=600)
