"""Global pytest fixtures for solid_principles."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from solid_principles.adapters.clocks import FixedClock
from solid_principles.adapters.sinks import MemorySink
from solid_principles.bootstrap import AppContainer, bootstrap

FIXED_INSTANT = datetime(2024, 5, 17, 9, 30, 0, 123000, tzinfo=UTC)


@pytest.fixture
def sink() -> MemorySink:
    """A fresh in-memory sink capturing illustration output."""
    return MemorySink()


@pytest.fixture
def clock() -> FixedClock:
    """A clock frozen at `FIXED_INSTANT`."""
    return FixedClock(FIXED_INSTANT)


@pytest.fixture
def container(sink: MemorySink, clock: FixedClock) -> AppContainer:
    """The application wired to the memory sink and the fixed clock."""
    return bootstrap(sink=sink, clock=clock)
