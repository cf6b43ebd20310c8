"""Fixtures for OutputSink contract tests."""

import io
from collections.abc import Callable, Iterable

import pytest

from solid_principles.adapters.sinks import ConsoleSink, MemorySink
from solid_principles.interfaces.output_sink import OutputSink

type Reader = Callable[[], list[str]]


@pytest.fixture(params=["memory", "console"])
def sink_under_test(request: pytest.FixtureRequest) -> Iterable[tuple[OutputSink, Reader]]:
    """Yield a sink and a function returning the lines it has received.

    Supported params:
      - `"memory"` → MemorySink
      - `"console"` → ConsoleSink writing to an in-memory text stream
    """
    match request.param:
        case "memory":
            memory = MemorySink()
            yield memory, lambda: memory.messages
        case "console":
            stream = io.StringIO()
            yield ConsoleSink(file=stream), lambda: stream.getvalue().splitlines()
        case _:
            raise ValueError(f"unknown sink: {request.param}")
