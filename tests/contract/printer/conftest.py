"""Fixtures for printer capability contract tests."""

from collections.abc import Iterable

import pytest

from solid_principles.adapters.printers import (
    AdvancedPrinter,
    BasicPrinter,
    Photocopier,
)
from solid_principles.adapters.sinks import MemorySink
from solid_principles.interfaces.printer import Printable

CAPABILITIES = {
    "basic": {"print_document"},
    "advanced": {"print_document", "scan", "fax"},
    "photocopier": {"print_document", "photocopy"},
}


@pytest.fixture(params=list(CAPABILITIES))
def device_key(request: pytest.FixtureRequest) -> str:
    """Key of the device under test."""
    return request.param


@pytest.fixture
def device(device_key: str, sink: MemorySink) -> Iterable[Printable]:
    """Return a fresh device writing to `sink`.

    Supported params:
      - `"basic"` → BasicPrinter
      - `"advanced"` → AdvancedPrinter
      - `"photocopier"` → Photocopier
    """
    match device_key:
        case "basic":
            yield BasicPrinter(sink)
        case "advanced":
            yield AdvancedPrinter(sink)
        case "photocopier":
            yield Photocopier(sink)
        case _:
            raise ValueError(f"unknown device: {device_key}")


@pytest.fixture
def capabilities(device_key: str) -> set[str]:
    """Operations the device under test exposes."""
    return CAPABILITIES[device_key]
