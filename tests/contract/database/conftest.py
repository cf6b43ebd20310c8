"""Fixtures for Database contract tests."""

import pytest

from solid_principles.adapters.databases import DATABASES
from solid_principles.adapters.sinks import MemorySink
from solid_principles.interfaces.database import Database

STORE_NAMES = {"mysql": "MySQL", "mongodb": "MongoDB", "postgresql": "PostgreSQL"}


@pytest.fixture(params=list(STORE_NAMES))
def store_key(request: pytest.FixtureRequest) -> str:
    """Key of the backend under test."""
    return request.param


@pytest.fixture
def database(store_key: str, sink: MemorySink) -> Database:
    """A fresh backend writing to `sink`."""
    return DATABASES[store_key](sink)


@pytest.fixture
def expected_store_name(store_key: str) -> str:
    """Store name the backend must report."""
    return STORE_NAMES[store_key]
