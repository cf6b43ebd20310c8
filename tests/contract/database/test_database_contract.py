"""Contract tests for Database implementations."""

from solid_principles.adapters.databases import DATABASES
from solid_principles.adapters.sinks import MemorySink
from solid_principles.interfaces.database import Database
from solid_principles.interfaces.output_sink import OutputSink
from solid_principles.service_layer.call_sites import DataStore

# pylint: disable=too-few-public-methods


def test_is_a_database(database: Database) -> None:
    """Every backend implements the Database contract."""
    assert isinstance(database, Database)


def test_saving_names_the_store(
    database: Database, sink: MemorySink, expected_store_name: str
) -> None:
    """'User data' → '<data> is being saved to <Store>'."""
    DataStore(database).save_data("User data")
    assert sink.messages == [f"User data is being saved to {expected_store_name}"]


def test_data_store_matches_direct_save(store_key: str) -> None:
    """Injecting a backend into DataStore has the same effect as calling it."""
    direct, injected = MemorySink(), MemorySink()
    DATABASES[store_key](direct).save("Post data")
    DataStore(DATABASES[store_key](injected)).save_data("Post data")
    assert injected.messages == direct.messages


def test_every_store_gives_a_distinct_message() -> None:
    """Same payload, same high-level code, one message per store."""
    sink = MemorySink()
    for database_cls in DATABASES.values():
        DataStore(database_cls(sink)).save_data("User data")
    assert len(set(sink.messages)) == len(DATABASES)


class InMemoryDatabase(Database):
    """Test-only backend that actually keeps what it is given."""

    store_name = "memory"

    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink
        self.rows: list[str] = []

    def save(self, data: str) -> None:
        self.rows.append(data)
        self._sink.emit(f"{data} is being saved to {self.store_name}")


def test_new_backend_needs_no_change(sink: MemorySink) -> None:
    """A backend unknown to DataStore is used without any change to it."""
    backend = InMemoryDatabase(sink)
    DataStore(backend).save_data("User data")
    assert backend.rows == ["User data"]
    assert sink.messages == ["User data is being saved to memory"]
