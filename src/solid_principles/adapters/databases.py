"""Placeholder storage backends.

None of these talk to a real server. Each one reports what it would have
saved, naming its backing store.
"""

import logging

from solid_principles.interfaces.database import Database
from solid_principles.interfaces.output_sink import OutputSink

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class _ReportingDatabase(Database):
    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink

    def save(self, data: str) -> None:
        logger.debug("Saving %d characters to %s", len(data), self.store_name)
        self._sink.emit(f"{data} is being saved to {self.store_name}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MySqlDatabase(_ReportingDatabase):
    """MySQL placeholder."""

    store_name = "MySQL"


class MongoDbDatabase(_ReportingDatabase):
    """MongoDB placeholder."""

    store_name = "MongoDB"


class PostgresDatabase(_ReportingDatabase):
    """PostgreSQL placeholder, added without touching the high-level module."""

    store_name = "PostgreSQL"


DATABASES: dict[str, type[Database]] = {
    "mysql": MySqlDatabase,
    "mongodb": MongoDbDatabase,
    "postgresql": PostgresDatabase,
}
