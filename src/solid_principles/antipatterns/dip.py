"""A high-level module wired directly to concrete databases."""

from solid_principles.adapters.databases import MongoDbDatabase, MySqlDatabase
from solid_principles.interfaces.output_sink import OutputSink


class HighLevelModule:
    """Builds its own MySQL and MongoDB stores.

    Adding a PostgreSQL store means adding a constructor line and a new
    ``save_to_postgresql`` method here.
    """

    def __init__(self, sink: OutputSink) -> None:
        self._mysql_database = MySqlDatabase(sink)  # tightly coupled with MySQL
        self._mongo_database = MongoDbDatabase(sink)  # tightly coupled with MongoDB

    def save_to_mysql(self, data: str) -> None:
        """Save through the hard-wired MySQL store."""
        self._mysql_database.save(data)

    def save_to_mongodb(self, data: str) -> None:
        """Save through the hard-wired MongoDB store."""
        self._mongo_database.save(data)
