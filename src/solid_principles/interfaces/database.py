"""Interface for storage backends."""

import abc

# pylint: disable=too-few-public-methods


class Database(abc.ABC):
    """Contract for a backing store that can persist a string payload.

    The stores named by the adapters (MySQL, MongoDB, PostgreSQL) are
    placeholders; they only report what would have been saved.
    """

    #: Display name of the backing store, e.g. "MySQL".
    store_name: str

    @abc.abstractmethod
    def save(self, data: str) -> None:
        """Persist the given payload.

        Args:
            data: The payload to save.
        """
