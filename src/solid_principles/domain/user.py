"""The user entity of the single responsibility illustration."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from solid_principles.interfaces.output_sink import OutputSink


class User:
    """A user that only knows how to describe and save itself.

    Logging is deliberately not part of this class; see
    `solid_principles.adapters.activity_log.TimestampedLogger`.
    """

    def __init__(self, name: str, email: str, password: str) -> None:
        self.name = name
        self.email = email
        self._password = password

    def get_user(self) -> dict[str, str]:
        """Return the public user details (the password is never exposed)."""
        return {"name": self.name, "email": self.email}

    def describe(self) -> str:
        """Return the public user details as a JSON string."""
        return json.dumps(self.get_user(), separators=(",", ":"))

    def save(self, sink: OutputSink) -> None:
        """Save the user to the (simulated) database.

        Args:
            sink: Where the confirmation message is emitted.
        """
        sink.emit(f"User {self.describe()} saved to database")

    def __repr__(self) -> str:
        return f"User(name={self.name!r}, email={self.email!r})"
