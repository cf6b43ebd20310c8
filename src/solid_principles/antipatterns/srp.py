"""A user class with two reasons to change: persistence and logging."""

from __future__ import annotations

from typing import TYPE_CHECKING

from solid_principles.domain.user import User

if TYPE_CHECKING:
    from solid_principles.interfaces.clock import Clock
    from solid_principles.interfaces.output_sink import OutputSink


class UserWithLogging(User):
    """Saves itself *and* writes the audit log line.

    Any change to the log format forces a change to the user class.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self, name: str, email: str, password: str, *, clock: Clock
    ) -> None:
        super().__init__(name, email, password)
        self._clock = clock

    def save(self, sink: OutputSink) -> None:
        sink.emit(f"User {self.describe()} saved to database")
        # Logger
        timestamp = self._clock.now().isoformat(timespec="milliseconds")
        sink.emit(
            f"LOG: User {self.describe()} saved to database at "
            f"{timestamp.replace('+00:00', 'Z')}"
        )
