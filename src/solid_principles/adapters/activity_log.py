"""Activity logger that stamps each message with the current time."""

from solid_principles.interfaces.activity_log import ActivityLogger
from solid_principles.interfaces.clock import Clock
from solid_principles.interfaces.output_sink import OutputSink

# pylint: disable=too-few-public-methods


class TimestampedLogger(ActivityLogger):
    """Log messages as ``LOG: <message> at <ISO-8601 timestamp>``."""

    def __init__(self, sink: OutputSink, clock: Clock) -> None:
        self._sink = sink
        self._clock = clock

    def log(self, message: str) -> None:
        timestamp = self._clock.now().isoformat(timespec="milliseconds")
        self._sink.emit(f"LOG: {message} at {timestamp.replace('+00:00', 'Z')}")
