"""Interface for output sinks."""

import abc

# pylint: disable=too-few-public-methods


class OutputSink(abc.ABC):
    """Contract for anything that accepts a formatted message.

    Every illustration writes through a sink instead of printing directly,
    so the destination (console, memory buffer, ...) can be swapped.
    """

    @abc.abstractmethod
    def emit(self, message: str) -> None:
        """Accept one formatted message.

        Args:
            message: The text to emit.
        """
