"""Output sinks: where illustration messages end up."""

from typing import TextIO

import click

from solid_principles.interfaces.output_sink import OutputSink

# pylint: disable=too-few-public-methods


class ConsoleSink(OutputSink):
    """Write each message as one line via `click.echo`.

    Messages go to stdout by default so they can be piped; pass
    ``err=True`` to send them to stderr instead.
    """

    def __init__(self, file: TextIO | None = None, err: bool = False) -> None:
        self._file = file
        self._err = err

    def emit(self, message: str) -> None:
        click.echo(message, file=self._file, err=self._err)


class MemorySink(OutputSink):
    """Collect messages in memory, in emission order.

    Note:
        Intended for tests and for comparing the output of two call paths.
    """

    def __init__(self) -> None:
        self._messages: list[str] = []

    def emit(self, message: str) -> None:
        self._messages.append(message)

    @property
    def messages(self) -> list[str]:
        """A copy of the messages emitted so far."""
        return list(self._messages)

    @property
    def last(self) -> str | None:
        """The most recent message, or None if nothing was emitted."""
        return self._messages[-1] if self._messages else None

    def clear(self) -> None:
        """Forget all captured messages."""
        self._messages.clear()

    def __len__(self) -> int:
        return len(self._messages)
