"""Office devices built from the segregated printer capabilities.

Each device implements only the capabilities it supports. There is no
"not supported" code path anywhere in this module.
"""

from solid_principles.interfaces.output_sink import OutputSink
from solid_principles.interfaces.printer import (
    Faxable,
    Photocopyable,
    Printable,
    Scannable,
)

# pylint: disable=too-few-public-methods


class _Device:
    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BasicPrinter(_Device, Printable):
    """A printer that can only print."""

    def print_document(self) -> None:
        self._sink.emit("Printing document...")


class AdvancedPrinter(_Device, Printable, Scannable, Faxable):
    """A multifunction printer: print, scan and fax."""

    def print_document(self) -> None:
        self._sink.emit("Printing document...")

    def scan(self) -> None:
        self._sink.emit("Scanning document...")

    def fax(self) -> None:
        self._sink.emit("Faxing document...")


class Photocopier(_Device, Printable, Photocopyable):
    """A photocopier that can also print.

    Photocopying arrived as a new capability; no existing device or contract
    had to change.
    """

    def print_document(self) -> None:
        self._sink.emit("Printing document...")

    def photocopy(self) -> None:
        self._sink.emit("Photocopying document...")
