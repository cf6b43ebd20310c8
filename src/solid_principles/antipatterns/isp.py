"""A "fat" printer interface and a printer forced to implement all of it."""

import abc
import logging

from solid_principles.domain.errors import UnsupportedOperationError
from solid_principles.interfaces.output_sink import OutputSink

logger = logging.getLogger(__name__)


class Printer(abc.ABC):
    """One interface for every office-machine operation."""

    @abc.abstractmethod
    def print_document(self) -> None:
        """Print a document."""

    @abc.abstractmethod
    def scan(self) -> None:
        """Scan a document."""

    @abc.abstractmethod
    def fax(self) -> None:
        """Fax a document."""


class FatBasicPrinter(Printer):
    """A print-only device that still has to provide ``scan`` and ``fax``."""

    variant = "BasicPrinter"

    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink

    def print_document(self) -> None:
        self._sink.emit("Printing document...")

    def scan(self) -> None:
        logger.warning("%s asked to scan", self.variant)
        raise UnsupportedOperationError("scan", self.variant)

    def fax(self) -> None:
        logger.warning("%s asked to fax", self.variant)
        raise UnsupportedOperationError("fax", self.variant)
