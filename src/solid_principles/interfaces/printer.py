"""Segregated printer capabilities.

Instead of one interface with every office-machine operation, each capability
is its own single-method contract. A device implements only the ones it
genuinely supports, and call sites ask only for the capability they use.
"""

import abc

# pylint: disable=too-few-public-methods


class Printable(abc.ABC):
    """A device that can print a document."""

    @abc.abstractmethod
    def print_document(self) -> None:
        """Print a document."""


class Scannable(abc.ABC):
    """A device that can scan a document."""

    @abc.abstractmethod
    def scan(self) -> None:
        """Scan a document."""


class Faxable(abc.ABC):
    """A device that can fax a document."""

    @abc.abstractmethod
    def fax(self) -> None:
        """Fax a document."""


class Photocopyable(abc.ABC):
    """A device that can photocopy a document."""

    @abc.abstractmethod
    def photocopy(self) -> None:
        """Photocopy a document."""
