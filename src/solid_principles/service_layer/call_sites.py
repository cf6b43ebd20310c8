"""Call sites that depend only on capability contracts.

None of these functions inspect which concrete variant they were given.
A new payment method, store or device works with them unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from solid_principles.domain.money import format_amount

if TYPE_CHECKING:
    from collections.abc import Iterable

    from solid_principles.domain.discounts import Discount
    from solid_principles.interfaces.database import Database
    from solid_principles.interfaces.payment import Amount, Payment
    from solid_principles.interfaces.printer import (
        Faxable,
        Photocopyable,
        Printable,
        Scannable,
    )

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


def process_customer_payment(payment_method: Payment, amount: Amount) -> None:
    """Process a customer's payment with whichever method they chose.

    Args:
        payment_method: Any `Payment` implementation.
        amount: The amount to charge.
    """
    logger.debug("Dispatching payment of %s to %r", amount, payment_method)
    payment_method.process_payment(amount)


def describe_discount(customer: Discount) -> str:
    """Return a one-line summary of a customer's discount."""
    return (
        f"{customer.tier} Customer Discount: "
        f"{format_amount(customer.calculate_discount())}"
    )


class DataStore:
    """High-level module that saves data through an injected `Database`.

    The store never builds its own backend; swapping MySQL for MongoDB or
    PostgreSQL is a matter of passing a different object in.
    """

    def __init__(self, database: Database) -> None:
        self._database = database

    @property
    def database(self) -> Database:
        """The injected backend."""
        return self._database

    def save_data(self, data: str) -> None:
        """Save `data` through the injected backend."""
        logger.debug("Saving data through %r", self._database)
        self._database.save(data)


def print_all(printers: Iterable[Printable]) -> None:
    """Print one document on each device."""
    for printer in printers:
        printer.print_document()


def scan_all(scanners: Iterable[Scannable]) -> None:
    """Scan one document on each device."""
    for scanner in scanners:
        scanner.scan()


def fax_all(fax_machines: Iterable[Faxable]) -> None:
    """Fax one document from each device."""
    for fax_machine in fax_machines:
        fax_machine.fax()


def photocopy_all(copiers: Iterable[Photocopyable]) -> None:
    """Photocopy one document on each device."""
    for copier in copiers:
        copier.photocopy()
