"""Command handlers: one illustration per SOLID principle.

Handlers name the collaborators they need (``sink``, ``clock``) as keyword
parameters; the bootstrap injects them. Each handler builds its variants,
hands them to the call sites and lets any domain error propagate.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from solid_principles.adapters.activity_log import TimestampedLogger
from solid_principles.adapters.databases import DATABASES
from solid_principles.adapters.payments import PAYMENT_METHODS
from solid_principles.adapters.printers import AdvancedPrinter, BasicPrinter, Photocopier
from solid_principles.antipatterns.dip import HighLevelModule
from solid_principles.antipatterns.isp import FatBasicPrinter
from solid_principles.antipatterns.ocp import SUPPORTED_CUSTOMER_TYPES, ConditionalDiscount
from solid_principles.antipatterns.srp import UserWithLogging
from solid_principles.domain.discounts import DISCOUNT_TIERS
from solid_principles.domain.errors import (
    UnrecognizedCaseError,
    UnrecognizedCustomerTypeError,
)
from solid_principles.domain.money import format_amount
from solid_principles.domain.user import User

from . import commands
from .call_sites import (
    DataStore,
    describe_discount,
    fax_all,
    photocopy_all,
    print_all,
    process_customer_payment,
    scan_all,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from solid_principles.interfaces.clock import Clock
    from solid_principles.interfaces.output_sink import OutputSink

logger = logging.getLogger(__name__)


# ============================================================================
#                       Single Responsibility Principle
# ============================================================================


def show_single_responsibility(
    cmd: commands.ShowSingleResponsibility, sink: OutputSink, clock: Clock
) -> None:
    """Save a user and log it, with or without a separate logger."""
    if not cmd.compliant:
        UserWithLogging(cmd.name, cmd.email, cmd.password, clock=clock).save(sink)
        return

    user = User(cmd.name, cmd.email, cmd.password)
    user.save(sink)

    activity_logger = TimestampedLogger(sink, clock)
    activity_logger.log(f"User {user.describe()} saved")


# ============================================================================
#                          Open/Closed Principle
# ============================================================================


def show_open_closed(cmd: commands.ShowOpenClosed, sink: OutputSink) -> None:
    """Print the discount of each requested customer tier."""
    if not cmd.compliant:
        for customer_type in cmd.tiers or SUPPORTED_CUSTOMER_TYPES:
            discount = ConditionalDiscount(customer_type, cmd.amount).calculate_discount()
            sink.emit(
                f"{customer_type.capitalize()} Customer Discount: "
                f"{format_amount(discount)}"
            )
        return

    for tier in cmd.tiers or tuple(DISCOUNT_TIERS):
        if (customer_cls := DISCOUNT_TIERS.get(tier.lower())) is None:
            raise UnrecognizedCustomerTypeError(tier)
        sink.emit(describe_discount(customer_cls(cmd.amount)))


# ============================================================================
#                        Liskov Substitution Principle
# ============================================================================


def show_liskov_substitution(
    cmd: commands.ShowLiskovSubstitution, sink: OutputSink
) -> None:
    """Run every requested payment through the same call site."""
    if not cmd.compliant:
        logger.info(
            "The Liskov substitution illustration has no violating form; "
            "showing the compliant design."
        )
    for method, amount in cmd.payments:
        if (payment_cls := PAYMENT_METHODS.get(method)) is None:
            raise UnrecognizedCaseError(method, f"Unknown payment method: {method!r}")
        process_customer_payment(payment_cls(sink), amount)


# ============================================================================
#                      Interface Segregation Principle
# ============================================================================


def show_interface_segregation(
    cmd: commands.ShowInterfaceSegregation, sink: OutputSink
) -> None:
    """Drive each device through the capabilities it implements."""
    if not cmd.compliant:
        printer = FatBasicPrinter(sink)
        printer.print_document()
        printer.scan()  # raises UnsupportedOperationError
        return

    basic_printer = BasicPrinter(sink)
    print_all([basic_printer])

    advanced_printer = AdvancedPrinter(sink)
    print_all([advanced_printer])
    scan_all([advanced_printer])
    fax_all([advanced_printer])

    photocopier = Photocopier(sink)
    print_all([photocopier])
    photocopy_all([photocopier])


# ============================================================================
#                       Dependency Inversion Principle
# ============================================================================


def show_dependency_inversion(
    cmd: commands.ShowDependencyInversion, sink: OutputSink
) -> None:
    """Save each payload to its store, injected or hard-wired."""
    if not cmd.compliant:
        high_level_module = HighLevelModule(sink)
        for store, data in cmd.saves:
            if store == "mysql":
                high_level_module.save_to_mysql(data)
            elif store == "mongodb":
                high_level_module.save_to_mongodb(data)
            else:
                raise UnrecognizedCaseError(
                    store, f"HighLevelModule cannot save to {store!r}"
                )
        return

    for store, data in cmd.saves:
        if (database_cls := DATABASES.get(store)) is None:
            raise UnrecognizedCaseError(store, f"Unknown store: {store!r}")
        DataStore(database_cls(sink)).save_data(data)


COMMAND_HANDLERS: dict[type[commands.Command], Callable[..., None]] = {
    commands.ShowSingleResponsibility: show_single_responsibility,
    commands.ShowOpenClosed: show_open_closed,
    commands.ShowLiskovSubstitution: show_liskov_substitution,
    commands.ShowInterfaceSegregation: show_interface_segregation,
    commands.ShowDependencyInversion: show_dependency_inversion,
}
