"""Module defining Commands.

Each command asks for one illustration to be shown. ``compliant`` selects
the design that follows the principle (True) or the one that violates it
(False).
"""

from dataclasses import dataclass
from typing import ClassVar

from solid_principles.domain.principles import Principle
from solid_principles.interfaces.payment import Amount

DEFAULT_PAYMENTS: tuple[tuple[str, Amount], ...] = (
    ("credit-card", 100),
    ("paypal", 200),
    ("bank-transfer", 300),
    ("crypto", 400),
)

DEFAULT_SAVES: tuple[tuple[str, str], ...] = (
    ("mysql", "User data"),
    ("mongodb", "Post data"),
)


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""

    #: The principle the command illustrates; None for commands outside the catalogue.
    principle: ClassVar[Principle | None] = None

    compliant: bool = True

    @property
    def form(self) -> str:
        """``"after"`` for the compliant design, ``"before"`` for the violating one."""
        return "after" if self.compliant else "before"


@dataclass(frozen=True)
class ShowSingleResponsibility(Command):
    """Save a user, then log that it was saved."""

    principle = Principle.SRP

    name: str = "Alice"
    email: str = "alice@example.com"
    password: str = "AlicePassword"


@dataclass(frozen=True)
class ShowOpenClosed(Command):
    """Calculate discounts for several customer tiers.

    ``tiers=None`` means every tier the chosen design knows about.
    """

    principle = Principle.OCP

    amount: Amount = 1000
    tiers: tuple[str, ...] | None = None


@dataclass(frozen=True)
class ShowLiskovSubstitution(Command):
    """Pay with several payment methods through one call site."""

    principle = Principle.LSP

    payments: tuple[tuple[str, Amount], ...] = DEFAULT_PAYMENTS


@dataclass(frozen=True)
class ShowInterfaceSegregation(Command):
    """Use each office device for the operations it supports."""

    principle = Principle.ISP


@dataclass(frozen=True)
class ShowDependencyInversion(Command):
    """Save payloads to several backing stores."""

    principle = Principle.DIP

    saves: tuple[tuple[str, str], ...] = DEFAULT_SAVES


COMMAND_FOR_PRINCIPLE: dict[Principle, type[Command]] = {
    command.principle: command
    for command in (
        ShowSingleResponsibility,
        ShowOpenClosed,
        ShowLiskovSubstitution,
        ShowInterfaceSegregation,
        ShowDependencyInversion,
    )
    if command.principle is not None
}
