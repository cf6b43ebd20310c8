"""Customer discount tiers.

`Discount` is the abstract contract; each customer tier is a subclass that
knows its own rate. New tiers are added by writing a new subclass, never by
editing an existing one.
"""

import abc
from fractions import Fraction
from numbers import Real

from .money import apply_rate, validate_amount


class Discount(abc.ABC):
    """Contract for calculating a customer's discount."""

    #: Display name of the tier, e.g. "Regular".
    tier: str

    def __init__(self, amount: Real) -> None:
        self._amount = validate_amount(amount)

    @property
    def amount(self) -> Real:
        """The purchase amount the discount applies to."""
        return self._amount

    @abc.abstractmethod
    def calculate_discount(self) -> Real:
        """Return the discount for this customer's purchase amount."""


class RegularCustomer(Discount):
    """Regular customers get 5% off."""

    tier = "Regular"

    def calculate_discount(self) -> Real:
        return apply_rate(self._amount, Fraction(5, 100))


class SilverCustomer(Discount):
    """Silver customers get 10% off."""

    tier = "Silver"

    def calculate_discount(self) -> Real:
        return apply_rate(self._amount, Fraction(10, 100))


class GoldCustomer(Discount):
    """Gold customers get 15% off."""

    tier = "Gold"

    def calculate_discount(self) -> Real:
        return apply_rate(self._amount, Fraction(15, 100))


class PremiumCustomer(Discount):
    """Premium customers get 20% off.

    Added after the other tiers without touching them.
    """

    tier = "Premium"

    def calculate_discount(self) -> Real:
        return apply_rate(self._amount, Fraction(20, 100))


DISCOUNT_TIERS: dict[str, type[Discount]] = {
    "regular": RegularCustomer,
    "silver": SilverCustomer,
    "gold": GoldCustomer,
    "premium": PremiumCustomer,
}
