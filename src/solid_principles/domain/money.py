"""Helpers for monetary amounts.

Integers are kept exact: they are never converted to float, so arbitrarily
large whole amounts validate, discount and format without overflow.
"""

import math
from fractions import Fraction
from numbers import Integral, Rational, Real

from .errors import InvalidAmountError


def validate_amount(amount: object) -> Real:
    """Return `amount` unchanged if it is a usable monetary amount.

    Args:
        amount: Candidate amount.

    Returns:
        The same amount.

    Raises:
        InvalidAmountError: If the amount is a bool, not a real number,
            not finite or negative.
    """
    if isinstance(amount, bool) or not isinstance(amount, Real):
        raise InvalidAmountError(amount)
    # rationals (ints included) are always finite
    if not isinstance(amount, Rational) and not math.isfinite(amount):
        raise InvalidAmountError(amount)
    if amount < 0:
        raise InvalidAmountError(amount)
    return amount


def apply_rate(amount: Real, rate: Fraction) -> Real:
    """Return ``amount * rate``.

    Whole amounts give an exact ``int`` when the product is whole, and a
    float otherwise (or the exact `Fraction` if it is too large for a
    float). Other amounts are multiplied by ``float(rate)``.
    """
    if isinstance(amount, Integral):
        exact = Fraction(int(amount)) * rate
        if exact.denominator == 1:
            return exact.numerator
        try:
            return float(exact)
        except OverflowError:
            return exact
    return amount * float(rate)


def format_amount(amount: Real) -> str:
    """Render an amount for display.

    Integral amounts are shown without decimals (``100``, ``150``); anything
    else is shown with two decimals (``12.50``).
    """
    if isinstance(amount, Integral):
        return str(int(amount))
    whole = math.floor(amount)
    if amount == whole:
        return str(whole)
    return f"{amount:.2f}"
