"""A discount calculator that branches on the customer type.

Supporting a new customer type means editing `calculate_discount`.
"""

import logging
from fractions import Fraction
from numbers import Real

from solid_principles.domain.errors import UnrecognizedCustomerTypeError
from solid_principles.domain.money import apply_rate, validate_amount

logger = logging.getLogger(__name__)

SUPPORTED_CUSTOMER_TYPES = ("regular", "silver", "gold")


class ConditionalDiscount:
    """Discount for a customer type given as a string tag."""

    def __init__(self, customer_type: str, amount: Real) -> None:
        self.customer_type = customer_type
        self.amount = validate_amount(amount)

    def calculate_discount(self) -> Real:  # pylint: disable=no-else-return
        """Return the discount for the tagged customer type.

        Raises:
            UnrecognizedCustomerTypeError: For any tag other than
                ``regular``, ``silver`` or ``gold``.
        """
        if self.customer_type == "regular":
            return apply_rate(self.amount, Fraction(5, 100))
        elif self.customer_type == "silver":
            return apply_rate(self.amount, Fraction(10, 100))
        elif self.customer_type == "gold":
            return apply_rate(self.amount, Fraction(15, 100))
        else:
            logger.warning("No discount branch for customer type %r", self.customer_type)
            raise UnrecognizedCustomerTypeError(self.customer_type)
