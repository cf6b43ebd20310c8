"""Interface for payment methods."""

import abc

# pylint: disable=too-few-public-methods

Amount = int | float


class Payment(abc.ABC):
    """Contract for processing a payment.

    Any payment method must be usable wherever a `Payment` is expected,
    without the caller knowing which method it holds.
    """

    #: Human readable name of the payment method, e.g. "credit card".
    label: str

    @abc.abstractmethod
    def process_payment(self, amount: Amount) -> None:
        """Process a payment of the given amount.

        Args:
            amount: The payment amount. Must be non-negative.

        Raises:
            InvalidAmountError: If the amount is negative or not a number.
        """
