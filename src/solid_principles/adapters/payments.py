"""Payment methods.

Every method implements `Payment` and nothing else; the caller never needs
to know which one it was given. `CryptoPayment` was added after the others
and slots in without any change to the call site.
"""

import logging

from solid_principles.domain.money import format_amount, validate_amount
from solid_principles.interfaces.output_sink import OutputSink
from solid_principles.interfaces.payment import Amount, Payment

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class _SinkPayment(Payment):
    """Shared plumbing: validate the amount and emit the confirmation."""

    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink

    def process_payment(self, amount: Amount) -> None:
        amount = validate_amount(amount)
        logger.debug("Processing %s payment of %s", self.label, amount)
        self._sink.emit(f"Processed {self.label} payment of ${format_amount(amount)}")


class CreditCardPayment(_SinkPayment):
    """Pay by credit card."""

    label = "credit card"


class PayPalPayment(_SinkPayment):
    """Pay with PayPal."""

    label = "PayPal"


class BankTransferPayment(_SinkPayment):
    """Pay by bank transfer."""

    label = "bank transfer"


class CryptoPayment(_SinkPayment):
    """Pay with cryptocurrency."""

    label = "cryptocurrency"


PAYMENT_METHODS: dict[str, type[Payment]] = {
    "credit-card": CreditCardPayment,
    "paypal": PayPalPayment,
    "bank-transfer": BankTransferPayment,
    "crypto": CryptoPayment,
}
