"""Fixtures for Payment contract tests."""

from collections.abc import Iterable

import pytest

from solid_principles.adapters.payments import (
    BankTransferPayment,
    CreditCardPayment,
    CryptoPayment,
    PayPalPayment,
)
from solid_principles.adapters.sinks import MemorySink
from solid_principles.interfaces.payment import Payment

PAYMENT_LABELS = {
    "credit-card": "credit card",
    "paypal": "PayPal",
    "bank-transfer": "bank transfer",
    "crypto": "cryptocurrency",
}


@pytest.fixture(params=list(PAYMENT_LABELS))
def payment_key(request: pytest.FixtureRequest) -> str:
    """Key of the payment method under test."""
    return request.param


@pytest.fixture
def payment_method(payment_key: str, sink: MemorySink) -> Iterable[Payment]:
    """Return a fresh Payment for the requested method, writing to `sink`.

    Supported params:
      - `"credit-card"` → CreditCardPayment
      - `"paypal"` → PayPalPayment
      - `"bank-transfer"` → BankTransferPayment
      - `"crypto"` → CryptoPayment
    """
    match payment_key:
        case "credit-card":
            yield CreditCardPayment(sink)
        case "paypal":
            yield PayPalPayment(sink)
        case "bank-transfer":
            yield BankTransferPayment(sink)
        case "crypto":
            yield CryptoPayment(sink)
        case _:
            raise ValueError(f"unknown payment method: {payment_key}")


@pytest.fixture
def expected_label(payment_key: str) -> str:
    """Label the method under test must put in its message."""
    return PAYMENT_LABELS[payment_key]
