"""Configuration utilities for solid_principles.

This module centralizes small helpers and constants related to application
configuration. Every setting is read from a ``SOLID_*`` environment variable.
"""

import math
import os

ENV_PREFIX = "SOLID"  # pragma: no mutate
DEFAULT_AMOUNT_ENV = f"{ENV_PREFIX}_DEFAULT_AMOUNT"
DEFAULT_PAYLOAD_ENV = f"{ENV_PREFIX}_DEFAULT_PAYLOAD"

DEFAULT_AMOUNT = 1000
DEFAULT_PAYLOAD = "User data"


class InvalidSettingError(Exception):
    """Raised when an environment setting has an unusable value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value for {name}: {value!r} ({reason})")
        self.name = name
        self.value = value


def get_default_amount() -> int | float:
    """Get the purchase amount used by the discount illustration.

    Returns:
        The value of `SOLID_DEFAULT_AMOUNT` as an int when integral, a float
        otherwise, or `DEFAULT_AMOUNT` when the variable is unset or empty.

    Raises:
        InvalidSettingError: If the value is not a finite, non-negative number.
    """
    if not (raw := os.environ.get(DEFAULT_AMOUNT_ENV, "").strip()):
        return DEFAULT_AMOUNT
    try:
        amount: int | float = int(raw)
    except ValueError:
        try:
            amount = float(raw)
        except ValueError as e:
            raise InvalidSettingError(DEFAULT_AMOUNT_ENV, raw, "not a number") from e
        if amount.is_integer():
            amount = int(amount)
    # ints are always finite
    if (isinstance(amount, float) and not math.isfinite(amount)) or amount < 0:
        raise InvalidSettingError(
            DEFAULT_AMOUNT_ENV, raw, "must be a non-negative number"
        )
    return amount


def get_default_payload(fallback: str | None = DEFAULT_PAYLOAD) -> str | None:
    """Get the payload saved by the storage illustration.

    Args:
        fallback: Returned when `SOLID_DEFAULT_PAYLOAD` is unset or empty.
            Pass None to tell "not configured" apart from the default.

    Returns:
        The value of `SOLID_DEFAULT_PAYLOAD`, or `fallback`.
    """
    return os.environ.get(DEFAULT_PAYLOAD_ENV) or fallback
