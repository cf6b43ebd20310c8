"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidAmountError(DomainError, ValueError):
    """Raised when a monetary amount is negative or not a number."""

    def __init__(self, amount: object) -> None:
        super().__init__(f"Invalid amount {amount!r}: expected a non-negative number.")
        self.amount = amount


# ============================================================================
#                   Errors the compliant designs eliminate
# ============================================================================


class UnsupportedOperationError(DomainError, NotImplementedError):
    """Raised when a variant is asked for an operation it cannot perform."""

    def __init__(self, operation: str, variant: str) -> None:
        super().__init__(f"{operation.capitalize()} not supported by {variant}.")
        self.operation = operation
        self.variant = variant


class UnrecognizedCaseError(DomainError, LookupError):
    """Raised when conditional dispatch meets a tag it has no branch for."""

    def __init__(self, case: str, message: str | None = None) -> None:
        super().__init__(message or f"Unrecognized case: {case!r}")
        self.case = case


class UnrecognizedCustomerTypeError(UnrecognizedCaseError):
    """Raised when a conditional discount does not know a customer type."""

    def __init__(self, customer_type: str) -> None:
        super().__init__(customer_type, "Customer type not supported")
        self.customer_type = customer_type
