"""Money-order domain exceptions.

Only local problems are raised to callers: misconfiguration, bad call
parameters and helpers used on the wrong result shape. Transport exceptions
are raised by transport implementations and folded into results by the
invoker before they reach business code.
"""

from akbank_transfer.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)

# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(DomainException):
    """Raised when the service is configured without required values."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.CONFIG_ERROR,
            details={"field": field} if field else None,
        )


# =============================================================================
# Request Exceptions
# =============================================================================


class InvalidAmountError(ValidationError):
    """Raised when a transfer amount is negative or not a number."""

    def __init__(self, amount: object) -> None:
        super().__init__(
            message=f"Amount must be a non-negative decimal, got {amount!r}",
            code=ErrorCode.INVALID_AMOUNT,
            details={"amount": str(amount)},
        )


class MissingTransactionIdError(ValidationError):
    """Raised when a transaction id is empty."""

    def __init__(self) -> None:
        super().__init__(message="Transaction id must not be empty")


# =============================================================================
# Result Exceptions
# =============================================================================


class MissingFieldError(DomainException):
    """Raised when a result helper is used on a result lacking its field.

    Asking for a reference code on a status-query result is a usage error,
    not a remote failure.
    """

    def __init__(self, fields: tuple[str, ...]) -> None:
        super().__init__(
            message=f"Result has none of the fields: {', '.join(fields)}",
            code=ErrorCode.MISSING_FIELD,
            details={"fields": list(fields)},
        )


# =============================================================================
# Transport Exceptions
# =============================================================================


class TransportFailure(DomainException):
    """Raised by a transport when the remote call cannot complete."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        code: ErrorCode = ErrorCode.TRANSPORT_FAILED,
    ) -> None:
        super().__init__(
            message=message,
            code=code,
            details={"operation": operation} if operation else None,
        )


class SoapFaultError(TransportFailure):
    """Raised when the remote service answers with a SOAP fault."""

    def __init__(
        self,
        fault_string: str,
        fault_code: str | None = None,
        operation: str | None = None,
    ) -> None:
        super().__init__(
            message=fault_string,
            operation=operation,
            code=ErrorCode.SOAP_FAULT,
        )
        self.fault_code = fault_code
