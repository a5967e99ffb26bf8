"""Shared domain exceptions and error codes.

Every exception raised by this package inherits from DomainException so
callers can catch the whole family in one place. Remote-side outcomes are
never raised; they travel in the normalized result mapping instead.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for programmatic handling."""

    # Local validation
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    CONFIG_ERROR = "CONFIG_ERROR"

    # Usage errors
    MISSING_FIELD = "MISSING_FIELD"

    # Transport
    TRANSPORT_FAILED = "TRANSPORT_FAILED"
    SOAP_FAULT = "SOAP_FAULT"

    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all errors raised by this package.

    Attributes
    ----------
    message
        Human-readable error message
    code
        Stable error code for programmatic handling
    details
        Optional additional context
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when call parameters fail local validation."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
