"""Shared domain components."""

from akbank_transfer.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)
from akbank_transfer.domain.shared.time import format_transaction_date, today_local

__all__ = [
    "DomainException",
    "ErrorCode",
    "ValidationError",
    "format_transaction_date",
    "today_local",
]
