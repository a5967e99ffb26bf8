"""Client adapter for the Akbank money-order (EFT / havale) web service."""

from akbank_transfer.application.transfer_service import AkbankTransferService
from akbank_transfer.config.transport_options import TransportOptions
from akbank_transfer.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)
from akbank_transfer.domain.transfer.constants import ReasonCode
from akbank_transfer.domain.transfer.exceptions import (
    ConfigError,
    MissingFieldError,
    SoapFaultError,
    TransportFailure,
)
from akbank_transfer.domain.transfer.iban import is_own_bank_iban, is_valid_iban
from akbank_transfer.domain.transfer.ports.transport_port import MoneyOrderTransport
from akbank_transfer.domain.transfer.results import (
    dekont_code,
    is_success,
    reference_code,
)

__all__ = [
    "AkbankTransferService",
    "ConfigError",
    "DomainException",
    "ErrorCode",
    "MissingFieldError",
    "MoneyOrderTransport",
    "ReasonCode",
    "SoapFaultError",
    "TransportFailure",
    "TransportOptions",
    "ValidationError",
    "dekont_code",
    "is_own_bank_iban",
    "is_success",
    "is_valid_iban",
    "reference_code",
]
