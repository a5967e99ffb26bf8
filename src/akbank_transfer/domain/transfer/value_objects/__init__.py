"""Value objects for the money-order domain."""

from akbank_transfer.domain.transfer.value_objects.credentials import Credentials
from akbank_transfer.domain.transfer.value_objects.sender_identity import (
    SenderIdentity,
)

__all__ = [
    "Credentials",
    "SenderIdentity",
]
