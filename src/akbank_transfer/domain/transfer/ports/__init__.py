"""Ports of the money-order domain."""

from akbank_transfer.domain.transfer.ports.transport_port import MoneyOrderTransport

__all__ = ["MoneyOrderTransport"]
