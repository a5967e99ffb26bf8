"""SOAP transport adapters."""

from akbank_transfer.infrastructure.soap.envelope import build_envelope, parse_envelope
from akbank_transfer.infrastructure.soap.httpx_transport import HttpxSoapTransport

__all__ = [
    "HttpxSoapTransport",
    "build_envelope",
    "parse_envelope",
]
