"""Normalized result helpers.

A normalized result is a flat ``dict`` with at least ``ReturnCode`` (int,
``0`` on success), ``ErrorCode`` and ``ReturnMessage``. Money-movement
results additionally carry a reference number and ``DekontKey``.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

from akbank_transfer.domain.transfer.exceptions import MissingFieldError

NormalizedResult = dict[str, Any]

RETURN_CODE = "ReturnCode"
ERROR_CODE = "ErrorCode"
RETURN_MESSAGE = "ReturnMessage"
DEKONT_KEY = "DekontKey"
EFT_REF_NO = "EftRefNo"
TRANSFER_REF_NO = "TransferRefNo"

REFERENCE_FIELDS = (EFT_REF_NO, TRANSFER_REF_NO)

FAILURE_RETURN_CODE = -1

_DEKONT_PATTERN = re.compile(r"\((.*?)\)")


def failure_result(message: str) -> NormalizedResult:
    """Build the result used when the remote service could not be reached."""
    return {
        RETURN_CODE: FAILURE_RETURN_CODE,
        ERROR_CODE: "",
        RETURN_MESSAGE: message,
    }


def is_success(result: Mapping[str, Any]) -> bool:
    """Return True only when ``ReturnCode`` is exactly the integer zero.

    ``"0"``, ``0.0`` and ``False`` all count as failures.
    """
    code = result.get(RETURN_CODE)
    return type(code) is int and code == 0


def reference_code(result: Mapping[str, Any]) -> str:
    """Return ``EftRefNo`` or ``TransferRefNo``, whichever is present."""
    for field in REFERENCE_FIELDS:
        value = result.get(field)
        if value is not None:
            return str(value)
    raise MissingFieldError(REFERENCE_FIELDS)


def dekont_code(result: Mapping[str, Any]) -> str:
    """Extract the receipt key from e.g. ``"Approved (ABC123)"``.

    Returns an empty string when the message has no parenthesized token.
    """
    message = result.get(RETURN_MESSAGE) or ""
    match = _DEKONT_PATTERN.search(str(message))
    return match.group(1) if match else ""
