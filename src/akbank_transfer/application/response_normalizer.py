"""Response normalizer.

Turns the raw, per-operation reply of the remote service into the flat
NormalizedResult every caller branches on.
"""

from __future__ import annotations

from typing import Any, Mapping

from akbank_transfer.domain.transfer.results import (
    DEKONT_KEY,
    ERROR_CODE,
    FAILURE_RETURN_CODE,
    RETURN_CODE,
    RETURN_MESSAGE,
    NormalizedResult,
    dekont_code,
    is_success,
)


def unwrap(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Strip the single outer key the service wraps its payload in.

    ``{"EftTransferResult": {...}}`` becomes ``{...}``. A reply that is
    already flat is returned as a copy.
    """
    if RETURN_CODE not in raw and raw:
        first = next(iter(raw.values()))
        if isinstance(first, Mapping):
            return dict(first)
    return dict(raw)


def with_dekont_key(result: NormalizedResult) -> NormalizedResult:
    """Set ``DekontKey``: the receipt token on success, None otherwise."""
    result[DEKONT_KEY] = dekont_code(result) if is_success(result) else None
    return result


def normalize(
    raw: Mapping[str, Any],
    *,
    money_movement: bool = False,
) -> NormalizedResult:
    result = unwrap(raw)
    result.setdefault(RETURN_CODE, FAILURE_RETURN_CODE)
    result.setdefault(ERROR_CODE, "")
    result.setdefault(RETURN_MESSAGE, None)
    if result[ERROR_CODE] is None:
        result[ERROR_CODE] = ""
    if money_movement:
        with_dekont_key(result)
    return result
