"""Transport invoker.

Runs one remote call and folds every transport failure into an
InvocationResult, so business code has a single decision point
(``ReturnCode``) instead of per-call exception handling.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping, Union

from akbank_transfer.domain.transfer.ports.transport_port import MoneyOrderTransport
from akbank_transfer.domain.transfer.requests import AnyTransferRequest
from akbank_transfer.domain.transfer.results import failure_result

logger = logging.getLogger(__name__)

_PASSWORD_ELEMENT = re.compile(
    r"(<(?:[\w.-]+:)?Password\b[^>]*>)(.*?)(</(?:[\w.-]+:)?Password>)",
    re.DOTALL,
)


@dataclass(frozen=True)
class RemoteReply:
    """The remote service answered; ``payload`` is its raw reply."""

    payload: Mapping[str, Any]

    @property
    def is_failure(self) -> bool:
        return False

    def as_raw_response(self) -> Mapping[str, Any]:
        return self.payload


@dataclass(frozen=True)
class TransportFailed:
    """The call did not complete; ``message`` describes why."""

    message: str

    @property
    def is_failure(self) -> bool:
        return True

    def as_raw_response(self) -> Mapping[str, Any]:
        return failure_result(self.message)


InvocationResult = Union[RemoteReply, TransportFailed]


def mask_password(body: str) -> str:
    """Blank out the text of any ``Password`` element, prefixed or not."""
    return _PASSWORD_ELEMENT.sub(r"\1***\3", body)


def format_traffic(transport: MoneyOrderTransport) -> str:
    """Render the last exchange as the tagged diagnostic record.

    The request body has its password masked.
    """
    return (
        f"<log><request><header>{transport.last_request_headers}</header>"
        f"<body>{mask_password(transport.last_request)}</body></request>"
        f"<response><header>{transport.last_response_headers}</header>"
        f"<body>{transport.last_response}</body></response></log>"
    )


class TransportInvoker:
    """
    Invokes remote operations through a MoneyOrderTransport.

    Each call hands the raw traffic to the diagnostic logger exactly once,
    whichever way the call ends. The invoker shares the transport's
    last-request state, so one invoker must not serve concurrent calls.
    """

    def __init__(
        self,
        transport: MoneyOrderTransport,
        diagnostic_logger: logging.Logger | None = None,
    ) -> None:
        self._transport = transport
        self._diagnostic_logger = diagnostic_logger

    @property
    def transport(self) -> MoneyOrderTransport:
        return self._transport

    def set_diagnostic_logger(self, diagnostic_logger: logging.Logger | None) -> None:
        self._diagnostic_logger = diagnostic_logger

    def invoke(self, request: AnyTransferRequest) -> InvocationResult:
        operation = request.operation
        try:
            payload = self._transport.invoke(operation, request.to_wire())
            if not isinstance(payload, Mapping):
                message = f"Malformed reply from {operation}: {type(payload).__name__}"
                logger.warning("%s", message)
                return TransportFailed(message=message)
            return RemoteReply(payload=payload)
        except Exception as e:
            message = str(e) or type(e).__name__
            logger.warning("%s failed in transport: %s", operation, message)
            return TransportFailed(message=message)
        finally:
            if self._diagnostic_logger is not None:
                self._diagnostic_logger.info(format_traffic(self._transport))
