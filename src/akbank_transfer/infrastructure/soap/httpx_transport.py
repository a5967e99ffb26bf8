"""SOAP transport over httpx.

Implements MoneyOrderTransport for the Akbank money-order web service. The
transport raises on every kind of failure and records the raw traffic of the
last attempt for diagnostics.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from akbank_transfer.config.transport_options import TransportOptions
from akbank_transfer.domain.transfer.exceptions import SoapFaultError, TransportFailure
from akbank_transfer.domain.transfer.ports.transport_port import MoneyOrderTransport
from akbank_transfer.infrastructure.soap.envelope import build_envelope, parse_envelope

logger = logging.getLogger(__name__)


def _format_request_headers(request: httpx.Request) -> str:
    lines = [f"{request.method} {request.url.raw_path.decode('ascii')} HTTP/1.1"]
    lines.extend(f"{name}: {value}" for name, value in request.headers.items())
    return "\r\n".join(lines)


def _format_response_headers(response: httpx.Response) -> str:
    lines = [f"{response.http_version} {response.status_code} {response.reason_phrase}"]
    lines.extend(f"{name}: {value}" for name, value in response.headers.items())
    return "\r\n".join(lines)


class HttpxSoapTransport(MoneyOrderTransport):
    """SOAP 1.1/1.2 client for the money-order service."""

    def __init__(
        self,
        endpoint_url: str,
        options: TransportOptions | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._endpoint_url = endpoint_url
        self._options = options or TransportOptions()
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(
                self._options.timeout,
                connect=self._options.connection_timeout,
            ),
            verify=self._options.verify,
        )
        self._reset_trace()

    @property
    def endpoint_url(self) -> str:
        return self._endpoint_url

    @property
    def options(self) -> TransportOptions:
        return self._options

    @property
    def last_request_headers(self) -> str:
        return self._last_request_headers

    @property
    def last_request(self) -> str:
        return self._last_request

    @property
    def last_response_headers(self) -> str:
        return self._last_response_headers

    @property
    def last_response(self) -> str:
        return self._last_response

    def _reset_trace(self) -> None:
        self._last_request_headers = ""
        self._last_request = ""
        self._last_response_headers = ""
        self._last_response = ""

    def _headers(self, operation: str) -> dict[str, str]:
        options = self._options
        action = options.soap_action(operation)
        charset = options.encoding.lower()
        if options.soap_version == "1.2":
            content_type = f'application/soap+xml; charset={charset}; action="{action}"'
            headers = {"Content-Type": content_type}
        else:
            headers = {
                "Content-Type": f"text/xml; charset={charset}",
                "SOAPAction": f'"{action}"',
            }
        headers["User-Agent"] = options.user_agent
        headers.update(options.extra_headers)
        return headers

    def invoke(self, operation: str, request: Mapping[str, Any]) -> Mapping[str, Any]:
        self._reset_trace()
        options = self._options

        content = build_envelope(
            operation,
            request,
            namespace=options.namespace,
            soap_version=options.soap_version,
            encoding=options.encoding,
        )
        http_request = self._client.build_request(
            "POST",
            self._endpoint_url,
            content=content,
            headers=self._headers(operation),
        )
        self._last_request_headers = _format_request_headers(http_request)
        self._last_request = content.decode(options.encoding)

        logger.debug("Calling %s at %s", operation, self._endpoint_url)

        try:
            response = self._client.send(http_request)
        except httpx.TimeoutException as e:
            msg = f"Timeout calling {operation}: {e}"
            raise TransportFailure(msg, operation=operation) from e
        except httpx.HTTPError as e:
            msg = f"Could not call {operation}: {e}"
            raise TransportFailure(msg, operation=operation) from e

        self._last_response_headers = _format_response_headers(response)
        self._last_response = response.text

        # Faults arrive with HTTP 500; prefer the fault text over the status
        if response.is_error:
            try:
                parse_envelope(response.content, operation=operation)
            except SoapFaultError:
                raise
            except TransportFailure:
                pass
            msg = (
                f"{operation} returned HTTP {response.status_code} "
                f"{response.reason_phrase}"
            )
            raise TransportFailure(msg, operation=operation)

        return parse_envelope(response.content, operation=operation)

    def close(self) -> None:
        self._client.close()
