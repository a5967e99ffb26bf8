"""Transport port interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping


class MoneyOrderTransport(ABC):
    """
    Interface for invoking the remote money-order service.

    Implementations raise on any failure; the caller decides how to fold
    failures. After every attempt, successful or not, the raw traffic of that
    attempt must be readable from the ``last_*`` properties.
    """

    @abstractmethod
    def invoke(self, operation: str, request: Mapping[str, Any]) -> Mapping[str, Any]:
        """
        Call a remote operation.

        Parameters
        ----------
        operation
            Remote operation name, e.g. ``"EftTransfer"``
        request
            Ordered request mapping, wrapped in its outer key

        Returns
        -------
        The decoded reply, still wrapped in its result envelope

        Raises
        ------
        TransportFailure
            If the call fails at network or protocol level
        """

    @property
    @abstractmethod
    def last_request_headers(self) -> str:
        """Headers of the last outbound request."""

    @property
    @abstractmethod
    def last_request(self) -> str:
        """Body of the last outbound request."""

    @property
    @abstractmethod
    def last_response_headers(self) -> str:
        """Headers of the last inbound response."""

    @property
    @abstractmethod
    def last_response(self) -> str:
        """Body of the last inbound response."""

    def close(self) -> None:  # NOQA: B027
        """Release transport resources."""
