"""SOAP transport options."""

from __future__ import annotations

from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from akbank_transfer.domain.transfer.exceptions import ConfigError


class TransportOptions(BaseModel):
    """
    Options of the default SOAP transport.

    A value object passed at construction; instances never share state, so
    overriding options for one service does not leak into another.
    """

    soap_version: Literal["1.1", "1.2"] = "1.1"
    encoding: str = "UTF-8"
    user_agent: str = "akbank-transfer/1.0"
    connection_timeout: float = Field(default=20.0, gt=0)
    timeout: float = Field(default=60.0, gt=0)
    verify: bool = True
    namespace: str = "http://tempuri.org/"
    service_contract: str = "IMoneyOrderService"
    extra_headers: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="forbid")

    def merged(self, overrides: Mapping[str, Any] | None) -> TransportOptions:
        """Return a copy with ``overrides`` applied; override values win."""
        if not overrides:
            return self
        try:
            return TransportOptions.model_validate(
                {**self.model_dump(), **dict(overrides)},
            )
        except PydanticValidationError as e:
            msg = f"Invalid transport options: {e}"
            raise ConfigError(msg, field="transport_options") from e

    def soap_action(self, operation: str) -> str:
        return f"{self.namespace}{self.service_contract}/{operation}"
