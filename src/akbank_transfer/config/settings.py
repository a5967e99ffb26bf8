"""Settings loaded from environment variables.

Values are read from:
1. OS environment variables (``AKBANK_`` prefix, highest priority)
2. The file named by ``AKBANK_ENV_FILE``, or ``.env`` in the working directory
3. Default values

Uses pydantic-settings for type coercion.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from akbank_transfer.domain.transfer.constants import DEFAULT_ENDPOINT_URL


def _resolve_env_file_path() -> Path | None:
    env_file_path = os.environ.get("AKBANK_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if path.exists():
            return path

    local_env = Path.cwd() / ".env"
    if local_env.exists():
        return local_env

    return None


class AkbankSettings(BaseSettings):
    """Service configuration from the environment.

    Credentials default to empty so that a missing value surfaces as a
    ConfigError when the service is built, not as a settings error.
    """

    model_config = SettingsConfigDict(
        env_prefix="AKBANK_",
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    username: str = ""
    password: SecretStr = SecretStr("")

    sender_iban: str | None = None
    sender_branch: str | None = None
    sender_account: str | None = None

    endpoint_url: str = DEFAULT_ENDPOINT_URL

    # Transport
    connection_timeout: float = 20.0
    timeout: float = 60.0
    user_agent: str = "akbank-transfer/1.0"
    soap_namespace: str = "http://tempuri.org/"

    # Logging
    log_level: str = "INFO"
    log_traffic: bool = False

    def to_service_config(self) -> dict[str, Any]:
        """Render the mapping accepted by ``AkbankTransferService``."""
        return {
            "username": self.username,
            "password": self.password.get_secret_value(),
            "sender_iban": self.sender_iban,
            "sender_branch": self.sender_branch,
            "sender_account": self.sender_account,
            "endpoint_url": self.endpoint_url,
            "transport_options": {
                "connection_timeout": self.connection_timeout,
                "timeout": self.timeout,
                "user_agent": self.user_agent,
                "namespace": self.soap_namespace,
            },
        }


@lru_cache()
def get_settings() -> AkbankSettings:
    """Return cached settings."""
    return AkbankSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
