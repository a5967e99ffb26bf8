"""Service credentials value object."""

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from akbank_transfer.domain.transfer.exceptions import ConfigError


class Credentials(BaseModel):
    """
    Value object holding the money-order service login.

    The username doubles as the ``FirmId`` of every request. The password is
    a SecretStr so it never shows up in reprs or logs.
    """

    username: str = Field(..., min_length=1, description="Service user name")
    password: SecretStr = Field(..., description="Service password")

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return f"Credentials(username={self.username}, password=*****)"

    @classmethod
    def from_plain(cls, username: str | None, password: str | None) -> "Credentials":
        """Create Credentials, failing fast on missing values."""
        if not username:
            msg = "Missing username in config."
            raise ConfigError(msg, field="username")
        if not password:
            msg = "Missing password in config."
            raise ConfigError(msg, field="password")
        return cls(username=username, password=SecretStr(password))
