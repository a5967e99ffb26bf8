"""Sender (remitter) identity value object."""

from pydantic import BaseModel, ConfigDict, Field


class SenderIdentity(BaseModel):
    """
    The account money is sent from.

    EFT requests use the IBAN; same-bank transfers use branch + account.
    Unlike the other value objects this one is mutable: it is set after
    construction through ``from_iban`` / ``from_account`` on the service.
    """

    iban: str | None = Field(default=None, description="Remitter IBAN")
    branch: str | None = Field(default=None, description="Remitter branch code")
    account: str | None = Field(default=None, description="Remitter account no")

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    @property
    def has_iban(self) -> bool:
        return bool(self.iban)

    @property
    def has_account(self) -> bool:
        return bool(self.branch and self.account)
