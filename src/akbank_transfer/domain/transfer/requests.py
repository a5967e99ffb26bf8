"""Wire request models for the money-order service.

The remote service expects every field of a request, in a fixed order, even
when a field is unused. Each remote request shape is therefore one frozen
model whose fields are declared in wire order and default to an empty value
instead of being optional. ``model_dump(by_alias=True)`` keeps declaration
order, so ``to_wire()`` yields exactly the structure the service expects.

The seven variants form a discriminated union on ``kind``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from akbank_transfer.domain.transfer.constants import (
    CURRENCY_CODE_TRY,
    NO_IDENTITY_CHECK,
    NOT_CREDIT_CARD,
    PROCESS_TYPE_HAVALE,
    ReasonCode,
)


class WireModel(BaseModel):
    """Base for models serialized onto the wire under their aliases."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="forbid",
        use_enum_values=True,
    )


# =============================================================================
# Payload blocks
# =============================================================================


class AuthBlock(WireModel):
    """Credential block attached to every request."""

    user_name: str = Field(alias="UserName", min_length=1)
    password: str = Field(alias="Password", min_length=1)


class EftFields(WireModel):
    amount: Decimal = Field(alias="Amount", ge=0)
    bank_code: str = Field(default="0", alias="BankCode")
    branch_code: str = Field(default="0", alias="BranchCode")
    firm_id: str = Field(alias="FirmId")
    is_credit_card: str = Field(default=NOT_CREDIT_CARD, alias="IsCreditCard")
    payee_account_no: str = Field(default="", alias="PayeeAccountNo")
    payee_name_surname: str = Field(default="", alias="PayeeNameSurname")
    reason_code: ReasonCode = Field(
        default=ReasonCode.OTHER_PAYMENTS.value,
        alias="ReasonCode",
    )
    remitter_iban: str = Field(default="", alias="RemitterIBAN")
    transaction_description: str = Field(default="", alias="TransactionDescription")
    transaction_id: str = Field(alias="TransactionId", min_length=1)
    transaction_date: str = Field(alias="TransactionDate")


class HavaleFields(WireModel):
    amount: Decimal = Field(alias="Amount", ge=0)
    identity_no: str = Field(default="", alias="IdentityNo")
    check_identity_no: str = Field(default=NO_IDENTITY_CHECK, alias="CheckIdentityNo")
    firm_id: str = Field(alias="FirmId")
    payee_account_no: str = Field(default="", alias="PayeeAccountNo")
    payee_branch_code: str = Field(default="", alias="PayeeBranchCode")
    payee_iban: str = Field(default="", alias="PayeeIBAN")
    process_type: str = Field(default=PROCESS_TYPE_HAVALE, alias="ProcessType")
    reason_code: ReasonCode = Field(
        default=ReasonCode.OTHER_PAYMENTS.value,
        alias="ReasonCode",
    )
    remitter_account_no: str = Field(default="", alias="RemitterAccountNo")
    remitter_branch_code: str = Field(default="", alias="RemitterBranchCode")
    remitter_currency_code: str = Field(
        default=CURRENCY_CODE_TRY,
        alias="RemitterCurrencyCode",
    )
    transaction_date: str = Field(alias="TransactionDate")
    transaction_description: str = Field(default="", alias="TransactionDescription")
    transaction_id: str = Field(alias="TransactionId", min_length=1)


class TransactionInfoFields(WireModel):
    firm_id: str = Field(alias="FirmId")
    transaction_date: str = Field(alias="TransactionDate")
    transaction_id: str = Field(alias="TransactionId", min_length=1)


class EftRequestBody(WireModel):
    authentication: AuthBlock = Field(alias="authantication")
    eft: EftFields


class HavaleRequestBody(WireModel):
    authentication: AuthBlock = Field(alias="authantication")
    havale: HavaleFields


class TransactionInfoRequestBody(WireModel):
    authentication: AuthBlock = Field(alias="authantication")
    eft: TransactionInfoFields


class DekontRequestBody(WireModel):
    authentication: AuthBlock = Field(alias="authantication")
    dekont_key: str = Field(alias="DekontKey")
    email: str = Field(alias="Email")


class TokenRequestBody(WireModel):
    authentication: AuthBlock = Field(alias="authantication")
    transaction_id: str = Field(alias="TransactionId", min_length=1)


# =============================================================================
# Request variants
# =============================================================================


class TransferRequest(WireModel):
    """Common behaviour of all request variants."""

    operation: ClassVar[str]
    wrapper_key: ClassVar[str]
    money_movement: ClassVar[bool] = False

    body: WireModel

    def to_wire(self) -> dict[str, Any]:
        """Return the ordered request mapping, wrapped in its outer key."""
        return {self.wrapper_key: self.body.model_dump(by_alias=True)}


class EftByIban(TransferRequest):
    operation: ClassVar[str] = "EftTransfer"
    wrapper_key: ClassVar[str] = "eftRequest"
    money_movement: ClassVar[bool] = True

    kind: Literal["eft_by_iban"] = "eft_by_iban"
    body: EftRequestBody


class EftByAccount(TransferRequest):
    operation: ClassVar[str] = "EftTransfer"
    wrapper_key: ClassVar[str] = "eftRequest"
    money_movement: ClassVar[bool] = True

    kind: Literal["eft_by_account"] = "eft_by_account"
    body: EftRequestBody


class TransferByIban(TransferRequest):
    operation: ClassVar[str] = "Transfer"
    wrapper_key: ClassVar[str] = "havaleRequest"
    money_movement: ClassVar[bool] = True

    kind: Literal["transfer_by_iban"] = "transfer_by_iban"
    body: HavaleRequestBody


class TransferByAccount(TransferRequest):
    operation: ClassVar[str] = "Transfer"
    wrapper_key: ClassVar[str] = "havaleRequest"
    money_movement: ClassVar[bool] = True

    kind: Literal["transfer_by_account"] = "transfer_by_account"
    body: HavaleRequestBody


class TransactionStatusQuery(TransferRequest):
    operation: ClassVar[str] = "GetTransactionStatus"
    wrapper_key: ClassVar[str] = "transactionInfoRequest"

    kind: Literal["transaction_status"] = "transaction_status"
    body: TransactionInfoRequestBody


class ReceiptQuery(TransferRequest):
    operation: ClassVar[str] = "GetReceipt"
    wrapper_key: ClassVar[str] = "dekontRequest"

    kind: Literal["receipt"] = "receipt"
    body: DekontRequestBody


class TokenQuery(TransferRequest):
    operation: ClassVar[str] = "GetToken"
    wrapper_key: ClassVar[str] = "tokenRequest"

    kind: Literal["token"] = "token"
    body: TokenRequestBody


AnyTransferRequest = Annotated[
    Union[
        EftByIban,
        EftByAccount,
        TransferByIban,
        TransferByAccount,
        TransactionStatusQuery,
        ReceiptQuery,
        TokenQuery,
    ],
    Field(discriminator="kind"),
]
