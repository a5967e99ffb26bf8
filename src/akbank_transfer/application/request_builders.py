"""Request builders.

Pure functions turning call parameters, the sender identity and the
credentials into one request variant. Nothing here performs I/O.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation

from akbank_transfer.domain.shared.exceptions import ValidationError
from akbank_transfer.domain.shared.time import format_transaction_date
from akbank_transfer.domain.transfer.constants import ReasonCode
from akbank_transfer.domain.transfer.exceptions import (
    InvalidAmountError,
    MissingTransactionIdError,
)
from akbank_transfer.domain.transfer.requests import (
    AuthBlock,
    DekontRequestBody,
    EftByAccount,
    EftByIban,
    EftFields,
    EftRequestBody,
    HavaleFields,
    HavaleRequestBody,
    ReceiptQuery,
    TokenQuery,
    TokenRequestBody,
    TransactionInfoFields,
    TransactionInfoRequestBody,
    TransactionStatusQuery,
    TransferByAccount,
    TransferByIban,
)
from akbank_transfer.domain.transfer.value_objects import Credentials, SenderIdentity

# Destination routing codes for an IBAN at another bank
IBAN_ROUTING_CODE = "0"


def build_auth(credentials: Credentials) -> AuthBlock:
    return AuthBlock(
        user_name=credentials.username,
        password=credentials.password.get_secret_value(),
    )


def normalize_receiver_name(name: str) -> str:
    """Canonical payee name: upper case, every whitespace character removed.

    ``"Ali  Veli"`` becomes ``"ALIVELI"``. The remote service matches payee
    names in this form.
    """
    return "".join(name.split()).upper()


def _amount(value: Decimal | int | float | str) -> Decimal:
    try:
        # floats go through str to avoid binary expansion
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise InvalidAmountError(value) from e
    if not amount.is_finite() or amount < 0:
        raise InvalidAmountError(value)
    return amount


def _txn_id(value: str) -> str:
    if not value or not value.strip():
        raise MissingTransactionIdError()
    return value


def _eft_body(
    credentials: Credentials,
    sender: SenderIdentity,
    *,
    txn_id: str,
    amount: Decimal | int | float | str,
    payee_account_no: str,
    receiver_name: str,
    bank_code: str,
    branch_code: str,
    description: str | None,
    txn_date: date | str | None,
    reason_code: ReasonCode,
) -> EftRequestBody:
    return EftRequestBody(
        authentication=build_auth(credentials),
        eft=EftFields(
            amount=_amount(amount),
            bank_code=bank_code,
            branch_code=branch_code,
            firm_id=credentials.username,
            payee_account_no=payee_account_no,
            payee_name_surname=normalize_receiver_name(receiver_name),
            reason_code=reason_code,
            remitter_iban=sender.iban or "",
            transaction_description=description or "",
            transaction_id=_txn_id(txn_id),
            transaction_date=format_transaction_date(txn_date),
        ),
    )


def build_eft_by_iban(
    credentials: Credentials,
    sender: SenderIdentity,
    *,
    txn_id: str,
    amount: Decimal | int | float | str,
    receiver_iban: str,
    receiver_name: str,
    description: str | None = None,
    txn_date: date | str | None = None,
    reason_code: ReasonCode = ReasonCode.OTHER_PAYMENTS,
) -> EftByIban:
    return EftByIban(
        body=_eft_body(
            credentials,
            sender,
            txn_id=txn_id,
            amount=amount,
            payee_account_no=receiver_iban,
            receiver_name=receiver_name,
            bank_code=IBAN_ROUTING_CODE,
            branch_code=IBAN_ROUTING_CODE,
            description=description,
            txn_date=txn_date,
            reason_code=reason_code,
        ),
    )


def build_eft_by_account(
    credentials: Credentials,
    sender: SenderIdentity,
    *,
    txn_id: str,
    amount: Decimal | int | float | str,
    bank_code: str,
    branch_code: str,
    account: str,
    receiver_name: str,
    description: str | None = None,
    txn_date: date | str | None = None,
    reason_code: ReasonCode = ReasonCode.OTHER_PAYMENTS,
) -> EftByAccount:
    if not bank_code or not branch_code:
        msg = "Bank and branch codes are required for an EFT to an account"
        raise ValidationError(msg, details={"bank_code": bank_code})
    return EftByAccount(
        body=_eft_body(
            credentials,
            sender,
            txn_id=txn_id,
            amount=amount,
            payee_account_no=account,
            receiver_name=receiver_name,
            bank_code=str(bank_code),
            branch_code=str(branch_code),
            description=description,
            txn_date=txn_date,
            reason_code=reason_code,
        ),
    )


def _havale_body(
    credentials: Credentials,
    sender: SenderIdentity,
    *,
    txn_id: str,
    amount: Decimal | int | float | str,
    branch: str | None,
    account: str | None,
    iban: str | None,
    description: str | None,
    txn_date: date | str | None,
    identity_no: str | None,
) -> HavaleRequestBody:
    return HavaleRequestBody(
        authentication=build_auth(credentials),
        havale=HavaleFields(
            amount=_amount(amount),
            identity_no=identity_no or "",
            firm_id=credentials.username,
            payee_account_no=account or "",
            payee_branch_code=branch or "",
            payee_iban=iban or "",
            remitter_account_no=sender.account or "",
            remitter_branch_code=sender.branch or "",
            transaction_date=format_transaction_date(txn_date),
            transaction_description=description or "",
            transaction_id=_txn_id(txn_id),
        ),
    )


def build_transfer_by_iban(
    credentials: Credentials,
    sender: SenderIdentity,
    *,
    txn_id: str,
    amount: Decimal | int | float | str,
    receiver_iban: str,
    description: str | None = None,
    txn_date: date | str | None = None,
    identity_no: str | None = None,
) -> TransferByIban:
    return TransferByIban(
        body=_havale_body(
            credentials,
            sender,
            txn_id=txn_id,
            amount=amount,
            branch=None,
            account=None,
            iban=receiver_iban,
            description=description,
            txn_date=txn_date,
            identity_no=identity_no,
        ),
    )


def build_transfer_by_account(
    credentials: Credentials,
    sender: SenderIdentity,
    *,
    txn_id: str,
    amount: Decimal | int | float | str,
    branch: str,
    account: str,
    description: str | None = None,
    txn_date: date | str | None = None,
    identity_no: str | None = None,
    iban: str | None = None,
) -> TransferByAccount:
    return TransferByAccount(
        body=_havale_body(
            credentials,
            sender,
            txn_id=txn_id,
            amount=amount,
            branch=branch,
            account=account,
            iban=iban,
            description=description,
            txn_date=txn_date,
            identity_no=identity_no,
        ),
    )


def build_transaction_status_query(
    credentials: Credentials,
    *,
    txn_id: str,
    txn_date: date | str | None = None,
) -> TransactionStatusQuery:
    return TransactionStatusQuery(
        body=TransactionInfoRequestBody(
            authentication=build_auth(credentials),
            eft=TransactionInfoFields(
                firm_id=credentials.username,
                transaction_date=format_transaction_date(txn_date),
                transaction_id=_txn_id(txn_id),
            ),
        ),
    )


def build_receipt_query(
    credentials: Credentials,
    *,
    dekont_key: str,
    email: str,
) -> ReceiptQuery:
    return ReceiptQuery(
        body=DekontRequestBody(
            authentication=build_auth(credentials),
            dekont_key=dekont_key,
            email=email,
        ),
    )


def build_token_query(credentials: Credentials, *, txn_id: str) -> TokenQuery:
    return TokenQuery(
        body=TokenRequestBody(
            authentication=build_auth(credentials),
            transaction_id=_txn_id(txn_id),
        ),
    )
