"""Akbank money-order service facade."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Mapping

from akbank_transfer.application import request_builders
from akbank_transfer.application.response_normalizer import normalize
from akbank_transfer.application.transport_invoker import TransportInvoker
from akbank_transfer.config.transport_options import TransportOptions
from akbank_transfer.domain.transfer import iban as iban_rules
from akbank_transfer.domain.transfer import results
from akbank_transfer.domain.transfer.constants import (
    BANK_CODE,
    BANK_ID,
    BANK_NAME,
    DEFAULT_ENDPOINT_URL,
    ReasonCode,
)
from akbank_transfer.domain.transfer.ports.transport_port import MoneyOrderTransport
from akbank_transfer.domain.transfer.requests import AnyTransferRequest
from akbank_transfer.domain.transfer.results import NormalizedResult
from akbank_transfer.domain.transfer.value_objects import Credentials, SenderIdentity
from akbank_transfer.infrastructure.soap.httpx_transport import HttpxSoapTransport

if TYPE_CHECKING:
    from akbank_transfer.config.settings import AkbankSettings

logger = logging.getLogger(__name__)

Amount = Decimal | int | float | str


class AkbankTransferService:
    """
    Facade over the Akbank money-order web service.

    Every operation builds one request, performs one blocking remote call and
    returns a flat NormalizedResult. Remote-side problems, including transport
    failures, never raise; check ``is_result_succeed(result)`` instead. Only
    local mistakes raise: ConfigError at construction, ValidationError for bad
    parameters.

    An instance is reusable for many sequential calls but must not be shared
    between threads: the transport keeps the last request/response for
    diagnostics and a concurrent call would overwrite it.

    Configuration keys
    ------------------
    username, password
        Required service credentials
    sender_iban, sender_branch, sender_account
        Optional remitter identity
    endpoint_url
        Optional service URL override
    transport_options
        Optional mapping merged over TransportOptions defaults
    """

    CODE = BANK_CODE
    ID = BANK_ID
    NAME = BANK_NAME

    def __init__(
        self,
        config: Mapping[str, Any],
        *,
        transport: MoneyOrderTransport | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._credentials = Credentials.from_plain(
            config.get("username"),
            config.get("password"),
        )
        self._sender = SenderIdentity(
            iban=config.get("sender_iban") or None,
            branch=config.get("sender_branch") or None,
            account=config.get("sender_account") or None,
        )
        self._endpoint_url = config.get("endpoint_url") or DEFAULT_ENDPOINT_URL
        self._transport_options = TransportOptions().merged(
            config.get("transport_options"),
        )
        if transport is None:
            transport = HttpxSoapTransport(
                self._endpoint_url,
                self._transport_options,
            )
        self._invoker = TransportInvoker(transport, diagnostic_logger=logger)

    @classmethod
    def from_settings(
        cls,
        settings: AkbankSettings,
        *,
        transport: MoneyOrderTransport | None = None,
    ) -> AkbankTransferService:
        """Build a service from environment settings."""
        diagnostic_logger = None
        if settings.log_traffic:
            diagnostic_logger = logging.getLogger("akbank_transfer.traffic")
        return cls(
            settings.to_service_config(),
            transport=transport,
            logger=diagnostic_logger,
        )

    def __enter__(self) -> AkbankTransferService:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._invoker.transport.close()

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def sender(self) -> SenderIdentity:
        return self._sender

    @property
    def transport_options(self) -> TransportOptions:
        return self._transport_options

    @property
    def endpoint_url(self) -> str:
        return self._endpoint_url

    def from_iban(self, iban: str) -> AkbankTransferService:
        self._sender.iban = iban
        return self

    def from_account(self, branch: str, account: str) -> AkbankTransferService:
        self._sender.branch = branch
        self._sender.account = account
        return self

    def set_logger(self, logger: logging.Logger | None) -> None:
        """Set the logger receiving one raw-traffic record per call."""
        self._invoker.set_diagnostic_logger(logger)

    # -------------------------------------------------------------------------
    # Service actions
    # -------------------------------------------------------------------------

    def eft_to_iban(
        self,
        txn_id: str,
        amount: Amount,
        receiver_iban: str,
        receiver_name: str,
        description: str | None = None,
        date: date | str | None = None,
        *,
        reason_code: ReasonCode = ReasonCode.OTHER_PAYMENTS,
    ) -> NormalizedResult:
        """
        Send an EFT to an IBAN at another bank.

        Returns
        -------
        ReturnCode, ErrorCode, ReturnMessage, EftRefNo, DekontKey
        """
        self._warn_without_iban(txn_id)
        request = request_builders.build_eft_by_iban(
            self._credentials,
            self._sender,
            txn_id=txn_id,
            amount=amount,
            receiver_iban=receiver_iban,
            receiver_name=receiver_name,
            description=description,
            txn_date=date,
            reason_code=reason_code,
        )
        return self._call(request, txn_id)

    def eft_to_account(
        self,
        txn_id: str,
        amount: Amount,
        bank_code: str,
        branch_code: str,
        account: str,
        receiver_name: str,
        description: str | None = None,
        date: date | str | None = None,
        *,
        reason_code: ReasonCode = ReasonCode.OTHER_PAYMENTS,
    ) -> NormalizedResult:
        """
        Send an EFT to an account number at another bank.

        Returns
        -------
        ReturnCode, ErrorCode, ReturnMessage, EftRefNo, DekontKey
        """
        self._warn_without_iban(txn_id)
        request = request_builders.build_eft_by_account(
            self._credentials,
            self._sender,
            txn_id=txn_id,
            amount=amount,
            bank_code=bank_code,
            branch_code=branch_code,
            account=account,
            receiver_name=receiver_name,
            description=description,
            txn_date=date,
            reason_code=reason_code,
        )
        return self._call(request, txn_id)

    def transfer_to_iban(
        self,
        txn_id: str,
        amount: Amount,
        receiver_iban: str,
        description: str | None = None,
        date: date | str | None = None,
        identity_no: str | None = None,
    ) -> NormalizedResult:
        """
        Send a same-bank transfer (havale) to an IBAN.

        Returns
        -------
        ReturnCode, ErrorCode, ReturnMessage, TransferRefNo, PayeeNameSurname,
        DekontKey
        """
        self._warn_without_account(txn_id)
        request = request_builders.build_transfer_by_iban(
            self._credentials,
            self._sender,
            txn_id=txn_id,
            amount=amount,
            receiver_iban=receiver_iban,
            description=description,
            txn_date=date,
            identity_no=identity_no,
        )
        return self._call(request, txn_id)

    def transfer_to_account(
        self,
        txn_id: str,
        amount: Amount,
        branch: str,
        account: str,
        description: str | None = None,
        date: date | str | None = None,
        identity_no: str | None = None,
        iban: str | None = None,
    ) -> NormalizedResult:
        """
        Send a same-bank transfer (havale) to a branch + account.

        Returns
        -------
        ReturnCode, ErrorCode, ReturnMessage, TransferRefNo, PayeeNameSurname,
        DekontKey
        """
        self._warn_without_account(txn_id)
        request = request_builders.build_transfer_by_account(
            self._credentials,
            self._sender,
            txn_id=txn_id,
            amount=amount,
            branch=branch,
            account=account,
            description=description,
            txn_date=date,
            identity_no=identity_no,
            iban=iban,
        )
        return self._call(request, txn_id)

    def get_transaction_status(
        self,
        txn_id: str,
        txn_date: date | str | None = None,
    ) -> NormalizedResult:
        """Query the state of an earlier transaction (ReturnCode, ErrorCode)."""
        request = request_builders.build_transaction_status_query(
            self._credentials,
            txn_id=txn_id,
            txn_date=txn_date,
        )
        return self._call(request, txn_id)

    def get_receipt(self, dekont_key: str, email: str) -> NormalizedResult:
        """Ask the service to mail the receipt of a transaction."""
        request = request_builders.build_receipt_query(
            self._credentials,
            dekont_key=dekont_key,
            email=email,
        )
        return self._call(request, dekont_key)

    def get_token(self, txn_id: str) -> NormalizedResult:
        """Fetch an access token (ReturnCode, AccessToken, TokenExpireDate)."""
        request = request_builders.build_token_query(self._credentials, txn_id=txn_id)
        return self._call(request, txn_id)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def is_result_succeed(result: Mapping[str, Any]) -> bool:
        return results.is_success(result)

    @staticmethod
    def get_result_ref_code(result: Mapping[str, Any]) -> str:
        return results.reference_code(result)

    @staticmethod
    def get_result_dekont_code(result: Mapping[str, Any]) -> str:
        return results.dekont_code(result)

    @staticmethod
    def is_valid_iban(iban: str) -> bool:
        return iban_rules.is_valid_iban(iban)

    @staticmethod
    def is_own_bank_iban(iban: str) -> bool:
        return iban_rules.is_own_bank_iban(iban)

    def _call(self, request: AnyTransferRequest, reference: str) -> NormalizedResult:
        logger.info("Calling %s for %s", request.operation, reference)
        outcome = self._invoker.invoke(request)
        result = normalize(
            outcome.as_raw_response(),
            money_movement=request.money_movement,
        )
        logger.info(
            "%s for %s returned %s",
            request.operation,
            reference,
            result[results.RETURN_CODE],
        )
        return result

    def _warn_without_iban(self, txn_id: str) -> None:
        if not self._sender.has_iban:
            logger.warning("No sender IBAN configured for EFT %s", txn_id)

    def _warn_without_account(self, txn_id: str) -> None:
        if not self._sender.has_account:
            logger.warning("No sender branch/account configured for transfer %s", txn_id)
