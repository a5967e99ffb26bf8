"""Tests for the AkbankTransferService facade."""

import logging
from datetime import date
from decimal import Decimal
from unittest.mock import Mock

import pytest

from akbank_transfer.application.transfer_service import AkbankTransferService
from akbank_transfer.config import AkbankSettings
from akbank_transfer.domain.shared.exceptions import ErrorCode, ValidationError
from akbank_transfer.domain.transfer.constants import DEFAULT_ENDPOINT_URL
from akbank_transfer.domain.transfer.exceptions import (
    ConfigError,
    MissingFieldError,
    TransportFailure,
)
from akbank_transfer.infrastructure.soap.httpx_transport import HttpxSoapTransport
from tests.shared.fakes import RECEIVER_IBAN, SENDER_IBAN, FakeTransport

# ═══════════════════════════════════════════════════════════════
#                     Configuration
# ═══════════════════════════════════════════════════════════════


class TestConfiguration:
    def test_valid_credentials(self, transport):
        service = AkbankTransferService(
            {"username": "firm01", "password": "s3cret"},
            transport=transport,
        )

        assert service.sender.iban is None
        assert service.endpoint_url == DEFAULT_ENDPOINT_URL

    @pytest.mark.parametrize(
        "config",
        [
            {"password": "s3cret"},
            {"username": "", "password": "s3cret"},
            {"username": "firm01"},
            {"username": "firm01", "password": ""},
            {},
        ],
    )
    def test_missing_credentials(self, transport, config):
        with pytest.raises(ConfigError):
            AkbankTransferService(config, transport=transport)

    def test_sender_identity_from_config(self, service):
        assert service.sender.iban == SENDER_IBAN
        assert service.sender.branch == "0123"
        assert service.sender.account == "4567890"

    def test_setters_override_sender(self, service):
        assert service.from_iban(RECEIVER_IBAN) is service
        service.from_account("0999", "111")

        assert service.sender.iban == RECEIVER_IBAN
        assert service.sender.branch == "0999"
        assert service.sender.account == "111"

    def test_transport_options_merge_caller_wins(self, transport):
        service = AkbankTransferService(
            {
                "username": "firm01",
                "password": "s3cret",
                "transport_options": {"connection_timeout": 5, "user_agent": "ops"},
            },
            transport=transport,
        )

        assert service.transport_options.connection_timeout == 5
        assert service.transport_options.user_agent == "ops"
        assert service.transport_options.encoding == "UTF-8"

    def test_unknown_transport_option(self, transport):
        with pytest.raises(ConfigError) as exc_info:
            AkbankTransferService(
                {
                    "username": "firm01",
                    "password": "s3cret",
                    "transport_options": {"cache_wsdl": True},
                },
                transport=transport,
            )

        assert exc_info.value.code == ErrorCode.CONFIG_ERROR

    def test_default_transport_uses_endpoint_override(self):
        with AkbankTransferService(
            {
                "username": "firm01",
                "password": "s3cret",
                "endpoint_url": "https://bank.test/MoneyOrderService",
                "transport_options": {"soap_version": "1.2"},
            },
        ) as service:
            transport = service._invoker.transport

            assert isinstance(transport, HttpxSoapTransport)
            assert transport.endpoint_url == "https://bank.test/MoneyOrderService"
            assert transport.options.soap_version == "1.2"

    def test_context_manager_closes_transport(self, service, transport):
        with service:
            pass

        assert transport.closed

    def test_from_settings(self, transport):
        settings = AkbankSettings(
            username="firm01",
            password="s3cret",
            sender_iban=SENDER_IBAN,
            connection_timeout=3,
        )

        service = AkbankTransferService.from_settings(settings, transport=transport)

        assert service.sender.iban == SENDER_IBAN
        assert service.transport_options.connection_timeout == 3

    def test_from_settings_without_credentials(self, transport):
        with pytest.raises(ConfigError):
            AkbankTransferService.from_settings(
                AkbankSettings(username="", password=""),
                transport=transport,
            )


# ═══════════════════════════════════════════════════════════════
#                     Money movement
# ═══════════════════════════════════════════════════════════════


class TestEftToIban:
    def test_success_round_trip(self, service, transport):
        transport.reply_with(
            {
                "EftTransferResult": {
                    "ReturnCode": 0,
                    "ReturnMessage": "Approved (ABC123)",
                    "EftRefNo": "E1",
                },
            },
        )

        result = service.eft_to_iban("TX-1", Decimal("10.50"), RECEIVER_IBAN, "Ali  Veli")

        assert service.is_result_succeed(result)
        assert result["DekontKey"] == "ABC123"
        assert service.get_result_ref_code(result) == "E1"
        operation, request = transport.calls[0]
        assert operation == "EftTransfer"
        eft = request["eftRequest"]["eft"]
        assert eft["PayeeNameSurname"] == "ALIVELI"
        assert eft["RemitterIBAN"] == SENDER_IBAN
        assert eft["TransactionDate"] == date.today().strftime("%d.%m.%Y")

    def test_business_failure_is_returned(self, service, transport):
        transport.reply_with(
            {
                "EftTransferResult": {
                    "ReturnCode": 5,
                    "ErrorCode": "E05",
                    "ReturnMessage": "Limit exceeded",
                },
            },
        )

        result = service.eft_to_iban("TX-1", 10, RECEIVER_IBAN, "Ali")

        assert not service.is_result_succeed(result)
        assert result["ReturnCode"] == 5
        assert result["ErrorCode"] == "E05"
        assert result["DekontKey"] is None

    def test_non_mapping_reply_is_failure_result(self, service, transport):
        transport.reply_with(None)

        result = service.eft_to_iban("TX", 1, RECEIVER_IBAN, "Ali")

        assert result["ReturnCode"] == -1
        assert result["ReturnMessage"] == "Malformed reply from EftTransfer: NoneType"
        assert result["DekontKey"] is None

    def test_date_argument(self, service, transport):
        service.eft_to_iban("TX-1", 1, RECEIVER_IBAN, "Ali", "desc", date(2025, 6, 1))

        eft = transport.calls[0][1]["eftRequest"]["eft"]
        assert eft["TransactionDate"] == "01.06.2025"
        assert eft["TransactionDescription"] == "desc"

    def test_missing_sender_iban_is_logged(self, transport, caplog):
        service = AkbankTransferService(
            {"username": "firm01", "password": "s3cret"},
            transport=transport,
        )

        with caplog.at_level(logging.WARNING, logger="akbank_transfer"):
            service.eft_to_iban("TX-1", 1, RECEIVER_IBAN, "Ali")

        assert "No sender IBAN configured for EFT TX-1" in caplog.text


class TestOtherMoneyMovement:
    def test_eft_to_account(self, service, transport):
        transport.reply_with(
            {"EftTransferResult": {"ReturnCode": 0, "ReturnMessage": "Ok", "EftRefNo": "E2"}},
        )

        result = service.eft_to_account(
            "TX-2",
            "20",
            "00062",
            "0445",
            "12345678",
            "Veli Ali",
        )

        assert result["DekontKey"] == ""
        eft = transport.calls[0][1]["eftRequest"]["eft"]
        assert eft["BankCode"] == "00062"
        assert eft["PayeeNameSurname"] == "VELIALI"

    def test_transfer_to_iban(self, service, transport):
        transport.reply_with(
            {
                "TransferResult": {
                    "ReturnCode": 0,
                    "ReturnMessage": "Completed (DK-9)",
                    "TransferRefNo": "T1",
                    "PayeeNameSurname": "ALI VELI",
                },
            },
        )

        result = service.transfer_to_iban("TX-3", 30, SENDER_IBAN, identity_no="111")

        assert result["DekontKey"] == "DK-9"
        assert result["PayeeNameSurname"] == "ALI VELI"
        assert service.get_result_ref_code(result) == "T1"
        operation, request = transport.calls[0]
        assert operation == "Transfer"
        assert request["havaleRequest"]["havale"]["IdentityNo"] == "111"

    def test_transfer_to_account(self, service, transport):
        transport.reply_with(
            {"TransferResult": {"ReturnCode": 0, "TransferRefNo": "T2"}},
        )

        result = service.transfer_to_account("TX-4", 40, "0999", "7654321")

        assert result["DekontKey"] == ""
        havale = transport.calls[0][1]["havaleRequest"]["havale"]
        assert havale["PayeeBranchCode"] == "0999"
        assert havale["PayeeIBAN"] == ""

    @pytest.mark.parametrize(
        ("method", "args"),
        [
            ("eft_to_iban", ("TX", 1, RECEIVER_IBAN, "Ali")),
            ("eft_to_account", ("TX", 1, "00062", "0445", "123", "Ali")),
            ("transfer_to_iban", ("TX", 1, SENDER_IBAN)),
            ("transfer_to_account", ("TX", 1, "0999", "7654321")),
            ("get_transaction_status", ("TX",)),
        ],
    )
    def test_transport_failure_becomes_result(self, service, transport, method, args):
        transport.reply_with(TransportFailure("Timeout calling operation"))

        result = getattr(service, method)(*args)

        assert result["ReturnCode"] == -1
        assert result["ReturnMessage"] == "Timeout calling operation"
        assert not service.is_result_succeed(result)

    def test_transport_failure_has_null_dekont_key(self, service, transport):
        transport.reply_with(ConnectionError("reset by peer"))

        result = service.transfer_to_iban("TX", 1, SENDER_IBAN)

        assert result["DekontKey"] is None
        assert result["ReturnMessage"] == "reset by peer"

    def test_local_validation_still_raises(self, service, transport):
        with pytest.raises(ValidationError):
            service.transfer_to_iban("TX", -5, SENDER_IBAN)

        assert transport.calls == []


# ═══════════════════════════════════════════════════════════════
#                     Queries
# ═══════════════════════════════════════════════════════════════


class TestQueries:
    def test_transaction_status(self, service, transport):
        transport.reply_with(
            {"GetTransactionStatusResult": {"ReturnCode": 0, "ErrorCode": ""}},
        )

        result = service.get_transaction_status("TX-5", "09.01.2025")

        assert service.is_result_succeed(result)
        assert "DekontKey" not in result
        info = transport.calls[0][1]["transactionInfoRequest"]["eft"]
        assert info == {
            "FirmId": "firm01",
            "TransactionDate": "09.01.2025",
            "TransactionId": "TX-5",
        }
        with pytest.raises(MissingFieldError):
            service.get_result_ref_code(result)

    def test_receipt(self, service, transport):
        transport.reply_with({"GetReceiptResult": {"ReturnCode": 0}})

        result = service.get_receipt("ABC123", "ops@example.com")

        assert service.is_result_succeed(result)
        assert transport.calls[0][0] == "GetReceipt"

    def test_token(self, service, transport):
        transport.reply_with(
            {
                "GetTokenResult": {
                    "ReturnCode": 0,
                    "AccessToken": "tok",
                    "TokenExpireDate": "01.01.2026 10:00",
                },
            },
        )

        result = service.get_token("TX-6")

        assert result["AccessToken"] == "tok"
        assert result["TokenExpireDate"] == "01.01.2026 10:00"


# ═══════════════════════════════════════════════════════════════
#                     Diagnostics and helpers
# ═══════════════════════════════════════════════════════════════


class TestDiagnostics:
    def test_constructor_logger_receives_traffic(self):
        transport = FakeTransport()
        diagnostic_logger = Mock(spec=logging.Logger)
        service = AkbankTransferService(
            {"username": "firm01", "password": "s3cret"},
            transport=transport,
            logger=diagnostic_logger,
        )

        service.get_token("TX")

        diagnostic_logger.info.assert_called_once()

    def test_set_logger_once_per_call_even_on_failure(self, service, transport):
        diagnostic_logger = Mock(spec=logging.Logger)
        service.set_logger(diagnostic_logger)
        transport.reply_with(TransportFailure("down"))

        service.get_token("TX-1")
        service.get_token("TX-2")

        assert diagnostic_logger.info.call_count == 2


class TestStaticHelpers:
    def test_iban_helpers(self):
        assert AkbankTransferService.is_valid_iban(RECEIVER_IBAN)
        assert AkbankTransferService.is_own_bank_iban(SENDER_IBAN)
        assert not AkbankTransferService.is_own_bank_iban(RECEIVER_IBAN)

    def test_dekont_code(self):
        result = {"ReturnMessage": "Approved (ABC123)"}

        assert AkbankTransferService.get_result_dekont_code(result) == "ABC123"

    def test_bank_constants(self):
        assert AkbankTransferService.CODE == "00046"
        assert AkbankTransferService.ID == "akbank"
        assert AkbankTransferService.NAME == "Akbank"
