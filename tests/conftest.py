"""Shared pytest fixtures."""

import pytest

from akbank_transfer.application.transfer_service import AkbankTransferService
from akbank_transfer.config import clear_settings_cache
from akbank_transfer.domain.transfer.value_objects import Credentials, SenderIdentity
from tests.shared.fakes import SENDER_IBAN, FakeTransport


@pytest.fixture(autouse=True)
def _clear_settings():
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def credentials() -> Credentials:
    return Credentials.from_plain("firm01", "s3cret")


@pytest.fixture
def sender() -> SenderIdentity:
    return SenderIdentity(iban=SENDER_IBAN, branch="0123", account="4567890")


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def service(transport: FakeTransport) -> AkbankTransferService:
    return AkbankTransferService(
        {
            "username": "firm01",
            "password": "s3cret",
            "sender_iban": SENDER_IBAN,
            "sender_branch": "0123",
            "sender_account": "4567890",
        },
        transport=transport,
    )
