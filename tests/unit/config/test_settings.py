"""Tests for settings and transport options."""

import pytest

from akbank_transfer.config import (
    AkbankSettings,
    TransportOptions,
    clear_settings_cache,
    get_settings,
)
from akbank_transfer.domain.transfer.constants import DEFAULT_ENDPOINT_URL
from akbank_transfer.domain.transfer.exceptions import ConfigError


class TestTransportOptions:
    def test_defaults(self):
        options = TransportOptions()

        assert options.soap_version == "1.1"
        assert options.encoding == "UTF-8"
        assert options.connection_timeout == 20.0
        assert options.soap_action("EftTransfer") == (
            "http://tempuri.org/IMoneyOrderService/EftTransfer"
        )

    def test_merged_overrides_win(self):
        options = TransportOptions().merged({"timeout": 5, "namespace": "urn:bank/"})

        assert options.timeout == 5
        assert options.namespace == "urn:bank/"
        assert options.connection_timeout == 20.0

    def test_merged_without_overrides_returns_same(self):
        options = TransportOptions()

        assert options.merged(None) is options
        assert options.merged({}) is options

    def test_merged_does_not_touch_defaults(self):
        TransportOptions().merged({"user_agent": "custom"})

        assert TransportOptions().user_agent == "akbank-transfer/1.0"

    @pytest.mark.parametrize(
        "overrides",
        [{"unknown": 1}, {"soap_version": "2.0"}, {"timeout": -1}],
    )
    def test_invalid_overrides(self, overrides):
        with pytest.raises(ConfigError):
            TransportOptions().merged(overrides)


class TestAkbankSettings:
    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("AKBANK_USERNAME", "firm01")
        monkeypatch.setenv("AKBANK_PASSWORD", "s3cret")
        monkeypatch.setenv("AKBANK_SENDER_IBAN", "TR330004600519786457841326")
        monkeypatch.setenv("AKBANK_CONNECTION_TIMEOUT", "7.5")

        settings = AkbankSettings()

        assert settings.username == "firm01"
        assert settings.password.get_secret_value() == "s3cret"
        assert settings.connection_timeout == 7.5
        assert settings.endpoint_url == DEFAULT_ENDPOINT_URL

    def test_password_is_masked(self):
        settings = AkbankSettings(username="firm01", password="s3cret")

        assert "s3cret" not in repr(settings)

    def test_to_service_config(self):
        settings = AkbankSettings(
            username="firm01",
            password="s3cret",
            sender_branch="0123",
            sender_account="4567890",
            timeout=30,
        )

        config = settings.to_service_config()

        assert config["username"] == "firm01"
        assert config["password"] == "s3cret"
        assert config["sender_branch"] == "0123"
        assert config["transport_options"]["timeout"] == 30

    def test_get_settings_is_cached(self, monkeypatch):
        monkeypatch.setenv("AKBANK_USERNAME", "first")
        first = get_settings()
        monkeypatch.setenv("AKBANK_USERNAME", "second")

        assert get_settings() is first

        clear_settings_cache()
        assert get_settings().username == "second"
