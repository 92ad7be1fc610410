"""
DataVault Pro - Configuration Tests

Tests for configuration management, environment variables, and settings validation.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from datavault.core.config import (
    LoggingSettings,
    PaymentSettings,
    Settings,
    StorageSettings,
    UISettings,
    WalletSettings,
)
from datavault.models.enums import ClientBackend, Environment, LogLevel


class TestWalletSettings:
    """Test signing agent configuration settings."""

    def test_wallet_settings_defaults(self):
        wallet_settings = WalletSettings()

        assert wallet_settings.enabled is True
        assert len(wallet_settings.accounts) == 1
        assert wallet_settings.accounts[0].startswith("0x")

    def test_wallet_settings_from_env(self):
        """Test wallet settings from environment variables."""
        with patch.dict(os.environ, {
            'WALLET_ENABLED': 'false',
            'WALLET_ACCOUNTS': '["0xabc", "0xdef"]',
        }):
            wallet_settings = WalletSettings()

            assert wallet_settings.enabled is False
            assert wallet_settings.accounts == ["0xabc", "0xdef"]

    def test_accounts_must_be_hex_addresses(self):
        with pytest.raises(ValidationError):
            WalletSettings(accounts=["not-an-address"])

    def test_blank_accounts_are_dropped(self):
        wallet_settings = WalletSettings(accounts=[" 0xabc ", ""])
        assert wallet_settings.accounts == ["0xabc"]


class TestStorageSettings:
    """Test storage network configuration settings."""

    def test_storage_settings_defaults(self):
        storage_settings = StorageSettings()

        assert storage_settings.backend == ClientBackend.MEMORY
        assert storage_settings.max_upload_size_bytes == 500 * 1024 * 1024
        assert storage_settings.timeout == 60.0

    def test_storage_settings_from_env(self):
        with patch.dict(os.environ, {
            'STORAGE_BACKEND': 'http',
            'STORAGE_GATEWAY_URL': 'https://storage.example.org',
            'STORAGE_MAX_UPLOAD_SIZE_BYTES': '1024',
        }):
            storage_settings = StorageSettings()

            assert storage_settings.backend == ClientBackend.HTTP
            assert storage_settings.gateway_url == 'https://storage.example.org'
            assert storage_settings.max_upload_size_bytes == 1024

    def test_storage_settings_validation(self):
        with pytest.raises(ValidationError):
            StorageSettings(timeout=0)

        with pytest.raises(ValidationError):
            StorageSettings(max_upload_size_bytes=0)


class TestPaymentSettings:
    """Test payment network configuration settings."""

    def test_payment_settings_defaults(self):
        payment_settings = PaymentSettings()

        assert payment_settings.backend == ClientBackend.MEMORY
        assert payment_settings.currency == "USDFC"

    def test_payment_settings_from_env(self):
        with patch.dict(os.environ, {'PAYMENT_CURRENCY': 'FIL', 'PAYMENT_TIMEOUT': '5'}):
            payment_settings = PaymentSettings()

            assert payment_settings.currency == 'FIL'
            assert payment_settings.timeout == 5.0

    def test_empty_currency_rejected(self):
        with pytest.raises(ValidationError):
            PaymentSettings(currency="")


class TestUISettings:
    """Test UI configuration settings."""

    def test_ui_settings_defaults(self):
        ui_settings = UISettings()

        assert ui_settings.page_title == "DataVault Pro"
        assert ui_settings.max_file_size_mb == 500
        assert ui_settings.listings_per_row == 3

    def test_ui_settings_validation(self):
        with pytest.raises(ValidationError):
            UISettings(listings_per_row=0)


class TestLoggingSettings:
    """Test logging configuration settings."""

    def test_logging_settings_defaults(self):
        logging_settings = LoggingSettings()

        assert logging_settings.level == LogLevel.INFO
        assert "%(levelname)s" in logging_settings.format
        assert logging_settings.file is None

    def test_logging_settings_from_env(self, tmp_path):
        log_file = tmp_path / "logs" / "app.log"
        with patch.dict(os.environ, {'LOG_LEVEL': 'DEBUG', 'LOG_FILE': str(log_file)}):
            logging_settings = LoggingSettings()

            assert logging_settings.level == LogLevel.DEBUG
            assert logging_settings.file == Path(log_file)


class TestMainSettings:
    """Test main application settings."""

    def test_main_settings_defaults(self):
        settings = Settings()

        assert settings.app_name == "DataVault Pro"
        assert settings.debug is False
        assert isinstance(settings.wallet, WalletSettings)
        assert isinstance(settings.storage, StorageSettings)
        assert isinstance(settings.payment, PaymentSettings)
        assert isinstance(settings.ui, UISettings)
        assert isinstance(settings.logging, LoggingSettings)

    def test_environment_properties(self):
        """Test environment detection properties."""
        with patch.dict(os.environ, {'ENVIRONMENT': 'production'}):
            settings = Settings()
            assert settings.is_production is True
            assert settings.is_development is False
            assert settings.is_testing is False

    def test_testing_environment(self, test_settings):
        assert test_settings.environment == Environment.TESTING
        assert test_settings.is_testing is True
        assert test_settings.logging.level == LogLevel.DEBUG

    def test_nested_sections_read_their_prefix(self):
        with patch.dict(os.environ, {'STORAGE_BACKEND': 'http', 'PAYMENT_BACKEND': 'http'}):
            settings = Settings()

            assert settings.storage.backend == ClientBackend.HTTP
            assert settings.payment.backend == ClientBackend.HTTP

    def test_base_dir_contains_package(self):
        settings = Settings()
        assert (settings.base_dir / "datavault").is_dir()
