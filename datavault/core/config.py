"""
DataVault Pro - Application Configuration

This module provides centralized configuration management using Pydantic Settings
with environment variable support and validation.
"""

from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.enums import ClientBackend, Environment, LogLevel


class WalletSettings(BaseSettings):
    """Signing agent configuration settings."""

    enabled: bool = Field(default=True, description="Expose a local signing agent to the app")
    accounts: List[str] = Field(
        default=["0x9f2C4a1E7b3D5c8A0e6F1b2D3c4E5f6A7b8C9d0E"],
        description="Accounts the local signing agent authorizes"
    )

    model_config = SettingsConfigDict(env_prefix="WALLET_")

    @field_validator("accounts")
    @classmethod
    def validate_accounts(cls, v: List[str]) -> List[str]:
        accounts = [account.strip() for account in v if account and account.strip()]
        for account in accounts:
            if not account.startswith("0x"):
                raise ValueError(f"Account address must start with 0x: {account}")
        return accounts


class StorageSettings(BaseSettings):
    """Storage network configuration settings."""

    backend: ClientBackend = Field(default=ClientBackend.MEMORY, description="Storage client backend")
    gateway_url: str = Field(default="http://localhost:8080", description="Storage gateway base URL")
    timeout: float = Field(default=60.0, gt=0, le=600, description="Storage request timeout in seconds")
    max_upload_size_bytes: int = Field(
        default=500 * 1024 * 1024, ge=1, description="Maximum payload size accepted for upload"
    )

    model_config = SettingsConfigDict(env_prefix="STORAGE_")


class PaymentSettings(BaseSettings):
    """Payment network configuration settings."""

    backend: ClientBackend = Field(default=ClientBackend.MEMORY, description="Payment client backend")
    gateway_url: str = Field(default="http://localhost:8090", description="Payment gateway base URL")
    timeout: float = Field(default=30.0, gt=0, le=300, description="Payment request timeout in seconds")
    currency: str = Field(default="USDFC", min_length=1, description="Currency label shown next to amounts")

    model_config = SettingsConfigDict(env_prefix="PAYMENT_")


class UISettings(BaseSettings):
    """UI configuration settings."""

    page_title: str = Field(default="DataVault Pro", description="Browser tab title")
    page_icon: str = Field(default="🗄️", description="Browser tab icon")
    max_file_size_mb: int = Field(default=500, ge=1, le=5000, description="Upload widget size limit in MB")
    listings_per_row: int = Field(default=3, ge=1, le=6, description="Marketplace cards per row")

    model_config = SettingsConfigDict(env_prefix="UI_")


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string"
    )
    file: Optional[Path] = Field(default=None, description="Optional log file path")

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main application settings."""

    app_name: str = Field(default="DataVault Pro", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    environment: Environment = Field(default=Environment.DEVELOPMENT, description="Application environment")

    # Nested settings
    wallet: WalletSettings = Field(default_factory=WalletSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    payment: PaymentSettings = Field(default_factory=PaymentSettings)
    ui: UISettings = Field(default_factory=UISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == Environment.TESTING

    @property
    def base_dir(self) -> Path:
        """Get the base directory of the application."""
        return Path(__file__).parent.parent.parent


# Global settings instance
settings = Settings()
