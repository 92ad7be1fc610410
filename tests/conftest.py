"""
DataVault Pro - Pytest Configuration and Fixtures

This module provides common test configuration, fixtures, and utilities
for the test suite.
"""

import os
from datetime import datetime, timedelta

import pytest

from datavault.core.config import Settings
from datavault.models.enums import DatasetCategory, StorageStatus
from datavault.models.schemas import Dataset, DatasetMetadata
from datavault.services.catalog import DatasetCatalog
from datavault.services.clients import InMemoryPaymentClient, InMemoryStorageClient, LocalSigningAgent
from datavault.services.payment_manager import PaymentSessionManager
from datavault.services.session_manager import WalletSessionManager
from datavault.services.upload_manager import UploadSessionManager

BUYER = "0xBuyer0000000000000000000000000000000001"
OTHER_ACCOUNT = "0xBuyer0000000000000000000000000000000002"
SELLER = "0xSeller"


# ============================================================================
# Collaborators
# ============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """Settings for the testing environment."""
    os.environ["ENVIRONMENT"] = "testing"
    os.environ["LOG_LEVEL"] = "DEBUG"
    return Settings()


@pytest.fixture
def agent() -> LocalSigningAgent:
    """Signing agent with one account the user will approve."""
    return LocalSigningAgent(accounts=[BUYER])


@pytest.fixture
def storage() -> InMemoryStorageClient:
    return InMemoryStorageClient()


@pytest.fixture
def payment_client() -> InMemoryPaymentClient:
    return InMemoryPaymentClient()


# ============================================================================
# Managers
# ============================================================================

@pytest.fixture
def wallet(agent: LocalSigningAgent) -> WalletSessionManager:
    """Disconnected wallet session bound to the test agent."""
    manager = WalletSessionManager(agent)
    yield manager
    manager.close()


@pytest.fixture
def uploads(wallet: WalletSessionManager, storage: InMemoryStorageClient) -> UploadSessionManager:
    return UploadSessionManager(wallet, storage, max_upload_size_bytes=1024 * 1024)


@pytest.fixture
def payments(wallet: WalletSessionManager, payment_client: InMemoryPaymentClient) -> PaymentSessionManager:
    return PaymentSessionManager(wallet, payment_client)


# ============================================================================
# Sample Data Fixtures
# ============================================================================

@pytest.fixture
def sample_metadata() -> DatasetMetadata:
    """Metadata as submitted by the upload form."""
    return DatasetMetadata(
        title="Weather Stations 2024",
        description="Hourly readings from 300 weather stations",
        category=DatasetCategory.RESEARCH,
        price=3.5,
        file_name="stations.csv",
        file_size=11,
    )


@pytest.fixture
def sample_payload() -> bytes:
    return b"id,temp\n1,4"


@pytest.fixture
def seller_datasets() -> list[Dataset]:
    """Two listings owned by the same seller and one owned by someone else."""
    now = datetime.now()
    return [
        Dataset(
            id="1", cid="bafybeione", title="Alpha", description="First",
            category=DatasetCategory.ANALYTICS, price=2.0, views=100, sales=4,
            seller=SELLER, uploaded_at=now - timedelta(days=3), file_size=1000,
            verified=True, status=StorageStatus.VERIFIED,
        ),
        Dataset(
            id="2", cid="bafybeitwo", title="Beta", description="Second",
            category=DatasetCategory.FINANCE, price=5.0, views=50, sales=2,
            seller=SELLER, uploaded_at=now - timedelta(days=1), file_size=2000,
        ),
        Dataset(
            id="3", cid="bafybeithree", title="Gamma", description="Third",
            category=DatasetCategory.FINANCE, price=1.0, views=10, sales=0,
            seller="0xSomeoneElse", uploaded_at=now - timedelta(days=7), file_size=3000,
        ),
    ]


@pytest.fixture
def catalog(seller_datasets: list[Dataset]) -> DatasetCatalog:
    return DatasetCatalog(datasets=seller_datasets)


# ============================================================================
# Test Environment Cleanup
# ============================================================================

@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables after each test."""
    original_env = os.environ.copy()

    yield

    os.environ.clear()
    os.environ.update(original_env)
