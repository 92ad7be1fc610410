"""
DataVault Pro - Schemas Unit Tests

Tests for Pydantic schemas validation and state transitions.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from datavault.core.exceptions import InvalidTransitionError
from datavault.models.enums import DatasetCategory, StorageStatus, TransferStatus
from datavault.models.schemas import (
    AnalyticsSummary,
    Dataset,
    DatasetMetadata,
    PaymentStatus,
    PaymentTransfer,
    UploadTask,
    WalletSession,
)


@pytest.fixture
def transfer() -> PaymentTransfer:
    return PaymentTransfer(id="pay_abc", dataset_id="ds-1", seller="0xSeller", buyer="0xBuyer", amount=2.5)


class TestWalletSession:
    """Test the wallet session snapshot."""

    def test_connected_iff_address_present(self):
        assert WalletSession().is_connected is False
        assert WalletSession(address="0xabc").is_connected is True

    def test_is_connected_is_serialized(self):
        data = WalletSession(address="0xabc").model_dump()
        assert data["is_connected"] is True


class TestDatasetMetadata:
    """Test upload metadata validation."""

    def test_metadata_valid(self, sample_metadata):
        assert sample_metadata.category == DatasetCategory.RESEARCH
        assert isinstance(sample_metadata.uploaded_at, datetime)

    def test_metadata_validation_errors(self):
        base = {
            "title": "Prices",
            "description": "Daily prices",
            "category": "finance",
            "price": 1.0,
            "file_name": "prices.csv",
            "file_size": 10,
        }

        with pytest.raises(ValidationError):
            DatasetMetadata(**{**base, "title": ""})

        with pytest.raises(ValidationError):
            DatasetMetadata(**{**base, "price": -1})

        with pytest.raises(ValidationError):
            DatasetMetadata(**{**base, "category": "sports"})

        assert DatasetMetadata(**{**base, "price": 0}).price == 0


class TestUploadTask:
    """Test upload task states."""

    def test_new_task_is_uploading_without_cid(self, sample_metadata):
        task = UploadTask(metadata=sample_metadata)

        assert task.is_uploading is True
        assert task.cid is None
        assert task.is_complete is False

    def test_succeed_sets_cid(self, sample_metadata):
        task = UploadTask(metadata=sample_metadata).succeed("bafybeiabc")

        assert task.cid == "bafybeiabc"
        assert task.is_uploading is False
        assert task.error is None
        assert task.is_complete is True

    def test_fail_keeps_cid_empty(self, sample_metadata):
        task = UploadTask(metadata=sample_metadata)
        failed = task.fail("boom")

        assert failed.cid is None
        assert failed.error == "boom"
        assert failed.task_id == task.task_id

    def test_cid_while_uploading_is_rejected(self, sample_metadata):
        with pytest.raises(ValidationError):
            UploadTask(metadata=sample_metadata, cid="bafybeiabc", is_uploading=True)

    def test_cid_with_error_is_rejected(self, sample_metadata):
        with pytest.raises(ValidationError):
            UploadTask(metadata=sample_metadata, cid="bafybeiabc", is_uploading=False, error="boom")

    def test_finished_without_error_needs_cid(self, sample_metadata):
        with pytest.raises(ValidationError):
            UploadTask(metadata=sample_metadata, is_uploading=False)


class TestPaymentTransfer:
    """Test transfer status transitions."""

    def test_new_transfer_is_active(self, transfer):
        assert transfer.status == TransferStatus.ACTIVE
        assert transfer.end_time is None
        assert transfer.is_active

    def test_amount_must_be_positive(self):
        with pytest.raises(ValidationError):
            PaymentTransfer(id="pay_x", dataset_id="ds", seller="0xS", buyer="0xB", amount=0)

    def test_terminal_status_requires_end_time(self):
        with pytest.raises(ValidationError):
            PaymentTransfer(
                id="pay_x", dataset_id="ds", seller="0xS", buyer="0xB", amount=1.0,
                status=TransferStatus.CANCELLED,
            )

    def test_active_transfer_rejects_end_time(self):
        with pytest.raises(ValidationError):
            PaymentTransfer(
                id="pay_x", dataset_id="ds", seller="0xS", buyer="0xB", amount=1.0,
                end_time=datetime.now(),
            )

    @pytest.mark.parametrize("action,expected", [
        ("complete", TransferStatus.COMPLETED),
        ("cancel", TransferStatus.CANCELLED),
    ])
    def test_active_transfer_can_end(self, transfer, action, expected):
        ended = getattr(transfer, action)()

        assert ended.status == expected
        assert ended.end_time is not None
        assert ended.end_time >= ended.start_time
        assert transfer.is_active

    @pytest.mark.parametrize("first,second", [
        ("complete", "cancel"),
        ("cancel", "complete"),
        ("cancel", "cancel"),
        ("complete", "complete"),
    ])
    def test_terminal_transfer_cannot_change(self, transfer, first, second):
        ended = getattr(transfer, first)()

        with pytest.raises(InvalidTransitionError) as exc_info:
            getattr(ended, second)()

        assert exc_info.value.current_status == ended.status.value

    def test_payment_status_from_transfer(self, transfer):
        status = PaymentStatus.from_transfer(transfer)
        assert status.timestamp == transfer.start_time

        cancelled = PaymentStatus.from_transfer(transfer.cancel())
        assert cancelled.status == TransferStatus.CANCELLED
        assert cancelled.timestamp >= transfer.start_time


class TestMarketplaceSchemas:
    """Test listing and analytics schemas."""

    def test_dataset_revenue(self):
        dataset = Dataset(
            id="1", cid="bafybeione", title="A", description="B",
            category=DatasetCategory.OTHER, price=3.75, sales=8,
            seller="0xS", uploaded_at=datetime.now(), status=StorageStatus.VERIFIED,
        )
        assert dataset.revenue == 30.0

    def test_summary_display_dict_rounds(self):
        summary = AnalyticsSummary(
            total_views=3, total_sales=1, total_revenue=10.005,
            conversion_rate=33.33333, avg_order_value=10.005,
        )
        display = summary.to_display_dict()

        assert display["conversion_rate"] == 33.33
        assert display["total_views"] == 3
