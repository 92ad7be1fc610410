"""
DataVault Pro - Pydantic Schemas

Typed records for everything the session managers produce and the UI reads:
wallet session snapshots, upload tasks, payment transfers, storage status,
marketplace listings and seller analytics.
"""

import uuid
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from ..core.exceptions import InvalidTransitionError
from .enums import DatasetCategory, StorageStatus, TransferStatus


# ============================================================================
# Wallet Session
# ============================================================================

class WalletSession(BaseModel):
    """Snapshot of the wallet session state."""

    address: Optional[str] = Field(default=None, description="Connected identity address")
    is_connecting: bool = Field(default=False, description="Authorization request in flight")
    error: Optional[str] = Field(default=None, description="Last user-visible error")

    @computed_field
    @property
    def is_connected(self) -> bool:
        return self.address is not None


# ============================================================================
# Upload
# ============================================================================

class DatasetMetadata(BaseModel):
    """Descriptive metadata submitted with an upload."""

    title: str = Field(..., min_length=1, max_length=200, description="Dataset title")
    description: str = Field(..., min_length=1, max_length=5000, description="Free-text description")
    category: DatasetCategory = Field(..., description="Category tag")
    price: float = Field(..., ge=0.0, description="Listing price")
    file_name: str = Field(..., min_length=1, max_length=255, description="Original file name")
    file_size: int = Field(..., ge=0, description="Payload size in bytes")
    uploaded_at: datetime = Field(default_factory=datetime.now, description="Creation time")


class UploadTask(BaseModel):
    """A single upload. The cid is set iff the upload finished without error."""

    model_config = ConfigDict(frozen=True)

    task_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    metadata: DatasetMetadata
    cid: Optional[str] = None
    is_uploading: bool = True
    error: Optional[str] = None

    @model_validator(mode="after")
    def check_cid_consistency(self) -> "UploadTask":
        settled_ok = not self.is_uploading and self.error is None
        if (self.cid is not None) != settled_ok:
            raise ValueError("cid must be set exactly when the upload finished without error")
        return self

    @property
    def is_complete(self) -> bool:
        return self.cid is not None

    def succeed(self, cid: str) -> "UploadTask":
        return UploadTask(task_id=self.task_id, metadata=self.metadata, cid=cid, is_uploading=False)

    def fail(self, error: str) -> "UploadTask":
        return UploadTask(task_id=self.task_id, metadata=self.metadata, is_uploading=False, error=error)


class FileStatus(BaseModel):
    """Storage network status for a content identifier."""

    cid: str
    status: StorageStatus
    proof_of_possession: bool = Field(
        default=False,
        description="Proof-of-possession label as reported by the storage network",
    )
    size: int = Field(default=0, ge=0)
    stored_at: Optional[datetime] = None
    last_checked: datetime = Field(default_factory=datetime.now)


# ============================================================================
# Payments
# ============================================================================

class PaymentTransfer(BaseModel):
    """Value moved (or streaming) from buyer to seller for a dataset."""

    model_config = ConfigDict(frozen=True)

    id: str
    dataset_id: str
    seller: str = Field(..., min_length=1, description="Recipient identity")
    buyer: str = Field(..., min_length=1, description="Payer identity")
    amount: float = Field(..., gt=0.0)
    start_time: datetime = Field(default_factory=datetime.now)
    end_time: Optional[datetime] = None
    status: TransferStatus = TransferStatus.ACTIVE

    @model_validator(mode="after")
    def check_end_time(self) -> "PaymentTransfer":
        if (self.end_time is not None) != (self.status != TransferStatus.ACTIVE):
            raise ValueError("end_time must be set exactly when the transfer is no longer active")
        return self

    @property
    def is_active(self) -> bool:
        return self.status == TransferStatus.ACTIVE

    def _transition(self, status: TransferStatus) -> "PaymentTransfer":
        if not self.is_active:
            raise InvalidTransitionError(
                f"Transfer {self.id} is already {self.status.value}",
                transfer_id=self.id,
                current_status=self.status.value,
                requested_status=status.value,
            )
        data = self.model_dump()
        data.update(status=status, end_time=datetime.now())
        return PaymentTransfer(**data)

    def complete(self) -> "PaymentTransfer":
        return self._transition(TransferStatus.COMPLETED)

    def cancel(self) -> "PaymentTransfer":
        return self._transition(TransferStatus.CANCELLED)


class PaymentStatus(BaseModel):
    """Status snapshot returned by a payment status query."""

    id: str
    status: TransferStatus
    amount: float
    timestamp: datetime

    @classmethod
    def from_transfer(cls, transfer: PaymentTransfer) -> "PaymentStatus":
        return cls(
            id=transfer.id,
            status=transfer.status,
            amount=transfer.amount,
            timestamp=transfer.end_time or transfer.start_time,
        )


# ============================================================================
# Marketplace
# ============================================================================

class Dataset(BaseModel):
    """A marketplace listing."""

    id: str
    cid: str
    title: str
    description: str
    detailed_description: str = ""
    sample_data: str = ""
    category: DatasetCategory
    price: float = Field(..., ge=0.0)
    views: int = Field(default=0, ge=0)
    sales: int = Field(default=0, ge=0)
    seller: str
    uploaded_at: datetime
    file_size: int = Field(default=0, ge=0)
    verified: bool = False
    status: StorageStatus = StorageStatus.PENDING

    @property
    def revenue(self) -> float:
        return round(self.price * self.sales, 2)


# ============================================================================
# Analytics
# ============================================================================

class DailyMetric(BaseModel):
    """One point of a daily analytics series."""

    date: str
    views: int = 0
    sales: int = 0


class TopDataset(BaseModel):
    """Best performing listing row."""

    id: str
    title: str
    views: int
    sales: int
    revenue: float


class AnalyticsSummary(BaseModel):
    """Seller analytics over a reporting window."""

    total_views: int = 0
    total_sales: int = 0
    total_revenue: float = 0.0
    conversion_rate: float = Field(default=0.0, description="Sales per view, in percent")
    avg_order_value: float = 0.0
    daily: List[DailyMetric] = Field(default_factory=list)
    top_datasets: List[TopDataset] = Field(default_factory=list)

    def to_display_dict(self) -> dict[str, Any]:
        """Headline figures, rounded for display."""
        return {
            "total_views": self.total_views,
            "total_sales": self.total_sales,
            "total_revenue": round(self.total_revenue, 2),
            "conversion_rate": round(self.conversion_rate, 2),
            "avg_order_value": round(self.avg_order_value, 2),
        }
