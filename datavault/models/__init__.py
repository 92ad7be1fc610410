"""
DataVault Pro - Models

Enumerations and Pydantic schemas.
"""

from .enums import (
    ClientBackend,
    DatasetCategory,
    Environment,
    LogLevel,
    SortOrder,
    StorageStatus,
    TimeRange,
    TransferStatus,
)
from .schemas import (
    AnalyticsSummary,
    DailyMetric,
    Dataset,
    DatasetMetadata,
    FileStatus,
    PaymentStatus,
    PaymentTransfer,
    TopDataset,
    UploadTask,
    WalletSession,
)

__all__ = [
    "AnalyticsSummary",
    "ClientBackend",
    "DailyMetric",
    "Dataset",
    "DatasetCategory",
    "DatasetMetadata",
    "Environment",
    "FileStatus",
    "LogLevel",
    "PaymentStatus",
    "PaymentTransfer",
    "SortOrder",
    "StorageStatus",
    "TimeRange",
    "TopDataset",
    "TransferStatus",
    "UploadTask",
    "WalletSession",
]
