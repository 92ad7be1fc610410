"""
DataVault Pro - Enumerations

String enums shared by schemas, settings and the UI.
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment."""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ClientBackend(str, Enum):
    """Which implementation backs an external collaborator."""
    MEMORY = "memory"
    HTTP = "http"


class TransferStatus(str, Enum):
    """Lifecycle of a payment transfer. Only ACTIVE may transition."""
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class StorageStatus(str, Enum):
    """Status label reported by the storage network for a content identifier."""
    VERIFIED = "verified"
    PENDING = "pending"
    FAILED = "failed"


class DatasetCategory(str, Enum):
    """Marketplace dataset categories."""
    ANALYTICS = "analytics"
    MACHINE_LEARNING = "machine-learning"
    FINANCE = "finance"
    HEALTHCARE = "healthcare"
    RESEARCH = "research"
    OTHER = "other"


class SortOrder(str, Enum):
    """Marketplace listing order."""
    RECENT = "recent"
    POPULAR = "popular"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"


class TimeRange(str, Enum):
    """Analytics reporting windows."""
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    LAST_90_DAYS = "90d"

    @property
    def days(self) -> int:
        return int(self.value[:-1])
