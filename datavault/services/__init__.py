"""
DataVault Pro - Services

Session managers, marketplace catalog and analytics.
"""

from .catalog import DatasetCatalog
from .payment_manager import PaymentSessionManager
from .session_manager import WalletSessionManager
from .upload_manager import UploadSessionManager

__all__ = [
    "DatasetCatalog",
    "PaymentSessionManager",
    "UploadSessionManager",
    "WalletSessionManager",
]
