"""
Streamlit Pages

This module contains the main page components for different application sections.
"""

from .analytics import AnalyticsPage
from .dashboard import DashboardPage
from .marketplace import MarketplacePage
from .payments import PaymentsPage
from .upload import UploadPage
from .verification import VerificationPage

__all__ = [
    "AnalyticsPage",
    "DashboardPage",
    "MarketplacePage",
    "PaymentsPage",
    "UploadPage",
    "VerificationPage",
]
