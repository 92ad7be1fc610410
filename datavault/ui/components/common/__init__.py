"""
Common UI Components

This module contains common reusable Streamlit components.
"""

from .header import ApplicationHeader
from .sidebar import SidebarNavigation
from .status_display import StatusDisplay

__all__ = [
    "ApplicationHeader",
    "SidebarNavigation",
    "StatusDisplay",
]
