"""
Sidebar Navigation Component

Provides the main navigation sidebar for the DataVault Pro interface.
"""

from typing import List, Optional

import streamlit as st


class SidebarNavigation:
    """Main navigation sidebar component."""

    DEFAULT_TABS = [
        "🛒 Marketplace",
        "📤 Upload",
        "📊 Dashboard",
        "💳 Payments",
        "🛡️ Verification",
        "📈 Analytics",
    ]

    def __init__(self, tabs: Optional[List[str]] = None, title: str = "🧭 Navigation"):
        """
        Initialize sidebar navigation.

        Args:
            tabs: List of tab names (uses default if not provided)
            title: Sidebar title
        """
        self.tabs = tabs if tabs is not None else self.DEFAULT_TABS
        self.title = title

    def render(self) -> str:
        """
        Render the sidebar navigation and return selected tab.

        Returns:
            Selected tab name
        """
        st.sidebar.title(self.title)
        return st.sidebar.radio("Go to:", self.tabs)

    def add_sidebar_info(self, info_text: str) -> None:
        """Add additional information to the sidebar."""
        st.sidebar.info(info_text)
