"""
Interface Manager

Central manager for the Streamlit interface, coordinates between components and pages.
"""

import logging

import streamlit as st

from datavault.core.context import AppContext
from datavault.ui.components.common.header import ApplicationHeader
from datavault.ui.components.common.sidebar import SidebarNavigation
from datavault.ui.core.session_state import SessionStateManager
from datavault.ui.pages import (
    AnalyticsPage,
    DashboardPage,
    MarketplacePage,
    PaymentsPage,
    UploadPage,
    VerificationPage,
)

logger = logging.getLogger(__name__)


class InterfaceManager:
    """Central interface manager for the DataVault Pro application."""

    def __init__(self, context: AppContext):
        """
        Initialize the interface manager.

        Args:
            context: Application context shared by every page
        """
        self.context = context
        self.header = ApplicationHeader(title=context.settings.app_name)
        self.sidebar = SidebarNavigation()

        self.pages = {
            "🛒 Marketplace": MarketplacePage(context),
            "📤 Upload": UploadPage(context),
            "📊 Dashboard": DashboardPage(context),
            "💳 Payments": PaymentsPage(context),
            "🛡️ Verification": VerificationPage(context),
            "📈 Analytics": AnalyticsPage(context),
        }

        SessionStateManager.initialize()

    def configure_page(self) -> None:
        """Configure the Streamlit page settings."""
        ui = self.context.settings.ui
        st.set_page_config(
            page_title=ui.page_title,
            page_icon=ui.page_icon,
            layout="wide",
            initial_sidebar_state="expanded",
        )

    def render_header(self) -> None:
        """Render the application header with the wallet control."""
        try:
            self.header.render(self.context)
        except Exception as e:
            logger.error(f"Header rendering failed: {e}")
            st.error(f"Error while rendering the header: {e}")

    def render_navigation(self) -> str:
        """
        Render the navigation sidebar.

        Returns:
            Selected tab name
        """
        try:
            return self.sidebar.render()
        except Exception as e:
            logger.error(f"Navigation rendering failed: {e}")
            st.error(f"Error while rendering the navigation: {e}")
            return self.sidebar.DEFAULT_TABS[0]

    def add_sidebar_info(self) -> None:
        """Add wallet and activity information to the sidebar."""
        wallet = self.context.wallet
        if wallet.is_connected:
            self.sidebar.add_sidebar_info(f"Connected: {wallet.address}")
        else:
            self.sidebar.add_sidebar_info("Wallet not connected")

        last_payment = SessionStateManager.get("last_payment_id")
        if last_payment:
            self.sidebar.add_sidebar_info(f"Last payment: {last_payment}")

    def handle_page_routing(self, selected_tab: str) -> None:
        """
        Handle routing to different pages based on selected tab.

        Args:
            selected_tab: Selected tab/page name
        """
        page = self.pages.get(selected_tab)
        if page is None:
            st.error(f"Page not found: {selected_tab}")
            return
        try:
            page.render()
        except Exception as e:
            logger.error(f"Page '{selected_tab}' failed to render: {e}")
            st.error(f"Error while rendering page '{selected_tab}': {e}")
            st.exception(e)

    def run(self) -> None:
        """Run the complete interface."""
        self.configure_page()
        self.render_header()
        selected_tab = self.render_navigation()
        self.add_sidebar_info()
        self.handle_page_routing(selected_tab)
