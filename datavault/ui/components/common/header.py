"""
Application Header Component

Branding plus the wallet connect / disconnect control.
"""

import streamlit as st

from datavault.core.context import AppContext
from datavault.core.exceptions import DataVaultException
from datavault.services.formatting import format_address
from datavault.ui.components.common.status_display import StatusDisplay
from datavault.ui.core.session_state import run_async


class ApplicationHeader:
    """Main application header component."""

    def __init__(self, title: str = "DataVault Pro", subtitle: str = "Buy and sell datasets with verifiable storage"):
        """
        Initialize header component.

        Args:
            title: Main application title
            subtitle: Application subtitle/description
        """
        self.title = title
        self.subtitle = subtitle

    def render_wallet_control(self, context: AppContext) -> None:
        """Connect button, or the connected address with a disconnect button."""
        wallet = context.wallet
        if wallet.is_connected:
            st.markdown(f"🟢 **{format_address(wallet.address)}**")
            if st.button("Disconnect", key="wallet_disconnect"):
                wallet.disconnect()
                st.rerun()
            return

        if st.button("🔗 Connect Wallet", key="wallet_connect", type="primary", disabled=wallet.is_connecting):
            try:
                run_async(wallet.connect())
                st.rerun()
            except DataVaultException as e:
                StatusDisplay.show_exception("Wallet connection failed", e)
        elif wallet.error:
            StatusDisplay.show_warning(wallet.error)

    def render(self, context: AppContext) -> None:
        """Render the header row."""
        col1, col2 = st.columns([4, 1])
        with col1:
            st.title(f"🗄️ {self.title}")
            st.caption(self.subtitle)
        with col2:
            self.render_wallet_control(context)
        st.divider()
