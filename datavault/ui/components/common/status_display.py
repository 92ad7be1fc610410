"""
Status Display Component

Provides consistent status messages (success, error, info, warning) for the application.
"""

from typing import Optional

import streamlit as st

from datavault.core.exceptions import DataVaultException


class StatusDisplay:
    """Status message display component."""

    @staticmethod
    def show_success(message: str, container: Optional[st.container] = None) -> None:
        """
        Display a success message.

        Args:
            message: Success message to display
            container: Optional container to display in
        """
        target = container if container else st
        target.success(f"✅ {message}")

    @staticmethod
    def show_error(message: str, container: Optional[st.container] = None) -> None:
        """
        Display an error message.

        Args:
            message: Error message to display
            container: Optional container to display in
        """
        target = container if container else st
        target.error(f"❌ {message}")

    @staticmethod
    def show_info(message: str, container: Optional[st.container] = None) -> None:
        target = container if container else st
        target.info(f"ℹ️ {message}")

    @staticmethod
    def show_warning(message: str, container: Optional[st.container] = None) -> None:
        target = container if container else st
        target.warning(f"⚠️ {message}")

    @staticmethod
    def show_exception(title: str, error: Exception, container: Optional[st.container] = None) -> None:
        """
        Display a failed operation as a transient notification.

        Args:
            title: What failed ("Upload failed", ...)
            error: The raised exception
            container: Optional container to display in
        """
        message = error.message if isinstance(error, DataVaultException) else str(error)
        st.toast(f"{title}: {message}", icon="❌")
        StatusDisplay.show_error(f"{title}: {message}", container)
