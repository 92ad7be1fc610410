"""
Session State Management

Centralized management of Streamlit session state for the DataVault Pro application.
"""

import asyncio
from typing import Any, Coroutine, Optional, TypeVar

import streamlit as st

from datavault.core.context import AppContext

T = TypeVar("T")


class SessionStateManager:
    """Manages Streamlit session state variables."""

    CONTEXT_KEY = "app_context"

    # Default session state keys and their initial values
    DEFAULT_STATE = {
        "selected_dataset_id": None,
        "search_query": "",
        "category_filter": "all",
        "sort_order": "recent",
        "last_upload_cid": None,
        "last_payment_id": None,
        "verification_result": None,
        "analytics_range": "7d",
    }

    @classmethod
    def initialize(cls) -> None:
        """Initialize session state with default values if not already set."""
        for key, default_value in cls.DEFAULT_STATE.items():
            if key not in st.session_state:
                st.session_state[key] = default_value

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Get a session state value.

        Args:
            key: Session state key
            default: Default value if key doesn't exist

        Returns:
            Session state value or default
        """
        return st.session_state.get(key, default)

    @classmethod
    def set(cls, key: str, value: Any) -> None:
        """
        Set a session state value.

        Args:
            key: Session state key
            value: Value to set
        """
        st.session_state[key] = value

    # Application context

    @classmethod
    def get_context(cls) -> AppContext:
        """Return the application context, creating it on first use."""
        context: Optional[AppContext] = st.session_state.get(cls.CONTEXT_KEY)
        if context is None:
            context = AppContext.create()
            run_async(context.wallet.restore())
            st.session_state[cls.CONTEXT_KEY] = context
        return context

    # Convenience methods for common session state operations

    @classmethod
    def get_selected_dataset_id(cls) -> Optional[str]:
        return cls.get("selected_dataset_id")

    @classmethod
    def select_dataset(cls, dataset_id: Optional[str]) -> None:
        cls.set("selected_dataset_id", dataset_id)


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """Drive a manager coroutine to completion from a Streamlit callback."""
    return asyncio.run(coro)
