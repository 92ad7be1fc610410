"""
DataVault Pro - Streamlit Web Interface

This module provides the web interface of the dataset marketplace using
Streamlit with a component-based architecture.
"""

import logging

import streamlit as st
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from datavault.core.logging import setup_logging

logger = logging.getLogger(__name__)


def create_streamlit_interface() -> None:
    """Create the main Streamlit interface using the component architecture."""
    from datavault.ui.core.interface_manager import InterfaceManager
    from datavault.ui.core.session_state import SessionStateManager

    context = SessionStateManager.get_context()
    interface_manager = InterfaceManager(context)
    interface_manager.run()


def launch_streamlit_app() -> None:
    """Launch the Streamlit application."""
    setup_logging()
    logger.info("Starting Streamlit interface...")

    try:
        create_streamlit_interface()
    except Exception as e:
        logger.error(f"Failed to start Streamlit interface: {e}")
        st.error(f"Initialization error: {str(e)}")
        raise


if __name__ == "__main__":
    launch_streamlit_app()
