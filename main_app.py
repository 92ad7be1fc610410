#!/usr/bin/env python3
"""
Main Streamlit Application Entry Point

This is the single entry point for the DataVault Pro Streamlit application.
Run with ``streamlit run main_app.py``.
"""

from datavault.ui.streamlit_app import launch_streamlit_app

if __name__ == "__main__":
    launch_streamlit_app()
