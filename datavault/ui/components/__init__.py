"""
UI Components

Reusable Streamlit components.
"""
