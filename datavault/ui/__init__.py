"""
DataVault Pro - Streamlit Interface
"""
