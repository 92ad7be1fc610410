"""
DataVault Pro - Dataset marketplace front-end.

Wallet session, upload and payment session managers behind a Streamlit
interface for listing, buying, verifying and analysing datasets.
"""

__version__ = "0.1.0"
__author__ = "DataVault Team"
