"""
DataVault Pro - Application Constants

This module defines all application-wide constants that are used
throughout the system.
"""

# ============================================================================
# Identifier Formats
# ============================================================================

# Content identifiers produced by the in-memory storage network
CID_PREFIX = "bafybei"
CID_DIGEST_LENGTH = 52

# Transfer identifiers produced by the in-memory payment network
TRANSFER_ID_PREFIX = "pay_"
TRANSFER_ID_LENGTH = 13

# ============================================================================
# User-visible Messages
# ============================================================================

AGENT_UNAVAILABLE_MESSAGE = "No signing agent available. Please install a browser wallet to continue."
CONNECT_FAILED_MESSAGE = "Failed to connect wallet"
NOT_CONNECTED_MESSAGE = "Wallet not connected"
NOT_INITIALIZED_MESSAGE = "Storage session not initialized. Please connect your wallet."
UPLOAD_FAILED_MESSAGE = "Failed to upload file"
PAYMENT_FAILED_MESSAGE = "Failed to create payment"
CANCEL_FAILED_MESSAGE = "Failed to cancel payment"

# ============================================================================
# Display
# ============================================================================

CATEGORY_LABELS = {
    "analytics": "Analytics",
    "machine-learning": "Machine Learning",
    "finance": "Finance",
    "healthcare": "Healthcare",
    "research": "Research",
    "other": "Other",
}

SORT_LABELS = {
    "recent": "Most Recent",
    "popular": "Most Popular",
    "price-low": "Price: Low to High",
    "price-high": "Price: High to Low",
}

STATUS_ICONS = {
    "verified": "✅",
    "completed": "✅",
    "active": "⚡",
    "pending": "⏳",
    "cancelled": "🚫",
    "failed": "❌",
}

ADDRESS_PREFIX_CHARS = 6
ADDRESS_SUFFIX_CHARS = 4
BYTES_PER_MB = 1024 * 1024
