"""Display formatting helpers shared by the pages."""

from datetime import datetime
from typing import Optional

from ..core.constants import ADDRESS_PREFIX_CHARS, ADDRESS_SUFFIX_CHARS, BYTES_PER_MB


def format_address(address: Optional[str]) -> str:
    """Shorten an address to ``0x742d...0bEb``."""
    if not address:
        return ""
    if len(address) <= ADDRESS_PREFIX_CHARS + ADDRESS_SUFFIX_CHARS:
        return address
    return f"{address[:ADDRESS_PREFIX_CHARS]}...{address[-ADDRESS_SUFFIX_CHARS:]}"


def format_file_size(size_bytes: int) -> str:
    return f"{size_bytes / BYTES_PER_MB:.2f} MB"


def format_date(value: Optional[datetime], with_time: bool = False) -> str:
    if value is None:
        return "-"
    if with_time:
        return value.strftime("%b %d, %Y %H:%M")
    return value.strftime("%B %d, %Y")


def format_amount(amount: float, currency: str) -> str:
    return f"{amount:.2f} {currency}"
