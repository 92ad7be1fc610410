"""
DataVault Pro - Logging Setup

Configures the root logger from ``settings.logging``.
"""

import logging
from typing import Optional

from .config import LoggingSettings, settings


def setup_logging(logging_settings: Optional[LoggingSettings] = None) -> None:
    """
    Configure root logging.

    Args:
        logging_settings: Logging section to apply (defaults to global settings)
    """
    config = logging_settings or settings.logging
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.file:
        config.file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, config.level.value.upper()),
        format=config.format,
        handlers=handlers,
        force=True,
    )
