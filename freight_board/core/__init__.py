"""
Core infrastructure for the freight board.

This module provides:
- Config: Configuration management
- Logging: structlog setup
- Errors: Exception hierarchy
"""

from .config import ConfigManager, get_config
from .errors import (
    EmptySubmissionError,
    FreightBoardError,
    FreightNotFoundError,
    InvalidStatusTransition,
    StoreError,
)
from .logging import configure_logging

__all__ = [
    "ConfigManager",
    "get_config",
    "configure_logging",
    "FreightBoardError",
    "StoreError",
    "EmptySubmissionError",
    "FreightNotFoundError",
    "InvalidStatusTransition",
]
