"""Utility functions for handscript.

This module provides:

- Logging setup and configuration
- Progress and statistics tracking for font builds
"""

from handscript.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
