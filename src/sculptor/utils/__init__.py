"""Utility functions for sculptor.

This module provides utility functions including:

- Logging setup and configuration
- Per-stroke sculpting statistics
"""

from sculptor.utils.logging import (
    SculptLogger,
    SculptStats,
    configure_logging,
)

__all__ = [
    "SculptLogger",
    "SculptStats",
    "configure_logging",
]
