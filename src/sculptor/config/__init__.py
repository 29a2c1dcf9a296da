"""Configuration management for sculptor.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- BrushConfig: Brush spacing and hover cursor settings
- LoggingConfig: Logging settings
- SculptorSettings: Main application settings
"""

from sculptor.config.settings import (
    MIN_SPACING_FLOOR,
    BrushConfig,
    LoggingConfig,
    SculptorSettings,
    get_default_settings,
)

__all__ = [
    "MIN_SPACING_FLOOR",
    "BrushConfig",
    "LoggingConfig",
    "SculptorSettings",
    "get_default_settings",
]
