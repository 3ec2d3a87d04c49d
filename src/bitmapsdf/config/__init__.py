"""Configuration management for bitmapsdf.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- DistanceFieldConfig: Distance range, sign and channel selection
- ProcessingConfig: Parallel processing settings
- LoggingConfig: Logging settings
- SdfSettings: Main application settings
"""

from bitmapsdf.config.settings import (
    DistanceFieldConfig,
    DistanceMode,
    LoggingConfig,
    ProcessingConfig,
    RGBAMode,
    SdfSettings,
    get_default_settings,
)

__all__ = [
    "DistanceFieldConfig",
    "DistanceMode",
    "LoggingConfig",
    "ProcessingConfig",
    "RGBAMode",
    "SdfSettings",
    "get_default_settings",
]
