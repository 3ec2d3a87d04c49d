"""Utility functions for bitmapsdf.

This module provides logging setup and conversion statistics.
"""

from bitmapsdf.utils.logging import (
    ConversionLogger,
    ConversionStats,
    configure_logging,
)

__all__ = [
    "ConversionLogger",
    "ConversionStats",
    "configure_logging",
]
