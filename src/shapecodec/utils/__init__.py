"""Utility functions for shapecodec.

This module provides logging setup and import/export statistics.
"""

from shapecodec.utils.logging import (
    ImportLogger,
    ImportStats,
    configure_logging,
)

__all__ = [
    "ImportLogger",
    "ImportStats",
    "configure_logging",
]
