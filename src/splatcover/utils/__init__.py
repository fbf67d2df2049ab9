"""Utility functions for splatcover.

This module provides utility functions including:

- Logging setup and configuration
- Surface action logging and statistics
"""

from splatcover.utils.logging import (
    SurfaceLogger,
    SurfaceStats,
    configure_logging,
)

__all__ = [
    "SurfaceLogger",
    "SurfaceStats",
    "configure_logging",
]
