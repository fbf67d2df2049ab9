"""Configuration management for splatcover.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SamplingConfig: Grid sampling settings
- SplatConfig: Splat placement settings
- LoggingConfig: Logging settings
- SplatCoverSettings: Main application settings
"""

from splatcover.config.settings import (
    LoggingConfig,
    SamplingConfig,
    SplatConfig,
    SplatCoverSettings,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "SamplingConfig",
    "SplatConfig",
    "SplatCoverSettings",
    "get_default_settings",
]
