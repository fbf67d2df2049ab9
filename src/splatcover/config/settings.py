"""Configuration settings for Splatcover."""

from pathlib import Path

from pydantic import BaseModel, Field


class SamplingConfig(BaseModel):
    """Configuration for grid sampling."""

    grid_resolution: int = Field(
        default=256,
        ge=1,
        description="Number of grid samples per axis",
    )
    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Worker processes used for sampling (None = sample in-process)",
    )


class SplatConfig(BaseModel):
    """Configuration for splat placement."""

    radius: float = Field(
        default=0.5,
        gt=0.0,
        description="Radius of every placed splat, in surface units",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    debug: bool = Field(
        default=True,
        description="Emit a debug event for every surface action",
    )


class SplatCoverSettings(BaseModel):
    """Main application settings."""

    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    splat: SplatConfig = Field(default_factory=SplatConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SplatCoverSettings:
    """Get default application settings."""
    return SplatCoverSettings()
