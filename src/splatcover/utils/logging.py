"""Logging utilities for Splatcover."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class SurfaceStats:
    """Statistics from a splat surface session."""

    splats_placed: int = 0
    splats_rejected: int = 0
    resets: int = 0
    area_computations: int = 0
    last_area: float | None = None


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("splatcover")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class SurfaceLogger:
    """Logger for tracking splat surface actions and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, debug: bool = True) -> None:
        self._logger = logger
        self._debug = debug
        self._stats = SurfaceStats()

    def log_action(self, action: str) -> None:
        """Log an incoming surface action."""
        if self._debug:
            self._logger.debug("Surface action", action=action)

    def log_splat_placed(self, x: float, y: float, radius: float, count: int) -> None:
        """Log a splat placement."""
        if self._debug:
            self._logger.debug("Splat placed", x=x, y=y, radius=radius, count=count)
        self._stats.splats_placed += 1

    def log_splat_rejected(self, position: object, error: Exception) -> None:
        """Log a rejected splat placement."""
        self._logger.warning(
            "Splat rejected",
            position=repr(position),
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.splats_rejected += 1

    def log_area(self, area: float, splats: int, resolution: int, duration_ms: float) -> None:
        """Log a completed area computation."""
        if self._debug:
            self._logger.debug(
                "Splat area calculated",
                area=area,
                splats=splats,
                resolution=resolution,
                duration_ms=round(duration_ms, 2),
            )
        self._stats.area_computations += 1
        self._stats.last_area = area

    def log_reset(self, removed: int) -> None:
        """Log a surface reset."""
        if self._debug:
            self._logger.debug("Splats reset", removed=removed)
        self._stats.resets += 1

    @property
    def stats(self) -> SurfaceStats:
        """Get current surface statistics."""
        return self._stats
