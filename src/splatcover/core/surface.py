"""Splat surface: the interaction point for placing and measuring splats.

The surface turns host events into estimator calls:
- A placement event adds a circle, by default of the configured splat radius
- A display volume event computes the covered area at the configured resolution
- A reset event clears every placed splat

Only the x and y components of a placement position are used.
"""

import time
from collections.abc import Sequence
from typing import NamedTuple, Protocol

import structlog

from splatcover.config import SplatCoverSettings
from splatcover.core.estimator import CoverageEstimator
from splatcover.exceptions import GeometryError, InvalidCoordinateError
from splatcover.utils import SurfaceLogger, SurfaceStats


class SplatPosition(NamedTuple):
    """Position reported by the host when a splat is placed."""

    x: float
    y: float
    z: float = 0.0


class HasXY(Protocol):
    x: float
    y: float


class SplatSurface:
    """Manages splats placed on a surface and reports their covered area.

    Example:
        surface = SplatSurface()
        surface.place_splat(SplatPosition(1.0, 2.0))
        surface.place_splat((1.5, 2.0))
        volume = surface.display_volume()
        surface.reset_splats()
    """

    def __init__(
        self,
        settings: SplatCoverSettings | None = None,
        estimator: CoverageEstimator | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the surface.

        Args:
            settings: Application settings (defaults if None)
            estimator: Estimator to drive (a new one if None)
            logger: Structured logger (module logger if None)
        """
        self.settings = settings or SplatCoverSettings()
        if estimator is None:
            estimator = CoverageEstimator(max_workers=self.settings.sampling.max_workers)
        self.estimator = estimator
        self.surface_logger = SurfaceLogger(
            logger or structlog.get_logger(__name__),
            debug=self.settings.logging.debug,
        )
        self.last_volume: float | None = None

    @property
    def splat_count(self) -> int:
        """Number of splats currently on the surface."""
        return len(self.estimator)

    @property
    def stats(self) -> SurfaceStats:
        """Statistics for this surface session."""
        return self.surface_logger.stats

    def place_splat(
        self, position: HasXY | Sequence[float], radius: float | None = None
    ) -> None:
        """Place a splat at the given position.

        Args:
            position: Object with x and y attributes, or an (x, y[, z]) sequence
            radius: Splat radius (configured splat radius if None)

        Raises:
            GeometryError: If the position or radius is invalid
        """
        self.surface_logger.log_action("place splat")
        if radius is None:
            radius = self.settings.splat.radius

        try:
            x, y = _position_xy(position)
            self.estimator.add_circle(x, y, radius)
        except GeometryError as e:
            self.surface_logger.log_splat_rejected(position, e)
            raise

        self.surface_logger.log_splat_placed(x, y, radius, self.splat_count)

    def display_volume(self) -> float:
        """Calculate the area covered by all splats.

        Returns:
            Covered area in square surface units
        """
        self.surface_logger.log_action("display splat volume")
        resolution = self.settings.sampling.grid_resolution

        start_time = time.time()
        volume = self.estimator.compute_covered_area(resolution)
        duration_ms = (time.time() - start_time) * 1000

        self.surface_logger.log_area(volume, self.splat_count, resolution, duration_ms)
        self.last_volume = volume
        return volume

    def reset_splats(self) -> None:
        """Remove every splat from the surface."""
        self.surface_logger.log_action("reset splat objects")
        removed = self.splat_count
        self.estimator.reset()
        self.last_volume = None
        self.surface_logger.log_reset(removed)


def _position_xy(position: HasXY | Sequence[float]) -> tuple[float, float]:
    """Extract (x, y) from a position object or sequence."""
    try:
        if hasattr(position, "x") and hasattr(position, "y"):
            x, y = position.x, position.y
        else:
            x, y, *_ = position
        return (float(x), float(y))
    except (TypeError, ValueError):
        raise InvalidCoordinateError(
            "position", position, reason="expected x and y numbers"
        ) from None

