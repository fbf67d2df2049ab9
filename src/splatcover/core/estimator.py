"""Coverage estimation over a growing set of circles.

The estimator owns the circle set and computes the approximate area of the
union of all circles by sampling a uniform grid laid over their bounding box.
Every call recomputes from scratch; nothing is cached between calls.

Key components:
- CoverageEstimator: Owns the circle set and answers area queries
"""

import threading
from concurrent.futures import ProcessPoolExecutor, as_completed

import structlog

from splatcover.core.geometry import count_covered_rows, split_rows, union_bounding_box
from splatcover.domain import BoundingBox, Circle
from splatcover.exceptions import InvalidResolutionError

logger = structlog.get_logger(__name__)


class CoverageEstimator:
    """Estimates the area covered by a set of possibly-overlapping circles.

    All operations are serialized by an internal lock so one estimator can be
    shared between threads. Sampling works on a snapshot of the circle set.

    Example:
        estimator = CoverageEstimator()
        estimator.add_circle(0.0, 0.0, 1.0)
        estimator.add_circle(10.0, 10.0, 1.0)
        area = estimator.compute_covered_area(256)  # ~6.28
    """

    def __init__(self, max_workers: int | None = None) -> None:
        """Initialize an empty estimator.

        Args:
            max_workers: Worker processes used for sampling. None or 1 samples
                in the calling process.
        """
        self._circles: list[Circle] = []
        self._lock = threading.RLock()
        self.max_workers = max_workers

    def __len__(self) -> int:
        with self._lock:
            return len(self._circles)

    @property
    def circles(self) -> tuple[Circle, ...]:
        """Snapshot of the circle set in insertion order."""
        with self._lock:
            return tuple(self._circles)

    def add_circle(self, x: float, y: float, r: float) -> None:
        """Append a circle to the set.

        Args:
            x: X coordinate of the centre
            y: Y coordinate of the centre
            r: Radius, must be > 0

        Raises:
            InvalidRadiusError: If r <= 0 (the set is left unchanged)
            InvalidCoordinateError: If x or y is not finite
        """
        circle = Circle(x, y, r)
        with self._lock:
            self._circles.append(circle)
            logger.debug("Circle added", x=x, y=y, r=r, count=len(self._circles))

    def reset(self) -> None:
        """Remove every circle from the set."""
        with self._lock:
            removed = len(self._circles)
            self._circles.clear()
        logger.debug("Circles reset", removed=removed)

    def bounding_box(self) -> BoundingBox | None:
        """Bounding box of the circle set, or None when empty."""
        with self._lock:
            return union_bounding_box(self._circles)

    def compute_covered_area(self, grid_resolution: int) -> float:
        """Compute the approximate area of the union of all circles.

        A grid of grid_resolution x grid_resolution samples is laid over the
        bounding box of the set. Each sample sits on the lower-left corner of
        its cell and counts as covered when it lies inside or on the edge of
        any circle. The result is the covered count times the cell area.

        Args:
            grid_resolution: Number of samples per axis, must be >= 1

        Returns:
            Estimated covered area in square coordinate units. 0.0 when the
            set is empty.

        Raises:
            InvalidResolutionError: If grid_resolution is not an int >= 1
        """
        if (
            isinstance(grid_resolution, bool)
            or not isinstance(grid_resolution, int)
            or grid_resolution < 1
        ):
            raise InvalidResolutionError(grid_resolution)

        with self._lock:
            circles = list(self._circles)

        bbox = union_bounding_box(circles)
        if bbox is None:
            return 0.0

        dx = bbox.width / grid_resolution
        dy = bbox.height / grid_resolution

        circle_data = [c.to_tuple() for c in circles]
        count = self._count_covered(circle_data, bbox.to_tuple(), grid_resolution)

        area = count * dx * dy
        logger.debug(
            "Covered area computed",
            circles=len(circles),
            resolution=grid_resolution,
            covered_samples=count,
            area=area,
        )
        return area

    def _count_covered(
        self,
        circle_data: list[tuple[float, float, float]],
        bbox: tuple[float, float, float, float],
        resolution: int,
    ) -> int:
        """Count covered samples, fanning row bands out to workers if enabled."""
        workers = self.max_workers or 1
        if workers <= 1 or resolution < 2:
            return count_covered_rows(circle_data, bbox, resolution, 0, resolution)

        bands = split_rows(resolution, workers)
        count = 0
        with ProcessPoolExecutor(max_workers=len(bands)) as executor:
            futures = [
                executor.submit(
                    count_covered_rows, circle_data, bbox, resolution, start, stop
                )
                for start, stop in bands
            ]
            for future in as_completed(futures):
                count += future.result()
        return count
