"""Geometric operations for coverage estimation.

This module provides the pure building blocks of the grid sampler:
- Point-in-circle testing (boundary inclusive)
- Union coverage testing against a set of circles
- Bounding box of a set of circles
- Row band partitioning and covered-sample counting

All functions are pure, stateless, and designed for use in parallel processing.
Circles cross process boundaries as plain (x, y, r) tuples.
"""

from collections.abc import Iterable, Sequence

from splatcover.domain import BoundingBox, Circle

CircleTuple = tuple[float, float, float]


def point_in_circle(x: float, y: float, circle: CircleTuple) -> bool:
    """Determine if a point lies within or on the edge of a circle.

    Args:
        x: X coordinate of the point
        y: Y coordinate of the point
        circle: Circle as an (x, y, r) tuple

    Returns:
        True if (x - cx)^2 + (y - cy)^2 <= r^2

    Examples:
        >>> point_in_circle(1.0, 0.0, (0.0, 0.0, 1.0))  # On the edge
        True
        >>> point_in_circle(1.0, 1.0, (0.0, 0.0, 1.0))
        False
    """
    cx, cy, cr = circle
    return (x - cx) ** 2 + (y - cy) ** 2 <= cr**2


def point_covered(x: float, y: float, circles: Iterable[CircleTuple]) -> bool:
    """Determine if a point is covered by at least one circle.

    Stops at the first circle containing the point.

    Args:
        x: X coordinate of the point
        y: Y coordinate of the point
        circles: Circles as (x, y, r) tuples

    Returns:
        True if any circle contains the point
    """
    return any(point_in_circle(x, y, c) for c in circles)


def union_bounding_box(circles: Iterable[Circle]) -> BoundingBox | None:
    """Calculate the bounding box enclosing every circle.

    Args:
        circles: Circles to enclose

    Returns:
        Union of the per-circle bounding boxes, or None when there are no circles
    """
    bbox: BoundingBox | None = None
    for circle in circles:
        circle_bbox = circle.bounding_box()
        bbox = circle_bbox if bbox is None else bbox.union(circle_bbox)
    return bbox


def split_rows(resolution: int, bands: int) -> list[tuple[int, int]]:
    """Partition rows [0, resolution) into contiguous half-open bands.

    Band sizes differ by at most one row. Never returns empty bands.

    Args:
        resolution: Number of grid rows
        bands: Requested number of bands

    Returns:
        List of (row_start, row_stop) pairs covering every row exactly once

    Examples:
        >>> split_rows(10, 3)
        [(0, 4), (4, 7), (7, 10)]
    """
    bands = max(1, min(bands, resolution))
    base, extra = divmod(resolution, bands)

    result: list[tuple[int, int]] = []
    start = 0
    for i in range(bands):
        stop = start + base + (1 if i < extra else 0)
        result.append((start, stop))
        start = stop
    return result


def count_covered_rows(
    circles: Sequence[CircleTuple],
    bbox: tuple[float, float, float, float],
    resolution: int,
    row_start: int,
    row_stop: int,
) -> int:
    """Count covered grid samples in rows [row_start, row_stop).

    Top-level function so it can be pickled for ProcessPoolExecutor.
    Samples sit on the lower-left corner of each grid cell:
    (min_x + c * dx, min_y + r * dy).

    Args:
        circles: Circles as (x, y, r) tuples
        bbox: (min_x, min_y, max_x, max_y) of the sampled region
        resolution: Number of samples per axis
        row_start: First row to sample
        row_stop: Row after the last row to sample

    Returns:
        Number of samples covered by at least one circle
    """
    min_x, min_y, max_x, max_y = bbox
    dx = (max_x - min_x) / resolution
    dy = (max_y - min_y) / resolution

    count = 0
    for r in range(row_start, row_stop):
        y = min_y + r * dy
        for c in range(resolution):
            x = min_x + c * dx
            if point_covered(x, y, circles):
                count += 1

    return count
