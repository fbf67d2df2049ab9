"""Core coverage algorithms for splatcover.

This module contains:

- Geometry operations (point-in-circle, bounding boxes, row band sampling)
- Coverage estimation over a mutable circle set
- The splat surface adapter driving the estimator

All geometry functions are pure and safe for use in worker processes.

Key functions:
- point_in_circle: Test if a point is inside or on a circle
- point_covered: Test if a point is covered by any circle
- union_bounding_box: Bounding box of a set of circles
- count_covered_rows: Count covered samples in a band of grid rows

Key classes:
- CoverageEstimator: Owns circles and estimates their union area
- SplatSurface: Turns placement, display and reset events into estimator calls
"""

from splatcover.core.estimator import CoverageEstimator
from splatcover.core.geometry import (
    count_covered_rows,
    point_covered,
    point_in_circle,
    split_rows,
    union_bounding_box,
)
from splatcover.core.surface import SplatPosition, SplatSurface

__all__ = [
    # Estimator classes
    "CoverageEstimator",
    # Surface classes
    "SplatPosition",
    "SplatSurface",
    # Geometry functions
    "count_covered_rows",
    "point_covered",
    "point_in_circle",
    "split_rows",
    "union_bounding_box",
]
