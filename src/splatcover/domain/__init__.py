"""Domain models for splatcover.

This module contains the value types describing splat footprints. All models
are immutable frozen dataclasses and validate themselves on construction.

Key classes:
- Circle: A splat footprint (centre and radius)
- BoundingBox: Axis-aligned extent of one or more circles
"""

from splatcover.domain.circle import BoundingBox, Circle

__all__: list[str] = [
    "BoundingBox",
    "Circle",
]
