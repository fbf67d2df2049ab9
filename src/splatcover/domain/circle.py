"""Core geometric types for splat footprints.

This module defines the value types the coverage estimator works on:
- Circle: A splat footprint with a centre and a positive radius
- BoundingBox: An axis-aligned rectangle enclosing one or more circles
"""

import math
from dataclasses import dataclass
from typing import Any

from splatcover.exceptions import InvalidCoordinateError, InvalidRadiusError


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box.

    Attributes:
        min_x: Left edge
        min_y: Bottom edge
        max_x: Right edge
        max_y: Top edge
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        """Horizontal extent of the box."""
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        """Vertical extent of the box."""
        return self.max_y - self.min_y

    def union(self, other: "BoundingBox") -> "BoundingBox":
        """Return the smallest box enclosing both boxes.

        Args:
            other: Box to merge with this one

        Returns:
            Combined bounding box
        """
        return BoundingBox(
            min_x=min(self.min_x, other.min_x),
            min_y=min(self.min_y, other.min_y),
            max_x=max(self.max_x, other.max_x),
            max_y=max(self.max_y, other.max_y),
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y) tuple."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)


@dataclass(frozen=True, slots=True)
class Circle:
    """A splat footprint: a disk in 2D space.

    Immutable and hashable. Invalid circles cannot be constructed: the radius
    must be strictly positive and every value must be finite.

    Attributes:
        x: X coordinate of the centre
        y: Y coordinate of the centre
        r: Radius
    """

    x: float
    y: float
    r: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.x):
            raise InvalidCoordinateError("x", self.x)
        if not math.isfinite(self.y):
            raise InvalidCoordinateError("y", self.y)
        if not (math.isfinite(self.r) and self.r > 0):
            raise InvalidRadiusError(self.r)

    def bounding_box(self) -> BoundingBox:
        """Calculate the bounding box of the circle.

        Returns:
            Box from (x - r, y - r) to (x + r, y + r)
        """
        return BoundingBox(
            min_x=self.x - self.r,
            min_y=self.y - self.r,
            max_x=self.x + self.r,
            max_y=self.y + self.r,
        )

    def area(self) -> float:
        """Exact area of the disk."""
        return math.pi * self.r**2

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert to simple (x, y, r) tuple."""
        return (self.x, self.y, self.r)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with x, y and r fields
        """
        return {"x": self.x, "y": self.y, "r": self.r}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Circle":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y and r fields

        Returns:
            Circle instance

        Raises:
            InvalidRadiusError: If the radius is not positive
        """
        return cls(x=data["x"], y=data["y"], r=data["r"])
