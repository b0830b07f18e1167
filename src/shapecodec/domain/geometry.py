"""Core geometric types.

This module defines the fundamental geometric types used throughout shapecodec:
- Point: A 2D point in logical workspace units
- Bounds: An axis-aligned bounding box
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in logical units
        y: Y coordinate in logical units
    """

    x: float
    y: float

    def is_finite(self) -> bool:
        """Check that both coordinates are finite numbers."""
        return math.isfinite(self.x) and math.isfinite(self.y)

    def translated(self, dx: float, dy: float) -> "Point":
        """Return a copy of this point moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned bounding box.

    ``width`` and ``height`` are stored separately from the corners because
    they are clamped to zero below a small epsilon, so a path whose points
    all sit within noise distance reports zero extent.

    Attributes:
        min_x: Smallest X coordinate
        min_y: Smallest Y coordinate
        max_x: Largest X coordinate
        max_y: Largest Y coordinate
        width: Clamped horizontal extent
        height: Clamped vertical extent
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float
    width: float
    height: float

    @property
    def center(self) -> Point:
        """Center of the box."""
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "min_x": self.min_x,
            "min_y": self.min_y,
            "max_x": self.max_x,
            "max_y": self.max_y,
            "width": self.width,
            "height": self.height,
        }
