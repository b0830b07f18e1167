"""Shape classification results.

Exactly one summary variant is produced per path with at least one finite
point.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from shapecodec.domain.geometry import Bounds


class ShapeKind(str, Enum):
    """Visual shape class of a path."""

    CIRCLE = "circle"
    OVAL = "oval"
    COMPLEX = "complex"


@dataclass(frozen=True, slots=True)
class CircleSummary:
    """A round path.

    Attributes:
        diameter: Mean of width and height, or the larger when one is zero
        bounds: Bounding box the summary was computed from
    """

    diameter: float
    bounds: Bounds
    kind: ShapeKind = field(default=ShapeKind.CIRCLE, init=False)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "kind": self.kind.value,
            "diameter": self.diameter,
            "bounds": self.bounds.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class OvalSummary:
    """An elongated round path.

    Attributes:
        horizontal: Bounding box width
        vertical: Bounding box height
        bounds: Bounding box the summary was computed from
    """

    horizontal: float
    vertical: float
    bounds: Bounds
    kind: ShapeKind = field(default=ShapeKind.OVAL, init=False)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "kind": self.kind.value,
            "horizontal": self.horizontal,
            "vertical": self.vertical,
            "bounds": self.bounds.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class ComplexSummary:
    """Any other path.

    Attributes:
        longest: Larger of width and height
        shortest: Smaller of width and height
        bounds: Bounding box the summary was computed from
    """

    longest: float
    shortest: float
    bounds: Bounds
    kind: ShapeKind = field(default=ShapeKind.COMPLEX, init=False)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "kind": self.kind.value,
            "longest": self.longest,
            "shortest": self.shortest,
            "bounds": self.bounds.to_dict(),
        }


ShapeSummary = CircleSummary | OvalSummary | ComplexSummary
