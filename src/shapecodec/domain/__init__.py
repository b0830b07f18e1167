"""Domain models for shapecodec.

This module contains the domain models representing points, paths imported
from or exported to interchange documents, and shape summaries. All models
are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries
- Independent of the interchange text format

Key classes:
- Point: A 2D point
- Bounds: Axis-aligned bounding box with noise-clamped extents
- ParsedShape: One imported entity
- PathEntity: A path owned by the design tool (nodes, meta, sample cache)
- CircleSummary / OvalSummary / ComplexSummary: Shape classification results
"""

from shapecodec.domain.geometry import Bounds, Point
from shapecodec.domain.path import (
    ParsedShape,
    PathEntity,
    PathKind,
    PathMeta,
    PathNode,
    SampledPath,
)
from shapecodec.domain.summary import (
    CircleSummary,
    ComplexSummary,
    OvalSummary,
    ShapeKind,
    ShapeSummary,
)

__all__: list[str] = [
    # Enums
    "PathKind",
    "ShapeKind",
    # Geometry
    "Point",
    "Bounds",
    # Paths
    "ParsedShape",
    "PathEntity",
    "PathMeta",
    "PathNode",
    "SampledPath",
    # Summaries
    "CircleSummary",
    "ComplexSummary",
    "OvalSummary",
    "ShapeSummary",
]
