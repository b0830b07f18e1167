"""Geometry analysis for shapecodec.

All functions are stateless and pure.

Key functions:
- compute_bounds: Bounding box of a path with noise-clamped extents
- classify_shape: Circle / oval / complex summary of a path
- format_dimension: One-decimal display formatting for measurements
"""

from shapecodec.core.analyzer import (
    classify_shape,
    compute_bounds,
    format_dimension,
    infer_shape_kind,
)

__all__ = [
    "classify_shape",
    "compute_bounds",
    "format_dimension",
    "infer_shape_kind",
]
