"""Conversion between imported shapes and design-tool paths.

Imported shapes are lifted into ``PathEntity`` values the same way the design
tool materializes them: one node per point, the shape's closed flag and
category, and a display name numbered by import order.
"""

import uuid
from collections.abc import Sequence

from shapecodec.domain import ParsedShape, PathEntity, PathKind, PathMeta, PathNode


def create_id(prefix: str) -> str:
    """Generate a unique identifier such as ``path-1f3a...``."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def shape_display_name(shape: ParsedShape, index: int) -> str:
    """Display name for the index-th (zero-based) imported shape.

    Examples:
        "Reference 1" for a reference outline, "Imported 3" otherwise.
    """
    label = "Reference" if shape.kind == PathKind.REFERENCE else "Imported"
    return f"{label} {index + 1}"


def shape_to_path(shape: ParsedShape, index: int) -> PathEntity:
    """Lift one imported shape into a path.

    Args:
        shape: Imported shape
        index: Zero-based position of the shape in the import

    Returns:
        New path with fresh node and path identifiers
    """
    nodes = [PathNode(id=create_id("node"), point=point) for point in shape.points]
    meta = PathMeta(
        id=create_id("path"),
        name=shape_display_name(shape, index),
        kind=shape.kind,
        closed=shape.closed,
    )
    return PathEntity(meta=meta, nodes=nodes)


def shapes_to_paths(shapes: Sequence[ParsedShape]) -> list[PathEntity]:
    """Lift every imported shape into a path, preserving order."""
    return [shape_to_path(shape, index) for index, shape in enumerate(shapes)]
