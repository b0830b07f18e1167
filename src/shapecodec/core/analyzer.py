"""Path geometry analysis for display and measurement.

This module measures paths and classifies their visual shape:
- Bounding boxes from the flattened sample cache or the raw node points
- Circle / oval / complex classification from the box and the path name

The classification is a convention-based heuristic. Checks run in a fixed
order: degenerate extent, name hints, near-square box, reference fallback.
"""

import math

from shapecodec.config import AnalyzerConfig
from shapecodec.domain import (
    Bounds,
    CircleSummary,
    ComplexSummary,
    OvalSummary,
    PathEntity,
    PathKind,
    Point,
    ShapeKind,
    ShapeSummary,
)

_DEFAULT_CONFIG = AnalyzerConfig()


def _collect_points(path: PathEntity) -> list[Point]:
    """Prefer the flattened sample cache, falling back to node points."""
    if path.sampled is not None and path.sampled.samples:
        return list(path.sampled.samples)
    return path.points


def _clamp_extent(value: float, epsilon: float) -> float:
    if not math.isfinite(value):
        return 0.0
    value = max(value, 0.0)
    return 0.0 if value < epsilon else value


def compute_bounds(path: PathEntity, config: AnalyzerConfig | None = None) -> Bounds | None:
    """Compute the bounding box of a path.

    Non-finite points are ignored. Width and height below the extent
    epsilon are reported as zero.

    Args:
        path: Path to measure
        config: Classification thresholds; defaults to ``AnalyzerConfig()``

    Returns:
        Bounds, or None if the path has no finite points
    """
    config = config or _DEFAULT_CONFIG
    points = [p for p in _collect_points(path) if p.is_finite()]
    if not points:
        return None

    min_x = min(p.x for p in points)
    min_y = min(p.y for p in points)
    max_x = max(p.x for p in points)
    max_y = max(p.y for p in points)

    return Bounds(
        min_x=min_x,
        min_y=min_y,
        max_x=max_x,
        max_y=max_y,
        width=_clamp_extent(max_x - min_x, config.extent_epsilon),
        height=_clamp_extent(max_y - min_y, config.extent_epsilon),
    )


def infer_shape_kind(path: PathEntity, bounds: Bounds, config: AnalyzerConfig | None = None) -> ShapeKind:
    """Decide which shape class a path belongs to.

    Args:
        path: Path being classified (name and category are consulted)
        bounds: Bounds of the path
        config: Classification thresholds

    Returns:
        The shape kind
    """
    config = config or _DEFAULT_CONFIG
    width, height = bounds.width, bounds.height

    # Degenerate boxes are never round
    if width == 0 or height == 0:
        return ShapeKind.COMPLEX

    name = path.meta.name.lower()
    if "circle" in name:
        return ShapeKind.CIRCLE
    if "oval" in name:
        return ShapeKind.OVAL

    if abs(width - height) <= config.round_tolerance(width, height):
        return ShapeKind.CIRCLE

    # Reference outlines that are not round are ovals by convention
    if path.meta.kind == PathKind.REFERENCE:
        return ShapeKind.OVAL

    return ShapeKind.COMPLEX


def classify_shape(path: PathEntity, config: AnalyzerConfig | None = None) -> ShapeSummary | None:
    """Summarize a path as a circle, oval or complex shape.

    Args:
        path: Path to classify
        config: Classification thresholds; defaults to ``AnalyzerConfig()``

    Returns:
        Shape summary, or None if the path has no finite points

    Examples:
        >>> from shapecodec.domain import PathMeta, PathNode
        >>> nodes = [PathNode(str(i), Point(x, y)) for i, (x, y) in enumerate(
        ...     [(0, 0), (10, 0), (10, 10), (0, 10)])]
        >>> classify_shape(PathEntity(PathMeta("p", "Imported 1"), nodes)).kind
        <ShapeKind.CIRCLE: 'circle'>
    """
    bounds = compute_bounds(path, config)
    if bounds is None:
        return None

    width, height = bounds.width, bounds.height
    kind = infer_shape_kind(path, bounds, config)

    if kind == ShapeKind.CIRCLE:
        diameter = (width + height) / 2 if width > 0 and height > 0 else max(width, height)
        return CircleSummary(diameter=diameter, bounds=bounds)
    if kind == ShapeKind.OVAL:
        return OvalSummary(horizontal=width, vertical=height, bounds=bounds)
    return ComplexSummary(longest=max(width, height), shortest=min(width, height), bounds=bounds)


def format_dimension(value: float) -> str:
    """Format a measurement for display, rounded to one decimal.

    Examples:
        >>> format_dimension(12.04)
        '12'
        >>> format_dimension(3.25)
        '3.3'
    """
    if not math.isfinite(value):
        return "—"
    normalized = math.floor(value * 10 + 0.5) / 10
    if normalized.is_integer():
        return f"{normalized:.0f}"
    return f"{normalized:.1f}"
