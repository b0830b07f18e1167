"""Shapecodec - Import, export and classify vector path geometry.

Shapecodec reads and writes the plain-text CAD interchange format (DXF-style
group-code/value pairs) and classifies paths as circles, ovals or complex
outlines for display and measurement.

Example:
    >>> from shapecodec import parse_shapes, serialize_paths
    >>> shapes = parse_shapes(open("outline.dxf").read())

Imported drawings are recentered on a fixed 50x50 logical workspace.
"""

from shapecodec.codec import parse_shapes, serialize_paths
from shapecodec.core import classify_shape, compute_bounds

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "classify_shape",
    "compute_bounds",
    "parse_shapes",
    "serialize_paths",
]
