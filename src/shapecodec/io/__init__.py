"""Drawing I/O layer for shapecodec.

This module handles reading and writing drawing files on disk, wrapping the
pure interchange codec.

Key responsibilities:
- Load interchange documents and parse shapes
- Lift imported shapes into design-tool paths
- Write paths back out as interchange documents

Key classes:
- DrawingReader: Load drawings and extract shapes
- DrawingWriter: Save paths as drawings
"""

from shapecodec.io.converter import shape_to_path, shapes_to_paths
from shapecodec.io.reader import DrawingReader
from shapecodec.io.writer import DrawingWriter

__all__ = [
    "DrawingReader",
    "DrawingWriter",
    "shape_to_path",
    "shapes_to_paths",
]
