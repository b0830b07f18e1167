"""Interchange document writer.

Paths are written in input order: an open two-point path becomes a LINE
record, every other path an LWPOLYLINE record. Paths with fewer than two
points are skipped.
"""

import logging
import math
from collections.abc import Iterable

from shapecodec.config import CodecConfig
from shapecodec.domain import PathEntity, PathKind

logger = logging.getLogger(__name__)

PREAMBLE = (
    "0", "SECTION",
    "2", "HEADER",
    "0", "ENDSEC",
    "0", "SECTION",
    "2", "ENTITIES",
)
TERMINATOR = ("0", "ENDSEC", "0", "EOF")


def format_number(value: float) -> str:
    """Format a coordinate with up to six decimals.

    Trailing zeros are stripped and non-finite values are written as "0".

    Examples:
        >>> format_number(1.5)
        '1.5'
        >>> format_number(2.0)
        '2'
        >>> format_number(float("nan"))
        '0'
    """
    if not math.isfinite(value):
        return "0"
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def is_exportable(path: PathEntity) -> bool:
    """Whether a path has enough points to be written."""
    return len(path.points) >= 2


def serialize_paths(paths: Iterable[PathEntity], config: CodecConfig | None = None) -> str:
    """Serialize paths into an interchange document.

    Args:
        paths: Paths to export, in order
        config: Layer naming; defaults to ``CodecConfig()``

    Returns:
        Document text with "\\n" line endings
    """
    config = config or CodecConfig()
    lines: list[str] = list(PREAMBLE)

    for path in paths:
        points = path.points
        if not is_exportable(path):
            logger.debug("Skipping path %s with %d points", path.meta.id, len(points))
            continue

        layer = config.reference_layer if path.meta.kind == PathKind.REFERENCE else config.design_layer

        if not path.meta.closed and len(points) == 2:
            start, end = points
            lines.extend([
                "0", "LINE",
                "8", layer,
                "10", format_number(start.x),
                "20", format_number(start.y),
                "11", format_number(end.x),
                "21", format_number(end.y),
            ])
            continue

        lines.extend([
            "0", "LWPOLYLINE",
            "8", layer,
            "90", str(len(points)),
            "70", "1" if path.meta.closed else "0",
        ])
        for point in points:
            lines.extend(["10", format_number(point.x), "20", format_number(point.y)])

    lines.extend(TERMINATOR)
    return "\n".join(lines)
