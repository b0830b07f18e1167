"""Arc and circle flattening.

Converts a circular arc into a discrete point sequence whose resolution
scales with the swept angle.
"""

import math

from shapecodec.domain import Point

FULL_TURN = 2 * math.pi

# Segments for a full turn; smaller sweeps get a proportional share
SEGMENTS_PER_TURN = 64
MIN_CLOSED_SEGMENTS = 16
MIN_OPEN_SEGMENTS = 8


def segment_count(sweep: float, closed: bool) -> int:
    """Number of segments used to sample a sweep.

    Args:
        sweep: Swept angle in radians
        closed: True for full-circle sampling

    Returns:
        Segment count, never below the closed/open minimum
    """
    minimum = MIN_CLOSED_SEGMENTS if closed else MIN_OPEN_SEGMENTS
    fraction = min(max(sweep / FULL_TURN, 0.0), 1.0)
    return max(minimum, math.ceil(fraction * SEGMENTS_PER_TURN))


def sample_arc(
    center: Point,
    radius: float,
    start_angle: float,
    sweep: float,
    closed: bool,
) -> list[Point]:
    """Sample points along a circular arc, counter-clockwise from start_angle.

    Closed samples omit the closing point (closure is implicit). Open samples
    include both the start and the end point.

    Args:
        center: Arc center
        radius: Arc radius
        start_angle: Start angle in radians
        sweep: Positive swept angle in radians
        closed: True to sample a closed loop

    Returns:
        ``segments`` points when closed, ``segments + 1`` when open

    Examples:
        >>> points = sample_arc(Point(0.0, 0.0), 1.0, 0.0, FULL_TURN, closed=True)
        >>> len(points)
        64
        >>> points[0]
        Point(x=1.0, y=0.0)
    """
    segments = segment_count(sweep, closed)
    count = segments if closed else segments + 1

    points = []
    for i in range(count):
        angle = start_angle + sweep * i / segments
        points.append(
            Point(
                center.x + radius * math.cos(angle),
                center.y + radius * math.sin(angle),
            )
        )
    return points
