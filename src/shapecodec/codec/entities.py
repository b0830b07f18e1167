"""Entity record parsers.

Each parser consumes the token run that follows an entity type marker, up to
(but not including) the next code-0 token. Known group codes are extracted
and every other code is ignored. A record missing required fields yields no
entity; parsers never raise.

Supported entities and their group codes:
- LINE: 8 layer, 10/20 start, 11/21 end
- LWPOLYLINE: 8 layer, 70 flags, repeated 10/20 vertices
- ARC: 8 layer, 10/20 center, 40 radius, 50/51 start/end angle in degrees
- CIRCLE: 8 layer, 10/20 center, 40 radius
"""

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from shapecodec.codec.arcs import FULL_TURN, sample_arc
from shapecodec.codec.tokenizer import Token
from shapecodec.domain import Point

logger = logging.getLogger(__name__)

# Closed polylines whose last vertex is this close to the first drop it
CLOSURE_EPSILON = 1e-6
# Sweeps smaller than this are treated as a full turn
MIN_SWEEP = 1e-9


@dataclass(frozen=True, slots=True)
class RawEntity:
    """Geometry extracted from one entity record, before normalization.

    Attributes:
        points: Ordered vertices in document coordinates
        closed: Whether the path is closed
        layer: Layer name, if the record carried one
    """

    points: tuple[Point, ...]
    closed: bool
    layer: str | None = None


ParseResult = tuple[RawEntity | None, int]
EntityParser = Callable[[Sequence[Token], int], ParseResult]


def parse_number(value: str) -> float:
    """Parse a coordinate value, reading unparsable or non-finite text as 0."""
    try:
        parsed = float(value)
    except ValueError:
        return 0.0
    return parsed if math.isfinite(parsed) else 0.0


def _run_end(tokens: Sequence[Token], start: int) -> int:
    """Index of the next code-0 token at or after start (or the token count)."""
    index = start
    while index < len(tokens) and tokens[index].code != 0:
        index += 1
    return index


def parse_line(tokens: Sequence[Token], start: int) -> ParseResult:
    """Parse a LINE record into a two-point open entity.

    Args:
        tokens: Full token stream
        start: Index just after the LINE type token

    Returns:
        Tuple of (entity or None, index of the next unconsumed token)
    """
    end = _run_end(tokens, start)
    layer: str | None = None
    start_x: float | None = None
    start_y: float | None = None
    end_x: float | None = None
    end_y: float | None = None

    for token in tokens[start:end]:
        if token.code == 8:
            layer = token.value
        elif token.code == 10:
            start_x = parse_number(token.value)
        elif token.code == 20:
            start_y = parse_number(token.value)
        elif token.code == 11:
            end_x = parse_number(token.value)
        elif token.code == 21:
            end_y = parse_number(token.value)

    if start_x is None or start_y is None or end_x is None or end_y is None:
        logger.debug("Dropping LINE with missing coordinates at token %d", start)
        return None, end

    entity = RawEntity(
        points=(Point(start_x, start_y), Point(end_x, end_y)),
        closed=False,
        layer=layer,
    )
    return entity, end


def parse_lwpolyline(tokens: Sequence[Token], start: int) -> ParseResult:
    """Parse an LWPOLYLINE record.

    Each 10 (x) code is held until its paired 20 (y) arrives; an x that is
    followed by another x is lost. Bit 0 of the 70 flags marks the polyline
    closed, in which case a trailing vertex repeating the first is dropped.

    Args:
        tokens: Full token stream
        start: Index just after the LWPOLYLINE type token

    Returns:
        Tuple of (entity or None, index of the next unconsumed token)
    """
    end = _run_end(tokens, start)
    layer: str | None = None
    closed = False
    points: list[Point] = []
    pending_x: float | None = None

    for token in tokens[start:end]:
        if token.code == 8:
            layer = token.value
        elif token.code == 70:
            try:
                closed = (int(token.value) & 1) == 1
            except ValueError:
                pass
        elif token.code == 10:
            pending_x = parse_number(token.value)
        elif token.code == 20 and pending_x is not None:
            points.append(Point(pending_x, parse_number(token.value)))
            pending_x = None

    if closed and len(points) > 1 and points[0].distance_to(points[-1]) <= CLOSURE_EPSILON:
        points.pop()

    if len(points) < 2:
        logger.debug("Dropping LWPOLYLINE with %d vertices at token %d", len(points), start)
        return None, end

    return RawEntity(points=tuple(points), closed=closed, layer=layer), end


def _parse_circular(
    tokens: Sequence[Token], start: int, end: int
) -> tuple[Point | None, float | None, float | None, float | None, str | None]:
    """Extract center, radius, start and end angle (degrees) and layer."""
    layer: str | None = None
    center_x: float | None = None
    center_y: float | None = None
    radius: float | None = None
    start_angle: float | None = None
    end_angle: float | None = None

    for token in tokens[start:end]:
        if token.code == 8:
            layer = token.value
        elif token.code == 10:
            center_x = parse_number(token.value)
        elif token.code == 20:
            center_y = parse_number(token.value)
        elif token.code == 40:
            radius = parse_number(token.value)
        elif token.code == 50:
            start_angle = parse_number(token.value)
        elif token.code == 51:
            end_angle = parse_number(token.value)

    center = Point(center_x, center_y) if center_x is not None and center_y is not None else None
    return center, radius, start_angle, end_angle, layer


def normalize_sweep(start_degrees: float, end_degrees: float) -> float:
    """Counter-clockwise sweep in radians from start to end angle.

    A zero (or non-finite) sweep means a full turn; negative sweeps wrap
    into (0, 2*pi].
    """
    sweep = math.radians(end_degrees - start_degrees)
    if not math.isfinite(sweep) or abs(sweep) < MIN_SWEEP:
        return FULL_TURN
    if sweep <= 0:
        # fmod keeps the sign, so the remainder lies in (-2*pi, 0]
        sweep = math.fmod(sweep, FULL_TURN)
        if sweep <= 0:
            sweep += FULL_TURN
    return sweep


def parse_arc(tokens: Sequence[Token], start: int) -> ParseResult:
    """Parse an ARC record into an open sampled entity.

    Args:
        tokens: Full token stream
        start: Index just after the ARC type token

    Returns:
        Tuple of (entity or None, index of the next unconsumed token)
    """
    end = _run_end(tokens, start)
    center, radius, start_angle, end_angle, layer = _parse_circular(tokens, start, end)

    if center is None or radius is None or radius <= 0:
        logger.debug("Dropping ARC without center or positive radius at token %d", start)
        return None, end

    start_degrees = start_angle if start_angle is not None else 0.0
    end_degrees = end_angle if end_angle is not None else start_degrees
    sweep = normalize_sweep(start_degrees, end_degrees)

    points = sample_arc(center, radius, math.radians(start_degrees), sweep, closed=False)
    return RawEntity(points=tuple(points), closed=False, layer=layer), end


def parse_circle(tokens: Sequence[Token], start: int) -> ParseResult:
    """Parse a CIRCLE record into a closed sampled entity.

    Args:
        tokens: Full token stream
        start: Index just after the CIRCLE type token

    Returns:
        Tuple of (entity or None, index of the next unconsumed token)
    """
    end = _run_end(tokens, start)
    center, radius, _, _, layer = _parse_circular(tokens, start, end)

    if center is None or radius is None or radius <= 0:
        logger.debug("Dropping CIRCLE without center or positive radius at token %d", start)
        return None, end

    points = sample_arc(center, radius, 0.0, FULL_TURN, closed=True)
    return RawEntity(points=tuple(points), closed=True, layer=layer), end


ENTITY_PARSERS: dict[str, EntityParser] = {
    "LINE": parse_line,
    "LWPOLYLINE": parse_lwpolyline,
    "ARC": parse_arc,
    "CIRCLE": parse_circle,
}


def skip_entity(tokens: Sequence[Token], start: int) -> ParseResult:
    """Pass over the run of an unsupported entity type."""
    return None, _run_end(tokens, start)
