"""Workspace centering and layer tagging for imported entities."""

from collections.abc import Sequence
from dataclasses import replace

from shapecodec.codec.entities import RawEntity
from shapecodec.domain import PathKind

WORKSPACE_SIZE = 50.0


def center_entities(
    entities: Sequence[RawEntity],
    workspace_size: float = WORKSPACE_SIZE,
) -> list[RawEntity]:
    """Translate all entities so the drawing is centered on the workspace.

    One bounding box is computed over every point of every entity and the
    same offset is applied to all of them, so the drawing moves as a rigid
    unit rather than per entity.

    Args:
        entities: Parsed entities in document coordinates
        workspace_size: Side length of the square workspace

    Returns:
        Translated entities, or the input unchanged if it has no points
    """
    all_points = [point for entity in entities for point in entity.points]
    if not all_points:
        return list(entities)

    min_x = min(p.x for p in all_points)
    max_x = max(p.x for p in all_points)
    min_y = min(p.y for p in all_points)
    max_y = max(p.y for p in all_points)

    center = workspace_size / 2
    dx = center - (min_x + max_x) / 2
    dy = center - (min_y + max_y) / 2

    return [
        replace(entity, points=tuple(p.translated(dx, dy) for p in entity.points))
        for entity in entities
    ]


def tag_layer(layer: str | None) -> PathKind:
    """Map an entity layer name to its path category.

    "reference" (any case) is a reference outline; every other layer,
    including none, is a design path.
    """
    return PathKind.from_label(layer)
