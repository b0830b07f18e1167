"""Path representation for import, export and analysis.

``ParsedShape`` is what the importer produces. ``PathEntity`` is the design
tool's path: an ordered list of nodes, display metadata and an optional cache
of flattened sample points. The codec only reads ``PathEntity`` values.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from shapecodec.domain.geometry import Point


class PathKind(str, Enum):
    """Logical path category.

    REFERENCE paths are externally supplied outlines; every other path is a
    user-authored DESIGN path.
    """

    REFERENCE = "reference"
    DESIGN = "design"

    @classmethod
    def from_label(cls, label: str | None) -> "PathKind":
        """Map a free-form label (layer name, stored kind) to a category.

        Only "reference" (any case) is a reference path; everything else,
        including a missing label, is a design path.
        """
        if label is not None and label.strip().lower() == cls.REFERENCE.value:
            return cls.REFERENCE
        return cls.DESIGN


@dataclass(frozen=True, slots=True)
class ParsedShape:
    """One shape recognized in an interchange document.

    Attributes:
        points: Ordered vertices, at least two
        closed: Whether the last vertex connects back to the first
        kind: Category derived from the entity's layer
    """

    points: tuple[Point, ...]
    closed: bool
    kind: PathKind

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "points": [p.to_dict() for p in self.points],
            "closed": self.closed,
            "kind": self.kind.value,
        }


@dataclass(frozen=True, slots=True)
class PathNode:
    """A node on a path.

    Attributes:
        id: Node identifier
        point: Node position
    """

    id: str
    point: Point

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"id": self.id, "point": self.point.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathNode":
        """Deserialize from dictionary."""
        return cls(id=str(data["id"]), point=Point.from_dict(data["point"]))


@dataclass(frozen=True, slots=True)
class PathMeta:
    """Display metadata for a path.

    Attributes:
        id: Path identifier
        name: Display name (also a hint for shape classification)
        kind: Logical category
        closed: Whether the path is closed
    """

    id: str
    name: str
    kind: PathKind = PathKind.DESIGN
    closed: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "kind": self.kind.value,
            "closed": self.closed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathMeta":
        """Deserialize from dictionary.

        Unknown kinds (including the legacy "oxided") load as design paths.
        """
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            kind=PathKind.from_label(data.get("kind")),
            closed=bool(data.get("closed", False)),
        )


@dataclass(frozen=True, slots=True)
class SampledPath:
    """Flattened sample points cached by the design tool."""

    samples: tuple[Point, ...] = ()


@dataclass
class PathEntity:
    """A path owned by the design tool.

    Attributes:
        meta: Display metadata
        nodes: Ordered path nodes
        sampled: Optional flattened sample cache, preferred for measurement
    """

    meta: PathMeta
    nodes: list[PathNode]
    sampled: SampledPath | None = field(default=None)

    @property
    def points(self) -> list[Point]:
        """Node positions in order."""
        return [node.point for node in self.nodes]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        data: dict[str, Any] = {
            "meta": self.meta.to_dict(),
            "nodes": [n.to_dict() for n in self.nodes],
        }
        if self.sampled is not None:
            data["sampled"] = [p.to_dict() for p in self.sampled.samples]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathEntity":
        """Deserialize from dictionary."""
        sampled = data.get("sampled")
        return cls(
            meta=PathMeta.from_dict(data["meta"]),
            nodes=[PathNode.from_dict(n) for n in data.get("nodes", [])],
            sampled=(
                SampledPath(tuple(Point.from_dict(p) for p in sampled))
                if sampled is not None
                else None
            ),
        )
