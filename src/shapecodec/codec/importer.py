"""Import pipeline: text to centered, categorized shapes."""

from shapecodec.codec.normalize import center_entities, tag_layer
from shapecodec.codec.scanner import scan_entities
from shapecodec.codec.tokenizer import tokenize
from shapecodec.config import CodecConfig
from shapecodec.domain import ParsedShape


def parse_shapes(text: str, config: CodecConfig | None = None) -> list[ParsedShape]:
    """Parse an interchange document into shapes.

    Never raises for malformed input; the worst case is an empty list.

    Args:
        text: Document text
        config: Workspace settings; defaults to ``CodecConfig()``

    Returns:
        One shape per recognized entity, centered on the workspace
    """
    config = config or CodecConfig()
    entities = center_entities(scan_entities(tokenize(text)), config.workspace_size)
    return [
        ParsedShape(points=entity.points, closed=entity.closed, kind=tag_layer(entity.layer))
        for entity in entities
    ]
