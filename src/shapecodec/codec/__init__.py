"""Interchange codec for shapecodec.

This module reads and writes the DXF-style group-code text format.

Import pipeline:
- tokenize: Text to (code, value) tokens
- scan_entities: ENTITIES section walk with per-type parser dispatch
- sample_arc: Arc and circle flattening
- center_entities: Rigid recentering on the logical workspace
- tag_layer: Layer name to path category

Export:
- serialize_paths: Paths to document text
"""

from shapecodec.codec.arcs import sample_arc
from shapecodec.codec.entities import ENTITY_PARSERS, RawEntity
from shapecodec.codec.importer import parse_shapes
from shapecodec.codec.normalize import WORKSPACE_SIZE, center_entities, tag_layer
from shapecodec.codec.scanner import scan_entities
from shapecodec.codec.serializer import format_number, is_exportable, serialize_paths
from shapecodec.codec.tokenizer import Token, tokenize

__all__ = [
    "ENTITY_PARSERS",
    "WORKSPACE_SIZE",
    "RawEntity",
    "Token",
    "center_entities",
    "format_number",
    "is_exportable",
    "parse_shapes",
    "sample_arc",
    "scan_entities",
    "serialize_paths",
    "tag_layer",
    "tokenize",
]
