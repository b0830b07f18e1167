"""Section scanner.

Walks the token stream, tracks whether the current position lies inside the
ENTITIES section and hands each entity record to its parser.
"""

import logging
from collections.abc import Sequence

from shapecodec.codec.entities import ENTITY_PARSERS, RawEntity, skip_entity
from shapecodec.codec.tokenizer import Token

logger = logging.getLogger(__name__)


def scan_entities(tokens: Sequence[Token]) -> list[RawEntity]:
    """Collect every supported entity inside ENTITIES sections.

    Records outside an ENTITIES section are ignored, unsupported entity types
    are passed over, and an EOF marker ends the scan.

    Args:
        tokens: Token stream from ``tokenize``

    Returns:
        Parsed entities in document order
    """
    entities: list[RawEntity] = []
    in_entities = False

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token.code != 0:
            i += 1
            continue

        kind = token.value.upper()
        if kind == "SECTION":
            following = tokens[i + 1] if i + 1 < len(tokens) else None
            if following is not None and following.code == 2 and following.value.upper() == "ENTITIES":
                in_entities = True
            i += 1
            continue
        if kind == "ENDSEC":
            in_entities = False
            i += 1
            continue
        if kind == "EOF":
            break
        if not in_entities:
            i += 1
            continue

        parser = ENTITY_PARSERS.get(kind)
        if parser is None:
            logger.debug("Skipping unsupported entity %s at token %d", kind, i)
            parser = skip_entity

        entity, next_index = parser(tokens, i + 1)
        if entity is not None:
            entities.append(entity)
        i = max(next_index, i + 1)

    return entities
