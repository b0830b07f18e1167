"""Group-code tokenizer for the interchange text format.

A document is a sequence of line pairs: an integer group code followed by a
value line. Tokenizing never fails; malformed input degrades to a partial
token stream.
"""

import re
from typing import NamedTuple

_GROUP_CODE = re.compile(r"[+-]?[0-9]+")


class Token(NamedTuple):
    """A single (group code, value) pair."""

    code: int
    value: str


def tokenize(text: str) -> list[Token]:
    """Split document text into group-code tokens.

    A code line that is blank or not a plain ASCII integer is skipped on its
    own, without consuming the following line, so stray blank lines do not
    shift every later pair out of alignment.

    Args:
        text: Raw document text with any line-ending convention

    Returns:
        Tokens in document order
    """
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    tokens: list[Token] = []

    i = 0
    while i < len(lines):
        raw_code = lines[i].strip()
        i += 1
        if not _GROUP_CODE.fullmatch(raw_code):
            continue
        code = int(raw_code)

        raw_value = lines[i] if i < len(lines) else ""
        i += 1
        tokens.append(Token(code, raw_value.strip()))

    return tokens
