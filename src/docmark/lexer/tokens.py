# topmark:header:start
#
#   project      : DocMark
#   file         : tokens.py
#   file_relpath : src/docmark/lexer/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Token types produced by the docblock lexer.

Tokens are never mutated: they are the sole source of truth for verbatim
reproduction of untouched docblock content.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Lexical categories of docblock tokens.

    Members:
        OPEN_DOCBLOCK: ``/**`` followed by whitespace.
        CLOSE_DOCBLOCK: ``*/``.
        EOL: A line break together with the next line's indentation and its
            optional ``*`` decoration (but not the space after it).
        HORIZONTAL_WS: A run of spaces and tabs.
        TAG: ``@name`` (letters, digits, ``_`` and ``-``).
        END: Empty sentinel appended after the last real token.
    """

    OPEN_DOCBLOCK = "open_docblock"
    CLOSE_DOCBLOCK = "close_docblock"
    EOL = "eol"
    HORIZONTAL_WS = "horizontal_ws"
    TAG = "tag"
    IDENTIFIER = "identifier"
    VARIABLE = "variable"
    THIS_VARIABLE = "this_variable"
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"
    OPEN_ANGLE = "open_angle"
    CLOSE_ANGLE = "close_angle"
    OPEN_SQUARE = "open_square"
    CLOSE_SQUARE = "close_square"
    OPEN_CURLY = "open_curly"
    CLOSE_CURLY = "close_curly"
    COMMA = "comma"
    VARIADIC = "variadic"
    DOUBLE_COLON = "double_colon"
    DOUBLE_ARROW = "double_arrow"
    EQUAL = "equal"
    COLON = "colon"
    UNION = "union"
    INTERSECTION = "intersection"
    NULLABLE = "nullable"
    SINGLE_QUOTED = "single_quoted"
    DOUBLE_QUOTED = "double_quoted"
    INTEGER = "integer"
    FLOAT = "float"
    OTHER = "other"
    END = "end"


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexical unit of the original input.

    Attributes:
        text (str): The exact source text of the token.
        kind (TokenKind): Lexical category.
        index (int): 0-based position of the token in its stream.
    """

    text: str
    kind: TokenKind
    index: int

    def __str__(self) -> str:
        return self.text
