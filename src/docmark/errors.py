# topmark:header:start
#
#   project      : DocMark
#   file         : errors.py
#   file_relpath : src/docmark/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the DocMark engine.

Taxonomy:
    - `ParserError`: malformed input. Grammars raise it and the docblock parser
      recovers locally (rollback to a save point, range clamping); it only escapes
      `parse()` when the text is not a docblock at all.
    - `ShouldNotHappenError`: an internal contract was violated. These indicate a
      bug in the engine (or in a collaborator feeding it) and are never caught.

A tag name that cannot be resolved to a fully-qualified annotation name is not an
error: the payload simply stays generic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docmark.lexer.tokens import TokenKind


class DocmarkError(Exception):
    """Base class for all DocMark errors."""


class ParserError(DocmarkError):
    """Lexical or grammar mismatch while parsing a docblock or a payload.

    Attributes:
        expected (TokenKind | None): The token kind the grammar required, if any.
        actual (TokenKind | None): The token kind that was found instead.
        actual_text (str): Text of the offending token.
        index (int): Token index where the mismatch occurred.
    """

    def __init__(
        self,
        message: str,
        *,
        expected: TokenKind | None = None,
        actual: TokenKind | None = None,
        actual_text: str = "",
        index: int = -1,
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.actual_text = actual_text
        self.index = index


class ShouldNotHappenError(DocmarkError):
    """Internal invariant violation (engine bug, not bad input)."""
