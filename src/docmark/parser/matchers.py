# topmark:header:start
#
#   project      : DocMark
#   file         : matchers.py
#   file_relpath : src/docmark/parser/matchers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String matchers: pluggable value factories keyed by tag name.

Matchers are kept in an ordered list and get first refusal on every tag: the first
matcher whose `TagMatcher.match` accepts the tag name builds the value. A matcher
also claims multi-part names, which lets the parser join ``@ORM`` and ``\\Column``
into ``@ORM\\Column``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Protocol

from docmark.ast.values import EmptyValue, GenericValue
from docmark.lexer.tokens import TokenKind

if TYPE_CHECKING:
    from docmark.ast.values import ValueNode
    from docmark.lexer.stream import TokenStream


class TagMatcher(Protocol):
    """Capability of a string matcher."""

    def match(self, tag_name: str) -> bool:
        """Return True if this matcher handles ``tag_name`` (``@`` included)."""
        ...

    def create_from(self, stream: TokenStream) -> ValueNode:
        """Build the value from the payload at the cursor (right after the tag name)."""
        ...


class FlagTagMatcher:
    """Tags that carry no structured payload (``@required``, ``@api``).

    The payload, if any, is kept verbatim as a generic value.

    Args:
        names (Iterable[str]): Tag names, with or without ``@`` (case-insensitive).
    """

    def __init__(self, names: Iterable[str]) -> None:
        self._names: frozenset[str] = frozenset("@" + n.lstrip("@").lower() for n in names)

    @property
    def names(self) -> frozenset[str]:
        """Normalized tag names handled by this matcher."""
        return self._names

    def match(self, tag_name: str) -> bool:
        """Return True if ``tag_name`` is one of the configured flag tags."""
        return tag_name.lower() in self._names

    def create_from(self, stream: TokenStream) -> ValueNode:
        """Return `EmptyValue`, or the rest of the line as `GenericValue`."""
        text: str = stream.join_until(TokenKind.EOL, TokenKind.CLOSE_DOCBLOCK).rstrip(" \t")
        return GenericValue(text) if text else EmptyValue()


def find_matcher(matchers: Sequence[TagMatcher], tag_name: str) -> TagMatcher | None:
    """Return the first matcher (in registration order) accepting ``tag_name``."""
    for matcher in matchers:
        if matcher.match(tag_name):
            return matcher
    return None
