# topmark:header:start
#
#   project      : DocMark
#   file         : docblock.py
#   file_relpath : src/docmark/parser/docblock.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Docblock parser.

Builds a `DocblockTree` from docblock text. Every child produced from real input
carries the `PositionRange` of its tokens, which is what lets the printer reproduce
untouched children verbatim.

Layout handled::

    /**            <- OPEN_DOCBLOCK, optional EOL
     * text        <- TextNode
     * @tag value  <- TagNode, value resolved by matchers or the value resolver
     */            <- CLOSE_DOCBLOCK (optional; tolerated when missing)
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from docmark.ast.nodes import ChildNode, DocblockTree, PositionRange, TagNode, TextNode
from docmark.config.logging import DocmarkLogger, get_logger
from docmark.lexer.lexer import Lexer
from docmark.lexer.stream import TokenStream
from docmark.lexer.tokens import TokenKind
from docmark.parser.matchers import TagMatcher, find_matcher
from docmark.parser.session import ParseSession
from docmark.parser.values import ResolvedValue, StructuredValueResolver

if TYPE_CHECKING:
    from docmark.ast.values import ValueNode
    from docmark.core.diagnostics import Diagnostic

logger: DocmarkLogger = get_logger(__name__)


@dataclass
class ParseResult:
    """Outcome of parsing one docblock."""

    tree: DocblockTree
    stream: TokenStream
    diagnostics: list[Diagnostic] = field(default_factory=list)


class DocblockParser:
    """Parse docblock text into a tree with token position ranges.

    Args:
        resolver (StructuredValueResolver): Payload classifier.
        matchers (Sequence[TagMatcher]): String matchers, in priority order.
        lexer (Lexer | None): Tokenizer.
    """

    def __init__(
        self,
        resolver: StructuredValueResolver,
        matchers: Sequence[TagMatcher] = (),
        lexer: Lexer | None = None,
    ) -> None:
        self._resolver: StructuredValueResolver = resolver
        self._matchers: tuple[TagMatcher, ...] = tuple(matchers)
        self._lexer: Lexer = lexer or Lexer()

    def parse(self, text: str, host_node: Any | None = None) -> ParseResult:
        """Parse ``text``, which must start with a docblock opening marker.

        Args:
            text (str): Docblock text.
            host_node (Any | None): Host node for name resolution.

        Returns:
            ParseResult: Tree, token stream and diagnostics.

        Raises:
            ParserError: If ``text`` does not start with ``/**``.
        """
        stream: TokenStream = TokenStream(self._lexer.tokenize(text))
        session: ParseSession = ParseSession(stream=stream, host_node=host_node)
        tree: DocblockTree = self.parse_tree(session)
        logger.debug(
            "Parsed docblock: %d token(s), %d child(ren), %d diagnostic(s)",
            stream.token_count,
            len(tree.children),
            len(session.diagnostics),
        )
        return ParseResult(tree=tree, stream=stream, diagnostics=session.diagnostics)

    def parse_tree(self, session: ParseSession) -> DocblockTree:
        """Parse the docblock at the session cursor into a tree."""
        stream: TokenStream = session.stream
        stream.consume(TokenKind.OPEN_DOCBLOCK)
        stream.try_consume(TokenKind.EOL)

        children: list[ChildNode] = []
        while not stream.is_current(TokenKind.CLOSE_DOCBLOCK, TokenKind.END):
            children.append(self._parse_child(session))
            stream.try_consume(TokenKind.EOL)
        if not stream.try_consume(TokenKind.CLOSE_DOCBLOCK):
            session.info("Docblock has no closing marker")
        return DocblockTree(children=children)

    def _parse_child(self, session: ParseSession) -> ChildNode:
        stream: TokenStream = session.stream
        start: int = stream.index

        node: ChildNode
        if stream.is_current(TokenKind.TAG):
            node = self._parse_tag(session)
        else:
            text: str = stream.join_until(TokenKind.EOL, TokenKind.CLOSE_DOCBLOCK)
            node = TextNode(text.rstrip(" \t"))

        end: int = self._correct_paren_end(session, stream.index)
        while end > start and stream.token_at(end - 1).kind == TokenKind.HORIZONTAL_WS:
            end -= 1
        node.position = PositionRange(start, end)
        logger.trace("Child %s at [%d, %d)", type(node).__name__, start, end)
        return node

    def _parse_tag(self, session: ParseSession) -> TagNode:
        stream: TokenStream = session.stream
        name: str = stream.consume(TokenKind.TAG)
        if stream.is_current(TokenKind.IDENTIFIER) and not stream.is_preceded_by_whitespace():
            joined: str = name + stream.current_text
            if self._claims(session, joined):
                name = joined
                stream.next()

        matcher: TagMatcher | None = find_matcher(self._matchers, name)
        if matcher is not None:
            value: ValueNode = matcher.create_from(stream)
            return TagNode(name=name, value=value)

        resolved: ResolvedValue = self._resolver.resolve(session, name)
        return TagNode(
            name=name,
            value=resolved.value,
            original_description=resolved.original_description,
        )

    def _claims(self, session: ParseSession, joined: str) -> bool:
        if find_matcher(self._matchers, joined) is not None:
            return True
        return self._resolver.name_resolver.resolve(joined, session.host_node) is not None

    @staticmethod
    def _correct_paren_end(session: ParseSession, end: int) -> int:
        """Advance ``end`` past the parenthesis group that opens at it, if any.

        Unmatched groups clamp the end to the last token index. The cursor is moved to
        the corrected end.
        """
        stream: TokenStream = session.stream
        if stream.token_at(end).kind != TokenKind.OPEN_PAREN:
            return end
        depth: int = 0
        for index in range(end, stream.token_count):
            kind: TokenKind = stream.token_at(index).kind
            if kind == TokenKind.OPEN_PAREN:
                depth += 1
            elif kind == TokenKind.CLOSE_PAREN:
                depth -= 1
                if depth == 0:
                    stream.seek(index + 1)
                    return index + 1
        corrected: int = max(stream.token_count - 1, end)
        session.warn(f"Unterminated parenthesis at token {end}; range clamped to {corrected}")
        stream.seek(corrected)
        return corrected
