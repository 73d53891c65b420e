# topmark:header:start
#
#   project      : DocMark
#   file         : values.py
#   file_relpath : src/docmark/parser/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structured-value resolution of tag payloads.

Classification order for a tag payload (string matchers run before this, in the
docblock parser):

    1. Structural tags (configured names) use the built-in grammars. A payload the
       grammar rejects is rolled back and kept as a generic value.
    2. Other payloads become nested annotations when the name resolver maps the tag
       to a fully-qualified name and the payload is call-shaped (empty or opening
       with ``(``).
    3. Everything else is kept verbatim as `GenericValue` (`EmptyValue` when blank).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from docmark.ast.values import AnnotationValue, EmptyValue, GenericValue, description_of
from docmark.config.logging import DocmarkLogger, get_logger
from docmark.errors import ParserError, ShouldNotHappenError
from docmark.lexer.lexer import Lexer
from docmark.lexer.tokens import TokenKind
from docmark.parser.annotations import StaticAnnotationParser
from docmark.parser.tags import StructuralKind, StructuralResult, StructuralTagGrammar
from docmark.resolution.silent_keys import SilentKeyMap

if TYPE_CHECKING:
    from docmark.ast.values import ValueNode
    from docmark.lexer.stream import TokenStream
    from docmark.parser.session import ParseSession
    from docmark.resolution.names import NameResolver

logger: DocmarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class ResolvedValue:
    """A tag value plus its verbatim description, when that differs from the model."""

    value: ValueNode
    original_description: str | None = None


def collect_payload(session: ParseSession, tag_name: str) -> str:
    """Collect the raw payload of a generic tag, leaving the cursor after it.

    A payload opening with ``(`` is collected as one balanced group, across lines
    if needed (line decorations reduce to ``\\n``), followed by the rest of its last
    line. An unterminated group stops before the closing marker's line and records a
    diagnostic. Any other payload runs to the end of the line.

    Args:
        session (ParseSession): Current parse session.
        tag_name (str): Tag name, for diagnostics.

    Returns:
        str: The payload text, right-trimmed.
    """
    stream: TokenStream = session.stream
    if not stream.is_current(TokenKind.OPEN_PAREN):
        return stream.join_until(TokenKind.EOL, TokenKind.CLOSE_DOCBLOCK).rstrip(" \t")

    start: int = stream.index
    index: int = start
    depth: int = 0
    parts: list[str] = []
    while True:
        token = stream.token_at(index)
        if token.kind in (TokenKind.CLOSE_DOCBLOCK, TokenKind.END):
            break
        if token.kind == TokenKind.OPEN_PAREN:
            depth += 1
        elif token.kind == TokenKind.CLOSE_PAREN:
            depth -= 1
        parts.append("\n" if token.kind == TokenKind.EOL else token.text)
        index += 1
        if depth == 0:
            break

    if depth > 0:
        session.warn(f"Unterminated parenthesis in payload of {tag_name}")
        while index > start + 1 and stream.token_at(index - 1).kind in (
            TokenKind.HORIZONTAL_WS,
            TokenKind.EOL,
        ):
            index -= 1
            parts.pop()
        stream.seek(index)
        return "".join(parts).rstrip()

    stream.seek(index)
    rest: str = stream.join_until(TokenKind.EOL, TokenKind.CLOSE_DOCBLOCK)
    return ("".join(parts) + rest).rstrip(" \t")


class StructuredValueResolver:
    """Classify tag payloads into value variants.

    Args:
        structural_tags (Mapping[str, StructuralKind]): Tag name (``@`` included,
            lowercase) to structural grammar.
        name_resolver (NameResolver): Maps tag names to annotation FQNs.
        silent_keys (SilentKeyMap | None): Silent argument key per annotation FQN.
        grammar (StructuralTagGrammar | None): Structural grammars.
        lexer (Lexer | None): Lexer used to re-tokenize annotation payloads.
    """

    def __init__(
        self,
        structural_tags: Mapping[str, StructuralKind],
        name_resolver: NameResolver,
        silent_keys: SilentKeyMap | None = None,
        grammar: StructuralTagGrammar | None = None,
        lexer: Lexer | None = None,
    ) -> None:
        self._structural: dict[str, StructuralKind] = {
            k.lower(): v for k, v in structural_tags.items()
        }
        self._names: NameResolver = name_resolver
        self._silent_keys: SilentKeyMap = silent_keys or SilentKeyMap()
        self._grammar: StructuralTagGrammar = grammar or StructuralTagGrammar()
        self._lexer: Lexer = lexer or Lexer()

    @property
    def name_resolver(self) -> NameResolver:
        """The name resolver consulted for annotation tags."""
        return self._names

    def structural_kind(self, tag_name: str) -> StructuralKind | None:
        """Return the structural grammar configured for ``tag_name``, if any."""
        return self._structural.get(tag_name.lower())

    def resolve(self, session: ParseSession, tag_name: str) -> ResolvedValue:
        """Resolve the payload at the cursor for tag ``tag_name``.

        Args:
            session (ParseSession): Current parse session (cursor right after the name).
            tag_name (str): Tag name as written, ``@`` included.

        Returns:
            ResolvedValue: The value and optional verbatim description.
        """
        kind: StructuralKind | None = self.structural_kind(tag_name)
        if kind is not None:
            return self._resolve_structural(session, kind, tag_name)
        payload: str = collect_payload(session, tag_name)
        return ResolvedValue(self.resolve_generic(session, tag_name, payload))

    def _resolve_structural(
        self, session: ParseSession, kind: StructuralKind, tag_name: str
    ) -> ResolvedValue:
        stream: TokenStream = session.stream
        stream.push_save_point()
        try:
            result: StructuralResult = self._grammar.parse(kind, stream)
        except ParserError as exc:
            stream.rollback()
            if not stream.is_current(TokenKind.EOL, TokenKind.CLOSE_DOCBLOCK, TokenKind.END):
                session.warn(f"Malformed {tag_name} payload kept as text: {exc}")
            payload: str = collect_payload(session, tag_name)
            return ResolvedValue(GenericValue(payload) if payload else EmptyValue())
        stream.drop_save_point()

        normalized: str | None = description_of(result.value)
        original: str | None = None
        if normalized is not None and result.raw_description != normalized:
            original = result.raw_description
        return ResolvedValue(result.value, original)

    def resolve_generic(self, session: ParseSession, tag_name: str, payload: str) -> ValueNode:
        """Classify a generic payload as annotation, generic or empty value.

        Args:
            session (ParseSession): Current parse session (for host node and diagnostics).
            tag_name (str): Tag name as written, ``@`` included.
            payload (str): Raw payload text.

        Returns:
            ValueNode: `AnnotationValue`, `GenericValue` or `EmptyValue`.

        Raises:
            ShouldNotHappenError: If the tag resolved to an annotation class and the
                payload is call-shaped, yet no annotation value was produced.
        """
        fqn: str | None = self._names.resolve(tag_name, session.host_node)
        call_shaped: bool = payload == "" or payload.startswith("(")
        if fqn is None or not call_shaped:
            return GenericValue(payload) if payload else EmptyValue()

        parser = StaticAnnotationParser(
            resolve_name=lambda name: self._names.resolve(name, session.host_node),
            silent_key_for=self._silent_keys.lookup,
            lexer=self._lexer,
        )
        try:
            value: AnnotationValue | None = parser.parse(fqn, tag_name.lstrip("@"), payload)
        except ParserError as exc:
            session.warn(f"Annotation payload of {tag_name} kept as text: {exc}")
            return GenericValue(payload)
        if value is None:
            raise ShouldNotHappenError(f"{tag_name} resolved to {fqn} but produced no value")
        logger.debug("Resolved %s as annotation %s", tag_name, fqn)
        return value
