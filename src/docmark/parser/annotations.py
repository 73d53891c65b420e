# topmark:header:start
#
#   project      : DocMark
#   file         : annotations.py
#   file_relpath : src/docmark/parser/annotations.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nested-annotation argument grammar.

The payload of a resolved annotation tag is re-tokenized into an independent
sub-stream and parsed as::

    ( argument, ... )
    argument := identifier "=" value | identifier ":" value | value
    value    := string | integer | float | true | false | null
              | Name::CONSTANT | { item, ... } | @Name(...) | Name(...)

Positional arguments go under the silent key of the annotation (``value`` when
none is configured); repeated positional arguments accumulate into a list.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from docmark.ast.values import (
    AnnotationValue,
    ArgumentValue,
    ConstantReference,
    PositionalArguments,
)
from docmark.config.logging import DocmarkLogger, get_logger
from docmark.constants import DEFAULT_SILENT_KEY
from docmark.errors import ParserError
from docmark.lexer.lexer import Lexer
from docmark.lexer.stream import TokenStream
from docmark.lexer.tokens import TokenKind

logger: DocmarkLogger = get_logger(__name__)

NameLookup = Callable[[str], "str | None"]
"""Maps an annotation name as written to its fully-qualified name (or None)."""

_SKIPPABLE: Final[tuple[TokenKind, ...]] = (TokenKind.HORIZONTAL_WS, TokenKind.EOL)
_KEY_SEPARATORS: Final[tuple[TokenKind, ...]] = (TokenKind.EQUAL, TokenKind.COLON)
_KEYWORDS: Final[dict[str, ArgumentValue]] = {"true": True, "false": False, "null": None}


class StaticAnnotationParser:
    """Parse annotation payloads into `AnnotationValue` arguments.

    Args:
        resolve_name (NameLookup): Resolves nested annotation names.
        silent_key_for (Callable[[str], str | None]): Configured silent key per FQN.
        lexer (Lexer | None): Lexer used to re-tokenize payload text.
    """

    def __init__(
        self,
        resolve_name: NameLookup,
        silent_key_for: Callable[[str], str | None],
        lexer: Lexer | None = None,
    ) -> None:
        self._resolve_name = resolve_name
        self._silent_key_for = silent_key_for
        self._lexer: Lexer = lexer or Lexer()

    def parse(self, fqn: str, name: str, payload: str) -> AnnotationValue:
        """Parse a full payload (``(...)`` or empty) of annotation ``fqn``.

        Args:
            fqn (str): Fully-qualified name of the annotation.
            name (str): The annotation name as written (without ``@``).
            payload (str): Raw payload text following the name.

        Returns:
            AnnotationValue: The parsed annotation.

        Raises:
            ParserError: On a grammar error or trailing content after ``)``.
        """
        stream: TokenStream = TokenStream(self._lexer.tokenize(payload))
        _skip(stream)
        silent_key: str | None = self._silent_key_for(fqn)
        values: dict[str, ArgumentValue] = {}
        if not stream.at_end():
            values = self._parse_arguments(stream, silent_key)
            _skip(stream)
            if not stream.at_end():
                raise ParserError(
                    f"Unexpected content after annotation arguments: {stream.remaining_text()!r}",
                    expected=TokenKind.END,
                    actual=stream.current_kind,
                    actual_text=stream.current_text,
                    index=stream.index,
                )
        logger.trace("Parsed annotation %s with %d argument(s)", fqn, len(values))
        return AnnotationValue(
            fqn=fqn, name=name, raw=payload, values=values, silent_key=silent_key
        )

    def _parse_arguments(
        self, stream: TokenStream, silent_key: str | None
    ) -> dict[str, ArgumentValue]:
        positional_key: str = silent_key or DEFAULT_SILENT_KEY
        values: dict[str, ArgumentValue] = {}
        positional: PositionalArguments = PositionalArguments()

        stream.consume(TokenKind.OPEN_PAREN)
        _skip(stream)
        while not stream.is_current(TokenKind.CLOSE_PAREN):
            key: str | None = None
            key_index: int = stream.index
            if stream.is_current(TokenKind.IDENTIFIER) and (
                stream.peek_significant_kind() in _KEY_SEPARATORS
            ):
                key = stream.current_text
                stream.next()
                _skip(stream)
                stream.next()
                _skip(stream)
            value: ArgumentValue = self._parse_value(stream)
            if key is not None:
                if key == positional_key and positional:
                    raise _key_collision(positional_key, stream, key_index)
                values[key] = value
            else:
                if not positional and positional_key in values:
                    raise _key_collision(positional_key, stream, key_index)
                positional.append(value)
                # One positional argument is a scalar; more become a spread list.
                values[positional_key] = (
                    positional[0] if len(positional) == 1 else PositionalArguments(positional)
                )
            _skip(stream)
            if not stream.try_consume(TokenKind.COMMA):
                break
            _skip(stream)
        stream.consume(TokenKind.CLOSE_PAREN)
        return values

    def _parse_value(self, stream: TokenStream) -> ArgumentValue:
        kind: TokenKind = stream.current_kind
        text: str = stream.current_text
        match kind:
            case TokenKind.DOUBLE_QUOTED:
                stream.next()
                return text[1:-1].replace('\\"', '"')
            case TokenKind.SINGLE_QUOTED:
                stream.next()
                return text[1:-1].replace("\\'", "'")
            case TokenKind.INTEGER:
                stream.next()
                return _parse_int(text)
            case TokenKind.FLOAT:
                stream.next()
                return float(text)
            case TokenKind.OPEN_CURLY:
                return self._parse_collection(stream)
            case TokenKind.TAG:
                return self._parse_nested(stream, text[1:], stream.index)
            case TokenKind.IDENTIFIER:
                return self._parse_identifier_value(stream)
            case _:
                raise ParserError(
                    f"Unexpected {kind.value} {text!r} in annotation arguments",
                    actual=kind,
                    actual_text=text,
                    index=stream.index,
                )

    def _parse_identifier_value(self, stream: TokenStream) -> ArgumentValue:
        start: int = stream.index
        name: str = stream.consume(TokenKind.IDENTIFIER)
        if name.lower() in _KEYWORDS:
            return _KEYWORDS[name.lower()]
        if stream.is_current(TokenKind.DOUBLE_COLON):
            stream.next()
            constant: str = stream.current_text
            stream.next()
            return ConstantReference(f"{name}::{constant}")
        if stream.is_current(TokenKind.OPEN_PAREN) and not stream.is_preceded_by_whitespace():
            stream.seek(start)
            return self._parse_nested(stream, "", start)
        return ConstantReference(name)

    def _parse_nested(self, stream: TokenStream, name: str, start: int) -> AnnotationValue:
        # Name: an ``@Tag`` token and/or an adjacent (possibly namespaced) identifier.
        stream.next()
        if not name:
            name = stream.token_at(start).text
        elif stream.is_current(TokenKind.IDENTIFIER) and not stream.is_preceded_by_whitespace():
            name += stream.current_text
            stream.next()
        fqn: str = self._resolve_name(name) or name
        silent_key: str | None = self._silent_key_for(fqn)
        values: dict[str, ArgumentValue] = {}
        args_start: int = stream.index
        if stream.is_current(TokenKind.OPEN_PAREN):
            values = self._parse_arguments(stream, silent_key)
        raw: str = stream.text_between(args_start, stream.index).rstrip()
        return AnnotationValue(fqn=fqn, name=name, raw=raw, values=values, silent_key=silent_key)

    def _parse_collection(self, stream: TokenStream) -> ArgumentValue:
        stream.consume(TokenKind.OPEN_CURLY)
        _skip(stream)
        items: list[tuple[ArgumentValue, ArgumentValue]] = []
        keyed: bool = False
        while not stream.is_current(TokenKind.CLOSE_CURLY):
            key: ArgumentValue = len(items)
            if stream.is_current(
                TokenKind.IDENTIFIER,
                TokenKind.DOUBLE_QUOTED,
                TokenKind.SINGLE_QUOTED,
                TokenKind.INTEGER,
            ) and stream.peek_significant_kind() in _KEY_SEPARATORS:
                key = self._parse_key(stream)
                keyed = True
                _skip(stream)
                stream.next()
                _skip(stream)
            items.append((key, self._parse_value(stream)))
            _skip(stream)
            if not stream.try_consume(TokenKind.COMMA):
                break
            _skip(stream)
        stream.consume(TokenKind.CLOSE_CURLY)
        if keyed:
            return dict(items)
        return [value for _, value in items]

    @staticmethod
    def _parse_key(stream: TokenStream) -> ArgumentValue:
        text: str = stream.current_text
        kind: TokenKind = stream.current_kind
        stream.next()
        if kind in (TokenKind.DOUBLE_QUOTED, TokenKind.SINGLE_QUOTED):
            return text[1:-1]
        if kind == TokenKind.INTEGER:
            return _parse_int(text)
        return text


def _skip(stream: TokenStream) -> None:
    while stream.is_current(*_SKIPPABLE):
        stream.seek(stream.index + 1)


def _parse_int(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError:
        return int(text, 10)


def _key_collision(key: str, stream: TokenStream, index: int) -> ParserError:
    return ParserError(
        f"Argument {key!r} given both by name and by position",
        actual=stream.token_at(index).kind,
        actual_text=stream.token_at(index).text,
        index=index,
    )
