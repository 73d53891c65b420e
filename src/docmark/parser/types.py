# topmark:header:start
#
#   project      : DocMark
#   file         : types.py
#   file_relpath : src/docmark/parser/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type expression grammar.

Supported forms::

    int  \\Foo\\Bar  $this  ?int  int|string  A&B  int[]  (int|null)[]
    array<int, string>  array{a: int, b?: string}  callable(int, string): void
    'literal'  42  Foo::BAR

Generic, array-shape, callable and array-suffix syntax must follow the preceding
token without whitespace; otherwise the type ends there and the rest belongs to
the description.
"""

from __future__ import annotations

from typing import Final

from docmark.ast.types import (
    ArrayShapeItem,
    ArrayShapeType,
    ArrayType,
    CallableParameter,
    CallableType,
    ConstType,
    GenericType,
    IdentifierType,
    IntersectionType,
    NullableType,
    ThisType,
    TypeNode,
    UnionType,
)
from docmark.errors import ParserError
from docmark.lexer.stream import TokenStream
from docmark.lexer.tokens import TokenKind

_CALLABLE_NAMES: Final[frozenset[str]] = frozenset({"callable", "closure", "\\closure"})
_SHAPE_NAMES: Final[frozenset[str]] = frozenset(
    {"array", "list", "non-empty-array", "non-empty-list", "object"}
)
_VARIANCE: Final[frozenset[str]] = frozenset({"covariant", "contravariant"})
_CONST_KINDS: Final[tuple[TokenKind, ...]] = (
    TokenKind.SINGLE_QUOTED,
    TokenKind.DOUBLE_QUOTED,
    TokenKind.INTEGER,
    TokenKind.FLOAT,
)


class TypeParser:
    """Recursive-descent parser for type expressions on a `TokenStream`."""

    def parse(self, stream: TokenStream) -> TypeNode:
        """Parse a full type expression (nullable, union or intersection included).

        Args:
            stream (TokenStream): Stream positioned on the first token of the type.

        Returns:
            TypeNode: The parsed type.

        Raises:
            ParserError: If no type starts at the cursor.
        """
        if stream.try_consume(TokenKind.NULLABLE):
            return NullableType(self._parse_atomic(stream))

        first: TypeNode = self._parse_atomic(stream)
        if stream.is_current(TokenKind.UNION):
            members: list[TypeNode] = [first]
            while stream.try_consume(TokenKind.UNION):
                members.append(self._parse_atomic(stream))
            return UnionType(tuple(members))
        if stream.is_current(TokenKind.INTERSECTION) and self._is_intersection(stream):
            members = [first]
            while stream.is_current(TokenKind.INTERSECTION) and self._is_intersection(stream):
                stream.next()
                members.append(self._parse_atomic(stream))
            return IntersectionType(tuple(members))
        return first

    @staticmethod
    def _is_intersection(stream: TokenStream) -> bool:
        # ``int &$x`` and ``int &...$x`` are by-reference parameters, not intersections.
        return stream.peek_significant_kind() not in (TokenKind.VARIABLE, TokenKind.VARIADIC)

    def _parse_atomic(self, stream: TokenStream) -> TypeNode:
        node: TypeNode
        if stream.try_consume(TokenKind.OPEN_PAREN):
            _skip_eol(stream)
            node = self.parse(stream)
            _skip_eol(stream)
            stream.consume(TokenKind.CLOSE_PAREN)
        elif stream.is_current(TokenKind.THIS_VARIABLE):
            stream.next()
            node = ThisType()
        elif stream.is_current(*_CONST_KINDS):
            node = ConstType(stream.current_text)
            stream.next()
        elif stream.is_current(TokenKind.IDENTIFIER):
            node = self._parse_named(stream)
        else:
            raise ParserError(
                f"Expected a type, found {stream.current_kind.value} {stream.current_text!r}",
                expected=TokenKind.IDENTIFIER,
                actual=stream.current_kind,
                actual_text=stream.current_text,
                index=stream.index,
            )
        return self._parse_array_suffix(stream, node)

    def _parse_named(self, stream: TokenStream) -> TypeNode:
        name: str = stream.consume(TokenKind.IDENTIFIER)
        identifier: IdentifierType = IdentifierType(name)
        adjacent: bool = not stream.is_preceded_by_whitespace()

        if stream.is_current(TokenKind.DOUBLE_COLON) and adjacent:
            stream.next()
            if not stream.is_current(TokenKind.IDENTIFIER, TokenKind.OTHER):
                raise ParserError(
                    "Expected a constant name after '::'",
                    expected=TokenKind.IDENTIFIER,
                    actual=stream.current_kind,
                    actual_text=stream.current_text,
                    index=stream.index,
                )
            constant: str = stream.current_text
            stream.next()
            return ConstType(f"{name}::{constant}")
        if stream.is_current(TokenKind.OPEN_ANGLE) and adjacent:
            return self._parse_generic(stream, identifier)
        if stream.is_current(TokenKind.OPEN_PAREN) and adjacent and name.lower() in _CALLABLE_NAMES:
            return self._parse_callable(stream, identifier)
        if stream.is_current(TokenKind.OPEN_CURLY) and adjacent and name.lower() in _SHAPE_NAMES:
            return self._parse_shape(stream, name)
        return identifier

    def _parse_array_suffix(self, stream: TokenStream, node: TypeNode) -> TypeNode:
        while (
            stream.is_current(TokenKind.OPEN_SQUARE)
            and not stream.is_preceded_by_whitespace()
            and stream.token_at(stream.index + 1).kind == TokenKind.CLOSE_SQUARE
        ):
            stream.next()
            stream.next()
            node = ArrayType(node)
        return node

    def _parse_generic(self, stream: TokenStream, base: IdentifierType) -> GenericType:
        stream.consume(TokenKind.OPEN_ANGLE)
        parameters: list[TypeNode] = []
        while True:
            _skip_eol(stream)
            if stream.is_current(TokenKind.IDENTIFIER) and stream.current_text.lower() in _VARIANCE:
                stream.next()
            parameters.append(self.parse(stream))
            _skip_eol(stream)
            if not stream.try_consume(TokenKind.COMMA):
                break
            _skip_eol(stream)
            if stream.is_current(TokenKind.CLOSE_ANGLE):
                break
        stream.consume(TokenKind.CLOSE_ANGLE)
        return GenericType(base, tuple(parameters))

    def _parse_callable(self, stream: TokenStream, identifier: IdentifierType) -> CallableType:
        stream.consume(TokenKind.OPEN_PAREN)
        parameters: list[CallableParameter] = []
        _skip_eol(stream)
        while not stream.is_current(TokenKind.CLOSE_PAREN):
            parameters.append(self._parse_callable_parameter(stream))
            _skip_eol(stream)
            if not stream.try_consume(TokenKind.COMMA):
                break
            _skip_eol(stream)
        stream.consume(TokenKind.CLOSE_PAREN)
        stream.consume(TokenKind.COLON)
        return_type: TypeNode
        if stream.try_consume(TokenKind.NULLABLE):
            return_type = NullableType(self._parse_atomic(stream))
        else:
            return_type = self._parse_atomic(stream)
        return CallableType(identifier, tuple(parameters), return_type)

    def _parse_callable_parameter(self, stream: TokenStream) -> CallableParameter:
        param_type: TypeNode = self.parse(stream)
        is_reference: bool = stream.try_consume(TokenKind.INTERSECTION)
        is_variadic: bool = stream.try_consume(TokenKind.VARIADIC)
        name: str = ""
        if stream.is_current(TokenKind.VARIABLE):
            name = stream.consume(TokenKind.VARIABLE)
        is_optional: bool = stream.try_consume(TokenKind.EQUAL)
        return CallableParameter(param_type, is_reference, is_variadic, name, is_optional)

    def _parse_shape(self, stream: TokenStream, kind: str) -> ArrayShapeType:
        stream.consume(TokenKind.OPEN_CURLY)
        items: list[ArrayShapeItem] = []
        _skip_eol(stream)
        while not stream.is_current(TokenKind.CLOSE_CURLY):
            if stream.try_consume(TokenKind.VARIADIC):
                _skip_eol(stream)
                break
            items.append(self._parse_shape_item(stream))
            _skip_eol(stream)
            if not stream.try_consume(TokenKind.COMMA):
                break
            _skip_eol(stream)
        stream.consume(TokenKind.CLOSE_CURLY)
        return ArrayShapeType(kind, tuple(items))

    def _parse_shape_item(self, stream: TokenStream) -> ArrayShapeItem:
        if stream.is_current(TokenKind.IDENTIFIER, TokenKind.INTEGER, *_CONST_KINDS[:2]):
            stream.push_save_point()
            key: str = stream.current_text
            stream.next()
            optional: bool = stream.try_consume(TokenKind.NULLABLE)
            if stream.try_consume(TokenKind.COLON):
                stream.drop_save_point()
                return ArrayShapeItem(key, optional, self.parse(stream))
            stream.rollback()
        return ArrayShapeItem(None, False, self.parse(stream))


def _skip_eol(stream: TokenStream) -> None:
    while stream.is_current(TokenKind.EOL):
        stream.next()
