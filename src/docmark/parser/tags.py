# topmark:header:start
#
#   project      : DocMark
#   file         : tags.py
#   file_relpath : src/docmark/parser/tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Grammars of the structural tags (param, return, var, throws).

Each grammar parses the payload that follows the tag name and returns the value
together with the verbatim description text. Descriptions run to the end of the
line and are stored whitespace-normalized on the value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from docmark.ast.values import ParamValue, ReturnValue, ThrowsValue, VarValue
from docmark.errors import ParserError
from docmark.lexer.tokens import TokenKind
from docmark.parser.types import TypeParser

if TYPE_CHECKING:
    from docmark.ast.types import TypeNode
    from docmark.ast.values import ValueNode
    from docmark.lexer.stream import TokenStream


class StructuralKind(Enum):
    """Built-in structural tag grammars."""

    PARAM = "param"
    RETURN = "return"
    VAR = "var"
    THROWS = "throws"


@dataclass(frozen=True)
class StructuralResult:
    """Outcome of a structural grammar.

    Attributes:
        value (ValueNode): The structured value.
        raw_description (str): Description exactly as written (right-trimmed).
    """

    value: ValueNode
    raw_description: str


def normalize_description(text: str) -> str:
    """Collapse whitespace runs of a description into single spaces."""
    return " ".join(text.split())


class StructuralTagGrammar:
    """Dispatch a structural tag payload to its grammar."""

    def __init__(self, type_parser: TypeParser | None = None) -> None:
        self._types: TypeParser = type_parser or TypeParser()

    def parse(self, kind: StructuralKind, stream: TokenStream) -> StructuralResult:
        """Parse the payload of a structural tag.

        Args:
            kind (StructuralKind): Which grammar to apply.
            stream (TokenStream): Stream positioned right after the tag name.

        Returns:
            StructuralResult: The value and its verbatim description.

        Raises:
            ParserError: If the payload does not match the grammar.
        """
        match kind:
            case StructuralKind.PARAM:
                return self._parse_param(stream)
            case StructuralKind.VAR:
                return self._parse_var(stream)
            case StructuralKind.RETURN:
                type_node, raw = self._parse_type_and_description(stream)
                return StructuralResult(ReturnValue(type_node, normalize_description(raw)), raw)
            case StructuralKind.THROWS:
                type_node, raw = self._parse_type_and_description(stream)
                return StructuralResult(ThrowsValue(type_node, normalize_description(raw)), raw)

    def _parse_param(self, stream: TokenStream) -> StructuralResult:
        type_node: TypeNode = self._types.parse(stream)
        is_reference: bool = stream.try_consume(TokenKind.INTERSECTION)
        is_variadic: bool = stream.try_consume(TokenKind.VARIADIC)
        name: str = stream.consume(TokenKind.VARIABLE)
        raw: str = _parse_description(stream)
        value = ParamValue(
            type=type_node,
            parameter_name=name,
            description=normalize_description(raw),
            is_variadic=is_variadic,
            is_reference=is_reference,
        )
        return StructuralResult(value, raw)

    def _parse_var(self, stream: TokenStream) -> StructuralResult:
        type_node: TypeNode = self._types.parse(stream)
        name: str = ""
        if stream.is_current(TokenKind.VARIABLE, TokenKind.THIS_VARIABLE):
            name = stream.current_text
            stream.next()
        raw: str = _parse_description(stream)
        return StructuralResult(VarValue(type_node, name, normalize_description(raw)), raw)

    def _parse_type_and_description(self, stream: TokenStream) -> tuple[TypeNode, str]:
        type_node: TypeNode = self._types.parse(stream)
        if stream.is_current(TokenKind.UNION, TokenKind.INTERSECTION):
            raise ParserError(
                f"Description cannot start with {stream.current_text!r}",
                actual=stream.current_kind,
                actual_text=stream.current_text,
                index=stream.index,
            )
        return type_node, _parse_description(stream)


def _parse_description(stream: TokenStream) -> str:
    if stream.is_current(TokenKind.EOL, TokenKind.CLOSE_DOCBLOCK, TokenKind.END):
        return ""
    if not stream.is_preceded_by_whitespace():
        raise ParserError(
            f"Expected whitespace before description, found {stream.current_text!r}",
            actual=stream.current_kind,
            actual_text=stream.current_text,
            index=stream.index,
        )
    return stream.join_until(TokenKind.EOL, TokenKind.CLOSE_DOCBLOCK).rstrip(" \t")
