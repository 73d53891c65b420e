# topmark:header:start
#
#   project      : DocMark
#   file         : test_synthesis.py
#   file_relpath : tests/printer/test_synthesis.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for printing docblocks that were never parsed from text."""

from __future__ import annotations

from docmark.api import DocblockEngine
from docmark.ast.nodes import TextNode
from docmark.ast.types import ArrayType, IdentifierType, UnionType
from docmark.ast.values import AnnotationValue, EmptyValue, GenericValue, ParamValue, VarValue
from docmark.info import DocblockInfo
from tests.conftest import make_engine


def test_empty_synthetic_tree_prints_nothing(engine: DocblockEngine) -> None:
    """A synthetic tree without children has no text."""
    assert engine.print_format_preserving(engine.create_empty()) == ""


def test_single_generic_tag(engine: DocblockEngine) -> None:
    """One tag yields an opening marker, one continuation line and a closing marker."""
    info: DocblockInfo = engine.create_empty()
    info.add_tag("x", GenericValue("y"))
    assert engine.print_format_preserving(info) == "/**\n * @x y\n */"


def test_mixed_children() -> None:
    """Text, structural, empty and annotation children render in order."""
    engine: DocblockEngine = make_engine()
    info: DocblockInfo = engine.create_empty()
    info.add_child(TextNode("Summary."))
    info.add_child(TextNode(""))
    info.add_tag(
        "@param",
        ParamValue(
            UnionType((ArrayType(IdentifierType("int")), IdentifierType("null"))),
            "$ids",
            "The ids.",
            is_variadic=True,
        ),
    )
    info.add_tag("required", EmptyValue())
    column = AnnotationValue("Doctrine\\ORM\\Mapping\\Column", values={"length": 3})
    info.add_tag("ORM\\Column", column)
    assert engine.print_format_preserving(info) == (
        "/**\n"
        " * Summary.\n"
        " *\n"
        " * @param int[]|null ...$ids The ids.\n"
        " * @required\n"
        " * @ORM\\Column(length=3)\n"
        " */"
    )


def test_multiline_text_is_decorated(engine: DocblockEngine) -> None:
    """Each line of a multi-line text child gets its own decoration."""
    info: DocblockInfo = engine.create_empty()
    info.add_child(TextNode("first\n\nsecond"))
    assert engine.print_format_preserving(info) == "/**\n * first\n *\n * second\n */"


def test_single_line_form(engine: DocblockEngine) -> None:
    """A single-line tree collapses to ``/** ... */``."""
    info: DocblockInfo = engine.create_empty()
    info.add_tag("var", VarValue(IdentifierType("int"), "$a"))
    info.make_single_line()
    assert engine.print_format_preserving(info) == "/** @var int $a */"


def test_crlf_configuration() -> None:
    """The configured newline is used when there is no original text."""
    engine: DocblockEngine = make_engine(newline="\r\n")
    info: DocblockInfo = engine.create_empty()
    info.add_tag("x", GenericValue("y"))
    assert engine.print_format_preserving(info) == "/**\r\n * @x y\r\n */"


def test_parenthesised_generic_payload_has_no_separator(engine: DocblockEngine) -> None:
    """A generic payload opening with ``(`` is glued to the tag name."""
    info: DocblockInfo = engine.create_empty()
    info.add_tag("Unknown", GenericValue('(a="b")'))
    assert engine.print_format_preserving(info) == '/**\n * @Unknown(a="b")\n */'
