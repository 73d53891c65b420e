# topmark:header:start
#
#   project      : DocMark
#   file         : test_format_preserving.py
#   file_relpath : tests/printer/test_format_preserving.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for format-preserving printing of edited docblocks."""

from __future__ import annotations

from docmark.api import DocblockEngine
from docmark.ast.nodes import TagNode, TextNode
from docmark.ast.types import IdentifierType
from docmark.ast.values import (
    AnnotationValue,
    EmptyValue,
    GenericValue,
    ParamValue,
    ReturnValue,
    VarValue,
)
from docmark.info import DocblockInfo
from tests.conftest import parametrize

ABC: str = "/**\n * @a\n * @b\n * @c\n */"


def reprint(engine: DocblockEngine, text: str) -> str:
    """Parse and print ``text`` without edits."""
    return engine.print_format_preserving(engine.parse(text))


@parametrize(
    "text",
    [
        ABC,
        "/** @var int $a */",
        "/**\n * Summary.\n *\n * @param  int   $a   Spaced   out.\n * @return void\n */",
        "/**\r\n * CRLF line.\r\n * @return int\r\n */",
        "/**\n\t * Tab indented.\n\t */",
        "/**\n * @Foo(\n *     a=\"x\",\n *     b={1, 2}\n * )\n */",
        "/**\n * No closing marker",
        "/**\n * @param int no variable\n */",
        "/**\n * trailing spaces   \n */\n",
    ],
)
def test_round_trip_is_byte_identical(engine: DocblockEngine, text: str) -> None:
    """An unmodified docblock prints back exactly."""
    if "*/" not in text:
        # A missing closing marker is added on output.
        assert reprint(engine, text) == text + " */"
    else:
        assert reprint(engine, text) == text


def test_reprint_is_idempotent(engine: DocblockEngine) -> None:
    """Printing the same edited tree twice yields the same text."""
    info: DocblockInfo = engine.parse(ABC)
    info.remove_by_name("b")
    info.add_tag("d", GenericValue("new"))
    first: str = engine.print_format_preserving(info)
    assert engine.print_format_preserving(info) == first


def test_remove_middle_tag(engine: DocblockEngine) -> None:
    """Removing ``@b`` drops exactly its line."""
    info: DocblockInfo = engine.parse(ABC)
    assert info.remove_by_name("@b") == 1
    assert engine.print_format_preserving(info) == "/**\n * @a\n * @c\n */"


def test_remove_adjacent_tags(engine: DocblockEngine) -> None:
    """Adjacent removals do not overlap."""
    info: DocblockInfo = engine.parse(ABC)
    info.remove_by_name("a")
    info.remove_by_name("b")
    assert engine.print_format_preserving(info) == "/**\n * @c\n */"


def test_remove_first_and_last_tags(engine: DocblockEngine) -> None:
    """Removing the edges keeps the middle line and the closing marker."""
    info: DocblockInfo = engine.parse(ABC)
    info.remove_by_name("a")
    info.remove_by_name("c")
    assert engine.print_format_preserving(info) == "/**\n * @b\n */"


def test_remove_keeps_crlf(engine: DocblockEngine) -> None:
    """Removal keeps the original line endings."""
    info: DocblockInfo = engine.parse("/**\r\n * @a\r\n * @b\r\n */")
    info.remove_by_name("a")
    assert engine.print_format_preserving(info) == "/**\r\n * @b\r\n */"


def test_remove_tag_before_closing_marker_on_same_line(engine: DocblockEngine) -> None:
    """A closing marker sharing the removed tag's line stays in place."""
    info: DocblockInfo = engine.parse("/**\n * @a\n * @b */")
    info.remove_by_name("b")
    assert engine.print_format_preserving(info) == "/**\n * @a */"


def test_removing_every_tag_prints_nothing(engine: DocblockEngine) -> None:
    """A tree left with no meaningful child prints as the empty string."""
    info: DocblockInfo = engine.parse("/**\n * @a\n *\n */")
    info.remove_by_name("a")
    assert info.is_empty()
    assert engine.print_format_preserving(info) == ""


def test_var_edit_is_local(engine: DocblockEngine) -> None:
    """Changing the type of ``@var`` rewrites only that payload."""
    info: DocblockInfo = engine.parse("/** @var int $a */")
    tag: TagNode = info.tree.tags()[0]
    info.replace_value(tag, VarValue(IdentifierType("string"), "$a"))
    assert engine.print_format_preserving(info) == "/** @var string $a */"


def test_edit_keeps_tag_separator(engine: DocblockEngine) -> None:
    """The whitespace between tag name and payload survives an edit."""
    info: DocblockInfo = engine.parse("/**\n * @return\tint\n * @see   Foo::bar()\n */")
    ret, see = info.tree.tags()
    info.replace_value(ret, ReturnValue(IdentifierType("string")))
    info.replace_value(see, GenericValue("Baz::qux()"))
    assert engine.print_format_preserving(info) == (
        "/**\n * @return\tstring\n * @see   Baz::qux()\n */"
    )


def test_edit_restores_original_description(engine: DocblockEngine) -> None:
    """An unchanged description keeps its original spacing."""
    info: DocblockInfo = engine.parse("/**\n * @param int $a Two  spaces.\n */")
    tag: TagNode = info.tree.tags()[0]
    assert tag.original_description == "Two  spaces."
    info.replace_value(tag, ParamValue(IdentifierType("string"), "$a", "Two spaces."))
    assert engine.print_format_preserving(info) == (
        "/**\n * @param string $a Two  spaces.\n */"
    )


def test_edit_with_new_description(engine: DocblockEngine) -> None:
    """A changed description is printed from the model."""
    info: DocblockInfo = engine.parse("/**\n * @param int $a Two  spaces.\n */")
    tag: TagNode = info.tree.tags()[0]
    info.replace_value(tag, ParamValue(IdentifierType("int"), "$a", "One."))
    assert tag.original_description is None
    assert engine.print_format_preserving(info) == "/**\n * @param int $a One.\n */"


def test_annotation_edit_keeps_adjacent_parenthesis(engine: DocblockEngine) -> None:
    """An annotation payload stays glued to its name."""
    info: DocblockInfo = engine.parse("/**\n * @Foo(a=1)\n */")
    value = info.tree.tags()[0].value
    assert isinstance(value, AnnotationValue)
    value.values["a"] = 2
    assert info.has_changed()
    assert engine.print_format_preserving(info) == "/**\n * @Foo(a=2)\n */"


def test_add_tag_at_end(engine: DocblockEngine) -> None:
    """A new tag gets its own decorated line before the closing marker."""
    info: DocblockInfo = engine.parse("/**\n * Summary.\n */")
    info.add_tag("return", ReturnValue(IdentifierType("void")))
    assert engine.print_format_preserving(info) == "/**\n * Summary.\n * @return void\n */"


def test_add_tag_to_inline_docblock(engine: DocblockEngine) -> None:
    """Adding to a one-line docblock moves the closing marker to its own line."""
    info: DocblockInfo = engine.parse("/** Summary. */")
    info.add_tag("api", EmptyValue())
    assert engine.print_format_preserving(info) == "/** Summary.\n * @api\n */"


def test_insert_tag_first(engine: DocblockEngine) -> None:
    """A child inserted first is printed right after the opening marker."""
    info: DocblockInfo = engine.parse("/**\n * Summary.\n */")
    info.insert_child(0, TagNode("@api", EmptyValue()))
    assert engine.print_format_preserving(info) == "/**\n * @api\n * Summary.\n */"


def test_insert_tag_first_in_inline_docblock(engine: DocblockEngine) -> None:
    """Inserting before inline text splits the docblock over several lines."""
    info: DocblockInfo = engine.parse("/** Summary. */")
    info.insert_child(0, TagNode("@api", EmptyValue()))
    assert engine.print_format_preserving(info) == "/**\n * @api\n * Summary.\n */"


def test_added_tag_follows_indentation_and_newline(engine: DocblockEngine) -> None:
    """New lines reuse the original decoration and line ending."""
    info: DocblockInfo = engine.parse("/**\r\n     * @a\r\n     */")
    info.add_tag("b", EmptyValue())
    assert engine.print_format_preserving(info) == "/**\r\n     * @a\r\n     * @b\r\n     */"


def test_replace_child_in_place(engine: DocblockEngine) -> None:
    """A replacement child is synthesized where the old one stood."""
    info: DocblockInfo = engine.parse(ABC)
    old = info.tree.children[1]
    info.replace_child(old, TextNode("Replaced.", old.position))
    assert engine.print_format_preserving(info) == "/**\n * @a\n * Replaced.\n * @c\n */"


def test_print_new_ignores_original_layout(engine: DocblockEngine) -> None:
    """`print_new` renders from the model only."""
    info: DocblockInfo = engine.parse("/**\n *   @a   x\n */")
    assert engine.print_new(info) == "/**\n * @a x\n */"


def test_reversed_children_are_not_duplicated(engine: DocblockEngine) -> None:
    """Children moved ahead of their original place are printed once each."""
    info: DocblockInfo = engine.parse(ABC)
    a, b, c = info.tree.children
    info.tree.children = [c, b, a]
    assert engine.print_format_preserving(info) == "/**\n * @c\n * @b\n * @a\n */"


def test_move_first_child_to_the_end(engine: DocblockEngine) -> None:
    """A child removed and appended again leaves its old line."""
    info: DocblockInfo = engine.parse(ABC)
    info.add_child(info.remove_at(0))
    assert engine.print_format_preserving(info) == "/**\n * @b\n * @c\n * @a\n */"
