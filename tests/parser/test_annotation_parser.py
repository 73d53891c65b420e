# topmark:header:start
#
#   project      : DocMark
#   file         : test_annotation_parser.py
#   file_relpath : tests/parser/test_annotation_parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the nested annotation argument grammar."""

from __future__ import annotations

import pytest

from docmark.ast.values import AnnotationValue, ConstantReference, render_argument
from docmark.errors import ParserError
from docmark.parser.annotations import StaticAnnotationParser
from docmark.resolution.silent_keys import SilentKeyMap
from tests.conftest import parametrize

ALIASES: dict[str, str] = {"Foo": "App\\Foo", "Bar": "App\\Bar", "Route": "App\\Route"}


def make_parser(silent_keys: dict[str, str] | None = None) -> StaticAnnotationParser:
    """Return a parser resolving the names in `ALIASES`."""
    return StaticAnnotationParser(
        resolve_name=lambda name: ALIASES.get(name.lstrip("@")),
        silent_key_for=SilentKeyMap(silent_keys or {}).lookup,
    )


def parse(payload: str, silent_keys: dict[str, str] | None = None) -> AnnotationValue:
    """Parse ``payload`` as the arguments of ``@Foo``."""
    return make_parser(silent_keys).parse("App\\Foo", "Foo", payload)


def test_positional_argument_uses_value_key() -> None:
    """A positional argument is stored under ``value`` by default."""
    assert parse('("bar")').values == {"value": "bar"}


def test_named_argument() -> None:
    """A named argument keeps its key."""
    assert parse('(key="bar")').values == {"key": "bar"}


def test_silent_key_from_configuration() -> None:
    """A configured silent key receives the positional argument."""
    value: AnnotationValue = parse('("/home", name="home")', {"App\\Foo": "path"})
    assert value.values == {"path": "/home", "name": "home"}
    assert value.get_silent_value() == "/home"


def test_repeated_positional_arguments_accumulate() -> None:
    """Several positional arguments become a list under the positional key."""
    assert parse('("a", "b", "c")').values == {"value": ["a", "b", "c"]}


@parametrize(
    ("payload", "expected"),
    [
        ("(1)", 1),
        ("(0x10)", 16),
        ("(1.5)", 1.5),
        ("(true)", True),
        ("(FALSE)", False),
        ("(null)", None),
        ("('single')", "single"),
        ('("with \\"quote\\"")', 'with "quote"'),
        ("(Foo::BAR)", ConstantReference("Foo::BAR")),
        ("(SOME_CONSTANT)", ConstantReference("SOME_CONSTANT")),
        ('({"a", "b"})', ["a", "b"]),
        ('({"a": 1, b=2})', {"a": 1, "b": 2}),
    ],
)
def test_scalar_and_collection_values(payload: str, expected: object) -> None:
    """Argument values map to Python scalars, constants and collections."""
    assert parse(payload).values == {"value": expected}


def test_nested_annotations() -> None:
    """Nested annotations resolve their names and parse their own arguments."""
    value: AnnotationValue = parse('(inner=@Bar(x=1), list={@Bar, Bar("y")})')
    inner = value.values["inner"]
    assert isinstance(inner, AnnotationValue)
    assert inner.fqn == "App\\Bar"
    assert inner.values == {"x": 1}
    first, second = value.values["list"]
    assert first.values == {} and first.fqn == "App\\Bar"
    assert second.values == {"value": "y"}


def test_multiline_payload() -> None:
    """Line breaks inside the payload are ignored."""
    assert parse('(\n    a="x",\n    b={1, 2}\n)').values == {"a": "x", "b": [1, 2]}


def test_empty_payload() -> None:
    """An empty payload has no arguments and renders as nothing."""
    value: AnnotationValue = parse("")
    assert value.values == {}
    assert str(value) == ""


@parametrize("payload", ['("a") extra', '("a"', "(=)", '(a="b",,)'])
def test_malformed_payloads_raise(payload: str) -> None:
    """Malformed payloads raise `ParserError`."""
    with pytest.raises(ParserError):
        parse(payload)


def test_rendering() -> None:
    """Annotation values render back to annotation syntax."""
    value: AnnotationValue = parse('("a", key="q\\"uote", flags={1, 2}, opt=true, n=null)')
    assert str(value) == '("a", key="q\\"uote", flags={1, 2}, opt=true, n=null)'
    assert render_argument({"a": 1}) == '{"a": 1}'
    assert render_argument(ConstantReference("Foo::BAR")) == "Foo::BAR"


@parametrize(
    "payload",
    ['("a", "b", value="x", "c")', '("a", value="x")', '(value="x", "a")'],
)
def test_positional_and_named_key_collision_raises(payload: str) -> None:
    """The positional key cannot also be given by name."""
    with pytest.raises(ParserError, match="both by name and by position"):
        parse(payload)


def test_silent_key_collision_raises() -> None:
    """A configured silent key collides with a named argument of the same key."""
    with pytest.raises(ParserError):
        parse('("/home", path="/other")', {"App\\Foo": "path"})


def test_positional_collection_keeps_its_braces() -> None:
    """A single positional collection renders as a collection, not as spread arguments."""
    value: AnnotationValue = parse("({1, 2}, extra=1)")
    assert value.values == {"value": [1, 2], "extra": 1}
    value.values["extra"] = 2
    assert str(value) == "({1, 2}, extra=2)"


def test_repeated_positional_arguments_render_spread() -> None:
    """Repeated positional arguments render back as separate arguments."""
    value: AnnotationValue = parse('("a", "b", extra=1)')
    value.values["extra"] = 2
    assert str(value) == '("a", "b", extra=2)'
