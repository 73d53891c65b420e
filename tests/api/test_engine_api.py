# topmark:header:start
#
#   project      : DocMark
#   file         : test_engine_api.py
#   file_relpath : tests/api/test_engine_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module-level API helpers and engine construction."""

from __future__ import annotations

import pytest

from docmark import api
from docmark.api import DocblockEngine
from docmark.ast.values import EmptyValue, GenericValue
from docmark.errors import ParserError
from docmark.info import DocblockInfo
from docmark.parser.matchers import FlagTagMatcher
from docmark.resolution.names import NullNameResolver
from docmark.resolution.nodes import CurrentNodeProvider
from tests.conftest import make_engine


def test_default_engine_is_shared() -> None:
    """The module helpers reuse a single default engine."""
    assert api.default_engine() is api.default_engine()


def test_parse_and_print_helpers() -> None:
    """`parse` then `print_format_preserving` reproduces the input."""
    text: str = "/**\n * Summary.\n *\n * @var int $a\n */"
    info: DocblockInfo = api.parse(text)
    assert api.print_format_preserving(info) == text
    assert api.print_docblock(*info.as_tuple()) == text


def test_create_empty_helper() -> None:
    """An empty docblock prints nothing until children are added."""
    info: DocblockInfo = api.create_empty()
    assert api.print_format_preserving(info) == ""
    info.add_tag("api", EmptyValue())
    assert api.print_format_preserving(info) == "/**\n * @api\n */"


def test_parse_rejects_non_docblock() -> None:
    """Text that does not open with ``/**`` is an error."""
    with pytest.raises(ParserError):
        api.parse("// comment")


def test_engine_defaults_come_from_config() -> None:
    """Flag tags configure the default matcher."""
    engine: DocblockEngine = make_engine(flag_tags=["@todo"])
    assert len(engine.matchers) == 1
    assert isinstance(engine.matchers[0], FlagTagMatcher)
    value = engine.parse("/** @todo later */").tree.tags()[0].value
    assert isinstance(value, GenericValue)
    assert value.value == "later"


def test_engine_without_flags_has_no_matchers() -> None:
    """No flag tags means no default matcher."""
    assert make_engine(flag_tags=[]).matchers == ()


def test_custom_name_resolver_disables_annotations() -> None:
    """With the null resolver, annotation payloads stay generic."""
    engine = DocblockEngine(make_engine().config, name_resolver=NullNameResolver())
    tag = engine.parse('/** @ORM\\Column(type="string") */').tree.tags()[0]
    assert tag.name == "@ORM"
    assert isinstance(tag.value, GenericValue)


def test_node_provider_supplies_host() -> None:
    """`parse` without a host node falls back to the provider's current node."""
    provider = CurrentNodeProvider()
    engine = DocblockEngine(make_engine().config, node_provider=provider)
    host = object()
    provider.set(host)
    assert engine.parse("/** x */").host_node is host
    assert engine.parse("/** x */", host_node="explicit").host_node == "explicit"
