# topmark:header:start
#
#   project      : DocMark
#   file         : __init__.py
#   file_relpath : src/docmark/parser/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Docblock, type, structural-tag and nested-annotation grammars."""

from __future__ import annotations

from docmark.parser.docblock import DocblockParser, ParseResult
from docmark.parser.matchers import FlagTagMatcher, TagMatcher
from docmark.parser.session import ParseSession
from docmark.parser.tags import StructuralKind
from docmark.parser.values import StructuredValueResolver

__all__ = [
    "DocblockParser",
    "FlagTagMatcher",
    "ParseResult",
    "ParseSession",
    "StructuralKind",
    "StructuredValueResolver",
    "TagMatcher",
]
