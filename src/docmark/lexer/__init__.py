# topmark:header:start
#
#   project      : DocMark
#   file         : __init__.py
#   file_relpath : src/docmark/lexer/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tokenization of docblock text into positioned, immutable tokens."""

from __future__ import annotations

from docmark.lexer.lexer import Lexer
from docmark.lexer.stream import TokenStream
from docmark.lexer.tokens import Token, TokenKind

__all__ = ["Lexer", "Token", "TokenKind", "TokenStream"]
