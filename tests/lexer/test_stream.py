# topmark:header:start
#
#   project      : DocMark
#   file         : test_stream.py
#   file_relpath : tests/lexer/test_stream.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the token stream cursor."""

from __future__ import annotations

import pytest

from docmark.errors import ParserError
from docmark.lexer import Lexer, TokenKind, TokenStream


def make_stream(text: str) -> TokenStream:
    """Return a stream over the tokens of ``text``."""
    return TokenStream(Lexer().tokenize(text))


def test_next_skips_one_whitespace_token() -> None:
    """Advancing should also step over one following horizontal whitespace token."""
    stream: TokenStream = make_stream("/** @var int */")
    stream.next()
    assert stream.current_kind == TokenKind.TAG
    assert stream.is_preceded_by_whitespace()


def test_consume_wrong_kind_raises() -> None:
    """Consuming a token of another kind should raise `ParserError` with context."""
    stream: TokenStream = make_stream("int $a")
    with pytest.raises(ParserError) as excinfo:
        stream.consume(TokenKind.VARIABLE)
    assert excinfo.value.expected == TokenKind.VARIABLE
    assert excinfo.value.actual == TokenKind.IDENTIFIER
    assert excinfo.value.index == 0


def test_try_consume() -> None:
    """`try_consume` should only advance on a matching token."""
    stream: TokenStream = make_stream("int $a")
    assert not stream.try_consume(TokenKind.VARIABLE)
    assert stream.index == 0
    assert stream.try_consume(TokenKind.IDENTIFIER)
    assert stream.current_text == "$a"


def test_join_until_is_raw() -> None:
    """`join_until` keeps whitespace and leaves the cursor on the stop token."""
    stream: TokenStream = make_stream("a  b\n * c")
    assert stream.join_until(TokenKind.EOL) == "a  b"
    assert stream.current_kind == TokenKind.EOL


def test_save_points_roll_back() -> None:
    """A rollback should restore the index saved by the matching push."""
    stream: TokenStream = make_stream("a b c")
    stream.push_save_point()
    stream.next()
    stream.next()
    stream.rollback()
    assert stream.index == 0


def test_clone_is_independent() -> None:
    """Moving a clone should not move the original cursor."""
    stream: TokenStream = make_stream("a b c")
    twin: TokenStream = stream.clone()
    twin.next()
    assert stream.index == 0
    assert twin.index == 2


def test_offsets_and_slices() -> None:
    """Character offsets and text slices should follow the original text."""
    text: str = "/** @var int */"
    stream: TokenStream = make_stream(text)
    assert stream.offset_of(2) == text.index("@var")
    assert stream.text_between(2, 5) == "@var int"
    assert stream.full_text() == text
    assert stream.token_at(999).kind == TokenKind.END


def test_counts_exclude_end_sentinel() -> None:
    """`token_count` and `len()` should not count the END sentinel."""
    stream: TokenStream = make_stream("a b")
    assert stream.token_count == 3
    assert len(stream) == 3
    assert TokenStream([]).token_count == 0


def test_peek_significant_kind() -> None:
    """Peeking should skip whitespace and line breaks after the current token."""
    stream: TokenStream = make_stream("key \n * = 1")
    assert stream.peek_significant_kind() == TokenKind.EQUAL
