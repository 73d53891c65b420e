# topmark:header:start
#
#   project      : DocMark
#   file         : stream.py
#   file_relpath : src/docmark/lexer/stream.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Index-based cursor over an immutable token table.

`TokenStream` is the only way grammars move through tokens. The parser reads the
current index and the raw token table directly (for position ranges and verbatim
text) instead of reaching into a base parser's internals. The printer never moves
a stream: it only reads tokens by index.

Cursor semantics:
    - Moving past a token also skips one following ``HORIZONTAL_WS`` token, so
      grammars never see inter-token spaces.
    - The cursor never moves beyond the trailing ``END`` token.
"""

from __future__ import annotations

from itertools import accumulate
from typing import TYPE_CHECKING

from docmark.errors import ParserError
from docmark.lexer.tokens import Token, TokenKind

if TYPE_CHECKING:
    from collections.abc import Sequence


_WHITESPACE_KINDS: tuple[TokenKind, ...] = (TokenKind.HORIZONTAL_WS, TokenKind.EOL)


class TokenStream:
    """Cursor over a tuple of tokens terminated by an ``END`` token.

    Args:
        tokens (Sequence[Token]): Tokens as produced by `Lexer.tokenize`. A missing
            ``END`` sentinel is appended.
        index (int): Initial cursor position.
    """

    def __init__(self, tokens: Sequence[Token], index: int = 0) -> None:
        table: list[Token] = list(tokens)
        if not table or table[-1].kind != TokenKind.END:
            table.append(Token("", TokenKind.END, len(table)))
        self._tokens: tuple[Token, ...] = tuple(table)
        self._offsets: tuple[int, ...] = tuple(
            accumulate((len(t.text) for t in self._tokens), initial=0)
        )
        self._index: int = min(max(index, 0), len(self._tokens) - 1)
        self._save_points: list[int] = []

    # ---- introspection -------------------------------------------------------------------

    @property
    def tokens(self) -> tuple[Token, ...]:
        """The full token table, ``END`` sentinel included."""
        return self._tokens

    @property
    def index(self) -> int:
        """Index of the current token."""
        return self._index

    @property
    def token_count(self) -> int:
        """Number of real tokens (the ``END`` sentinel is not counted)."""
        return len(self._tokens) - 1

    @property
    def current(self) -> Token:
        """The token under the cursor."""
        return self._tokens[self._index]

    @property
    def current_kind(self) -> TokenKind:
        """Kind of the token under the cursor."""
        return self._tokens[self._index].kind

    @property
    def current_text(self) -> str:
        """Text of the token under the cursor."""
        return self._tokens[self._index].text

    def at_end(self) -> bool:
        """Return True when the cursor sits on the ``END`` sentinel."""
        return self.current_kind == TokenKind.END

    def is_current(self, *kinds: TokenKind) -> bool:
        """Return True if the current token is of one of ``kinds``."""
        return self.current_kind in kinds

    def is_preceded_by_whitespace(self) -> bool:
        """Return True if the token before the cursor is whitespace or a line break."""
        return self._index > 0 and self._tokens[self._index - 1].kind in _WHITESPACE_KINDS

    def peek_significant_kind(self) -> TokenKind:
        """Return the kind of the next non-whitespace token after the current one."""
        i: int = self._index + 1
        while i < len(self._tokens) and self._tokens[i].kind in _WHITESPACE_KINDS:
            i += 1
        return self._tokens[min(i, len(self._tokens) - 1)].kind

    # ---- movement ------------------------------------------------------------------------

    def next(self) -> None:
        """Move past the current token and one following horizontal whitespace token."""
        if self.at_end():
            return
        self._index += 1
        if self.current_kind == TokenKind.HORIZONTAL_WS:
            self._index += 1

    def consume(self, kind: TokenKind) -> str:
        """Consume a token of the given kind and return its text.

        Args:
            kind (TokenKind): The required kind.

        Returns:
            str: Text of the consumed token.

        Raises:
            ParserError: If the current token is of another kind.
        """
        if self.current_kind != kind:
            raise ParserError(
                f"Expected {kind.value}, found {self.current_kind.value} {self.current_text!r}",
                expected=kind,
                actual=self.current_kind,
                actual_text=self.current_text,
                index=self._index,
            )
        text: str = self.current_text
        self.next()
        return text

    def try_consume(self, kind: TokenKind) -> bool:
        """Consume the current token if it is of ``kind``; return whether it was."""
        if self.current_kind != kind:
            return False
        self.next()
        return True

    def skip_horizontal_whitespace(self) -> None:
        """Move past horizontal whitespace under the cursor, if any."""
        while self.current_kind == TokenKind.HORIZONTAL_WS:
            self._index += 1

    def join_until(self, *kinds: TokenKind) -> str:
        """Collect raw token text up to (not including) the first token of ``kinds``.

        Whitespace tokens are included verbatim. The cursor is left on the stopping
        token (or on ``END``).
        """
        parts: list[str] = []
        while not self.at_end() and self.current_kind not in kinds:
            parts.append(self.current_text)
            self._index += 1
        return "".join(parts)

    def seek(self, index: int) -> None:
        """Place the cursor on ``index`` (clamped to the token table)."""
        self._index = min(max(index, 0), len(self._tokens) - 1)

    # ---- save points ---------------------------------------------------------------------

    def push_save_point(self) -> None:
        """Remember the current index so that a failed grammar can roll back."""
        self._save_points.append(self._index)

    def drop_save_point(self) -> None:
        """Forget the most recent save point after a successful grammar."""
        self._save_points.pop()

    def rollback(self) -> None:
        """Return to (and forget) the most recent save point."""
        self._index = self._save_points.pop()

    def clone(self) -> TokenStream:
        """Return an independent cursor over the same token table."""
        twin: TokenStream = TokenStream.__new__(TokenStream)
        twin._tokens = self._tokens
        twin._offsets = self._offsets
        twin._index = self._index
        twin._save_points = list(self._save_points)
        return twin

    # ---- raw access ----------------------------------------------------------------------

    def token_at(self, index: int) -> Token:
        """Return the token at ``index``; out-of-range indexes yield the ``END`` sentinel."""
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        return self._tokens[-1]

    def text_between(self, start: int, end: int) -> str:
        """Return the concatenated text of tokens in ``[start, end)``."""
        start = max(start, 0)
        end = min(end, len(self._tokens))
        if start >= end:
            return ""
        return "".join(t.text for t in self._tokens[start:end])

    def offset_of(self, index: int) -> int:
        """Return the character offset of token ``index`` in the original text."""
        index = min(max(index, 0), len(self._tokens) - 1)
        return self._offsets[index]

    def remaining_text(self) -> str:
        """Return the raw text from the cursor to the end of input."""
        return self.text_between(self._index, len(self._tokens))

    def full_text(self) -> str:
        """Return the original input text."""
        return self.text_between(0, len(self._tokens))

    def __len__(self) -> int:
        return self.token_count

    def __repr__(self) -> str:
        return f"TokenStream(index={self._index}, token_count={self.token_count})"
