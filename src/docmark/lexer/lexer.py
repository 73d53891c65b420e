# topmark:header:start
#
#   project      : DocMark
#   file         : lexer.py
#   file_relpath : src/docmark/lexer/lexer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Regex-driven docblock lexer.

The lexer is lossless: concatenating the text of every token it returns yields the
input exactly. Any character that no rule claims becomes a one-character ``OTHER``
token rather than an error, so arbitrary text can always be tokenized.

Alternatives are tried in order at each position; the first match wins. Keep the
rule order stable: ``EOL`` must precede ``HORIZONTAL_WS`` handling of the next line,
``CLOSE_DOCBLOCK`` must precede ``OTHER``, and ``THIS_VARIABLE`` must precede
``VARIABLE``.
"""

from __future__ import annotations

import re
from typing import Final

from docmark.config.logging import DocmarkLogger, get_logger
from docmark.lexer.tokens import Token, TokenKind

logger: DocmarkLogger = get_logger(__name__)

_IDENT_START: Final[str] = r"a-z_\x80-\uffff"
_IDENT_BODY: Final[str] = r"0-9a-z_\x80-\uffff"

_RULES: Final[tuple[tuple[TokenKind, str], ...]] = (
    (TokenKind.EOL, r"\r?\n[\x09\x20]*(?:\*(?!/))?"),
    (TokenKind.HORIZONTAL_WS, r"[\x09\x20]+"),
    (TokenKind.OPEN_DOCBLOCK, r"/\*\*(?=\s)"),
    (TokenKind.CLOSE_DOCBLOCK, r"\*/"),
    (TokenKind.TAG, r"@[a-z_][a-z0-9_-]*"),
    (TokenKind.THIS_VARIABLE, rf"\$this(?![{_IDENT_BODY}])"),
    (TokenKind.VARIABLE, rf"\$[{_IDENT_START}][{_IDENT_BODY}]*"),
    (TokenKind.VARIADIC, r"\.\.\."),
    (TokenKind.DOUBLE_COLON, r"::"),
    (TokenKind.DOUBLE_ARROW, r"=>"),
    (TokenKind.FLOAT, r"-?(?:[0-9]+\.[0-9]*|\.[0-9]+)(?:e-?[0-9]+)?|-?[0-9]+e-?[0-9]+"),
    (TokenKind.INTEGER, r"-?(?:0b[01]+|0o[0-7]+|0x[0-9a-f]+|[0-9]+)"),
    (TokenKind.IDENTIFIER, rf"(?:\\?[{_IDENT_START}][{_IDENT_BODY}-]*)+"),
    (TokenKind.OPEN_PAREN, r"\("),
    (TokenKind.CLOSE_PAREN, r"\)"),
    (TokenKind.OPEN_ANGLE, r"<"),
    (TokenKind.CLOSE_ANGLE, r">"),
    (TokenKind.OPEN_SQUARE, r"\["),
    (TokenKind.CLOSE_SQUARE, r"\]"),
    (TokenKind.OPEN_CURLY, r"\{"),
    (TokenKind.CLOSE_CURLY, r"\}"),
    (TokenKind.COMMA, r","),
    (TokenKind.EQUAL, r"="),
    (TokenKind.COLON, r":"),
    (TokenKind.UNION, r"\|"),
    (TokenKind.INTERSECTION, r"&"),
    (TokenKind.NULLABLE, r"\?"),
    (TokenKind.SINGLE_QUOTED, r"'(?:\\[^\r\n]|[^'\r\n\\])*'"),
    (TokenKind.DOUBLE_QUOTED, r'"(?:\\[^\r\n]|[^"\r\n\\])*"'),
    (TokenKind.OTHER, r"(?:(?!\*/)[^\s])+"),
)

_TOKEN_RE: Final[re.Pattern[str]] = re.compile(
    "|".join(f"(?P<{kind.name}>{pattern})" for kind, pattern in _RULES),
    re.IGNORECASE,
)


class Lexer:
    """Tokenize docblock text into an indexed list of `Token` objects."""

    def tokenize(self, text: str) -> list[Token]:
        """Split ``text`` into tokens, terminated by an empty ``END`` token.

        Args:
            text (str): Raw docblock (or payload) text.

        Returns:
            list[Token]: Tokens in source order; ``tokens[i].index == i``.
        """
        tokens: list[Token] = []
        pos: int = 0
        length: int = len(text)
        while pos < length:
            match: re.Match[str] | None = _TOKEN_RE.match(text, pos)
            if match is None or match.end() == pos:
                # Unclaimed character (e.g. a lone carriage return): keep it verbatim.
                tokens.append(Token(text[pos], TokenKind.OTHER, len(tokens)))
                pos += 1
                continue
            kind: TokenKind = TokenKind[match.lastgroup or TokenKind.OTHER.name]
            tokens.append(Token(match.group(), kind, len(tokens)))
            pos = match.end()

        tokens.append(Token("", TokenKind.END, len(tokens)))
        logger.trace("Tokenized %d chars into %d tokens", length, len(tokens))
        return tokens
