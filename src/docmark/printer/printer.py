# topmark:header:start
#
#   project      : DocMark
#   file         : printer.py
#   file_relpath : src/docmark/printer/printer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format-preserving docblock printer.

`DocblockPrinter.print` renders a working tree against its baseline snapshot and
original tokens:

    - gaps between children (line decorations, blank space) are copied from the
      tokens, minus the ranges of removed children;
    - a child equal to the baseline child at the same position is copied verbatim;
    - an edited child is synthesized from its model in place;
    - a new child (no position) is synthesized on its own decorated line;
    - a child moved ahead of an earlier one is elided from its old place and
      re-emitted on its own decorated line.

The printer keeps no state between calls: everything mutable lives in a
`_PrintSession` created per call, so printing is a pure function of its inputs.
"""

from __future__ import annotations

import re
from functools import cached_property
from typing import TYPE_CHECKING, Final

from docmark.ast.nodes import TagNode, TextNode
from docmark.ast.values import description_of
from docmark.config.logging import DocmarkLogger, get_logger
from docmark.constants import DEFAULT_NEWLINE, DOCBLOCK_CLOSE, DOCBLOCK_OPEN
from docmark.lexer.tokens import Token, TokenKind
from docmark.parser.tags import normalize_description
from docmark.printer.inliner import inline
from docmark.printer.removed import compute_removed_ranges
from docmark.printer.spacing import resolve_separator

if TYPE_CHECKING:
    from docmark.ast.nodes import ChildNode, DocblockTree, PositionRange
    from docmark.info import DocblockInfo
    from docmark.lexer.stream import TokenStream

logger: DocmarkLogger = get_logger(__name__)

_OPENING_RE: Final[re.Pattern[str]] = re.compile(r"^\s*(//|/\*\*|/\*|#)")
_BLANK_DECORATION_RE: Final[re.Pattern[str]] = re.compile(r"(?m)^([ \t]*\*)[ \t]+$")
_CALLABLE_RE: Final[re.Pattern[str]] = re.compile(r"\bcallable \(", re.IGNORECASE)


def clean_fragment(text: str) -> str:
    """Tidy a synthesized fragment: no blanks after a bare ``*``, no ``callable (``."""
    text = _BLANK_DECORATION_RE.sub(r"\1", text)
    return _CALLABLE_RE.sub(lambda m: m.group(0)[:-2] + "(", text)


def finalize(text: str, single_line: bool) -> str:
    """Apply whole-output post-processing.

    Adds a missing opening marker, closes an opened docblock that lacks a closing
    marker, and collapses the output when the tree is flagged single-line.
    """
    if not text:
        return text
    if not _OPENING_RE.match(text):
        text = DOCBLOCK_OPEN + text
    if DOCBLOCK_OPEN in text and DOCBLOCK_CLOSE not in text:
        text += " " + DOCBLOCK_CLOSE
    if single_line:
        text = inline(text)
    return text


class DocblockPrinter:
    """Render docblock trees.

    Args:
        newline (str): Newline used when the original text offers none.
    """

    def __init__(self, newline: str = DEFAULT_NEWLINE) -> None:
        self._newline: str = newline

    def print(
        self, tree: DocblockTree, baseline: DocblockTree, stream: TokenStream | None
    ) -> str:
        """Render ``tree``, reusing ``stream`` text for everything left untouched.

        Args:
            tree (DocblockTree): Working tree.
            baseline (DocblockTree): Tree as originally parsed.
            stream (TokenStream | None): Original tokens; None or empty for trees
                never parsed from text.

        Returns:
            str: The docblock text.
        """
        return _PrintSession(tree, baseline, stream, self._newline).render()

    def print_format_preserving(self, info: DocblockInfo) -> str:
        """Render a `DocblockInfo` against its own baseline and tokens."""
        return self.print(info.tree, info.baseline, info.tokens)

    def print_new(self, info: DocblockInfo) -> str:
        """Render the tree of ``info`` from its model only, ignoring the original text."""
        return _PrintSession(info.tree, info.baseline, None, self._newline).render()


class _PrintSession:
    """Mutable state of one print call."""

    def __init__(
        self,
        tree: DocblockTree,
        baseline: DocblockTree,
        stream: TokenStream | None,
        newline: str,
    ) -> None:
        self.tree: DocblockTree = tree
        self.baseline: DocblockTree = baseline
        self.stream: TokenStream | None = stream if stream and stream.token_count else None
        self.default_newline: str = newline
        self.fresh_emitted: bool = False

    # ---- derived layout ------------------------------------------------------------------

    @cached_property
    def decorated_eol(self) -> Token | None:
        if self.stream is None:
            return None
        for token in self.stream.tokens:
            if token.kind == TokenKind.EOL and token.text.endswith("*"):
                return token
        return None

    @cached_property
    def newline(self) -> str:
        if self.stream is not None:
            for token in self.stream.tokens:
                if token.kind == TokenKind.EOL:
                    return "\r\n" if token.text.startswith("\r\n") else "\n"
        return self.default_newline

    @cached_property
    def indent(self) -> str:
        eol: Token | None = self.decorated_eol
        if eol is None:
            return " "
        return eol.text.lstrip("\r\n")[:-1]

    @property
    def decoration(self) -> str:
        """Line break, indentation and ``* `` that start a continuation line."""
        return f"{self.newline}{self.indent}* "

    @property
    def closing_line(self) -> str:
        return f"{self.newline}{self.indent}{DOCBLOCK_CLOSE}"

    @cached_property
    def removed_indexes(self) -> frozenset[int]:
        if self.stream is None:
            return frozenset()
        ranges: list[PositionRange] = compute_removed_ranges(self.tree, self.baseline, self.stream)
        return frozenset(i for r in ranges for i in range(r.start, r.end))

    @cached_property
    def baseline_by_position(self) -> dict[PositionRange, ChildNode]:
        return {c.position: c for c in self.baseline.children if c.position is not None}

    @cached_property
    def original_text(self) -> str:
        return self.stream.full_text() if self.stream is not None else ""

    # ---- rendering -----------------------------------------------------------------------

    def render(self) -> str:
        if self.stream is None:
            return finalize(self._render_synthetic(), self.tree.single_line)
        if self.tree.is_effectively_empty() and self.tree != self.baseline:
            logger.debug("All meaningful children removed; printing nothing")
            return ""
        return finalize(self._render_preserving(self.stream), self.tree.single_line)

    def _render_synthetic(self) -> str:
        if not self.tree.children:
            return ""
        body: str = "".join(
            clean_fragment(self.decoration + self._synthesize(c)) for c in self.tree.children
        )
        return f"{DOCBLOCK_OPEN}{body}{self.closing_line}"

    def _render_preserving(self, stream: TokenStream) -> str:
        out: list[str] = []
        cursor: int = 0
        after_fresh: bool = False

        for child in self.tree.children:
            position: PositionRange | None = child.position
            if position is None:
                if cursor == 0:
                    out.append(self._flush(stream, 0, 1))
                    cursor = 1
                out.append(clean_fragment(self.decoration + self._synthesize(child)))
                after_fresh = True
                self.fresh_emitted = True
                continue

            position.check_within(stream.token_count)
            if position.start < cursor:
                # Moved ahead of its original place: its range is elided like a removal.
                out.append(self.decoration + self._render_child(stream, child, position))
                after_fresh = True
                self.fresh_emitted = True
                continue

            gap: str = self._flush(stream, cursor, position.start)
            if after_fresh and "\n" not in gap:
                gap = self.decoration
            out.append(gap)
            cursor = position.end
            after_fresh = False
            out.append(self._render_child(stream, child, position))

        out.append(self._flush_tail(stream, cursor))
        return "".join(out)

    def _render_child(self, stream: TokenStream, child: ChildNode, position: PositionRange) -> str:
        if self.baseline_by_position.get(position) == child:
            return stream.text_between(position.start, position.end)
        return clean_fragment(self._synthesize(child))

    def _emitted(self, stream: TokenStream, start: int, end: int) -> list[Token]:
        skip: frozenset[int] = self.removed_indexes
        return [stream.token_at(i) for i in range(start, end) if i not in skip]

    def _flush(self, stream: TokenStream, start: int, end: int) -> str:
        return "".join(t.text for t in self._emitted(stream, start, end))

    def _flush_tail(self, stream: TokenStream, cursor: int) -> str:
        tokens: list[Token] = self._emitted(stream, cursor, stream.token_count)
        close_at: int | None = next(
            (i for i, t in enumerate(tokens) if t.kind == TokenKind.CLOSE_DOCBLOCK), None
        )
        if close_at is None:
            return "".join(t.text for t in tokens)

        head: list[Token] = tokens[:close_at]
        # Keep only the last line break of a blank run directly above the marker.
        blank_from: int = len(head)
        while blank_from > 0 and head[blank_from - 1].kind in (
            TokenKind.EOL,
            TokenKind.HORIZONTAL_WS,
        ):
            blank_from -= 1
        blank: list[Token] = head[blank_from:]
        eols: list[int] = [i for i, t in enumerate(blank) if t.kind == TokenKind.EOL]
        if len(eols) > 1:
            blank = blank[eols[-1] :]
        lead: str = "".join(t.text for t in head[:blank_from])
        gap: str = "".join(t.text for t in blank)

        if self.fresh_emitted and not eols and not lead.endswith("\n"):
            closing: str = self.closing_line
        else:
            closing = gap + tokens[close_at].text
        trailing: str = "".join(t.text for t in tokens[close_at + 1 :])
        return lead + closing + trailing

    # ---- synthesis -----------------------------------------------------------------------

    def _synthesize(self, child: ChildNode) -> str:
        if isinstance(child, TextNode):
            return self._expand_lines(child.text)
        return self._expand_lines(self._synthesize_tag(child))

    def _synthesize_tag(self, tag: TagNode) -> str:
        baseline_tag: ChildNode | None = None
        offset: int | None = None
        if tag.position is not None and self.stream is not None:
            baseline_tag = self.baseline_by_position.get(tag.position)
            offset = self.stream.offset_of(tag.position.start)
        separator: str = resolve_separator(
            tag,
            original_text=self.original_text,
            offset=offset,
            baseline_tag=baseline_tag if isinstance(baseline_tag, TagNode) else None,
        )
        value_text: str = self._restore_description(tag, str(tag.value).lstrip())
        return f"{tag.name}{separator}{value_text}"

    @staticmethod
    def _restore_description(tag: TagNode, text: str) -> str:
        original: str | None = tag.original_description
        description: str | None = description_of(tag.value)
        if not original or not description:
            return text
        if normalize_description(original) != description:
            return text
        pattern: str = r"\s+".join(re.escape(word) for word in description.split())
        return re.sub(rf"{pattern}$", lambda _: original, text, count=1)

    def _expand_lines(self, text: str) -> str:
        lines: list[str] = text.split("\n")
        if len(lines) == 1:
            return text
        prefix: str = f"{self.newline}{self.indent}*"
        expanded: list[str] = [lines[0]]
        for line in lines[1:]:
            line = line.rstrip("\r")
            if line and not line.startswith((" ", "\t")):
                line = " " + line
            expanded.append(prefix + line)
        return "".join(expanded)
