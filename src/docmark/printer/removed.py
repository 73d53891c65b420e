# topmark:header:start
#
#   project      : DocMark
#   file         : removed.py
#   file_relpath : src/docmark/printer/removed.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Token ranges of children removed from a working tree.

A child is removed when its position range, which identifies it, is present in the
baseline but carried by no anchored working child. A working child is anchored when
its range starts at or after the end of the previous anchored child; a child placed
ahead of an earlier range has been moved, and its original range is removed too.

Each range is widened backward over the horizontal whitespace and the one line
break before it, so that the whole line disappears. Widening never crosses the
opening marker or the end of the previous removed range.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docmark.ast.nodes import PositionRange
from docmark.config.logging import DocmarkLogger, get_logger
from docmark.errors import ShouldNotHappenError
from docmark.lexer.tokens import TokenKind

if TYPE_CHECKING:
    from docmark.ast.nodes import DocblockTree
    from docmark.lexer.stream import TokenStream

logger: DocmarkLogger = get_logger(__name__)


def compute_removed_ranges(
    tree: DocblockTree, baseline: DocblockTree, stream: TokenStream
) -> list[PositionRange]:
    """Return the widened ranges of baseline children missing from ``tree``.

    Args:
        tree (DocblockTree): Working tree.
        baseline (DocblockTree): Tree as originally parsed.
        stream (TokenStream): Original tokens (read by index only).

    Returns:
        list[PositionRange]: Non-overlapping ranges sorted by start.

    Raises:
        ShouldNotHappenError: If a baseline child carries no position range.
    """
    kept: set[PositionRange] = anchored_positions(tree)
    removed: list[PositionRange] = []
    for child in baseline.children:
        if child.position is None:
            raise ShouldNotHappenError(f"Baseline child without position range: {child!r}")
        if child.position not in kept:
            removed.append(child.position)

    floor: int = 1 if stream.token_at(0).kind == TokenKind.OPEN_DOCBLOCK else 0
    expanded: list[PositionRange] = []
    for rng in sorted(removed, key=lambda r: (r.start, r.end)):
        start: int = rng.start
        while start > floor and stream.token_at(start - 1).kind == TokenKind.HORIZONTAL_WS:
            start -= 1
        if start > floor and stream.token_at(start - 1).kind == TokenKind.EOL:
            start -= 1
        widened = PositionRange(start, max(start, rng.end))
        expanded.append(widened)
        floor = max(floor, widened.end)

    if expanded:
        logger.debug("Removed ranges: %s", ", ".join(f"[{r.start}, {r.end})" for r in expanded))
    return expanded


def anchored_positions(tree: DocblockTree) -> set[PositionRange]:
    """Return the ranges of working children that keep their original place.

    Children are scanned in tree order; a positioned child starting before the end of
    the last anchored one is a moved child and is not included.
    """
    anchored: set[PositionRange] = set()
    cursor: int = 0
    for child in tree.children:
        position: PositionRange | None = child.position
        if position is None or position.start < cursor:
            continue
        anchored.add(position)
        cursor = position.end
    return anchored
