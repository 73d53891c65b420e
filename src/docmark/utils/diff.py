# topmark:header:start
#
#   project      : DocMark
#   file         : diff.py
#   file_relpath : src/docmark/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diffs between an original docblock and its reprint.

Used by ``docmark check`` to show where a reprint departs from the input. Control
characters are made visible so that whitespace-only differences can be read.
"""

from __future__ import annotations

import difflib
from collections.abc import Sequence

from yachalk import chalk

from docmark.config.logging import DocmarkLogger, get_logger

logger: DocmarkLogger = get_logger(__name__)


def unified_diff(original: str, updated: str, name: str = "docblock") -> list[str]:
    """Return the unified diff of two texts as a list of lines (no line endings).

    Args:
        original (str): Text before.
        updated (str): Text after.
        name (str): Label used in the ``---``/``+++`` header lines.

    Returns:
        list[str]: Diff lines; empty when both texts are equal.
    """
    lines: list[str] = [
        line.rstrip("\n")
        for line in difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{name} (original)",
            tofile=f"{name} (printed)",
        )
    ]
    logger.debug("Diff for %s: %d line(s)", name, len(lines))
    return lines


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch (Sequence[str] | str): A unified diff as a sequence of lines or a
            single multiline string.
        show_line_numbers (bool): Whether to prefix output with line numbers.

    Returns:
        str: The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = list(patch)

    def process_line(line: str) -> str:
        content: str = line.replace("\r", "\\r").replace("\t", "\\t")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return chalk.gray(
            "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
        )
    return chalk.gray("".join(f"{process_line(line)}\n" for line in lines))
