# topmark:header:start
#
#   project      : DocMark
#   file         : inliner.py
#   file_relpath : src/docmark/printer/inliner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Collapse a multi-line docblock into its inline form (``/** @var int $a */``)."""

from __future__ import annotations

import re
from typing import Final

_NEWLINE_RE: Final[re.Pattern[str]] = re.compile(r"\r?\n")
_DECORATION_RE: Final[re.Pattern[str]] = re.compile(r"^[ \t]*\*(?!/)")


def inline(text: str) -> str:
    """Join the lines of ``text`` with single spaces, dropping line decorations.

    Blank lines disappear. Text without line breaks is returned unchanged.
    """
    lines: list[str] = _NEWLINE_RE.split(text)
    if len(lines) == 1:
        return text
    parts: list[str] = [lines[0].rstrip()]
    for line in lines[1:]:
        content: str = _DECORATION_RE.sub("", line).strip()
        if content:
            parts.append(content)
    return " ".join(parts)
