# topmark:header:start
#
#   project      : DocMark
#   file         : diagnostics.py
#   file_relpath : src/docmark/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics support.

Recoverable problems found while parsing (malformed structured payloads,
unterminated parentheses, annotation payloads with trailing content) are recorded
as diagnostics instead of failing the whole parse.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Final

from yachalk import chalk


class DiagnosticLevel(Enum):
    """Severity of a diagnostic, most severe last."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """The `yachalk` style used when reporting this level."""
        return _LEVEL_COLORS[self]


_LEVEL_COLORS: Final[dict[DiagnosticLevel, Callable[[str], str]]] = {
    DiagnosticLevel.INFO: chalk.blue,
    DiagnosticLevel.WARNING: chalk.yellow,
    DiagnosticLevel.ERROR: chalk.red_bright,
}


@dataclass(frozen=True)
class Diagnostic:
    """One recoverable problem and its severity."""

    level: DiagnosticLevel
    message: str

    def __str__(self) -> str:
        return f"[{self.level.value}] {self.message}"


def summarize(diagnostics: Iterable[Diagnostic]) -> str:
    """Return a one-line count of ``diagnostics`` per level, errors first.

    Example:
        ``2 diagnostic(s): 0 error, 1 warning, 1 info``
    """
    counts: Counter[DiagnosticLevel] = Counter(d.level for d in diagnostics)
    per_level: str = ", ".join(
        f"{counts[level]} {level.value}" for level in reversed(DiagnosticLevel)
    )
    return f"{sum(counts.values())} diagnostic(s): {per_level}"
