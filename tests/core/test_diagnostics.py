# topmark:header:start
#
#   project      : DocMark
#   file         : test_diagnostics.py
#   file_relpath : tests/core/test_diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for diagnostic records and their summary line."""

from __future__ import annotations

from docmark.core.diagnostics import Diagnostic, DiagnosticLevel, summarize


def test_diagnostic_str() -> None:
    """A diagnostic renders its level in brackets."""
    assert str(Diagnostic(DiagnosticLevel.WARNING, "odd")) == "[warning] odd"


def test_summarize_counts_per_level() -> None:
    """Counts are listed errors first, with zero for absent levels."""
    diagnostics: list[Diagnostic] = [
        Diagnostic(DiagnosticLevel.INFO, "a"),
        Diagnostic(DiagnosticLevel.WARNING, "b"),
        Diagnostic(DiagnosticLevel.INFO, "c"),
    ]
    assert summarize(diagnostics) == "3 diagnostic(s): 0 error, 1 warning, 2 info"
    assert summarize([]) == "0 diagnostic(s): 0 error, 0 warning, 0 info"


def test_every_level_has_a_color() -> None:
    """Each level maps to a styling function."""
    for level in DiagnosticLevel:
        assert "x" in level.color("x")
