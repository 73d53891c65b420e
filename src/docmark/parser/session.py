# topmark:header:start
#
#   project      : DocMark
#   file         : session.py
#   file_relpath : src/docmark/parser/session.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-parse state threaded through every grammar call."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from docmark.config.logging import DocmarkLogger, get_logger
from docmark.core.diagnostics import Diagnostic, DiagnosticLevel

if TYPE_CHECKING:
    from docmark.lexer.stream import TokenStream

logger: DocmarkLogger = get_logger(__name__)


@dataclass
class ParseSession:
    """State of one `DocblockParser.parse` call.

    Nothing here outlives the call; the parser instance itself holds no per-parse
    state, so nested and repeated parses cannot interfere.

    Attributes:
        stream (TokenStream): Cursor over the docblock tokens.
        host_node (Any | None): Host node providing name-resolution context.
        diagnostics (list[Diagnostic]): Recoverable problems found so far.
    """

    stream: TokenStream
    host_node: Any | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def add_diagnostic(self, level: DiagnosticLevel, message: str) -> None:
        """Record a diagnostic and log it."""
        self.diagnostics.append(Diagnostic(level, message))
        if level == DiagnosticLevel.INFO:
            logger.debug(message)
        else:
            logger.warning(message)

    def warn(self, message: str) -> None:
        """Record a warning diagnostic."""
        self.add_diagnostic(DiagnosticLevel.WARNING, message)

    def info(self, message: str) -> None:
        """Record an informational diagnostic."""
        self.add_diagnostic(DiagnosticLevel.INFO, message)
