# topmark:header:start
#
#   project      : DocMark
#   file         : errors.py
#   file_relpath : src/docmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the DocMark CLI.

Raise these in commands to signal errors with standardized messages and exit codes.
Engine exceptions are translated here: `ParserError` becomes `DocmarkDataError` and
`ShouldNotHappenError` becomes `DocmarkInternalError`.
"""

from __future__ import annotations

from typing import IO, Any

import click

from docmark.cli.exit_codes import ExitCode


class DocmarkCliError(click.ClickException):
    """Base class for all DocMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (styling is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class DocmarkUsageError(DocmarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class DocmarkDataError(DocmarkCliError):
    """Error for input that is not a docblock."""

    exit_code = ExitCode.DATA_ERROR


class DocmarkFileNotFoundError(DocmarkCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DocmarkInternalError(DocmarkCliError):
    """Error for engine invariant violations."""

    exit_code = ExitCode.INTERNAL_ERROR


class DocmarkConfigError(DocmarkCliError):
    """Error for configuration errors (unreadable or invalid config)."""

    exit_code = ExitCode.CONFIG_ERROR
