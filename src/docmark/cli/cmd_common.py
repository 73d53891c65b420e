# topmark:header:start
#
#   project      : DocMark
#   file         : cmd_common.py
#   file_relpath : src/docmark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

These helpers encapsulate plumbing shared by the commands: reading the input
docblock, building the engine from the group options, translating engine
exceptions into CLI errors, and reporting diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import click

from docmark.api import DocblockEngine
from docmark.cli.errors import (
    DocmarkConfigError,
    DocmarkDataError,
    DocmarkFileNotFoundError,
    DocmarkInternalError,
)
from docmark.config import ConfigLoadError, MutableConfig
from docmark.config.logging import DocmarkLogger, get_logger
from docmark.errors import ParserError, ShouldNotHappenError

if TYPE_CHECKING:
    from pathlib import Path

    from docmark.cli.console import ClickConsole
    from docmark.core.diagnostics import Diagnostic
    from docmark.info import DocblockInfo

logger: DocmarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class DocblockInput:
    """A docblock read from a file or STDIN.

    Attributes:
        name (str): Display name (the path, or ``<stdin>``).
        text (str): Full input text.
        indent (str): Leading whitespace preceding the opening marker.
    """

    name: str
    text: str
    indent: str

    @property
    def docblock(self) -> str:
        """The input without its leading whitespace."""
        return self.text[len(self.indent) :]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``-v`` count, negative when quiet)."""
    return int(ctx.obj.get("verbosity_level", 0))


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the group context."""
    return ctx.obj["console"]


def get_engine(ctx: click.Context) -> DocblockEngine:
    """Return the engine for this invocation, building it on first use.

    Raises:
        DocmarkConfigError: If the configuration file cannot be loaded.
    """
    engine: DocblockEngine | None = ctx.obj.get("engine")
    if engine is not None:
        return engine
    config_file: Path | None = ctx.obj.get("config_file")
    try:
        config = MutableConfig.load_merged(config_file).freeze()
    except ConfigLoadError as exc:
        raise DocmarkConfigError(str(exc)) from exc
    engine = DocblockEngine(config)
    ctx.obj["engine"] = engine
    return engine


def read_input(input_file: str) -> DocblockInput:
    """Read the docblock from ``input_file`` (``-`` for STDIN).

    Line endings are preserved as-is for files.

    Raises:
        DocmarkFileNotFoundError: If the path does not exist or is a directory.
    """
    if input_file == "-":
        name: str = "<stdin>"
        text: str = click.get_text_stream("stdin").read()
    else:
        name = input_file
        try:
            with open(input_file, encoding="utf-8", newline="") as fh:
                text = fh.read()
        except (FileNotFoundError, IsADirectoryError) as exc:
            raise DocmarkFileNotFoundError(f"No such file: {input_file}") from exc
    indent: str = text[: len(text) - len(text.lstrip())]
    logger.debug("Read %d characters from %s", len(text), name)
    return DocblockInput(name=name, text=text, indent=indent)


def parse_input(engine: DocblockEngine, source: DocblockInput) -> DocblockInfo:
    """Parse ``source`` with ``engine``, translating engine errors.

    Raises:
        DocmarkDataError: If the input is not a docblock.
        DocmarkInternalError: If the engine hits an invariant violation.
    """
    try:
        return engine.parse(source.docblock)
    except ParserError as exc:
        raise DocmarkDataError(f"{source.name}: {exc}") from exc
    except ShouldNotHappenError as exc:
        raise DocmarkInternalError(f"{source.name}: {exc}") from exc


def print_info(engine: DocblockEngine, info: DocblockInfo) -> str:
    """Print ``info`` format-preservingly, translating invariant violations."""
    try:
        return engine.print_format_preserving(info)
    except ShouldNotHappenError as exc:
        raise DocmarkInternalError(str(exc)) from exc


def report_diagnostics(console: ClickConsole, name: str, diagnostics: list[Diagnostic]) -> None:
    """Write ``diagnostics`` to stderr, one per line."""
    for diag in diagnostics:
        line: str = f"{name}: {diag}"
        console.warn(diag.level.color(line) if console.enable_color else line)
