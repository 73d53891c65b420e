# topmark:header:start
#
#   project      : DocMark
#   file         : check.py
#   file_relpath : src/docmark/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocMark `check` command.

Parses a docblock and prints it back without modification. Exits with
`ExitCode.SUCCESS` when the output is byte-identical to the input, otherwise shows
a unified diff and exits with `ExitCode.FAILURE`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docmark.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    get_engine,
    parse_input,
    print_info,
    read_input,
    report_diagnostics,
)
from docmark.cli.exit_codes import ExitCode
from docmark.cli.options import input_argument
from docmark.config.logging import DocmarkLogger, get_logger
from docmark.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from docmark.api import DocblockEngine
    from docmark.cli.cmd_common import DocblockInput
    from docmark.cli.console import ClickConsole
    from docmark.info import DocblockInfo

logger: DocmarkLogger = get_logger(__name__)


@click.command(
    name="check",
    help="Verify that a docblock (FILE or STDIN) reprints byte-identically.",
)
@input_argument
def check_command(input_file: str) -> None:
    """Round-trip a docblock and report any difference."""
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    engine: DocblockEngine = get_engine(ctx)

    source: DocblockInput = read_input(input_file)
    info: DocblockInfo = parse_input(engine, source)
    if vlevel > 0:
        report_diagnostics(console, source.name, info.diagnostics)

    printed: str = source.indent + print_info(engine, info)
    if printed == source.text:
        if vlevel >= 0:
            console.print(console.styled(f"✅ {source.name}: round-trip OK", fg="green"))
        return

    logger.info("Round-trip mismatch for %s", source.name)
    console.print(console.styled(f"❌ {source.name}: reprint differs from input", fg="red"))
    console.print(render_patch(unified_diff(source.text, printed, source.name)), nl=False)
    ctx.exit(ExitCode.FAILURE)
