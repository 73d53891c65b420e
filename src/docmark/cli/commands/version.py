# topmark:header:start
#
#   project      : DocMark
#   file         : version.py
#   file_relpath : src/docmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocMark `version` command.

Prints the current DocMark version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docmark.cli.cmd_common import get_console, get_effective_verbosity
from docmark.constants import DOCMARK_VERSION

if TYPE_CHECKING:
    from docmark.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of DocMark.",
)
def version_command() -> None:
    """Show the current version of DocMark."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("DocMark version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(DOCMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(DOCMARK_VERSION, bold=True))
