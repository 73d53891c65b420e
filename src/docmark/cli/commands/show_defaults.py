# topmark:header:start
#
#   project      : DocMark
#   file         : show_defaults.py
#   file_relpath : src/docmark/cli/commands/show_defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocMark `show-defaults` command.

Displays the built-in default configuration bundled with the package, as a
reference for users writing their own ``docmark.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docmark.cli.cmd_common import get_console, get_effective_verbosity
from docmark.config.io import load_default_config_template_toml_text

if TYPE_CHECKING:
    from docmark.cli.console import ClickConsole


@click.command(
    name="show-defaults",
    help="Display the built-in default DocMark configuration file.",
)
def show_defaults_command() -> None:
    """Display the built-in default configuration."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    if vlevel > 0:
        console.print(
            console.styled("Default DocMark Configuration (TOML):", bold=True, underline=True)
        )
        console.print(console.styled("# === BEGIN ===", fg="cyan", dim=True))

    console.print(console.styled(load_default_config_template_toml_text(), fg="cyan"))

    if vlevel > 0:
        console.print(console.styled("# === END ===", fg="cyan", dim=True))
