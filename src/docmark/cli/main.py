# topmark:header:start
#
#   project      : DocMark
#   file         : main.py
#   file_relpath : src/docmark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocMark command-line interface.

Key ideas:
- Group-level options are initialized once and placed into ``ctx.obj``.
- The engine is built lazily from ``--config`` by the first command that needs it.
- Subcommands reuse the helpers in `docmark.cli.cmd_common`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docmark.cli.commands.check import check_command
from docmark.cli.commands.dump import dump_command
from docmark.cli.commands.remove_tag import remove_tag_command
from docmark.cli.commands.show_defaults import show_defaults_command
from docmark.cli.commands.version import version_command
from docmark.cli.console import ClickConsole
from docmark.cli.options import (
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_verbosity,
)
from docmark.config.logging import DocmarkLogger, get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from pathlib import Path

logger: DocmarkLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_file: Path | None,
) -> None:
    """Initialize shared state on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
        config_file (Path | None): Configuration file from ``--config``.
    """
    ctx.obj = ctx.obj or {}

    # Internal logging: DOCMARK_LOG_LEVEL wins over -v/-q
    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env if level_env is not None else level_cli
    setup_logging(level=ctx.obj["log_level"])

    # Program-output verbosity
    ctx.obj["verbosity_level"] = verbose - quiet

    ctx.obj["color_enabled"] = not no_color
    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)

    ctx.obj["config_file"] = config_file


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="DocMark: parse, edit and reprint docblocks without disturbing their formatting.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_file: Path | None,
) -> None:
    """Entry point for the DocMark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
        config_file=config_file,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'docmark check FILE' to verify a docblock round-trips.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(show_defaults_command)

cli.add_command(check_command)

cli.add_command(dump_command)

cli.add_command(remove_tag_command)

if __name__ == "__main__":
    cli()
