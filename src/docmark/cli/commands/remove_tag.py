# topmark:header:start
#
#   project      : DocMark
#   file         : remove_tag.py
#   file_relpath : src/docmark/cli/commands/remove_tag.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocMark `remove-tag` command.

Removes every occurrence of a tag from a docblock and writes the result to
stdout (or back to FILE with ``--in-place``). Lines that are not touched keep
their original bytes.
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
)
from docmark.cli.errors import DocmarkUsageError
from docmark.cli.options import input_argument
from docmark.config.logging import DocmarkLogger, get_logger

if TYPE_CHECKING:
    from docmark.api import DocblockEngine
    from docmark.cli.cmd_common import DocblockInput
    from docmark.cli.console import ClickConsole
    from docmark.info import DocblockInfo

logger: DocmarkLogger = get_logger(__name__)


@click.command(
    name="remove-tag",
    help="Remove every @NAME tag from a docblock (FILE or STDIN).",
)
@click.argument("name")
@input_argument
@click.option(
    "-i",
    "--in-place",
    "in_place",
    is_flag=True,
    default=False,
    help="Rewrite FILE instead of printing to stdout.",
)
def remove_tag_command(name: str, input_file: str, in_place: bool) -> None:
    """Remove tags named NAME and print the updated docblock."""
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    engine: DocblockEngine = get_engine(ctx)

    if in_place and input_file == "-":
        raise DocmarkUsageError("'--in-place' requires a FILE argument.")

    source: DocblockInput = read_input(input_file)
    info: DocblockInfo = parse_input(engine, source)
    removed: int = info.remove_by_name(name)
    logger.info("Removed %d tag(s) named %s from %s", removed, name, source.name)
    if removed == 0 and get_effective_verbosity(ctx) >= 0:
        console.warn(f"{source.name}: no @{name.lstrip('@')} tag found")

    output: str = source.indent + print_info(engine, info)
    if in_place:
        if output != source.text:
            with open(input_file, "w", encoding="utf-8", newline="") as fh:
                fh.write(output)
        return
    console.print(output, nl=False)
