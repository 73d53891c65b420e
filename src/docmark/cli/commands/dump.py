# topmark:header:start
#
#   project      : DocMark
#   file         : dump.py
#   file_relpath : src/docmark/cli/commands/dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocMark `dump` command.

Lists the children of a parsed docblock, one per line, with their token ranges
and parsed values. Parse diagnostics follow the listing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docmark.ast.nodes import TagNode
from docmark.cli.cmd_common import (
    get_console,
    get_engine,
    parse_input,
    read_input,
    report_diagnostics,
)
from docmark.cli.options import input_argument
from docmark.core.diagnostics import summarize

if TYPE_CHECKING:
    from docmark.api import DocblockEngine
    from docmark.ast.nodes import ChildNode
    from docmark.cli.cmd_common import DocblockInput
    from docmark.cli.console import ClickConsole
    from docmark.info import DocblockInfo


def format_child(index: int, child: ChildNode) -> str:
    """Return the one-line listing of ``child``."""
    span: str = (
        f"{child.position.start}..{child.position.end}" if child.position is not None else "-"
    )
    if isinstance(child, TagNode):
        return f"[{index}] tag  {span:<9} {child.name} <{child.value.kind.value}> {child.value}"
    return f"[{index}] text {span:<9} {child.text!r}"


@click.command(
    name="dump",
    help="List the parsed children of a docblock (FILE or STDIN).",
)
@input_argument
def dump_command(input_file: str) -> None:
    """Print the parsed structure of a docblock."""
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    engine: DocblockEngine = get_engine(ctx)

    source: DocblockInput = read_input(input_file)
    info: DocblockInfo = parse_input(engine, source)

    for index, child in enumerate(info.tree.children):
        console.print(format_child(index, child))

    diagnostics = info.diagnostics
    if diagnostics:
        console.print(console.styled(summarize(diagnostics), bold=True))
        report_diagnostics(console, source.name, diagnostics)
