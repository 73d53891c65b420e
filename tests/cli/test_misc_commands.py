# topmark:header:start
#
#   project      : DocMark
#   file         : test_misc_commands.py
#   file_relpath : tests/cli/test_misc_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI: `version`, `show-defaults` and the bare group."""

from __future__ import annotations

from docmark.constants import DOCMARK_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli


def test_version() -> None:
    """`version` prints the installed version."""
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == DOCMARK_VERSION


def test_version_verbose() -> None:
    """With ``-v`` a heading precedes the version."""
    result = run_cli(["--no-color", "-v", "version"])
    assert_SUCCESS(result)
    assert "DocMark version:" in result.output


def test_show_defaults() -> None:
    """`show-defaults` prints the bundled template."""
    result = run_cli(["--no-color", "show-defaults"])
    assert_SUCCESS(result)
    assert "[annotations.aliases]" in result.output
    assert "topmark:header" not in result.output


def test_group_without_command_shows_help() -> None:
    """Running the bare group prints a hint and the help text."""
    result = run_cli(["--no-color"])
    assert_SUCCESS(result)
    assert "Hint:" in result.output
    assert "remove-tag" in result.output
