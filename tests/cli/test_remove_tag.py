# topmark:header:start
#
#   project      : DocMark
#   file         : test_remove_tag.py
#   file_relpath : tests/cli/test_remove_tag.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI: `remove-tag` output and in-place rewriting."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli

if TYPE_CHECKING:
    from pathlib import Path

DOCBLOCK: str = "/**\n * Summary.\n *\n * @param  int  $a\n * @internal\n * @return void\n */\n"


def test_remove_tag_to_stdout() -> None:
    """Only the removed line disappears; the rest keeps its bytes."""
    result = run_cli(["--no-color", "remove-tag", "internal"], input_text=DOCBLOCK)
    assert_SUCCESS(result)
    assert result.output == "/**\n * Summary.\n *\n * @param  int  $a\n * @return void\n */\n"


def test_remove_tag_with_marker_and_case() -> None:
    """The ``@`` marker is optional and names are case-insensitive."""
    result = run_cli(["--no-color", "remove-tag", "@RETURN"], input_text=DOCBLOCK)
    assert_SUCCESS(result)
    assert "@return" not in result.output
    assert "@internal" in result.output


def test_remove_tag_in_place(tmp_path: Path) -> None:
    """``--in-place`` rewrites FILE and keeps its CRLF line endings."""
    path: Path = tmp_path / "block.txt"
    path.write_bytes(DOCBLOCK.replace("\n", "\r\n").encode("utf-8"))
    result = run_cli(["--no-color", "remove-tag", "param", str(path), "--in-place"])
    assert_SUCCESS(result)
    assert result.output == ""
    expected: str = "/**\n * Summary.\n *\n * @internal\n * @return void\n */\n"
    assert path.read_bytes() == expected.replace("\n", "\r\n").encode("utf-8")


def test_remove_every_tag_prints_nothing() -> None:
    """A docblock left without meaningful content disappears."""
    result = run_cli(["--no-color", "remove-tag", "var"], input_text="/** @var int $a */")
    assert_SUCCESS(result)
    assert result.output == ""


def test_remove_missing_tag_warns() -> None:
    """Nothing to remove: the input is echoed and a warning is shown."""
    result = run_cli(["--no-color", "remove-tag", "throws"], input_text=DOCBLOCK)
    assert_SUCCESS(result)
    assert "no @throws tag found" in result.output
    assert DOCBLOCK in result.output


def test_in_place_requires_file() -> None:
    """``--in-place`` cannot rewrite STDIN."""
    result = run_cli(["remove-tag", "param", "--in-place"], input_text=DOCBLOCK)
    assert_USAGE_ERROR(result)
