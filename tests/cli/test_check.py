# topmark:header:start
#
#   project      : DocMark
#   file         : test_check.py
#   file_relpath : tests/cli/test_check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI: `check` round-trips and exit codes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docmark.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

DOCBLOCK: str = "/**\n * Summary.\n *\n * @param  int  $a\tAligned.\n * @ORM\\Id\n */\n"


def test_check_file_round_trips(tmp_path: Path) -> None:
    """A well-formed docblock passes."""
    (tmp_path / "block.txt").write_text(DOCBLOCK, encoding="utf-8")
    result = run_cli_in(tmp_path, ["--no-color", "check", "block.txt"])
    assert_SUCCESS(result)
    assert "block.txt: round-trip OK" in result.output


def test_check_keeps_crlf_and_indentation(tmp_path: Path) -> None:
    """Line endings and leading indentation are part of the round trip."""
    text: str = "    /**\r\n     * @var int $a\r\n     */\r\n"
    path: Path = tmp_path / "crlf.txt"
    path.write_bytes(text.encode("utf-8"))
    assert_SUCCESS(run_cli(["--no-color", "check", str(path)]))


def test_check_stdin() -> None:
    """Without FILE the docblock is read from STDIN."""
    result = run_cli(["--no-color", "check"], input_text=DOCBLOCK)
    assert_SUCCESS(result)
    assert "<stdin>: round-trip OK" in result.output


def test_check_quiet_prints_nothing() -> None:
    """``-q`` suppresses the success line."""
    result = run_cli(["-q", "check"], input_text=DOCBLOCK)
    assert_SUCCESS(result)
    assert result.output == ""


def test_check_missing_file(tmp_path: Path) -> None:
    """A missing path maps to EX_NOINPUT."""
    result = run_cli(["check", str(tmp_path / "absent.txt")])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND


def test_check_not_a_docblock() -> None:
    """Input without ``/**`` maps to EX_DATAERR."""
    result = run_cli(["check"], input_text="// just a comment\n")
    assert result.exit_code == ExitCode.DATA_ERROR


def test_check_invalid_config(tmp_path: Path) -> None:
    """An invalid configuration file maps to EX_CONFIG."""
    config: Path = tmp_path / "docmark.toml"
    config.write_text('[printer]\nnewline = "cr"\n', encoding="utf-8")
    result = run_cli(["--config", str(config), "check"], input_text=DOCBLOCK)
    assert result.exit_code == ExitCode.CONFIG_ERROR


def test_verbose_and_quiet_conflict() -> None:
    """``-v`` and ``-q`` are mutually exclusive."""
    assert_USAGE_ERROR(run_cli(["-v", "-q", "check"], input_text=DOCBLOCK))


def test_check_reports_mismatch_and_diagnostics() -> None:
    """A docblock without closing marker is reprinted closed: diff, diagnostics, failure."""
    result = run_cli(["--no-color", "-v", "check"], input_text="/**\n * @a\n")
    assert result.exit_code == ExitCode.FAILURE
    assert "no closing marker" in result.output
    assert "<stdin>: reprint differs from input" in result.output
    assert "+ */" in result.output
