# topmark:header:start
#
#   project      : DocMark
#   file         : options.py
#   file_relpath : src/docmark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the DocMark CLI.

This module centralizes reusable options (verbosity, color, configuration file) and
their resolution logic, so the group and its commands can stay thin.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Final, ParamSpec, TypeVar

import click

from docmark.cli.errors import DocmarkUsageError
from docmark.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

# Log level per number of -v flags; three or more mean TRACE.
VERBOSE_LEVELS: Final[tuple[int, ...]] = (
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
    TRACE_LEVEL,
)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Return the log level selected by ``-v``/``-q`` counts.

    ``-v`` gives INFO, ``-vv`` DEBUG and ``-vvv`` TRACE; ``-q`` gives ERROR; the
    default is WARNING.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: The logging level.

    Raises:
        DocmarkUsageError: If both ``-v`` and ``-q`` are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise DocmarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return logging.ERROR
    return VERBOSE_LEVELS[min(verbose_count, len(VERBOSE_LEVELS) - 1)]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (counted, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-color``."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable colored output.",
    )(f)


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-c/--config PATH`` (a ``docmark.toml`` or ``pyproject.toml`` file)."""
    return click.option(
        "-c",
        "--config",
        "config_file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Configuration file layered over the built-in defaults.",
    )(f)


def input_argument(f: Callable[P, R]) -> Callable[P, R]:
    """Add the optional ``FILE`` argument (``-`` or omitted reads STDIN)."""
    return click.argument(
        "input_file",
        metavar="FILE",
        required=False,
        default="-",
        type=str,
    )(f)
