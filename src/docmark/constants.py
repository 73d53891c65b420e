# topmark:header:start
#
#   project      : DocMark
#   file         : constants.py
#   file_relpath : src/docmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocMark Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    DOCMARK_VERSION: str = get_version("docmark")
except PackageNotFoundError:  # pragma: no cover - source checkout without install
    DOCMARK_VERSION = "0.0.0"

# Name of the bundled default config inside the package `docmark.config`:
DEFAULT_TOML_CONFIG_PACKAGE: Final[str] = "docmark.config"
DEFAULT_TOML_CONFIG_NAME: Final[str] = "docmark-default.toml"

# Docblock delimiters used when synthesizing text
DOCBLOCK_OPEN: Final[str] = "/**"
DOCBLOCK_CLOSE: Final[str] = "*/"
DOCBLOCK_LINE_MARKER: Final[str] = "*"

DEFAULT_NEWLINE: Final[str] = "\n"

# Key used for positional annotation arguments when no silent key is configured
DEFAULT_SILENT_KEY: Final[str] = "value"

# Last line of the license header carried by bundled resources
HEADER_END_MARKER: Final[str] = "topmark:header:end"
