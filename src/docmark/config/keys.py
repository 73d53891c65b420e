# topmark:header:start
#
#   project      : DocMark
#   file         : keys.py
#   file_relpath : src/docmark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for DocMark configuration.

This module defines the authoritative string constants used when reading and
validating DocMark configuration from TOML sources (``docmark.toml`` and
``[tool.docmark]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by DocMark configuration.

    The ordering of constants mirrors `docmark-default.toml` to make it easy to
    audit schema changes and keep defaults, docs and parsing aligned.
    """

    # [tags]: structural tag names per grammar, plus flag tags
    SECTION_TAGS: Final[str] = "tags"

    KEY_PARAM: Final[str] = "param"
    KEY_RETURN: Final[str] = "return"
    KEY_VAR: Final[str] = "var"
    KEY_THROWS: Final[str] = "throws"
    KEY_FLAGS: Final[str] = "flags"

    # [annotations]
    SECTION_ANNOTATIONS: Final[str] = "annotations"

    KEY_ALIASES: Final[str] = "aliases"
    KEY_SILENT_KEYS: Final[str] = "silent_keys"

    # [printer]
    SECTION_PRINTER: Final[str] = "printer"

    KEY_NEWLINE: Final[str] = "newline"

    # ---------------------------- Schema helpers ----------------------------

    STRUCTURAL_KEYS: Final[tuple[str, ...]] = (KEY_PARAM, KEY_RETURN, KEY_VAR, KEY_THROWS)

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            SECTION_TAGS,
            SECTION_ANNOTATIONS,
            SECTION_PRINTER,
        }
    )

    # Allowed keys per section. [annotations.*] subtables hold arbitrary keys.
    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_TAGS: frozenset(
            {
                KEY_PARAM,
                KEY_RETURN,
                KEY_VAR,
                KEY_THROWS,
                KEY_FLAGS,
            }
        ),
        SECTION_ANNOTATIONS: frozenset(
            {
                KEY_ALIASES,
                KEY_SILENT_KEYS,
            }
        ),
        SECTION_PRINTER: frozenset(
            {
                KEY_NEWLINE,
            }
        ),
    }

    # Values accepted for [printer].newline
    NEWLINE_VALUES: Final[dict[str, str]] = {"lf": "\n", "crlf": "\r\n"}
