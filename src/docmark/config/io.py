# topmark:header:start
#
#   project      : DocMark
#   file         : io.py
#   file_relpath : src/docmark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for DocMark configuration.

DocMark uses `tomlkit` for parsing and rendering:

    - `load_toml_dict()` parses on-disk TOML and returns plain dicts.
    - `load_defaults_dict()` returns the runtime defaults (no I/O).
    - `load_default_config_template_toml_text()` returns the annotated bundled
      template ``docmark-default.toml``.
    - `to_toml()` renders a dict back to TOML.

Getters come in two flavours: unchecked (return a default, log at debug level) and
checked (also record a warning `Diagnostic` for the user).
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, TypeAlias, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from docmark.config.keys import Toml
from docmark.config.logging import DocmarkLogger, get_logger
from docmark.constants import (
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    HEADER_END_MARKER,
)
from docmark.core.diagnostics import Diagnostic, DiagnosticLevel
from docmark.errors import DocmarkError

if TYPE_CHECKING:
    from pathlib import Path

logger: DocmarkLogger = get_logger(__name__)

TomlTable: TypeAlias = dict[str, Any]


class ConfigLoadError(DocmarkError):
    """A configuration file could not be read or decoded."""


# --- Type guards ---


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict``.
    """
    return isinstance(obj, dict)


def is_str_list(obj: object) -> TypeGuard[list[str]]:
    """Type guard for a ``list[str]`` value."""
    return isinstance(obj, list) and all(isinstance(x, str) for x in obj)


# --- Getters ---


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table; a missing or non-table value yields a new empty dict."""
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def get_string_list_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: list[Diagnostic],
) -> list[str] | None:
    """Extract a list of strings, recording a warning when the shape is wrong.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Section name used in the diagnostic message.
        diagnostics (list[Diagnostic]): Sink for warnings.

    Returns:
        list[str] | None: The list, or None when absent or malformed.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if is_str_list(value):
        return list(value)
    message: str = f"[{where}].{key} must be a list of strings; ignoring {value!r}"
    logger.warning(message)
    diagnostics.append(Diagnostic(DiagnosticLevel.WARNING, message))
    return None


def get_string_map_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: list[Diagnostic],
) -> dict[str, str]:
    """Extract a table of string values, dropping (and reporting) other entries."""
    sub: TomlTable = get_table_value(table, key)
    out: dict[str, str] = {}
    for k, v in sub.items():
        if isinstance(v, str):
            out[k] = v
        else:
            message: str = f"[{where}.{key}].{k} must be a string; ignoring {v!r}"
            logger.warning(message)
            diagnostics.append(Diagnostic(DiagnosticLevel.WARNING, message))
    return out


def check_unknown_keys(data: TomlTable, diagnostics: list[Diagnostic]) -> None:
    """Record a warning for every unknown section or key in ``data``."""
    for section, body in data.items():
        if section not in Toml.ALLOWED_TOP_LEVEL_KEYS:
            message: str = f"Unknown configuration section [{section}]"
            logger.warning(message)
            diagnostics.append(Diagnostic(DiagnosticLevel.WARNING, message))
            continue
        if not is_toml_table(body):
            continue
        allowed: frozenset[str] = Toml.ALLOWED_SECTION_KEYS.get(section, frozenset())
        for key in body:
            if key not in allowed:
                message = f"Unknown key '{key}' in [{section}]"
                logger.warning(message)
                diagnostics.append(Diagnostic(DiagnosticLevel.WARNING, message))


# --- Loaders ---


def load_defaults_dict() -> TomlTable:
    """Return DocMark's **runtime defaults** as a new dict (no I/O).

    The bundled ``docmark-default.toml`` documents the same values for humans; the
    runtime defaults live in code so DocMark works even if that resource is missing.
    """
    return {
        Toml.SECTION_TAGS: {
            Toml.KEY_PARAM: ["@param", "@phpstan-param", "@psalm-param"],
            Toml.KEY_RETURN: ["@return", "@phpstan-return", "@psalm-return"],
            Toml.KEY_VAR: ["@var", "@phpstan-var", "@psalm-var"],
            Toml.KEY_THROWS: ["@throws"],
            Toml.KEY_FLAGS: ["@required", "@api", "@internal"],
        },
        Toml.SECTION_ANNOTATIONS: {
            Toml.KEY_ALIASES: {
                "ORM": "Doctrine\\ORM\\Mapping",
                "Assert": "Symfony\\Component\\Validator\\Constraints",
                "Route": "Symfony\\Component\\Routing\\Annotation\\Route",
            },
            Toml.KEY_SILENT_KEYS: {
                "Symfony\\Component\\Routing\\Annotation\\Route": "path",
            },
        },
        Toml.SECTION_PRINTER: {
            Toml.KEY_NEWLINE: "lf",
        },
    }


def load_default_config_template_toml_text() -> str:
    """Return the annotated bundled template, without its license header.

    Falls back to rendering the runtime defaults when the resource is unreadable.
    """
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    try:
        text: str = resource.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Cannot read packaged default config template %s: %s", resource, exc)
        return to_toml(load_defaults_dict())

    lines: list[str] = text.splitlines(keepends=True)
    for i, line in enumerate(lines):
        if line.strip() == f"# {HEADER_END_MARKER}":
            return "".join(lines[i + 1 :]).lstrip("\n")
    return text


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to ``docmark.toml``, ``pyproject.toml`` or any TOML file.

    Returns:
        TomlTable: The parsed document as plain Python values.

    Raises:
        ConfigLoadError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        raise ConfigLoadError(f"Cannot read {path}: {exc}") from exc
    except TomlkitParseError as exc:
        raise ConfigLoadError(f"Invalid TOML in {path}: {exc}") from exc
    data: Any = doc.unwrap()
    return cast("TomlTable", data) if isinstance(data, dict) else {}


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document.
    """
    return tomlkit.dumps(toml_dict)
