# topmark:header:start
#
#   project      : DocMark
#   file         : model.py
#   file_relpath : src/docmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used to build the engine.
    - `MutableConfig`: a mutable builder used while loading and merging; it can be
      frozen into `Config` and thawed back for edits.

Merge policy (`MutableConfig.merge_with`): last wins. Tag lists are replaced as a
whole; alias and silent-key tables are merged key by key.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from docmark.config.io import (
    ConfigLoadError,
    check_unknown_keys,
    get_string_list_value_checked,
    get_string_map_value_checked,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from docmark.config.keys import Toml
from docmark.config.logging import DocmarkLogger, get_logger
from docmark.core.diagnostics import Diagnostic, DiagnosticLevel

if TYPE_CHECKING:
    from docmark.config.io import TomlTable

logger: DocmarkLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for DocMark.

    Attributes:
        structural_tags (dict[str, tuple[str, ...]]): Tag names per structural grammar
            key (``param``, ``return``, ``var``, ``throws``).
        flag_tags (tuple[str, ...]): Tags handled by the flag matcher.
        aliases (dict[str, str]): Namespace aliases for annotation name resolution.
        silent_keys (dict[str, str]): Positional-argument key per annotation FQN.
        newline (str): Newline for docblocks synthesized from scratch.
        config_files (tuple[Path, ...]): Files this snapshot was loaded from.
        diagnostics (tuple[Diagnostic, ...]): Problems found while loading.
    """

    structural_tags: dict[str, tuple[str, ...]]
    flag_tags: tuple[str, ...]
    aliases: dict[str, str]
    silent_keys: dict[str, str]
    newline: str
    config_files: tuple[Path, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def structural_tag_map(self) -> dict[str, str]:
        """Return a ``tag name -> grammar key`` table (names lowercased, ``@`` included)."""
        out: dict[str, str] = {}
        for key, names in self.structural_tags.items():
            if key not in Toml.STRUCTURAL_KEYS:
                continue
            for name in names:
                out["@" + name.lstrip("@").lower()] = key
        return out

    def to_toml_dict(self) -> TomlTable:
        """Return this snapshot as a TOML-compatible dict."""
        newline_key: str = next(
            (k for k, v in Toml.NEWLINE_VALUES.items() if v == self.newline), "lf"
        )
        tags: TomlTable = {k: list(v) for k, v in self.structural_tags.items()}
        tags[Toml.KEY_FLAGS] = list(self.flag_tags)
        return {
            Toml.SECTION_TAGS: tags,
            Toml.SECTION_ANNOTATIONS: {
                Toml.KEY_ALIASES: dict(self.aliases),
                Toml.KEY_SILENT_KEYS: dict(self.silent_keys),
            },
            Toml.SECTION_PRINTER: {Toml.KEY_NEWLINE: newline_key},
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            structural_tags={k: list(v) for k, v in self.structural_tags.items()},
            flag_tags=list(self.flag_tags),
            aliases=dict(self.aliases),
            silent_keys=dict(self.silent_keys),
            newline=self.newline,
            config_files=list(self.config_files),
            diagnostics=list(self.diagnostics),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used while loading and merging.

    ``None`` values mean "not set here" and let lower layers show through when
    merging.
    """

    structural_tags: dict[str, list[str]] = field(default_factory=dict)
    flag_tags: list[str] | None = None
    aliases: dict[str, str] = field(default_factory=dict)
    silent_keys: dict[str, str] = field(default_factory=dict)
    newline: str | None = None
    config_files: list[Path] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    # ---------------------------- Build/freeze ----------------------------

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`."""
        return Config(
            structural_tags={k: tuple(v) for k, v in self.structural_tags.items()},
            flag_tags=tuple(self.flag_tags or ()),
            aliases=dict(self.aliases),
            silent_keys=dict(self.silent_keys),
            newline=self.newline or Toml.NEWLINE_VALUES["lf"],
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Load configuration from a TOML file.

        For ``pyproject.toml`` the ``[tool.docmark]`` table is used.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig: The configuration layer defined by that file.

        Raises:
            ConfigLoadError: If the file cannot be read or decoded.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path)
        if path.name == "pyproject.toml":
            data = get_table_value(get_table_value(data, "tool"), "docmark")
        draft: MutableConfig = cls.from_toml_dict(data)
        draft.config_files.append(path)
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableConfig:
        """Build a configuration layer from a parsed TOML mapping.

        Malformed values are dropped with a warning diagnostic.

        Raises:
            ConfigLoadError: If ``[printer].newline`` is not a known newline name.
        """
        diagnostics: list[Diagnostic] = []
        check_unknown_keys(data, diagnostics)

        tags: TomlTable = get_table_value(data, Toml.SECTION_TAGS)
        structural: dict[str, list[str]] = {}
        for key in Toml.STRUCTURAL_KEYS:
            names: list[str] | None = get_string_list_value_checked(
                tags, key, where=Toml.SECTION_TAGS, diagnostics=diagnostics
            )
            if names is not None:
                structural[key] = names
        flags: list[str] | None = get_string_list_value_checked(
            tags, Toml.KEY_FLAGS, where=Toml.SECTION_TAGS, diagnostics=diagnostics
        )

        annotations: TomlTable = get_table_value(data, Toml.SECTION_ANNOTATIONS)
        aliases: dict[str, str] = get_string_map_value_checked(
            annotations, Toml.KEY_ALIASES, where=Toml.SECTION_ANNOTATIONS, diagnostics=diagnostics
        )
        silent_keys: dict[str, str] = get_string_map_value_checked(
            annotations,
            Toml.KEY_SILENT_KEYS,
            where=Toml.SECTION_ANNOTATIONS,
            diagnostics=diagnostics,
        )

        printer: TomlTable = get_table_value(data, Toml.SECTION_PRINTER)
        newline: str | None = None
        raw_newline: object = printer.get(Toml.KEY_NEWLINE)
        if raw_newline is not None:
            if not isinstance(raw_newline, str) or raw_newline.lower() not in Toml.NEWLINE_VALUES:
                raise ConfigLoadError(
                    f"[{Toml.SECTION_PRINTER}].{Toml.KEY_NEWLINE} must be one of "
                    f"{', '.join(Toml.NEWLINE_VALUES)}; got {raw_newline!r}"
                )
            newline = Toml.NEWLINE_VALUES[raw_newline.lower()]

        return cls(
            structural_tags=structural,
            flag_tags=flags,
            aliases=aliases,
            silent_keys=silent_keys,
            newline=newline,
            diagnostics=diagnostics,
        )

    @classmethod
    def load_merged(cls, config_file: Path | None = None) -> MutableConfig:
        """Return the defaults, overridden by ``config_file`` when given."""
        draft: MutableConfig = cls.from_defaults()
        if config_file is not None:
            draft = draft.merge_with(cls.from_toml_file(config_file))
        for diag in draft.diagnostics:
            if diag.level == DiagnosticLevel.WARNING:
                logger.debug("Config diagnostic: %s", diag)
        return draft

    # ------------------------------- Merging -------------------------------

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Args:
            other (MutableConfig): The higher-precedence layer.

        Returns:
            MutableConfig: The merged configuration.
        """
        return MutableConfig(
            structural_tags={**self.structural_tags, **other.structural_tags},
            flag_tags=other.flag_tags if other.flag_tags is not None else self.flag_tags,
            aliases={**self.aliases, **other.aliases},
            silent_keys={**self.silent_keys, **other.silent_keys},
            newline=other.newline if other.newline is not None else self.newline,
            config_files=self.config_files + other.config_files,
            diagnostics=self.diagnostics + other.diagnostics,
        )
