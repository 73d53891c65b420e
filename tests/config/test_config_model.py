# topmark:header:start
#
#   project      : DocMark
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model: defaults, layering and freeze/thaw."""

from __future__ import annotations

import dataclasses

import pytest

from docmark.config import Config, ConfigLoadError, MutableConfig
from docmark.core.diagnostics import DiagnosticLevel


def test_defaults() -> None:
    """The runtime defaults cover the structural tags, flags and aliases."""
    config: Config = MutableConfig.from_defaults().freeze()
    assert config.structural_tags["param"] == ("@param", "@phpstan-param", "@psalm-param")
    assert config.flag_tags == ("@required", "@api", "@internal")
    assert config.aliases["ORM"] == "Doctrine\\ORM\\Mapping"
    assert config.newline == "\n"
    assert config.diagnostics == ()


def test_structural_tag_map() -> None:
    """Tag names map to their grammar key, lowercased."""
    m: MutableConfig = MutableConfig.from_defaults()
    m.structural_tags["var"] = ["@Var", "type"]
    table: dict[str, str] = m.freeze().structural_tag_map()
    assert table["@var"] == "var"
    assert table["@type"] == "var"
    assert table["@phpstan-return"] == "return"


def test_freeze_thaw_round_trip() -> None:
    """Thawing gives an independent builder with the same values."""
    config: Config = MutableConfig.from_defaults().freeze()
    draft: MutableConfig = config.thaw()
    draft.flag_tags = ["@todo"]
    assert draft.freeze().flag_tags == ("@todo",)
    assert config.flag_tags == ("@required", "@api", "@internal")
    assert config.thaw().freeze() == config


def test_frozen_config_is_immutable() -> None:
    """Frozen snapshots reject attribute assignment."""
    config: Config = MutableConfig.from_defaults().freeze()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.newline = "\r\n"  # type: ignore[misc]


def test_merge_overrides_and_unions() -> None:
    """Scalars and lists are replaced; tables are merged key by key."""
    base: MutableConfig = MutableConfig.from_defaults()
    layer: MutableConfig = MutableConfig.from_toml_dict(
        {
            "tags": {"throws": ["@throws", "@exception"], "flags": []},
            "annotations": {"aliases": {"Gedmo": "Gedmo\\Mapping\\Annotation"}},
            "printer": {"newline": "crlf"},
        }
    )
    merged: Config = base.merge_with(layer).freeze()
    assert merged.structural_tags["throws"] == ("@throws", "@exception")
    assert merged.structural_tags["param"] == ("@param", "@phpstan-param", "@psalm-param")
    assert merged.flag_tags == ()
    assert merged.aliases["Gedmo"] == "Gedmo\\Mapping\\Annotation"
    assert merged.aliases["ORM"] == "Doctrine\\ORM\\Mapping"
    assert merged.newline == "\r\n"


def test_unset_values_do_not_override() -> None:
    """An empty layer leaves the defaults in place."""
    base: MutableConfig = MutableConfig.from_defaults()
    merged: Config = base.merge_with(MutableConfig.from_toml_dict({})).freeze()
    assert merged == base.freeze()


def test_invalid_newline_is_an_error() -> None:
    """Only ``lf`` and ``crlf`` are accepted."""
    with pytest.raises(ConfigLoadError):
        MutableConfig.from_toml_dict({"printer": {"newline": "cr"}})


def test_malformed_values_become_diagnostics() -> None:
    """Wrong shapes are dropped with a warning instead of failing the load."""
    draft: MutableConfig = MutableConfig.from_toml_dict(
        {
            "tags": {"param": "@param", "flags": ["@api", 3]},
            "annotations": {"aliases": {"ORM": 1, "Assert": "Symfony\\Constraints"}},
        }
    )
    assert "param" not in draft.structural_tags
    assert draft.flag_tags is None
    assert draft.aliases == {"Assert": "Symfony\\Constraints"}
    assert len(draft.diagnostics) == 3
    assert all(d.level == DiagnosticLevel.WARNING for d in draft.diagnostics)


def test_unknown_keys_are_reported() -> None:
    """Unknown sections and keys are reported, known ones still load."""
    draft: MutableConfig = MutableConfig.from_toml_dict(
        {"colors": {"x": 1}, "printer": {"newline": "lf", "width": 80}}
    )
    messages: list[str] = [d.message for d in draft.diagnostics]
    assert "Unknown configuration section [colors]" in messages
    assert "Unknown key 'width' in [printer]" in messages
    assert draft.newline == "\n"


def test_to_toml_dict() -> None:
    """The TOML view mirrors the file layout."""
    data = MutableConfig.from_defaults().freeze().to_toml_dict()
    assert data["tags"]["flags"] == ["@required", "@api", "@internal"]
    assert data["printer"]["newline"] == "lf"
    assert data["annotations"]["silent_keys"] == {
        "Symfony\\Component\\Routing\\Annotation\\Route": "path"
    }
