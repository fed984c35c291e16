"""Tests for lint configuration coercion and manifest loading."""

from pathlib import Path

import pytest

from lintlevels.config import (
    InvalidLintConfig,
    InvalidLintLevel,
    LintConfig,
    LintSetting,
    load_enabled_features,
    load_manifest_lints,
)
from lintlevels.levels import Level


def test_from_mapping_accepts_all_value_forms():
    config = LintConfig.from_mapping(
        {
            "a": "warn",
            "b": Level.DENY,
            "c": {"level": "forbid", "priority": -1},
            "d": LintSetting(Level.ALLOW, 3),
        }
    )
    assert config["a"] == LintSetting(Level.WARN)
    assert config["b"] == LintSetting(Level.DENY)
    assert config["c"] == LintSetting(Level.FORBID, -1)
    assert config["d"] == LintSetting(Level.ALLOW, 3)
    assert config.level_of("a") is Level.WARN
    assert config.level_of("missing") is None


def test_from_mapping_keeps_key_order():
    config = LintConfig.from_mapping({"z": "warn", "a": "warn"})
    assert list(config) == ["z", "a"]


def test_from_mapping_passes_existing_config_through():
    config = LintConfig.from_mapping({"a": "warn"})
    assert LintConfig.from_mapping(config) is config


def test_bad_level_word():
    with pytest.raises(InvalidLintLevel) as exc:
        LintConfig.from_mapping({"a": "loud"})
    assert exc.value.name == "a"
    assert "loud" in str(exc.value)


@pytest.mark.parametrize("word", ["Warn", "DENY", " allow", "forbid "])
def test_level_words_are_lowercase_only(word):
    with pytest.raises(InvalidLintLevel) as exc:
        LintConfig.from_mapping({"a": word})
    assert exc.value.value == word


def test_bad_value_type():
    with pytest.raises(InvalidLintLevel):
        LintConfig.from_mapping({"a": 3})


def test_table_without_level():
    with pytest.raises(InvalidLintConfig):
        LintConfig.from_mapping({"a": {"priority": 1}})


def test_table_with_bad_priority():
    with pytest.raises(InvalidLintConfig):
        LintConfig.from_mapping({"a": {"level": "warn", "priority": "high"}})


def test_load_package_lints(write_manifest):
    path = write_manifest(
        """
[package]
name = "foo"
version = "0.1.0"

[lints.cargo]
this-lint-does-not-exist = "warn"
unknown_lints = { level = "deny", priority = 1 }

[lints.rust]
unsafe_code = "forbid"
"""
    )
    config = load_manifest_lints(path)
    assert list(config) == ["this-lint-does-not-exist", "unknown_lints"]
    assert config["unknown_lints"] == LintSetting(Level.DENY, 1)


def test_manifest_without_lints(write_manifest):
    path = write_manifest('[package]\nname = "foo"\n')
    assert len(load_manifest_lints(path)) == 0


def test_inherits_lints_from_same_manifest(write_manifest):
    path = write_manifest(
        """
[workspace]
members = []

[workspace.lints.cargo]
suspicious = "deny"

[package]
name = "foo"

[lints]
workspace = true
"""
    )
    assert load_manifest_lints(path).level_of("suspicious") is Level.DENY


def test_inherits_lints_from_ancestor_workspace(write_manifest):
    write_manifest(
        """
[workspace]
members = ["crates/foo"]

[workspace.lints.cargo]
unknown_lints = "allow"
"""
    )
    member = write_manifest(
        """
[package]
name = "foo"

[lints]
workspace = true
""",
        subdir="crates/foo",
    )
    assert load_manifest_lints(member).level_of("unknown_lints") is Level.ALLOW


def test_inherit_without_workspace(write_manifest):
    path = write_manifest('[package]\nname = "foo"\n\n[lints]\nworkspace = true\n', subdir="lonely")
    with pytest.raises(InvalidLintConfig):
        load_manifest_lints(path)


def test_missing_manifest(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_manifest_lints(tmp_path / "Cargo.toml")


def test_malformed_toml(write_manifest):
    path = write_manifest("[lints.cargo\n")
    with pytest.raises(InvalidLintConfig):
        load_manifest_lints(path)


def test_lints_table_must_be_table(write_manifest):
    path = write_manifest('[lints]\ncargo = "warn"\n')
    with pytest.raises(InvalidLintConfig):
        load_manifest_lints(path)


def test_enabled_features(write_manifest):
    path = write_manifest('cargo-features = ["test-dummy-unstable"]\n\n[package]\nname = "foo"\n')
    assert load_enabled_features(path) == frozenset({"test_dummy_unstable"})
