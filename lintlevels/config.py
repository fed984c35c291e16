"""
User lint configuration.

The core consumes a flat ``name -> level`` mapping. This module coerces raw
values into :class:`LintConfig` and, for the CLI, extracts the
``[lints.<tool>]`` table from a TOML manifest.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Mapping

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

from .levels import Level

MANIFEST_NAME = "Cargo.toml"


class LintConfigError(ValueError):
    """User lint configuration could not be interpreted."""


class InvalidLintLevel(LintConfigError):
    def __init__(self, name: str, value: Any):
        super().__init__(
            f"invalid level {value!r} for lint `{name}`; expected one of: allow, warn, deny, forbid"
        )
        self.name = name
        self.value = value


class InvalidLintConfig(LintConfigError):
    pass


@dataclass(frozen=True)
class LintSetting:
    """One configured entry: a level and its table priority."""

    level: Level
    priority: int = 0


def coerce_level(value: Any) -> Level:
    """Turn a ``Level`` or level word into a ``Level``."""
    if isinstance(value, Level):
        return value
    if isinstance(value, str):
        return Level.parse(value)
    raise ValueError(f"not a lint level: {value!r}")


def _coerce_setting(name: str, value: Any) -> LintSetting:
    if isinstance(value, LintSetting):
        return value

    if isinstance(value, dict):
        if "level" not in value:
            raise InvalidLintConfig(f"lint `{name}` is a table but has no `level` key")
        priority = value.get("priority", 0)
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise InvalidLintConfig(f"priority for lint `{name}` must be an integer, got {priority!r}")
        raw_level = value["level"]
    else:
        priority = 0
        raw_level = value

    try:
        level = coerce_level(raw_level)
    except ValueError:
        raise InvalidLintLevel(name, raw_level) from None
    return LintSetting(level=level, priority=priority)


class LintConfig(Mapping[str, LintSetting]):
    """Read-only, insertion-ordered mapping of configured names to settings."""

    def __init__(self, entries: Mapping[str, LintSetting] | None = None):
        self._entries: dict[str, LintSetting] = dict(entries or {})

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "LintConfig":
        """
        Coerce a raw mapping into a LintConfig.

        Values may be a ``Level``, a level word (``"warn"``), a table
        ``{"level": ..., "priority": ...}`` or a ``LintSetting``.
        An existing LintConfig is returned unchanged.

        Raises:
            InvalidLintLevel: A value is not a recognised level
            InvalidLintConfig: A key or table is malformed
        """
        if isinstance(raw, LintConfig):
            return raw
        entries: dict[str, LintSetting] = {}
        for name, value in raw.items():
            if not isinstance(name, str):
                raise InvalidLintConfig(f"lint names must be strings, got {name!r}")
            entries[name] = _coerce_setting(name, value)
        return cls(entries)

    def __getitem__(self, name: str) -> LintSetting:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k!r}: {str(v.level)!r}" for k, v in self._entries.items())
        return f"LintConfig({{{inner}}})"

    def level_of(self, name: str) -> Level | None:
        setting = self._entries.get(name)
        return setting.level if setting is not None else None


# ============================================================================
# MANIFEST LOADING
# ============================================================================


def _read_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidLintConfig(f"failed to parse {path}: {e}") from e


def _tool_table(data: dict[str, Any], keys: tuple[str, ...]) -> dict[str, Any] | None:
    node: Any = data
    for key in keys:
        if not isinstance(node, dict) or key not in node:
            return None
        node = node[key]
    if not isinstance(node, dict):
        raise InvalidLintConfig(f"`{'.'.join(keys)}` must be a table")
    return node


def _find_workspace_root(manifest_path: Path) -> Path | None:
    """Nearest ancestor manifest that declares ``[workspace]``."""
    for parent in manifest_path.resolve().parent.parents:
        candidate = parent / MANIFEST_NAME
        if candidate.is_file() and "workspace" in _read_toml(candidate):
            return candidate
    return None


def load_manifest_lints(manifest_path: str | Path, tool: str = "cargo") -> LintConfig:
    """
    Load the ``[lints.<tool>]`` table from a manifest.

    When the manifest sets ``[lints] workspace = true`` the table is read
    from ``[workspace.lints.<tool>]``, either in the same manifest or in the
    nearest ancestor workspace manifest.

    Args:
        manifest_path: Path to the manifest (e.g. Cargo.toml)
        tool: Lint tool table to read

    Returns:
        LintConfig (empty if the manifest configures no lints for `tool`)

    Raises:
        FileNotFoundError: If the manifest does not exist
        InvalidLintConfig: If the TOML is malformed or the table has the wrong shape
    """
    path = Path(manifest_path)
    if not path.is_file():
        raise FileNotFoundError(f"Manifest not found: {path}")

    data = _read_toml(path)
    lints = _tool_table(data, ("lints",)) or {}

    if lints.get("workspace") is True:
        if "workspace" in data:
            ws_data = data
        else:
            ws_path = _find_workspace_root(path)
            if ws_path is None:
                raise InvalidLintConfig(f"{path} inherits workspace lints but no workspace root was found")
            ws_data = _read_toml(ws_path)
        table = _tool_table(ws_data, ("workspace", "lints", tool))
    else:
        table = _tool_table(data, ("lints", tool))

    return LintConfig.from_mapping(table or {})


def load_enabled_features(manifest_path: str | Path) -> frozenset[str]:
    """Read ``cargo-features = [...]`` from a manifest, normalised to underscores."""
    data = _read_toml(Path(manifest_path))
    features = data.get("cargo-features", [])
    if not isinstance(features, list):
        raise InvalidLintConfig("`cargo-features` must be an array of strings")
    return frozenset(str(f).replace("-", "_") for f in features)
