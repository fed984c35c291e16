"""
Level resolution.

Each lint's effective level comes from exactly one of, highest first:

1. an entry for the lint itself,
2. an entry for the lint's group,
3. the lint's catalog default.

Configured names that match neither a lint nor a group are ignored here;
reporting them is the detector's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .catalog import Catalog
from .config import LintConfig, LintSetting
from .levels import Level, LevelSource

ResolvedLevels = dict[str, Level]


@dataclass(frozen=True)
class Resolution:
    """The effective level of one lint and where it came from."""

    lint: str
    level: Level
    source: LevelSource
    priority: int = 0  # table priority of the entry that set the level


def _configured(catalog: Catalog, config: LintConfig, name: str) -> LintSetting | None:
    # `cargo::name` and `name` are one entry; the qualified spelling wins.
    setting = config.get(catalog.qualified_name(name))
    if setting is None:
        setting = config.get(name)
    return setting


def resolve_lint(catalog: Catalog, config: Mapping[str, Any], lint_id: str) -> Resolution:
    """
    Resolve the effective level of a single lint.

    Raises:
        KeyError: If `lint_id` is not in the catalog
        InvalidLintLevel: If `config` holds a value that is not a level
    """
    lint = catalog.lint(lint_id)
    if lint is None:
        raise KeyError(lint_id)
    config = LintConfig.from_mapping(config)

    setting = _configured(catalog, config, lint.id)
    if setting is not None:
        return Resolution(lint.id, setting.level, LevelSource.LINT, setting.priority)

    setting = _configured(catalog, config, lint.group)
    if setting is not None:
        return Resolution(lint.id, setting.level, LevelSource.GROUP, setting.priority)

    return Resolution(lint.id, lint.default_level, LevelSource.DEFAULT)


def resolve(catalog: Catalog, config: Mapping[str, Any]) -> ResolvedLevels:
    """Resolve every catalog lint, keyed by lint id in catalog order."""
    config = LintConfig.from_mapping(config)
    return {
        lint_id: resolve_lint(catalog, config, lint_id).level
        for lint_id in catalog.all_lints()
    }


def emitted_source(resolution: Resolution, tool: str = "cargo") -> str:
    """Explain a resolution, e.g. "`cargo::unknown_lints` is set to `warn` by default"."""
    return f"`{tool}::{resolution.lint}` is set to `{resolution.level}` {resolution.source.describe()}"
