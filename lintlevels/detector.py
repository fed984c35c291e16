"""
Unknown-name detection for lint configuration.

Unknown names are findings of the ordinary `unknown_lints` lint: their
severity is whatever the resolver says `unknown_lints` is set to, so users
silence them the same way as any other lint.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Literal, Mapping

from .catalog import Catalog, MissingLint, NameKind
from .config import LintConfig
from .levels import Level
from .resolver import Resolution, ResolvedLevels, resolve, resolve_lint
from .rules import UNKNOWN_LINTS

logger = logging.getLogger(__name__)


class ProblemKind(str, Enum):
    UNKNOWN_NAME = "unknown_name"
    FEATURE_NOT_ENABLED = "feature_not_enabled"


@dataclass(frozen=True)
class Problem:
    """A reportable issue with a configured lint name."""

    kind: ProblemKind
    raw_name: str
    severity: Level
    candidate: str | None = None  # "did you mean" suggestion
    candidate_kind: Literal["lint", "group"] | None = None
    feature: str | None = None  # for FEATURE_NOT_ENABLED

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "name": self.raw_name,
            "severity": str(self.severity),
            "candidate": self.candidate,
            "candidate_kind": self.candidate_kind,
            "feature": self.feature,
        }


@dataclass
class LintReport:
    """Resolved levels plus every problem found in the configuration."""

    levels: ResolvedLevels
    problems: list[Problem] = field(default_factory=list)
    unknown_lints: Resolution | None = None

    @property
    def error_count(self) -> int:
        return sum(1 for p in self.problems if p.severity.is_error())


def _similar_name(catalog: Catalog, name: str) -> tuple[str | None, Literal["lint", "group"] | None]:
    underscored = catalog.canonical_name(name).replace("-", "_")
    if catalog.lint(underscored) is not None:
        return underscored, "lint"
    if catalog.group(underscored) is not None:
        return underscored, "group"
    return None, None


def unknown_lints_level(catalog: Catalog, config: Mapping[str, Any]) -> Resolution:
    """Resolve the `unknown_lints` lint through the ordinary resolver."""
    if catalog.lint(UNKNOWN_LINTS) is None:
        raise MissingLint(UNKNOWN_LINTS)
    return resolve_lint(catalog, config, UNKNOWN_LINTS)


def detect(catalog: Catalog, config: Mapping[str, Any]) -> list[Problem]:
    """
    Report configured names that are neither a known lint nor a known group.

    Problems follow the configuration's own key order and all carry the
    resolved level of `unknown_lints`, including ``Level.ALLOW``.

    Raises:
        MissingLint: If the catalog has no `unknown_lints` entry
    """
    config = LintConfig.from_mapping(config)
    severity = unknown_lints_level(catalog, config).level

    problems = []
    for name in config:
        if catalog.classify(name) is not NameKind.UNKNOWN:
            continue
        candidate, candidate_kind = _similar_name(catalog, name)
        problems.append(
            Problem(
                kind=ProblemKind.UNKNOWN_NAME,
                raw_name=name,
                severity=severity,
                candidate=candidate,
                candidate_kind=candidate_kind,
            )
        )

    if problems:
        logger.debug(f"{len(problems)} unknown lint name(s) at level {severity}")
    return problems


def check_feature_gates(
    catalog: Catalog,
    config: Mapping[str, Any],
    enabled_features: Iterable[str] = (),
) -> list[Problem]:
    """Report configured lints and groups whose unstable feature is not enabled."""
    config = LintConfig.from_mapping(config)
    enabled = frozenset(enabled_features)

    problems = []
    for name in config:
        bare = catalog.canonical_name(name)
        entry = catalog.lint(bare) or catalog.group(bare)
        if entry is None or entry.feature_gate is None:
            continue
        if entry.feature_gate in enabled:
            continue
        problems.append(
            Problem(
                kind=ProblemKind.FEATURE_NOT_ENABLED,
                raw_name=name,
                severity=Level.DENY,
                feature=entry.feature_gate,
            )
        )
    return problems


def analyze(
    catalog: Catalog,
    config: Mapping[str, Any],
    enabled_features: Iterable[str] = (),
) -> LintReport:
    """Resolve every lint and collect unknown-name and feature-gate problems."""
    config = LintConfig.from_mapping(config)
    problems = detect(catalog, config)
    problems.extend(check_feature_gates(catalog, config, enabled_features))
    return LintReport(
        levels=resolve(catalog, config),
        problems=problems,
        unknown_lints=unknown_lints_level(catalog, config),
    )
