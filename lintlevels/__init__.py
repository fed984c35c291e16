"""Lint registry and level resolution for `[lints]` tables."""

__version__ = "0.1.0"

from .catalog import (
    Catalog,
    CatalogError,
    DuplicateGroup,
    DuplicateLint,
    Lint,
    LintGroup,
    MissingLint,
    NameCollision,
    NameKind,
    UnknownGroupReference,
    build_catalog,
)
from .config import InvalidLintConfig, InvalidLintLevel, LintConfig, LintConfigError, LintSetting
from .detector import LintReport, Problem, ProblemKind, analyze, check_feature_gates, detect
from .levels import Level, LevelSource
from .resolver import Resolution, ResolvedLevels, emitted_source, resolve, resolve_lint
from .rules import UNKNOWN_LINTS, default_catalog

__all__ = [
    "__version__",
    "Catalog",
    "CatalogError",
    "DuplicateGroup",
    "DuplicateLint",
    "InvalidLintConfig",
    "InvalidLintLevel",
    "Level",
    "LevelSource",
    "Lint",
    "LintConfig",
    "LintConfigError",
    "LintGroup",
    "LintReport",
    "LintSetting",
    "MissingLint",
    "NameCollision",
    "NameKind",
    "Problem",
    "ProblemKind",
    "Resolution",
    "ResolvedLevels",
    "UNKNOWN_LINTS",
    "UnknownGroupReference",
    "analyze",
    "build_catalog",
    "check_feature_gates",
    "default_catalog",
    "detect",
    "emitted_source",
    "resolve",
    "resolve_lint",
]
