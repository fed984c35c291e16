"""
Lint catalog: the static registry of known lints and lint groups.

A catalog is built once from hardcoded lint and group tables and is
read-only afterwards. Lookup is a two-level tagged table:
lint id -> group id -> group record. Groups are one level deep.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from .levels import Level

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """The lint tables are inconsistent (a packaging defect, not user error)."""


class DuplicateLint(CatalogError):
    def __init__(self, lint_id: str):
        super().__init__(f"duplicate lint `{lint_id}`")
        self.lint_id = lint_id


class DuplicateGroup(CatalogError):
    def __init__(self, group_id: str):
        super().__init__(f"duplicate lint group `{group_id}`")
        self.group_id = group_id


class UnknownGroupReference(CatalogError):
    def __init__(self, lint_id: str, group_id: str):
        super().__init__(f"lint `{lint_id}` references unknown group `{group_id}`")
        self.lint_id = lint_id
        self.group_id = group_id


class NameCollision(CatalogError):
    def __init__(self, name: str):
        super().__init__(f"`{name}` is registered as both a lint and a lint group")
        self.name = name


class MissingLint(CatalogError):
    def __init__(self, lint_id: str):
        super().__init__(f"catalog does not register lint `{lint_id}`")
        self.lint_id = lint_id


@dataclass(frozen=True)
class LintGroup:
    """A named bundle of lints sharing one default level."""

    id: str
    default_level: Level
    description: str
    feature_gate: str | None = None
    hidden: bool = False  # left out of listings


@dataclass(frozen=True)
class Lint:
    """A single named check."""

    id: str
    group: str
    default_level: Level
    description: str
    rationale: str = ""
    feature_gate: str | None = None
    # Markdown used by `explain`; None means the lint is undocumented.
    docs: str | None = None


class NameKind(str, Enum):
    LINT = "lint"
    GROUP = "group"
    UNKNOWN = "unknown"


class Catalog:
    """Read-only lint and group registry.

    Use :func:`build_catalog` to construct one; the constructor assumes its
    inputs were already validated.
    """

    def __init__(
        self,
        lints: Mapping[str, Lint],
        groups: Mapping[str, LintGroup],
        tool: str,
    ):
        self._lints = MappingProxyType(dict(lints))
        self._groups = MappingProxyType(dict(groups))
        self.tool = tool

        members: dict[str, set[str]] = {gid: set() for gid in self._groups}
        for lint in self._lints.values():
            members[lint.group].add(lint.id)
        self._members = MappingProxyType({gid: frozenset(ids) for gid, ids in members.items()})

        self._lint_order = tuple(sorted(self._lints))
        self._group_order = tuple(sorted(self._groups))

    def __repr__(self) -> str:
        return f"Catalog(tool={self.tool!r}, lints={len(self._lints)}, groups={len(self._groups)})"

    @property
    def prefix(self) -> str:
        return f"{self.tool}::"

    def lint(self, lint_id: str) -> Lint | None:
        return self._lints.get(lint_id)

    def group(self, group_id: str) -> LintGroup | None:
        return self._groups.get(group_id)

    def all_lints(self) -> tuple[str, ...]:
        """All lint ids, sorted for reproducible output."""
        return self._lint_order

    def all_groups(self) -> tuple[str, ...]:
        return self._group_order

    def members(self, group_id: str) -> frozenset[str]:
        return self._members.get(group_id, frozenset())

    def group_of(self, lint_id: str) -> LintGroup | None:
        lint = self._lints.get(lint_id)
        if lint is None:
            return None
        return self._groups[lint.group]

    def canonical_name(self, name: str) -> str:
        """Strip this catalog's tool prefix (``cargo::``) if present.

        Names carrying another tool's prefix are returned unchanged.
        """
        if name.startswith(self.prefix):
            return name[len(self.prefix):]
        return name

    def qualified_name(self, name: str) -> str:
        return f"{self.prefix}{self.canonical_name(name)}"

    def classify(self, name: str) -> NameKind:
        """Classify a configured name as a known lint, known group or unknown."""
        bare = self.canonical_name(name)
        if bare in self._lints:
            return NameKind.LINT
        if bare in self._groups:
            return NameKind.GROUP
        return NameKind.UNKNOWN


def build_catalog(
    lint_specs: Iterable[Lint],
    group_specs: Iterable[LintGroup],
    tool: str = "cargo",
) -> Catalog:
    """
    Validate lint and group tables and build a catalog.

    Args:
        lint_specs: Lint records, one per lint id
        group_specs: Group records, one per group id
        tool: Namespace prefix used in configured names (``<tool>::name``)

    Raises:
        DuplicateLint: Two lints share an id
        DuplicateGroup: Two groups share an id
        UnknownGroupReference: A lint names a group that was not supplied
        NameCollision: A lint id equals a group id
    """
    groups: dict[str, LintGroup] = {}
    for group in group_specs:
        if group.id in groups:
            raise DuplicateGroup(group.id)
        groups[group.id] = group

    lints: dict[str, Lint] = {}
    for lint in lint_specs:
        if lint.id in lints:
            raise DuplicateLint(lint.id)
        if lint.group not in groups:
            raise UnknownGroupReference(lint.id, lint.group)
        if lint.id in groups:
            raise NameCollision(lint.id)
        lints[lint.id] = lint

    catalog = Catalog(lints, groups, tool)
    logger.debug(f"Built lint catalog: {catalog!r}")
    return catalog
