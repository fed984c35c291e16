"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from lintlevels.catalog import Catalog, Lint, LintGroup, build_catalog
from lintlevels.levels import Level
from lintlevels.rules import default_catalog


@pytest.fixture
def catalog() -> Catalog:
    """The builtin cargo catalog."""
    return default_catalog()


@pytest.fixture
def small_catalog() -> Catalog:
    """Two groups with distinct defaults, plus the `unknown_lints` lint."""
    groups = [
        LintGroup(id="suspicious", default_level=Level.WARN, description="likely wrong"),
        LintGroup(id="pedantic", default_level=Level.ALLOW, description="strict"),
    ]
    lints = [
        Lint(id="unknown_lints", group="suspicious", default_level=Level.WARN, description="unknown lint"),
        Lint(id="odd_thing", group="suspicious", default_level=Level.DENY, description="odd"),
        Lint(id="picky", group="pedantic", default_level=Level.ALLOW, description="picky"),
        Lint(id="pickier", group="pedantic", default_level=Level.WARN, description="pickier"),
    ]
    return build_catalog(lints, groups)


@pytest.fixture
def write_manifest(tmp_path: Path):
    """Write a Cargo.toml under tmp_path (optionally in a subdirectory)."""

    def _write(text: str, subdir: str | None = None) -> Path:
        root = tmp_path / subdir if subdir else tmp_path
        root.mkdir(parents=True, exist_ok=True)
        path = root / "Cargo.toml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
