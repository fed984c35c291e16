"""
Builtin lint and group tables.

Both tables are kept sorted by id; tests enforce it.
"""

from __future__ import annotations

from functools import lru_cache

from .catalog import Catalog, Lint, LintGroup, build_catalog
from .levels import Level

UNKNOWN_LINTS = "unknown_lints"

# Feature that unlocks lints meant only for this package's own tests
TEST_DUMMY_UNSTABLE = "test_dummy_unstable"

LINT_GROUPS: tuple[LintGroup, ...] = (
    LintGroup(
        id="complexity",
        default_level=Level.WARN,
        description="code that does something simple but in a complex way",
    ),
    LintGroup(
        id="correctness",
        default_level=Level.DENY,
        description="code that is outright wrong or useless",
    ),
    LintGroup(
        id="nursery",
        default_level=Level.ALLOW,
        description="new lints that are still under development",
    ),
    LintGroup(
        id="pedantic",
        default_level=Level.ALLOW,
        description="lints which are rather strict or have occasional false positives",
    ),
    LintGroup(
        id="perf",
        default_level=Level.WARN,
        description="code that can be written to run faster",
    ),
    LintGroup(
        id="restriction",
        default_level=Level.ALLOW,
        description="lints which prevent the use of Cargo features",
    ),
    LintGroup(
        id="style",
        default_level=Level.WARN,
        description="code that should be written in a more idiomatic way",
    ),
    LintGroup(
        id="suspicious",
        default_level=Level.WARN,
        description="code that is most likely wrong or useless",
    ),
    LintGroup(
        id="test_dummy_unstable",
        default_level=Level.ALLOW,
        description="test_dummy_unstable is meant to only be used in tests",
        feature_gate=TEST_DUMMY_UNSTABLE,
        hidden=True,
    ),
)

LINTS: tuple[Lint, ...] = (
    Lint(
        id="im_a_teapot",
        group="test_dummy_unstable",
        default_level=Level.ALLOW,
        description="`im_a_teapot` is specified",
        rationale="Exercises feature-gated lints in tests.",
        feature_gate=TEST_DUMMY_UNSTABLE,
    ),
    Lint(
        id="implicit_features",
        group="nursery",
        default_level=Level.ALLOW,
        description="implicit features for optional dependencies",
        rationale="Optional dependencies silently become public features.",
        docs="""
### What it does
Checks for implicit features for optional dependencies

### Why it is bad
By default, optional dependencies become a feature of the same name. This
exposes the dependency name as part of the package's public interface.

### Example
```toml
[dependencies]
bar = { version = "0.1.0", optional = true }
```
""",
    ),
    Lint(
        id=UNKNOWN_LINTS,
        group="suspicious",
        default_level=Level.WARN,
        description="unknown lint",
        rationale=(
            "A misspelled lint name silently does nothing, and it may collide "
            "with a lint added under that name later."
        ),
        docs="""
### What it does
Checks for unknown lints in the `[lints.cargo]` table

### Why it is bad
- The lint name could be misspelled, leading to confusion as to why it is
  not working as expected
- The unknown lint could end up causing an error if `cargo` decides to make
  a lint with the same name in the future

### Example
```toml
[lints.cargo]
this-lint-does-not-exist = "warn"
```
""",
    ),
    Lint(
        id="unused_optional_dependency",
        group="suspicious",
        default_level=Level.WARN,
        description="unused optional dependency",
        rationale="An optional dependency no feature enables can never be built.",
        docs="""
### What it does
Checks for optional dependencies that are not activated by any feature

### Why it is bad
The dependency can never be enabled, so it only adds noise to the manifest.

### Example
```toml
[dependencies]
bar = { version = "0.1.0", optional = true }

[features]
default = []
```
""",
    ),
)


@lru_cache(maxsize=None)
def default_catalog() -> Catalog:
    """The builtin catalog, built on first use and shared afterwards."""
    return build_catalog(LINTS, LINT_GROUPS, tool="cargo")
