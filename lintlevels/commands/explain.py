"""Explain and list command implementations."""

from rich.console import Console
from rich.markup import escape
from rich.markdown import Markdown
from rich.table import Table

from ..catalog import NameKind
from ..rules import default_catalog


def run_explain(name: str) -> int:
    """Explain a lint or lint group.

    Args:
        name: Lint or group name, with or without the tool prefix

    Returns:
        Exit code (0 = success, 1 = name not found)
    """
    console = Console()
    catalog = default_catalog()

    bare = catalog.canonical_name(name.strip())
    kind = catalog.classify(bare)

    if kind is NameKind.UNKNOWN:
        console.print(f"Unknown lint or group: {escape(name)}", style="bold red")
        console.print()
        console.print("Known lints:", style="bold")
        for lint_id in catalog.all_lints():
            console.print(f"  - {lint_id}")
        return 1

    if kind is NameKind.GROUP:
        group = catalog.group(bare)
        explanation = f"""# {catalog.prefix}{group.id}

**Default level**: `{group.default_level}`

{group.description}

## Lints

"""
        for lint_id in sorted(catalog.members(group.id)):
            explanation += f"- `{lint_id}`: {catalog.lint(lint_id).description}\n"
        console.print(Markdown(explanation))
        return 0

    lint = catalog.lint(bare)
    explanation = f"""# {catalog.prefix}{lint.id}

**Group**: `{lint.group}`

**Default level**: `{lint.default_level}`

{lint.rationale}
"""
    if lint.feature_gate:
        explanation += f"\n**Requires**: `cargo-features = [\"{lint.feature_gate.replace('_', '-')}\"]`\n"
    if lint.docs:
        explanation += "\n" + lint.docs.strip() + "\n"

    console.print(Markdown(explanation))
    return 0


def run_list() -> int:
    """List all lints and lint groups."""
    console = Console()
    catalog = default_catalog()

    groups = Table(title="Lint groups")
    groups.add_column("Group", style="cyan")
    groups.add_column("Default")
    groups.add_column("Description", style="dim")
    for group_id in catalog.all_groups():
        group = catalog.group(group_id)
        if group.hidden:
            continue
        groups.add_row(group.id, str(group.default_level), group.description)

    lints = Table(title="Lints")
    lints.add_column("Lint", style="cyan")
    lints.add_column("Group")
    lints.add_column("Default")
    lints.add_column("Description", style="dim")
    for lint_id in catalog.all_lints():
        lint = catalog.lint(lint_id)
        if catalog.group(lint.group).hidden:
            continue
        lints.add_row(lint.id, lint.group, str(lint.default_level), lint.description)

    console.print(groups)
    console.print()
    console.print(lints)
    return 0
