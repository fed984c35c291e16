"""Check and levels command implementations."""

import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import load_enabled_features, load_manifest_lints
from ..detector import LintReport, Problem, ProblemKind, analyze
from ..levels import Level
from ..resolver import emitted_source, resolve_lint
from ..rules import default_catalog


def _load_report(manifest_path: Path) -> LintReport:
    catalog = default_catalog()
    config = load_manifest_lints(manifest_path, tool=catalog.tool)
    features = load_enabled_features(manifest_path)
    return analyze(catalog, config, features)


def _problem_title(problem: Problem) -> str:
    if problem.kind is ProblemKind.FEATURE_NOT_ENABLED:
        return f"use of unstable lint `{problem.raw_name}`"
    return f"unknown lint: `{problem.raw_name}`"


def run_check(manifest_path: Path, output_json: bool = False) -> int:
    """Report unknown or feature-gated names in a manifest's lint table.

    Args:
        manifest_path: Path to the manifest
        output_json: Output problems as JSON instead of human-readable

    Returns:
        Exit code (0 = success, 1 = error-level problems found)
    """
    console = Console(stderr=True)
    console.print(f"Checking lints in {escape(str(manifest_path))}...", style="dim")

    catalog = default_catalog()
    report = _load_report(manifest_path)
    reported = [p for p in report.problems if p.severity is not Level.ALLOW]

    if output_json:
        output = {
            "problems": [p.to_dict() for p in reported],
            "summary": {
                "errors": report.error_count,
                "warnings": sum(1 for p in reported if p.severity is Level.WARN),
            },
        }
        print(json.dumps(output, indent=2))
        return 1 if report.error_count else 0

    note_shown = False
    for problem in reported:
        if problem.severity.is_error():
            console.print(f"error: {escape(_problem_title(problem))}", style="bold red")
        else:
            console.print(f"warning: {escape(_problem_title(problem))}", style="yellow")

        if problem.kind is ProblemKind.FEATURE_NOT_ENABLED:
            dashed = problem.feature.replace("_", "-")
            console.print(f"  = note: this is behind `{dashed}`, which is not enabled", style="dim")
            console.print(
                f'  = help: consider adding `cargo-features = ["{dashed}"]` to the top of the manifest',
                style="cyan",
            )
            continue

        # The source note is printed once, on the first unknown name
        if not note_shown and report.unknown_lints is not None:
            console.print(f"  = note: {escape(emitted_source(report.unknown_lints, catalog.tool))}", style="dim")
            note_shown = True
        if problem.candidate:
            console.print(
                f"  = help: there is a {problem.candidate_kind} with a similar name: `{problem.candidate}`",
                style="cyan",
            )

    console.print()
    if report.error_count:
        console.print(f"❌ {report.error_count} error(s)", style="bold red")
        return 1
    if reported:
        console.print(f"⚠️  {len(reported)} warning(s)", style="yellow")
    else:
        console.print("✓ No lint configuration problems", style="green")
    return 0


def run_levels(manifest_path: Path, output_json: bool = False) -> int:
    """Print the effective level of every lint for a manifest.

    Returns:
        Exit code (always 0; configuration problems are reported by `check`)
    """
    catalog = default_catalog()
    config = load_manifest_lints(manifest_path, tool=catalog.tool)

    resolutions = [resolve_lint(catalog, config, lint_id) for lint_id in catalog.all_lints()]

    if output_json:
        output = {
            r.lint: {
                "level": str(r.level),
                "source": r.source.value,
                "priority": r.priority,
                "group": catalog.lint(r.lint).group,
            }
            for r in resolutions
        }
        print(json.dumps(output, indent=2))
        return 0

    console = Console()
    table = Table(title=f"Lint levels for {escape(str(manifest_path))}")
    table.add_column("Lint", style="cyan", no_wrap=True)
    table.add_column("Group")
    table.add_column("Level")
    table.add_column("Source", style="dim")

    level_styles = {
        Level.ALLOW: "dim",
        Level.WARN: "yellow",
        Level.DENY: "red",
        Level.FORBID: "bold red",
    }
    for r in resolutions:
        table.add_row(
            f"{catalog.prefix}{r.lint}",
            catalog.lint(r.lint).group,
            f"[{level_styles[r.level]}]{r.level}[/]",
            escape(r.source.describe()),
        )

    console.print(table)
    return 0
