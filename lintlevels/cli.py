"""CLI entrypoint for lintlevels."""

import sys
from pathlib import Path

import click

from . import __version__
from .catalog import CatalogError
from .config import LintConfigError

MANIFEST = click.Path(exists=False, dir_okay=False, path_type=Path)


def _run(fn, *args) -> None:
    try:
        exit_code = fn(*args)
    except FileNotFoundError as e:
        raise click.ClickException(str(e)) from e
    except (LintConfigError, CatalogError) as e:
        raise click.ClickException(str(e)) from e
    sys.exit(exit_code)


@click.group()
@click.version_option(__version__, prog_name="lintlevels")
def cli() -> None:
    """lintlevels - Resolve and check `[lints.cargo]` configuration.

    Every lint gets exactly one effective level: its own entry, else its
    group's entry, else its default.
    """


@cli.command()
@click.argument("manifest", type=MANIFEST, default="Cargo.toml")
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON")
def check(manifest: Path, output_json: bool) -> None:
    """Report unknown and feature-gated lint names in MANIFEST.

    Exits non-zero when a problem resolves to `deny` or `forbid`.
    Silence unknown-name warnings with `unknown_lints = "allow"`.
    """
    from .commands.check import run_check

    _run(run_check, manifest, output_json)


@cli.command()
@click.argument("manifest", type=MANIFEST, default="Cargo.toml")
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON")
def levels(manifest: Path, output_json: bool) -> None:
    """Show the effective level of every lint for MANIFEST."""
    from .commands.check import run_levels

    _run(run_levels, manifest, output_json)


@cli.command()
@click.argument("name")
def explain(name: str) -> None:
    """Explain a lint or lint group (e.g. `lintlevels explain unknown_lints`)."""
    from .commands.explain import run_explain

    _run(run_explain, name)


@cli.command("list")
def list_lints() -> None:
    """List all lints and lint groups."""
    from .commands.explain import run_list

    _run(run_list)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
