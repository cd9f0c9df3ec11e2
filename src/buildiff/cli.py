"""buildiff CLI — Typer application with diff and init commands."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from buildiff import __version__

app = typer.Typer(
    name="buildiff",
    help="List the files added, updated, and deleted between two build outputs.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


# ── diff ──────────────────────────────────────────────────────────────────────


@app.command()
def diff(
    old_dir: str = typer.Argument(..., help="Old build directory"),
    new_dir: str = typer.Argument(..., help="New build directory"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .buildiff.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
    ignore: Optional[List[str]] = typer.Option(None, "--ignore", "-i", help="Relative path to blacklist (repeatable)"),
    no_default_blacklist: bool = typer.Option(False, "--no-default-blacklist", help="Do not apply the built-in blacklist"),
    strict_roots: bool = typer.Option(False, "--strict-roots", help="Fail if report lines match neither directory"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress progress output"),
    exit_code: bool = typer.Option(False, "--exit-code", help="Exit with 1 when differences are found"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Compare OLD_DIR and NEW_DIR and report changed files."""
    from buildiff.compare.adapter import UpstreamExecutionError
    from buildiff.compare.classifier import RootMismatchError
    from buildiff.compare.engine import diff_directories
    from buildiff.config.blacklist import build_blacklist
    from buildiff.config.loader import ConfigError, load_config
    from buildiff.config.schema import OUTPUT_FORMATS
    from buildiff.output import json_report, terminal

    # --- Load config ---
    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if quiet:
        cfg.output.quiet = True
    if strict_roots:
        cfg.compare.strict_roots = True

    try:
        blacklist = build_blacklist(cfg, ignore or (), use_defaults=not no_default_blacklist)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if verbose:
        console.print(f"[dim]Old: {old_dir}[/dim]")
        console.print(f"[dim]New: {new_dir}[/dim]")
        console.print(f"[dim]Blacklisted paths: {len(blacklist)}[/dim]")

    # --- Compare ---
    try:
        result = diff_directories(
            old_dir,
            new_dir,
            blacklist=blacklist,
            quiet=cfg.output.quiet,
            strict_roots=cfg.compare.strict_roots,
            command=cfg.compare.command,
            timeout=cfg.compare.timeout,
            console=console,
        )
    except UpstreamExecutionError as exc:
        console.print(f"[bold red]Diff error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    except RootMismatchError as exc:
        console.print(f"[bold red]Root mismatch:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- Output ---
    if cfg.output.format == "terminal":
        terminal.render(result, show_summary=cfg.output.show_summary, console=console)
    else:
        print(json_report.render(result))

    if output:
        Path(output).write_text(json_report.render(result), encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")

    if exit_code and result.has_changes:
        raise typer.Exit(code=1)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing .buildiff.toml"),
) -> None:
    """Generate a starter .buildiff.toml in the current directory."""
    from buildiff.config.defaults import DEFAULT_TOML
    from buildiff.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists() and not force:
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"buildiff {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """buildiff — List the files that changed between two build outputs."""
