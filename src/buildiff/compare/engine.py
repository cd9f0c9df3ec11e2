"""Compare two build directories and return what was added, updated, or deleted."""

from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console

from buildiff.compare.adapter import require_report, run_comparison
from buildiff.compare.classifier import DirectoryDiffClassifier
from buildiff.compare.models import DiffResult
from buildiff.config.defaults import DEFAULT_BLACKLIST


def diff_directories(
    build_old: str,
    build_new: str,
    *,
    blacklist: Optional[Iterable[str]] = None,
    quiet: bool = False,
    strict_roots: bool = False,
    command: str = "diff",
    timeout: Optional[float] = None,
    console: Optional[Console] = None,
) -> DiffResult:
    """Compute the differences between *build_old* and *build_new*.

    *blacklist* defaults to DEFAULT_BLACKLIST. Raises UpstreamExecutionError
    when the comparator fails (missing directory, permission denied, ...);
    no partial result is ever returned. *quiet* only silences progress.
    """
    console = console or Console(stderr=True)
    ignored = DEFAULT_BLACKLIST if blacklist is None else frozenset(blacklist)

    if not quiet:
        console.print("[yellow]Diffing directories...[/yellow] ", end="")
    try:
        outcome = run_comparison(build_old, build_new, command=command, timeout=timeout)
        report = require_report(outcome)
    except Exception:
        if not quiet:
            console.print("[red]Failed[/red]")
        raise
    if not quiet:
        console.print("[green]Done[/green]")
        console.print("[yellow]Parsing diff results...[/yellow] ", end="")

    classifier = DirectoryDiffClassifier(
        build_old,
        build_new,
        blacklist=ignored,
        strict_roots=strict_roots,
    )
    result = classifier.classify(report)

    if not quiet:
        console.print("[green]Done[/green]")
    return result
