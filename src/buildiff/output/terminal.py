"""Rich terminal reporter — one row per changed path."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from buildiff.compare.models import ChangeKind, DiffResult

_KIND_STYLE = {
    ChangeKind.ADDED: "bold green",
    ChangeKind.UPDATED: "bold yellow",
    ChangeKind.DELETED: "bold red",
}

_KIND_ICON = {
    ChangeKind.ADDED: "+",
    ChangeKind.UPDATED: "~",
    ChangeKind.DELETED: "-",
}


def _kind_pill(kind: ChangeKind) -> Text:
    return Text(f" {_KIND_ICON[kind]} {kind.value.upper()} ", style=_KIND_STYLE[kind])


def render(
    result: DiffResult,
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print the diff result to the terminal using Rich."""
    console = console or Console(stderr=True)

    if not result.has_changes:
        console.print()
        console.print("[bold green]No differences between the two builds.[/bold green]")
        if show_summary:
            _print_summary(console, result)
        return

    console.print()
    table = Table(
        title="Build Changes",
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Change", justify="center", width=12)
    table.add_column("Path", style="cyan")

    for kind in ChangeKind:
        for path in result.paths(kind):
            table.add_row(_kind_pill(kind), path)

    console.print(table)

    if show_summary:
        _print_summary(console, result)


def _print_summary(console: Console, result: DiffResult) -> None:
    console.print()
    console.print(f"[dim]Added:[/dim]    {len(result.files_added)}")
    console.print(f"[dim]Updated:[/dim]  {len(result.files_updated)}")
    console.print(f"[dim]Deleted:[/dim]  {len(result.files_deleted)}")
    console.print(f"[dim]Total:[/dim]    {result.total_changes}")
