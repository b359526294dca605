"""Audit trail commands."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from proxyctl.audit import read_events

app = typer.Typer(no_args_is_help=True)
console = Console()


@app.command(name="list")
def list_events(
    limit: int = typer.Option(20, help="Number of events to show"),
    action: Optional[str] = typer.Option(None, help="Filter by action, e.g. proxy.update"),
) -> None:
    """Show recent proxy operations."""
    events = read_events(limit=limit, action=action)
    if not events:
        console.print("No audit events recorded.")
        return

    table = Table(title="Audit Log")
    table.add_column("Time", style="dim")
    table.add_column("Actor")
    table.add_column("Action", style="cyan")
    table.add_column("Target")
    table.add_column("Result")
    table.add_column("Error", style="red")

    for event in events:
        color = {"success": "green", "partial": "yellow"}.get(event.result, "red")
        table.add_row(
            event.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
            event.actor,
            event.action,
            event.target,
            f"[{color}]{event.result}[/{color}]",
            event.error or "",
        )

    console.print(table)
