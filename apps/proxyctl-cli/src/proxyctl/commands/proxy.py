"""Proxy definition commands."""

from __future__ import annotations

import json
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from proxyctl.config import get_config
from proxyctl.errors import DefinitionError, ProxyctlError
from proxyctl.services import proxies
from proxyctl.services.compiler import compile_config
from proxyctl.services.lifecycle import ProxyLifecycle
from proxyctl.services.store import ProxyStore
from proxyctl.services.vhost_renderer import render_config

app = typer.Typer(no_args_is_help=True)
console = Console()


def _store() -> ProxyStore:
    return ProxyStore(get_config().store_db_path)


def _lifecycle() -> ProxyLifecycle:
    return ProxyLifecycle(get_config().conf_dir)


@contextmanager
def _errors() -> Generator[None, None, None]:
    try:
        yield
    except ProxyctlError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(exc.exit_code) from exc


def _read_document(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise DefinitionError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise DefinitionError(f"{path} must contain a JSON object")
    return data


def _report(outcome: proxies.ProxyOutcome, verb: str) -> None:
    proxy_id = outcome.definition.id
    console.print(f"[green]Proxy {proxy_id} {verb}.[/green]")
    if outcome.applied:
        if outcome.artifact is not None:
            console.print(f"  nginx config: {outcome.artifact}")
        return
    console.print(
        f"[yellow]Proxy {proxy_id} was {verb} but nginx config was not applied:[/yellow] "
        f"{escape(outcome.error or '')}"
    )
    raise typer.Exit(5)


@app.command(name="list")
def list_proxies() -> None:
    """List stored proxy definitions."""
    with _errors():
        definitions = proxies.get_list(_store())

    table = Table(title="Proxies")
    table.add_column("ID", style="bold")
    table.add_column("Domains", style="cyan")
    table.add_column("HTTP")
    table.add_column("HTTPS")
    table.add_column("Application", style="green")

    for d in definitions:
        http = ("redirect" if d.redirect_https else "yes") if d.enable_http else "no"
        https = ("yes" if d.certificate else "no cert") if d.enable_https else "no"
        table.add_row(str(d.id), d.domains or "-", http, https, d.application.key if d.application else "-")

    console.print(table)


@app.command()
def show(proxy_id: int = typer.Argument(help="Proxy id")) -> None:
    """Show a stored proxy definition as JSON."""
    with _errors():
        definition = proxies.get_info(_store(), proxy_id)
    console.print_json(definition.model_dump_json())


@app.command()
def render(proxy_id: int = typer.Argument(help="Proxy id")) -> None:
    """Print the nginx config compiled for a proxy, without writing it."""
    with _errors():
        definition = proxies.get_info(_store(), proxy_id)
    content = render_config(compile_config(definition))
    console.print(Syntax(content, "nginx", theme="monokai"))


@app.command()
def create(
    file: Path = typer.Option(..., "--file", "-f", exists=True, dir_okay=False, help="JSON proxy definition"),
) -> None:
    """Create a proxy definition and write its nginx config."""
    with _errors():
        definition = proxies.parse_definition(_read_document(file))
        outcome = proxies.create(_store(), _lifecycle(), definition)
    _report(outcome, "created")


@app.command()
def update(
    proxy_id: int = typer.Argument(help="Proxy id"),
    domains: Optional[str] = typer.Option(None, help="Server name(s)"),
    http: Optional[bool] = typer.Option(None, "--http/--no-http", help="Serve plain HTTP"),
    https: Optional[bool] = typer.Option(None, "--https/--no-https", help="Serve HTTPS"),
    redirect_https: Optional[bool] = typer.Option(
        None, "--redirect-https/--no-redirect-https", help="Redirect HTTP to HTTPS"
    ),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, dir_okay=False, help="JSON object of fields to change"
    ),
) -> None:
    """Change fields of a proxy definition and rewrite its nginx config."""
    with _errors():
        changes: dict[str, Any] = _read_document(file) if file else {}
        for key, value in (
            ("domains", domains),
            ("enable_http", http),
            ("enable_https", https),
            ("redirect_https", redirect_https),
        ):
            if value is not None:
                changes[key] = value
        outcome = proxies.update(_store(), _lifecycle(), proxy_id, changes)
    _report(outcome, "updated")


@app.command()
def apply(proxy_id: int = typer.Argument(help="Proxy id")) -> None:
    """Rewrite the nginx config for a stored proxy."""
    with _errors():
        outcome = proxies.apply(_store(), _lifecycle(), proxy_id)
    _report(outcome, "applied")


@app.command()
def delete(
    proxy_id: int = typer.Argument(help="Proxy id"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a proxy definition and its nginx config."""
    if not yes:
        typer.confirm(f"Delete proxy {proxy_id}?", abort=True)
    with _errors():
        outcome = proxies.remove(_store(), _lifecycle(), proxy_id)
    _report(outcome, "deleted")
