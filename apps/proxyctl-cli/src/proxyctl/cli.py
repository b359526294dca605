"""Root Typer application for the proxyctl CLI."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from proxyctl.commands import audit, proxy

app = typer.Typer(
    name="proxyctl",
    help="Compile reverse-proxy definitions into nginx configuration.",
    no_args_is_help=True,
)

app.add_typer(proxy.app, name="proxy", help="Create, update, delete and render proxy definitions.")
app.add_typer(audit.app, name="audit", help="Inspect the audit trail.")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


if __name__ == "__main__":
    app()
