"""Typer sub-applications for the proxyctl CLI."""
