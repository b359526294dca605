"""Jinja2-based renderer turning a ConfigTree into nginx configuration text."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from proxyctl_common import ConfigTree

_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


def _on_off(value: bool) -> str:
    return "on" if value else "off"


@lru_cache(maxsize=1)
def _get_env() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATE_DIR)),
        autoescape=select_autoescape([]),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["onoff"] = _on_off
    return env


def render_config(tree: ConfigTree) -> str:
    """Render the upstream pool and HTTP/HTTPS servers of *tree*."""
    template = _get_env().get_template("proxy.conf.j2")
    return template.render(tree=tree)


def write_vhost(path: Path, content: str) -> None:
    """Write rendered config to disk, creating the parent directory."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
