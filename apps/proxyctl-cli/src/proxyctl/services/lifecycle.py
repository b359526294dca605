"""Write and remove the rendered nginx file for a proxy definition.

The artifact for definition ``N`` lives at ``{conf_dir}/N``. Operations on
different ids never touch the same file; callers must serialize operations
on the same id. Reloading nginx after a write is left to the operator.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from proxyctl_common import ConfigTree, ProxyDefinition

from proxyctl.errors import ArtifactDeleteError, ArtifactWriteError
from proxyctl.services.compiler import compile_config
from proxyctl.services.vhost_renderer import render_config, write_vhost

log = logging.getLogger(__name__)

Renderer = Callable[[ConfigTree], str]


class ProxyLifecycle:
    """Keeps the on-disk nginx artifacts in step with proxy definitions."""

    def __init__(self, conf_dir: Path, renderer: Renderer = render_config):
        self.conf_dir = Path(conf_dir)
        self.renderer = renderer

    def artifact_path(self, definition_id: int) -> Path:
        return self.conf_dir / str(definition_id)

    def on_create_or_update(self, definition: ProxyDefinition) -> Path:
        """Compile, render and (over)write the artifact. Returns its path."""
        tree = compile_config(definition)
        content = self.renderer(tree)
        path = self.artifact_path(definition.id)
        try:
            write_vhost(path, content)
        except OSError as exc:
            raise ArtifactWriteError(f"Failed to write {path}: {exc}") from exc
        log.info("wrote nginx config for proxy %s to %s", definition.id, path)
        return path

    def on_delete(self, definition_id: int) -> bool:
        """Remove the artifact if present. Returns True when a file was removed."""
        path = self.artifact_path(definition_id)
        if not path.exists():
            log.debug("no nginx config for proxy %s at %s", definition_id, path)
            return False
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise ArtifactDeleteError(f"Failed to remove {path}: {exc}") from exc
        log.info("removed nginx config for proxy %s (%s)", definition_id, path)
        return True
