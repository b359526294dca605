"""Tests for writing and removing nginx artifacts."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from proxyctl_common import ConfigTree, ProxyDefinition
from proxyctl.errors import ArtifactDeleteError, ArtifactError, ArtifactWriteError
from proxyctl.services.lifecycle import ProxyLifecycle


class TestOnCreateOrUpdate:
    def test_writes_file_named_by_id(self, lifecycle: ProxyLifecycle, definition: ProxyDefinition):
        assert not lifecycle.conf_dir.exists()
        path = lifecycle.on_create_or_update(definition)
        assert path == lifecycle.conf_dir / "7"
        assert path.is_file()
        assert "upstream api_7 {" in path.read_text()

    def test_overwrites_previous_content(self, lifecycle: ProxyLifecycle, definition: ProxyDefinition):
        lifecycle.on_create_or_update(definition)
        changed = definition.model_copy(update={"redirect_https": True})
        path = lifecycle.on_create_or_update(changed)
        content = path.read_text()
        assert "rewrite ^/(.*) https://$server_name$1 permanent;" in content
        assert content.count("proxy_pass") == 1

    def test_custom_renderer(self, tmp_path: Path, definition: ProxyDefinition):
        seen: list[ConfigTree] = []

        def renderer(tree: ConfigTree) -> str:
            seen.append(tree)
            return "rendered"

        lifecycle = ProxyLifecycle(tmp_path, renderer=renderer)
        path = lifecycle.on_create_or_update(definition)
        assert path.read_text() == "rendered"
        assert seen[0].upstream.name == "api_7"

    def test_write_failure(self, lifecycle: ProxyLifecycle, definition: ProxyDefinition):
        with patch("proxyctl.services.lifecycle.write_vhost", side_effect=PermissionError("denied")):
            with pytest.raises(ArtifactWriteError) as exc_info:
                lifecycle.on_create_or_update(definition)
        assert isinstance(exc_info.value, ArtifactError)
        assert isinstance(exc_info.value.__cause__, PermissionError)


class TestOnDelete:
    def test_removes_existing_file(self, lifecycle: ProxyLifecycle, definition: ProxyDefinition):
        path = lifecycle.on_create_or_update(definition)
        assert lifecycle.on_delete(7) is True
        assert not path.exists()

    def test_missing_file_is_noop(self, lifecycle: ProxyLifecycle):
        assert lifecycle.on_delete(7) is False
        assert lifecycle.on_delete(7) is False

    def test_leaves_other_ids(self, lifecycle: ProxyLifecycle, definition: ProxyDefinition):
        lifecycle.on_create_or_update(definition)
        other = lifecycle.on_create_or_update(definition.model_copy(update={"id": 8}))
        lifecycle.on_delete(7)
        assert other.exists()

    def test_delete_failure(self, lifecycle: ProxyLifecycle, definition: ProxyDefinition):
        lifecycle.on_create_or_update(definition)
        with patch.object(Path, "unlink", side_effect=PermissionError("denied")):
            with pytest.raises(ArtifactDeleteError):
                lifecycle.on_delete(7)
