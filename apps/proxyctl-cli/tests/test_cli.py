"""Tests for the proxyctl CLI."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from proxyctl.cli import app

runner = CliRunner()


def _write_definition(tmp_path: Path, **overrides) -> Path:
    doc = {
        "id": 7,
        "domains": "a.com",
        "enable_http": True,
        "application": {"key": "api", "targets": [{"host": "10.0.0.1"}]},
    }
    doc.update(overrides)
    path = tmp_path / "proxy.json"
    path.write_text(json.dumps(doc))
    return path


class TestProxyCommands:
    def test_create_show_delete(self, patched_config, tmp_path: Path):
        result = runner.invoke(app, ["proxy", "create", "--file", str(_write_definition(tmp_path))])
        assert result.exit_code == 0, result.output
        assert (patched_config.conf_dir / "7").exists()

        result = runner.invoke(app, ["proxy", "show", "7"])
        assert result.exit_code == 0
        assert '"domains": "a.com"' in result.output

        result = runner.invoke(app, ["proxy", "delete", "7", "--yes"])
        assert result.exit_code == 0
        assert not (patched_config.conf_dir / "7").exists()

    def test_update_flags(self, patched_config, tmp_path: Path):
        runner.invoke(app, ["proxy", "create", "--file", str(_write_definition(tmp_path))])
        result = runner.invoke(app, ["proxy", "update", "7", "--redirect-https"])
        assert result.exit_code == 0, result.output
        assert "permanent;" in (patched_config.conf_dir / "7").read_text()

    def test_show_missing(self, patched_config):
        result = runner.invoke(app, ["proxy", "show", "42"])
        assert result.exit_code == 4
        assert "does not exist" in result.output

    def test_invalid_id(self, patched_config):
        result = runner.invoke(app, ["proxy", "show", "0"])
        assert result.exit_code == 2

    def test_invalid_document(self, patched_config, tmp_path: Path):
        path = _write_definition(tmp_path, id=-5)
        result = runner.invoke(app, ["proxy", "create", "--file", str(path)])
        assert result.exit_code == 2

    def test_list(self, patched_config, tmp_path: Path):
        runner.invoke(app, ["proxy", "create", "--file", str(_write_definition(tmp_path))])
        result = runner.invoke(app, ["proxy", "list"])
        assert result.exit_code == 0
        assert "a.com" in result.output

    def test_camel_case_document_rejected(self, patched_config, tmp_path: Path):
        path = tmp_path / "proxy.json"
        path.write_text(json.dumps({"id": 3, "domains": "a.com", "enableHttp": True}))
        result = runner.invoke(app, ["proxy", "create", "--file", str(path)])
        assert result.exit_code == 2
        assert "enableHttp" in result.output
        assert "extra_forbidden" in result.output
        assert not (patched_config.conf_dir / "3").exists()

    def test_update_file_with_unknown_key(self, patched_config, tmp_path: Path):
        runner.invoke(app, ["proxy", "create", "--file", str(_write_definition(tmp_path))])
        changes = tmp_path / "changes.json"
        changes.write_text(json.dumps({"redirectHttps": True}))
        result = runner.invoke(app, ["proxy", "update", "7", "--file", str(changes)])
        assert result.exit_code == 2
        assert "permanent;" not in (patched_config.conf_dir / "7").read_text()

    def test_saved_but_not_applied(self, patched_config, tmp_path: Path):
        with patch("proxyctl.services.lifecycle.write_vhost", side_effect=OSError("disk full")):
            result = runner.invoke(app, ["proxy", "create", "--file", str(_write_definition(tmp_path))])
        assert result.exit_code == 5
        assert "Proxy 7 created." in result.output
        assert "was created but nginx config was not applied" in result.output

        result = runner.invoke(app, ["proxy", "show", "7"])
        assert result.exit_code == 0
