"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator
from unittest.mock import patch

import pytest

from proxyctl_common import Application, Certificate, ComputeTarget, ProxyctlConfig, ProxyDefinition
from proxyctl.services.lifecycle import ProxyLifecycle
from proxyctl.services.store import ProxyStore


@pytest.fixture
def tmp_config(tmp_path: Path) -> ProxyctlConfig:
    """Return a ProxyctlConfig pointing at temp directories."""
    return ProxyctlConfig(
        node_id="test-node",
        conf_dir=tmp_path / "nginx" / "proxyctl.d",
        state_dir=tmp_path / "state",
        log_dir=tmp_path / "log",
    )


@pytest.fixture
def patched_config(tmp_config: ProxyctlConfig) -> Iterator[ProxyctlConfig]:
    """Route every get_config() lookup to tmp_config."""
    with patch("proxyctl.audit.get_config", return_value=tmp_config), patch(
        "proxyctl.commands.proxy.get_config", return_value=tmp_config
    ):
        yield tmp_config


@pytest.fixture
def store(tmp_config: ProxyctlConfig) -> ProxyStore:
    return ProxyStore(tmp_config.store_db_path)


@pytest.fixture
def lifecycle(tmp_config: ProxyctlConfig) -> ProxyLifecycle:
    return ProxyLifecycle(tmp_config.conf_dir)


@pytest.fixture
def api_app() -> Application:
    return Application(
        key="api",
        targets=[
            ComputeTarget(host="10.0.0.1", disabled=False),
            ComputeTarget(host="10.0.0.2", disabled=True),
        ],
    )


@pytest.fixture
def cert() -> Certificate:
    return Certificate(crt="/etc/ssl/a.com.crt", crt_key="/etc/ssl/a.com.key")


@pytest.fixture
def definition(api_app: Application, cert: Certificate) -> ProxyDefinition:
    """HTTP + HTTPS proxy for a.com backed by the api application."""
    return ProxyDefinition(
        id=7,
        domains="a.com",
        enable_http=True,
        enable_https=True,
        application=api_app,
        certificate=cert,
    )
