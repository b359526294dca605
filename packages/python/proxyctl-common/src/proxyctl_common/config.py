"""Central configuration for proxyctl."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from proxyctl_common.constants import (
    AUDIT_DB_NAME,
    AUDIT_JSONL_NAME,
    LOG_DIR,
    NGINX_CONF_DIR,
    STATE_DIR,
    STORE_DB_NAME,
)


def _env_path(name: str, default: Path) -> Path:
    env = os.environ.get(name)
    return Path(env) if env else default


class ProxyctlConfig(BaseModel):
    """Runtime configuration resolved once at startup."""

    node_id: str = Field(default_factory=lambda: os.environ.get("PROXYCTL_NODE_ID", "node-01"))
    conf_dir: Path = Field(default_factory=lambda: _env_path("PROXYCTL_CONF_DIR", NGINX_CONF_DIR))
    state_dir: Path = Field(default_factory=lambda: _env_path("PROXYCTL_STATE_DIR", STATE_DIR))
    log_dir: Path = Field(default_factory=lambda: _env_path("PROXYCTL_LOG_DIR", LOG_DIR))

    @property
    def store_db_path(self) -> Path:
        return self.state_dir / STORE_DB_NAME

    @property
    def audit_db_path(self) -> Path:
        return self.state_dir / AUDIT_DB_NAME

    @property
    def audit_jsonl_path(self) -> Path:
        return self.log_dir / AUDIT_JSONL_NAME
