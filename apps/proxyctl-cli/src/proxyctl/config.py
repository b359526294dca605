"""CLI configuration — singleton ProxyctlConfig resolved at startup."""

from __future__ import annotations

from functools import lru_cache

from proxyctl_common import ProxyctlConfig


@lru_cache(maxsize=1)
def get_config() -> ProxyctlConfig:
    """Return the global ProxyctlConfig (resolved once, cached)."""
    return ProxyctlConfig()
