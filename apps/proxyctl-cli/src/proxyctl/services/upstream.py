"""Upstream pool construction from an application's compute targets."""

from __future__ import annotations

from proxyctl_common import Application, UpstreamPool


def pool_name(application: Application, definition_id: int) -> str:
    return f"{application.key}_{definition_id}"


def build_upstream_pool(application: Application | None, definition_id: int) -> UpstreamPool | None:
    """Return the pool for *application*, or None when there is nothing to pool.

    A pool exists whenever the application carries a target collection, even
    if every target in it is disabled; the result is then an empty pool.
    """
    if application is None or application.targets is None:
        return None

    hosts = tuple(target.host for target in application.targets if not target.disabled)
    return UpstreamPool(name=pool_name(application, definition_id), targets=hosts)
