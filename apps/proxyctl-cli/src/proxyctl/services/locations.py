"""Location builders for proxied and HTTPS-redirect servers."""

from __future__ import annotations

from proxyctl_common import (
    HeaderDirective,
    ProxyLocation,
    RedirectLocation,
    RewriteMode,
    RewriteRule,
)
from proxyctl_common.constants import (
    HOST_HEADER,
    HOST_VALUE,
    REAL_IP_HEADER,
    REAL_IP_VALUE,
    REDIRECT_SOURCE,
    REDIRECT_TARGET,
)


def build_proxy_location(pool_name: str) -> ProxyLocation:
    """Forward ``/`` to the upstream pool, passing client IP and original host."""
    return ProxyLocation(
        path="/",
        send_file=True,
        headers=(
            HeaderDirective(key=REAL_IP_HEADER, value=REAL_IP_VALUE),
            HeaderDirective(key=HOST_HEADER, value=HOST_VALUE),
        ),
        proxy_pass=f"http://{pool_name}",
    )


def build_redirect_location() -> RedirectLocation:
    """Permanently rewrite every path to its HTTPS equivalent on the same server name."""
    return RedirectLocation(
        path="/",
        rewrite=RewriteRule(
            source=REDIRECT_SOURCE,
            target=REDIRECT_TARGET,
            mode=RewriteMode.PERMANENT,
        ),
    )
