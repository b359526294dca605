"""Compile a ProxyDefinition into an nginx ConfigTree.

The compiler is a pure function of its input: no I/O, no clock, no shared
state. Each block is built as a complete value, so the tree never exists
half-populated. Missing references (no application, no certificate) drop
the matching block instead of raising.
"""

from __future__ import annotations

import logging

from proxyctl_common import ConfigTree, HttpBlock, HttpsBlock, Location, ProxyDefinition, UpstreamPool

from proxyctl.services.locations import build_proxy_location, build_redirect_location
from proxyctl.services.ssl_block import build_ssl_block
from proxyctl.services.upstream import build_upstream_pool

log = logging.getLogger(__name__)


def _http_block(definition: ProxyDefinition, upstream: UpstreamPool | None) -> HttpBlock:
    locations: tuple[Location, ...] = ()
    if definition.redirect_https:
        locations = (build_redirect_location(),)
    elif upstream is not None:
        locations = (build_proxy_location(upstream.name),)
    return HttpBlock(service_name=definition.domains, locations=locations)


def _https_block(definition: ProxyDefinition, upstream: UpstreamPool | None) -> HttpsBlock:
    locations: tuple[Location, ...] = ()
    if upstream is not None:
        locations = (build_proxy_location(upstream.name),)
    return HttpsBlock(
        service_name=definition.domains,
        ssl=build_ssl_block(definition.certificate, definition),
        locations=locations,
    )


def compile_config(definition: ProxyDefinition) -> ConfigTree:
    """Build the nginx config tree for *definition*."""
    if not definition.domains:
        return ConfigTree()

    upstream = build_upstream_pool(definition.application, definition.id)

    http = _http_block(definition, upstream) if definition.enable_http else None

    https = None
    if definition.enable_https:
        if definition.certificate is not None:
            https = _https_block(definition, upstream)
        else:
            log.debug("proxy %s: HTTPS enabled without a certificate, skipping HTTPS server", definition.id)

    return ConfigTree(upstream=upstream, http=http, https=https)
