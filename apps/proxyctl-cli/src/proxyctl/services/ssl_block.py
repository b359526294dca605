"""SSL block mapping."""

from __future__ import annotations

from proxyctl_common import Certificate, ProxyDefinition, SslBlock


def build_ssl_block(certificate: Certificate, definition: ProxyDefinition) -> SslBlock:
    """Map certificate material and TLS policy onto an SslBlock, unchanged."""
    return SslBlock(
        certificate=certificate.crt,
        certificate_key=certificate.crt_key,
        session_timeout=definition.ssl_session_timeout,
        protocols=definition.ssl_protocols,
        ciphers=definition.ssl_ciphers,
        session_cache=definition.ssl_session_cache,
        prefer_server_ciphers=definition.ssl_prefer_server_ciphers,
        stapling=definition.ssl_stapling,
    )
