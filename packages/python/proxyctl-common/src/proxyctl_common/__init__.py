"""proxyctl common — shared models, constants and configuration."""

from proxyctl_common.config import ProxyctlConfig
from proxyctl_common.constants import (
    DEFAULT_SSL_CIPHERS,
    DEFAULT_SSL_PREFER_SERVER_CIPHERS,
    DEFAULT_SSL_PROTOCOLS,
    DEFAULT_SSL_SESSION_CACHE,
    DEFAULT_SSL_SESSION_TIMEOUT,
    DEFAULT_SSL_STAPLING,
    LOG_DIR,
    NGINX_CONF_DIR,
    STATE_DIR,
)
from proxyctl_common.models import (
    Application,
    AuditEvent,
    Certificate,
    ComputeTarget,
    ConfigTree,
    HeaderDirective,
    HttpBlock,
    HttpsBlock,
    Location,
    ProxyDefinition,
    ProxyLocation,
    RedirectLocation,
    RewriteMode,
    RewriteRule,
    SslBlock,
    UpstreamPool,
)

__all__ = [
    "Application",
    "AuditEvent",
    "Certificate",
    "ComputeTarget",
    "ConfigTree",
    "DEFAULT_SSL_CIPHERS",
    "DEFAULT_SSL_PREFER_SERVER_CIPHERS",
    "DEFAULT_SSL_PROTOCOLS",
    "DEFAULT_SSL_SESSION_CACHE",
    "DEFAULT_SSL_SESSION_TIMEOUT",
    "DEFAULT_SSL_STAPLING",
    "HeaderDirective",
    "HttpBlock",
    "HttpsBlock",
    "LOG_DIR",
    "Location",
    "NGINX_CONF_DIR",
    "ProxyDefinition",
    "ProxyLocation",
    "ProxyctlConfig",
    "RedirectLocation",
    "RewriteMode",
    "RewriteRule",
    "STATE_DIR",
    "SslBlock",
    "UpstreamPool",
]
