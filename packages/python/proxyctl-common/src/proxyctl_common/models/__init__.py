"""Shared Pydantic models."""

from proxyctl_common.models.audit_event import AuditEvent
from proxyctl_common.models.config_tree import (
    ConfigTree,
    HeaderDirective,
    HttpBlock,
    HttpsBlock,
    Location,
    ProxyLocation,
    RedirectLocation,
    RewriteMode,
    RewriteRule,
    SslBlock,
    UpstreamPool,
)
from proxyctl_common.models.proxy import Application, Certificate, ComputeTarget, ProxyDefinition

__all__ = [
    "Application",
    "AuditEvent",
    "Certificate",
    "ComputeTarget",
    "ConfigTree",
    "HeaderDirective",
    "HttpBlock",
    "HttpsBlock",
    "Location",
    "ProxyDefinition",
    "ProxyLocation",
    "RedirectLocation",
    "RewriteMode",
    "RewriteRule",
    "SslBlock",
    "UpstreamPool",
]
