"""Proxy definition models: the input side of the config compiler."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, PositiveInt

from proxyctl_common.constants import (
    DEFAULT_SSL_CIPHERS,
    DEFAULT_SSL_PREFER_SERVER_CIPHERS,
    DEFAULT_SSL_PROTOCOLS,
    DEFAULT_SSL_SESSION_CACHE,
    DEFAULT_SSL_SESSION_TIMEOUT,
    DEFAULT_SSL_STAPLING,
)


class ComputeTarget(BaseModel):
    """A backend host registered for an application."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    host: str
    disabled: bool = False


class Application(BaseModel):
    """An application and its ordered compute targets.

    ``targets`` is ``None`` when no target collection is attached at all,
    which is different from an attached but empty collection.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str
    targets: tuple[ComputeTarget, ...] | None = None


class Certificate(BaseModel):
    """Certificate and key material, passed through to nginx unchanged."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    crt: str
    crt_key: str


class ProxyDefinition(BaseModel):
    """Reverse-proxy intent for one set of domains."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: PositiveInt
    domains: str | None = None
    enable_http: bool = False
    enable_https: bool = False
    redirect_https: bool = False
    application: Application | None = None
    certificate: Certificate | None = None

    ssl_ciphers: str = DEFAULT_SSL_CIPHERS
    ssl_protocols: str = DEFAULT_SSL_PROTOCOLS
    ssl_session_cache: str = DEFAULT_SSL_SESSION_CACHE
    ssl_session_timeout: str = DEFAULT_SSL_SESSION_TIMEOUT
    ssl_prefer_server_ciphers: bool = DEFAULT_SSL_PREFER_SERVER_CIPHERS
    ssl_stapling: bool = DEFAULT_SSL_STAPLING
