"""Compiled nginx configuration tree.

Everything here is an immutable value produced by the compiler and consumed
by the renderer. Collections are tuples so a built tree cannot be mutated.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class RewriteMode(str, Enum):
    LAST = "last"
    BREAK = "break"
    REDIRECT = "redirect"
    PERMANENT = "permanent"


class HeaderDirective(_Frozen):
    """A ``proxy_set_header`` entry."""

    key: str
    value: str


class RewriteRule(_Frozen):
    source: str
    target: str
    mode: RewriteMode = RewriteMode.PERMANENT


class ProxyLocation(_Frozen):
    """Location that forwards requests to an upstream pool."""

    kind: Literal["proxy"] = "proxy"
    path: str = "/"
    send_file: bool = True
    headers: tuple[HeaderDirective, ...] = ()
    proxy_pass: str


class RedirectLocation(_Frozen):
    """Location that permanently rewrites requests to HTTPS."""

    kind: Literal["redirect"] = "redirect"
    path: str = "/"
    rewrite: RewriteRule


Location = Annotated[Union[ProxyLocation, RedirectLocation], Field(discriminator="kind")]


class UpstreamPool(_Frozen):
    name: str
    targets: tuple[str, ...] = ()


class SslBlock(_Frozen):
    certificate: str
    certificate_key: str
    session_timeout: str
    protocols: str
    ciphers: str
    session_cache: str
    prefer_server_ciphers: bool
    stapling: bool


class HttpBlock(_Frozen):
    service_name: str
    locations: tuple[Location, ...] = ()


class HttpsBlock(_Frozen):
    service_name: str
    ssl: SslBlock
    locations: tuple[Location, ...] = ()


class ConfigTree(_Frozen):
    """Compiler output: an optional pool plus optional HTTP/HTTPS servers."""

    upstream: UpstreamPool | None = None
    http: HttpBlock | None = None
    https: HttpsBlock | None = None

    @property
    def is_empty(self) -> bool:
        return self.upstream is None and self.http is None and self.https is None
