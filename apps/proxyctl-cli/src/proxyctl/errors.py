"""Custom exceptions for proxyctl."""

from __future__ import annotations


class ProxyctlError(Exception):
    """Base exception for all proxyctl operations."""

    def __init__(self, message: str, *, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class InvalidProxyIdError(ProxyctlError):
    """Proxy id is not a positive integer."""

    def __init__(self, proxy_id: object):
        super().__init__(f"Illegal proxy id: {proxy_id!r}", exit_code=2)
        self.proxy_id = proxy_id


class ProxyNotFoundError(ProxyctlError):
    """No stored proxy definition has the requested id."""

    def __init__(self, proxy_id: int):
        super().__init__(f"Proxy {proxy_id} does not exist", exit_code=4)
        self.proxy_id = proxy_id


class ProxyExistsError(ProxyctlError):
    """A proxy definition with this id is already stored."""

    def __init__(self, proxy_id: int):
        super().__init__(f"Proxy {proxy_id} already exists", exit_code=3)
        self.proxy_id = proxy_id


class DefinitionError(ProxyctlError):
    """A proxy definition document failed validation."""

    def __init__(self, message: str):
        super().__init__(message, exit_code=2)


class ArtifactError(ProxyctlError):
    """Rendered nginx file could not be written or removed."""


class ArtifactWriteError(ArtifactError):
    """Writing the rendered nginx file failed."""


class ArtifactDeleteError(ArtifactError):
    """Removing the rendered nginx file failed."""
