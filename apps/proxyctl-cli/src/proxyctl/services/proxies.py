"""Proxy definition handlers: persist first, then apply the nginx artifact.

The store change and the artifact write are not transactional. When the
write (or removal) fails after the store was updated, the handler returns a
ProxyOutcome with ``saved=True, applied=False`` so callers can report both
results separately.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError

from proxyctl_common import AuditEvent, ProxyDefinition

from proxyctl.audit import audit
from proxyctl.errors import ArtifactError, DefinitionError
from proxyctl.services.lifecycle import ProxyLifecycle
from proxyctl.services.store import ProxyStore, validate_id

log = logging.getLogger(__name__)


class ProxyOutcome(BaseModel):
    """Result of a handler: the definition plus store and artifact status."""

    model_config = ConfigDict(frozen=True)

    definition: ProxyDefinition
    saved: bool
    applied: bool
    artifact: Path | None = None
    error: str | None = None


def parse_definition(data: Mapping[str, Any]) -> ProxyDefinition:
    """Validate a raw mapping into a ProxyDefinition."""
    try:
        return ProxyDefinition.model_validate(data)
    except ValidationError as exc:
        raise DefinitionError(f"Invalid proxy definition: {exc}") from exc


def get_list(store: ProxyStore) -> list[ProxyDefinition]:
    return store.list()


def get_info(store: ProxyStore, proxy_id: int) -> ProxyDefinition:
    return store.get(proxy_id)


def _apply(lifecycle: ProxyLifecycle, definition: ProxyDefinition, event: AuditEvent) -> ProxyOutcome:
    try:
        path = lifecycle.on_create_or_update(definition)
    except ArtifactError as exc:
        log.warning("proxy %s saved but not applied: %s", definition.id, exc)
        event.result = "partial"
        event.error = str(exc)
        return ProxyOutcome(definition=definition, saved=True, applied=False, error=str(exc))
    return ProxyOutcome(definition=definition, saved=True, applied=True, artifact=path)


def create(store: ProxyStore, lifecycle: ProxyLifecycle, definition: ProxyDefinition) -> ProxyOutcome:
    """Store a new definition and write its nginx file."""
    with audit("proxy.create", target=str(definition.id), domains=definition.domains) as event:
        store.create(definition)
        return _apply(lifecycle, definition, event)


def update(
    store: ProxyStore,
    lifecycle: ProxyLifecycle,
    proxy_id: int,
    changes: Mapping[str, Any],
) -> ProxyOutcome:
    """Merge *changes* into a stored definition and rewrite its nginx file.

    Keys mapped to ``None`` are left unchanged. The id cannot be changed.
    Unknown keys raise DefinitionError.
    """
    validate_id(proxy_id)
    fields = {k: v for k, v in changes.items() if v is not None and k != "id"}
    with audit("proxy.update", target=str(proxy_id), fields=sorted(fields)) as event:
        unknown = sorted(set(fields) - set(ProxyDefinition.model_fields))
        if unknown:
            raise DefinitionError(f"Unknown proxy definition field(s): {', '.join(unknown)}")
        current = store.get(proxy_id)
        merged = parse_definition({**current.model_dump(), **fields})
        store.save(merged)
        return _apply(lifecycle, merged, event)


def apply(store: ProxyStore, lifecycle: ProxyLifecycle, proxy_id: int) -> ProxyOutcome:
    """Rewrite the nginx file for a stored definition without changing it."""
    with audit("proxy.apply", target=str(proxy_id)) as event:
        definition = store.get(proxy_id)
        return _apply(lifecycle, definition, event)


def remove(store: ProxyStore, lifecycle: ProxyLifecycle, proxy_id: int) -> ProxyOutcome:
    """Delete a stored definition and its nginx file, if one was written."""
    with audit("proxy.delete", target=str(proxy_id)) as event:
        definition = store.get(proxy_id)
        store.delete(proxy_id)
        try:
            lifecycle.on_delete(proxy_id)
        except ArtifactError as exc:
            log.warning("proxy %s deleted but artifact remains: %s", proxy_id, exc)
            event.result = "partial"
            event.error = str(exc)
            return ProxyOutcome(definition=definition, saved=True, applied=False, error=str(exc))
        return ProxyOutcome(definition=definition, saved=True, applied=True)
