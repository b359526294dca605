"""SQLite-backed store of proxy definitions.

Each definition is kept as its JSON document keyed by id; the store does not
model the definition's fields as columns.
"""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from proxyctl_common import ProxyDefinition

from proxyctl.errors import DefinitionError, InvalidProxyIdError, ProxyExistsError, ProxyNotFoundError

_SCHEMA = """
CREATE TABLE IF NOT EXISTS proxies (
    id INTEGER PRIMARY KEY,
    payload TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
"""


def validate_id(proxy_id: object) -> int:
    """Return *proxy_id* if it is a positive integer, else raise InvalidProxyIdError."""
    if isinstance(proxy_id, bool) or not isinstance(proxy_id, int) or proxy_id <= 0:
        raise InvalidProxyIdError(proxy_id)
    return proxy_id


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _load(payload: str) -> ProxyDefinition:
    try:
        return ProxyDefinition.model_validate_json(payload)
    except ValidationError as exc:
        raise DefinitionError(f"Stored proxy definition is invalid: {exc}") from exc


class ProxyStore:
    """CRUD access to stored proxy definitions."""

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)

    def _connect(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(self.db_path))
        conn.executescript(_SCHEMA)
        return conn

    def list(self) -> list[ProxyDefinition]:
        conn = self._connect()
        try:
            rows = conn.execute("SELECT payload FROM proxies ORDER BY id").fetchall()
        finally:
            conn.close()
        return [_load(payload) for (payload,) in rows]

    def get(self, proxy_id: int) -> ProxyDefinition:
        validate_id(proxy_id)
        conn = self._connect()
        try:
            row = conn.execute("SELECT payload FROM proxies WHERE id = ?", (proxy_id,)).fetchone()
        finally:
            conn.close()
        if row is None:
            raise ProxyNotFoundError(proxy_id)
        return _load(row[0])

    def exists(self, proxy_id: int) -> bool:
        validate_id(proxy_id)
        conn = self._connect()
        try:
            row = conn.execute("SELECT 1 FROM proxies WHERE id = ?", (proxy_id,)).fetchone()
        finally:
            conn.close()
        return row is not None

    def create(self, definition: ProxyDefinition) -> ProxyDefinition:
        """Insert a new definition. Raises ProxyExistsError on a duplicate id."""
        if self.exists(definition.id):
            raise ProxyExistsError(definition.id)
        conn = self._connect()
        try:
            conn.execute(
                "INSERT INTO proxies (id, payload, updated_at) VALUES (?, ?, ?)",
                (definition.id, definition.model_dump_json(), _now()),
            )
            conn.commit()
        except sqlite3.IntegrityError as exc:
            raise ProxyExistsError(definition.id) from exc
        finally:
            conn.close()
        return definition

    def save(self, definition: ProxyDefinition) -> ProxyDefinition:
        """Replace an existing definition. Raises ProxyNotFoundError if absent."""
        conn = self._connect()
        try:
            cur = conn.execute(
                "UPDATE proxies SET payload = ?, updated_at = ? WHERE id = ?",
                (definition.model_dump_json(), _now(), definition.id),
            )
            conn.commit()
        finally:
            conn.close()
        if cur.rowcount == 0:
            raise ProxyNotFoundError(definition.id)
        return definition

    def delete(self, proxy_id: int) -> None:
        validate_id(proxy_id)
        conn = self._connect()
        try:
            cur = conn.execute("DELETE FROM proxies WHERE id = ?", (proxy_id,))
            conn.commit()
        finally:
            conn.close()
        if cur.rowcount == 0:
            raise ProxyNotFoundError(proxy_id)
