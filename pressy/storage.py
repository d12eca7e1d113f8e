"""Namespaced JSON key/value storage on top of the local SQLite table.

Every failure of the underlying medium is absorbed here: reads degrade to
``None`` and writes are best-effort, so callers can treat the store as
infallible.
"""
from __future__ import annotations

import json
import logging
import sqlite3
from typing import Any, List, Optional

from pressy.constants import STORAGE_PREFIX

logger = logging.getLogger(__name__)


class LocalStore:
    """Persistent key/value store; keys are prefixed with `prefix` internally."""

    def __init__(self, conn: sqlite3.Connection, prefix: str = STORAGE_PREFIX) -> None:
        self._conn = conn
        self._prefix = prefix

    def _full_key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def get(self, key: str) -> Optional[Any]:
        """Return the stored value for `key`, or None when absent or unreadable.

        A value that no longer decodes as JSON is deleted before returning None.
        """
        full_key = self._full_key(key)
        try:
            cur = self._conn.cursor()
            cur.execute("SELECT value FROM local_storage WHERE key = ?", (full_key,))
            row = cur.fetchone()
        except sqlite3.Error as e:
            logger.exception("Error getting item %s from local storage: %s", key, e)
            return None

        if row is None:
            return None

        try:
            return json.loads(row[0])
        except (TypeError, ValueError):
            logger.warning("Corrupted item %s in local storage, removing it", key)
            self.remove(key)
            return None

    def set(self, key: str, value: Any) -> None:
        """Store `value` under `key`. Setting None deletes the key."""
        if value is None:
            self.remove(key)
            return

        try:
            item = json.dumps(value, ensure_ascii=False)
            with self._conn:
                self._conn.execute(
                    """
                    INSERT INTO local_storage (key, value) VALUES (?, ?)
                    ON CONFLICT(key) DO UPDATE SET value = excluded.value
                    """,
                    (self._full_key(key), item),
                )
        except (TypeError, ValueError, sqlite3.Error) as e:
            logger.exception("Error setting item %s in local storage: %s", key, e)

    def remove(self, key: str) -> None:
        """Delete `key`; removing a missing key is a no-op."""
        try:
            with self._conn:
                self._conn.execute(
                    "DELETE FROM local_storage WHERE key = ?", (self._full_key(key),)
                )
        except sqlite3.Error as e:
            logger.exception("Error removing item %s from local storage: %s", key, e)

    def keys(self) -> List[str]:
        """List stored keys under this store's prefix, without the prefix."""
        try:
            cur = self._conn.cursor()
            if self._prefix:
                # Range scan on the prefix; LIKE would treat "_" as a wildcard
                upper = self._prefix[:-1] + chr(ord(self._prefix[-1]) + 1)
                cur.execute(
                    "SELECT key FROM local_storage WHERE key >= ? AND key < ? ORDER BY key",
                    (self._prefix, upper),
                )
            else:
                cur.execute("SELECT key FROM local_storage ORDER BY key")
            rows = cur.fetchall()
        except sqlite3.Error as e:
            logger.exception("Failed to list local storage keys: %s", e)
            return []
        return [row[0][len(self._prefix):] for row in rows]

    def clear(self) -> None:
        """Remove every key under this store's prefix."""
        for key in self.keys():
            self.remove(key)
