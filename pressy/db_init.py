# ---------- db_init.py ----------
"""Create and return the SQLite connection backing local storage.

The database holds a single key/value table; all interpretation of the
stored values happens in `pressy.storage`.
"""
import logging
import os
import sqlite3
from typing import Optional

from pressy.config import load_settings

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"


def init_schema(conn: sqlite3.Connection) -> None:
    """Create the key/value table (safe to run on an existing DB)."""
    cur = conn.cursor()
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS local_storage (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        )
        """
    )
    conn.commit()


def init_db(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Open the local storage database, creating it when needed.

    Uses the configured path when `db_path` is not given.
    """
    if db_path is None:
        db_path = load_settings().db_path

    if db_path != MEMORY_DB:
        parent = os.path.dirname(db_path)
        if parent:
            os.makedirs(parent, exist_ok=True)

    conn = sqlite3.connect(db_path, check_same_thread=False)
    logger.debug("Opened local storage at %s", db_path)
    init_schema(conn)
    return conn
