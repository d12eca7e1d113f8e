from __future__ import annotations

import pytest

from pressy.app_state import AppState
from pressy.db_init import MEMORY_DB, init_db
from pressy.storage import LocalStore


@pytest.fixture
def conn():
    connection = init_db(MEMORY_DB)
    yield connection
    connection.close()


@pytest.fixture
def store(conn) -> LocalStore:
    return LocalStore(conn)


@pytest.fixture
def state(store) -> AppState:
    return AppState(store)


@pytest.fixture
def raw_value(conn):
    """Read the raw stored text for a caller-visible key."""

    def _read(key: str):
        row = conn.execute(
            "SELECT value FROM local_storage WHERE key = ?", (f"pressy_{key}",)
        ).fetchone()
        return None if row is None else row[0]

    return _read
