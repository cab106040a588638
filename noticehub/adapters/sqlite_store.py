"""
SQLite key-value store adapter.

Implements KeyValueStorePort on a single two-column table so the board
survives between CLI invocations. Every write is committed on its own; a
value is always replaced whole.

Several processes sharing one file are not coordinated: the last write to a
key wins.
"""

from __future__ import annotations

import logging
import os
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

SCHEMA = "CREATE TABLE IF NOT EXISTS kv (key TEXT PRIMARY KEY, value TEXT NOT NULL)"


class SQLiteKeyValueStore:
    def __init__(self, db_path: str | Path, connection: sqlite3.Connection | None = None):
        self.db_path = str(db_path)
        self._external_conn = connection
        conn = self._get_conn()
        try:
            conn.execute(SCHEMA)
            conn.commit()
        finally:
            self._close(conn)

    def _get_conn(self) -> sqlite3.Connection:
        """Get database connection (uses external if provided)."""
        if self._external_conn is not None:
            return self._external_conn
        return sqlite3.connect(self.db_path)

    def _close(self, conn: sqlite3.Connection) -> None:
        if self._external_conn is None:
            conn.close()

    def get(self, key: str) -> str | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
            return row[0] if row else None
        finally:
            self._close(conn)

    def set(self, key: str, value: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO kv (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value=excluded.value
                """,
                (key, value),
            )
            conn.commit()
        finally:
            self._close(conn)

    def remove(self, key: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM kv WHERE key = ?", (key,))
            conn.commit()
        finally:
            self._close(conn)

    def keys(self) -> list[str]:
        conn = self._get_conn()
        try:
            return [row[0] for row in conn.execute("SELECT key FROM kv ORDER BY key")]
        finally:
            self._close(conn)


def create_sqlite_store(
    db_path: str | Path | None = None,
    *,
    env_var: str = "NOTICEHUB_DB_PATH",
    default_path: str = "noticehub.db",
) -> SQLiteKeyValueStore:
    """
    Factory function to create SQLiteKeyValueStore from config.

    Args:
        db_path: Explicit database path (overrides env var)
        env_var: Environment variable name for the database path
        default_path: Default path if not configured
    """
    if db_path is None:
        db_path = os.environ.get(env_var, default_path)

    logger.debug("Opening key-value store at %s", db_path)
    return SQLiteKeyValueStore(db_path)
