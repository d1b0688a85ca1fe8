"""SQLite key-value store for winloss.

Plays the role of a platform "defaults" database: opaque byte values
stored under string keys, each write replacing the previous value.
"""

import sqlite3
from pathlib import Path
from typing import Optional


class DefaultsStore:
    """SQLite-backed key-value store."""

    TABLE = "defaults"

    def __init__(self, db_path: Path):
        """Initialize the defaults store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = db_path
        self._ensure_db_dir()
        self._init_schema()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Initialize database schema on first run."""
        conn = self._get_connection()
        try:
            conn.execute(f"""
                CREATE TABLE IF NOT EXISTS {self.TABLE} (
                    key TEXT PRIMARY KEY,
                    value BLOB NOT NULL
                )
            """)
            conn.commit()
        finally:
            conn.close()

    def data(self, key: str) -> Optional[bytes]:
        """Get the value stored under a key.

        Args:
            key: Storage key.

        Returns:
            The stored bytes, or None if the key is absent.
        """
        conn = self._get_connection()
        try:
            row = conn.execute(
                f"SELECT value FROM {self.TABLE} WHERE key = ?", (key,)
            ).fetchone()
            if row is None:
                return None
            return bytes(row["value"])
        finally:
            conn.close()

    def set(self, key: str, value: bytes) -> None:
        """Store a value, replacing whatever was under the key.

        Args:
            key: Storage key.
            value: Bytes to store.
        """
        conn = self._get_connection()
        try:
            conn.execute(
                f"INSERT OR REPLACE INTO {self.TABLE} (key, value) VALUES (?, ?)",
                (key, sqlite3.Binary(value)),
            )
            conn.commit()
        finally:
            conn.close()

    def remove(self, key: str) -> None:
        """Delete a key. Missing keys are ignored."""
        conn = self._get_connection()
        try:
            conn.execute(f"DELETE FROM {self.TABLE} WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()

    def keys(self) -> list[str]:
        """Get all stored keys, sorted."""
        conn = self._get_connection()
        try:
            rows = conn.execute(
                f"SELECT key FROM {self.TABLE} ORDER BY key"
            ).fetchall()
            return [row["key"] for row in rows]
        finally:
            conn.close()
