"""Persistent key-value store backed by SQLite."""

from __future__ import annotations

import logging
import sqlite3
import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from types import TracebackType

from crispymd.errors.exceptions import StoreError

logger = logging.getLogger(__name__)

_DEFAULT_MAX_SIZE_MB = 500
_DEFAULT_DB_PATH = Path.home() / ".crispymd" / "cache.db"


class SQLiteStore:
    """SQLite-backed persistent store with TTL and LRU eviction.

    Backend failures are raised as StoreError.
    """

    def __init__(
        self,
        db_path: Path | None = None,
        max_size_mb: float = _DEFAULT_MAX_SIZE_MB,
    ) -> None:
        self._db_path = db_path or _DEFAULT_DB_PATH
        self._max_size_bytes = int(max_size_mb * 1024 * 1024)
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(self._db_path))
        except (OSError, sqlite3.Error) as e:
            raise StoreError(
                f"Cannot open cache database {self._db_path}: {e}",
                operation="open",
                original=e,
            ) from e
        self._conn.row_factory = sqlite3.Row
        with self._guard("open"):
            self._create_table()

    @property
    def db_path(self) -> Path:
        return self._db_path

    def get(self, key: str) -> str | None:
        with self._guard("get", key):
            row = self._conn.execute(
                "SELECT value, created_at, ttl_seconds FROM cache WHERE key = ?", (key,)
            ).fetchone()
            if row is None:
                return None
            now = time.time()
            if now > row["created_at"] + row["ttl_seconds"]:
                self._conn.execute("DELETE FROM cache WHERE key = ?", (key,))
                self._conn.commit()
                return None
            # Update last_accessed for LRU
            self._conn.execute("UPDATE cache SET last_accessed = ? WHERE key = ?", (now, key))
            self._conn.commit()
            return row["value"]

    def set(self, key: str, value: str, ttl_seconds: int) -> bool:
        size_bytes = len(value.encode("utf-8"))
        if size_bytes > self._max_size_bytes:
            return False
        with self._guard("set", key):
            self._evict_if_needed(key, size_bytes)
            now = time.time()
            self._conn.execute(
                """INSERT OR REPLACE INTO cache
                   (key, value, created_at, ttl_seconds, last_accessed, size_bytes)
                   VALUES (?, ?, ?, ?, ?, ?)""",
                (key, value, now, ttl_seconds, now, size_bytes),
            )
            self._conn.commit()
        return True

    def delete(self, key: str) -> bool:
        with self._guard("delete", key):
            cursor = self._conn.execute("DELETE FROM cache WHERE key = ?", (key,))
            self._conn.commit()
            return cursor.rowcount > 0

    def find_keys_by_prefix(self, prefix: str) -> list[str]:
        # substr() instead of LIKE: content IDs may contain '%' or '_'
        with self._guard("find", prefix):
            rows = self._conn.execute(
                """SELECT key FROM cache
                   WHERE substr(key, 1, ?) = ? AND created_at + ttl_seconds >= ?
                   ORDER BY key""",
                (len(prefix), prefix, time.time()),
            ).fetchall()
        return [row["key"] for row in rows]

    def measure_prefix(self, prefix: str) -> tuple[int, int]:
        """Count and UTF-8 size of live entries under ``prefix``, leaving last_accessed alone."""
        with self._guard("measure", prefix):
            count, total = self._conn.execute(
                """SELECT COUNT(*), COALESCE(SUM(size_bytes), 0) FROM cache
                   WHERE substr(key, 1, ?) = ? AND created_at + ttl_seconds >= ?""",
                (len(prefix), prefix, time.time()),
            ).fetchone()
        return count, total

    def clear(self) -> None:
        with self._guard("clear"):
            self._conn.execute("DELETE FROM cache")
            self._conn.commit()

    @property
    def entry_count(self) -> int:
        with self._guard("count"):
            row = self._conn.execute("SELECT COUNT(*) FROM cache").fetchone()
        return row[0]

    @property
    def size_mb(self) -> float:
        with self._guard("size"):
            row = self._conn.execute(
                "SELECT COALESCE(SUM(size_bytes), 0) FROM cache"
            ).fetchone()
        return row[0] / (1024 * 1024)

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> SQLiteStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @contextmanager
    def _guard(self, operation: str, key: str | None = None) -> Iterator[None]:
        try:
            yield
        except sqlite3.Error as e:
            raise StoreError(
                f"SQLite {operation} failed: {e}",
                operation=operation,
                key=key,
                original=e,
            ) from e

    def _create_table(self) -> None:
        self._conn.executescript("""
            CREATE TABLE IF NOT EXISTS cache (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                created_at REAL NOT NULL,
                ttl_seconds REAL NOT NULL,
                last_accessed REAL NOT NULL,
                size_bytes INTEGER NOT NULL
            );
            CREATE INDEX IF NOT EXISTS idx_cache_last_accessed ON cache (last_accessed);
        """)

    def _evict_if_needed(self, key: str, incoming_bytes: int) -> None:
        """Make room for ``incoming_bytes`` under ``key``.

        Expired rows and the row being replaced go first; after that the
        least recently read rows are dropped until the new value fits.
        """
        self._conn.execute(
            "DELETE FROM cache WHERE key = ? OR created_at + ttl_seconds < ?",
            (key, time.time()),
        )
        (used,) = self._conn.execute(
            "SELECT COALESCE(SUM(size_bytes), 0) FROM cache"
        ).fetchone()
        overflow = used + incoming_bytes - self._max_size_bytes
        if overflow <= 0:
            return

        victims: list[str] = []
        for row in self._conn.execute(
            "SELECT key, size_bytes FROM cache ORDER BY last_accessed ASC"
        ):
            if overflow <= 0:
                break
            victims.append(row["key"])
            overflow -= row["size_bytes"]
        logger.debug("Evicting %d least recently used entries", len(victims))
        self._conn.executemany("DELETE FROM cache WHERE key = ?", [(k,) for k in victims])
