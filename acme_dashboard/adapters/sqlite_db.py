"""
SQLite database client.

One client is constructed at process start from ``DATABASE_URL``, shared by
the repositories, and closed at shutdown. Statements are serialised on the
single connection; each ``connection()`` block commits on success and rolls
back on error.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

logger = logging.getLogger(__name__)

MEMORY_PATH = ":memory:"
_SCHEME = "sqlite://"


def dict_factory(cursor: sqlite3.Cursor, row: tuple[Any, ...]) -> dict[str, Any]:
    """Convert SQLite row to dictionary."""
    return {col[0]: row[idx] for idx, col in enumerate(cursor.description)}


def parse_database_url(url: str) -> str:
    """
    Resolve a ``sqlite://`` URL to a database path.

    ``sqlite:///data/acme.db`` is relative to the working directory,
    ``sqlite:////var/lib/acme.db`` is absolute and ``sqlite://:memory:``
    is an in-memory database.

    Raises:
        ValueError: unsupported scheme or missing path.
    """
    if not url.startswith(_SCHEME):
        scheme = url.split(":", 1)[0] if ":" in url else url
        raise ValueError(f"Unsupported DATABASE_URL scheme: {scheme!r} (expected sqlite)")

    rest = url[len(_SCHEME) :]
    if rest in (MEMORY_PATH, "/" + MEMORY_PATH):
        return MEMORY_PATH
    if rest.startswith("/"):
        rest = rest[1:]
    if not rest:
        raise ValueError("DATABASE_URL has no database path")
    return rest


class SQLiteDatabase:
    """Application-scoped SQLite client."""

    def __init__(self, path: str) -> None:
        self.path = path
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_url(cls, url: str) -> SQLiteDatabase:
        return cls(parse_database_url(url))

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> None:
        if self._conn is not None:
            return
        conn = sqlite3.connect(self.path, check_same_thread=False)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        self._conn = conn
        logger.info("Opened database at %s", self.path)

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.info("Closed database at %s", self.path)

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Exclusive access to the connection for one unit of work."""
        if self._conn is None:
            raise RuntimeError("Database is not open")
        with self._lock:
            try:
                yield self._conn
                self._conn.commit()
            except Exception:
                self._conn.rollback()
                raise

    def __enter__(self) -> SQLiteDatabase:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
