"""
SQLite store handle and schema initialisation.

The service keeps a single SQLite connection for the lifetime of the
process.  ``Database`` wraps that connection with an explicit
``open``/``close`` lifecycle; the application opens it on start-up,
runs ``init_db`` and hands it to request handlers through the
``get_database`` dependency.  Nothing in this module holds the handle
as a module global.
"""

import logging
import sqlite3
from pathlib import Path
from typing import Optional

from fastapi import Request

from .config import MEMORY_DATABASE

logger = logging.getLogger(__name__)

# Millisecond precision keeps ``created_at`` ordering meaningful for
# rows written within the same second.
SQL_NOW = "strftime('%Y-%m-%dT%H:%M:%fZ', 'now')"

# Value for ``updated_at`` on every write: the current time, or one
# millisecond past the stored value when the clock has not moved on.
SQL_TOUCH_UPDATED_AT = f"""CASE
    WHEN {SQL_NOW} > updated_at THEN {SQL_NOW}
    ELSE strftime('%Y-%m-%dT%H:%M:%fZ', julianday(updated_at) + 0.001 / 86400.0)
END"""

SCHEMA = f"""
CREATE TABLE IF NOT EXISTS resources (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    description TEXT,
    category TEXT,
    status TEXT DEFAULT 'active',
    created_at TIMESTAMP DEFAULT ({SQL_NOW}),
    updated_at TIMESTAMP DEFAULT ({SQL_NOW})
);
"""


class Database:
    """Process-wide SQLite connection with an explicit lifecycle."""

    def __init__(self, path: str) -> None:
        self.path = path
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("Database is not open")
        return self._conn

    def open(self) -> sqlite3.Connection:
        """Open the connection, creating the data directory if needed.

        Rows are returned as ``sqlite3.Row`` so columns can be read by
        name.  The connection is shared by every request, so it is
        created with ``check_same_thread=False``; statements are still
        executed one at a time by SQLite itself.
        """
        if self._conn is not None:
            return self._conn
        if self.path != MEMORY_DATABASE:
            Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        self._conn = conn
        logger.info("Database path: %s", self.path)
        return conn

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.info("Database connection closed")

    def __enter__(self) -> "Database":
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def init_db(database: Database) -> None:
    """Ensure the ``resources`` table exists.

    Safe to call repeatedly.  Errors are not caught: a store that
    cannot be reached or a broken statement must stop start-up.
    """
    conn = database.connection
    conn.executescript(SCHEMA)
    conn.commit()
    logger.info("Database initialized successfully")


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the store opened at start-up."""
    return request.app.state.db
