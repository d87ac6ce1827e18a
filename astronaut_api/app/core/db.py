"""
SQLite database integration and simple schema bootstrap.

This module provides functions for opening a database connection
(``get_connection``), applying the versioned schema on application
start (``init_db``) and the ``get_db`` dependency that hands a
per-request connection to FastAPI routes.  Repositories never open
connections themselves; they receive one at construction time.

Applied schema versions are stored in the ``migrations`` table and
new versions are executed in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import AsyncIterator, Iterator, List, Optional, Tuple

from .config import settings

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"
# Named shared-cache database used for ``:memory:``: every connection in
# the process sees the same data while at least one of them stays open.
SHARED_MEMORY_URI = "file:astronaut_api?mode=memory&cache=shared"

# Range of an SQLite INTEGER; ids outside it cannot be bound to a query.
SQLITE_INTEGER_MIN = -(2 ** 63)
SQLITE_INTEGER_MAX = 2 ** 63 - 1

# Ordered list of (version, script).  Append new entries with an
# incremented version number; never edit an applied one.
MIGRATIONS: List[Tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS images (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            path TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS planets (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            description TEXT NOT NULL,
            isHabitable INTEGER NOT NULL DEFAULT 0,
            imageId INTEGER NOT NULL,
            FOREIGN KEY(imageId) REFERENCES images(id)
        );

        CREATE TABLE IF NOT EXISTS astronauts (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            firstname TEXT NOT NULL,
            lastname TEXT NOT NULL,
            originPlanetId INTEGER NOT NULL,
            FOREIGN KEY(originPlanetId) REFERENCES planets(id)
        );
        """,
    ),
    (
        2,
        """
        -- Join columns used by every listing
        CREATE INDEX IF NOT EXISTS idx_planets_image_id ON planets(imageId);
        CREATE INDEX IF NOT EXISTS idx_astronauts_origin_planet_id ON astronauts(originPlanetId);
        """,
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the URL is an absolute path or ``:memory:``, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = database_url or settings.database_url
    if db_url == MEMORY_DATABASE or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def is_memory_database(database_url: Optional[str] = None) -> bool:
    return get_database_path(database_url) == MEMORY_DATABASE


def get_connection(
    database_url: Optional[str] = None,
    enforce_foreign_keys: Optional[bool] = None,
) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` objects so columns can be
    accessed by name.  ``:memory:`` maps to one shared in-memory
    database, kept alive by the connection the application holds
    open for its lifetime.  The connection may be handed across threads
    (FastAPI runs dependencies and the test client in worker
    threads), but it is only ever used by one request at a time.
    """
    db_path = get_database_path(database_url)
    if db_path == MEMORY_DATABASE:
        conn = sqlite3.connect(SHARED_MEMORY_URI, uri=True, check_same_thread=False)
    else:
        conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    if enforce_foreign_keys is None:
        enforce_foreign_keys = settings.enforce_foreign_keys
    # Foreign key support is off by default in SQLite and must be
    # turned on per connection.
    conn.execute(f"PRAGMA foreign_keys = {'ON' if enforce_foreign_keys else 'OFF'}")
    return conn


@contextmanager
def get_cursor(conn: sqlite3.Connection) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor on ``conn`` and commit when the block succeeds."""
    cursor = conn.cursor()
    try:
        yield cursor
        conn.commit()
    except sqlite3.Error:
        conn.rollback()
        raise
    finally:
        cursor.close()


def init_db(conn: Optional[sqlite3.Connection] = None) -> int:
    """Initialise the database and apply pending schema versions.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version and applies every newer entry of
    ``MIGRATIONS``.  When no connection is given a new one is opened
    and closed again.  Returns the resulting schema version.
    """
    own_connection = conn is None
    if conn is None:
        conn = get_connection()
    try:
        with get_cursor(conn) as cursor:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            cursor.execute("SELECT MAX(version) AS version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    cursor.executescript(sql)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    logger.info("Applied schema version %s", version)
                    current_version = version
        return current_version
    finally:
        if own_connection:
            conn.close()


async def get_db() -> AsyncIterator[sqlite3.Connection]:
    """FastAPI dependency yielding a connection for the current request."""
    conn = get_connection()
    try:
        yield conn
    finally:
        conn.close()
