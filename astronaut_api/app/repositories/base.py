"""Base class for SQLite-backed repositories."""

import sqlite3
from typing import Any, List, Optional, Sequence

from astronaut_api.app.core.db import get_cursor


class SQLiteRepository:
    """
    Holds the storage handle and the statement helpers shared by all
    repositories.

    The connection is injected rather than opened here so callers
    decide its lifetime (one per request in the API, one per test in
    the test suite).
    """

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def _fetch_all(self, sql: str, params: Sequence[Any] = ()) -> List[sqlite3.Row]:
        return self.conn.execute(sql, tuple(params)).fetchall()

    def _fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[sqlite3.Row]:
        return self.conn.execute(sql, tuple(params)).fetchone()

    def _insert(self, sql: str, params: Sequence[Any]) -> int:
        """Run an INSERT and return the id assigned by storage."""
        with get_cursor(self.conn) as cursor:
            cursor.execute(sql, tuple(params))
            return cursor.lastrowid

    def _modify(self, sql: str, params: Sequence[Any]) -> int:
        """Run an UPDATE or DELETE and return the affected-row count."""
        with get_cursor(self.conn) as cursor:
            cursor.execute(sql, tuple(params))
            return cursor.rowcount
