"""
Base repository class for thread-safe database operations.

Provides common execution helpers used by all domain-specific repositories.
Write helpers report failures as ``Err(StoreError.WRITE_FAILED)`` rather
than letting ``sqlite3`` exceptions escape to callers.
"""
from __future__ import annotations

import logging
import sqlite3
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple, Union, cast

from monsters.errors import StoreError
from monsters.result import Err, Ok, Result

logger = logging.getLogger(__name__)

# Type alias for SQL parameters
SqlParams = Union[Tuple[()], Tuple[object, ...]]


class BaseRepository:
    """
    Base class for all database repositories.

    Each repository receives the shared connection and lock from the
    parent MonsterDatabase instance; every statement runs under that lock.
    """

    def __init__(self, conn: sqlite3.Connection, lock: threading.RLock):
        """
        Initialize the repository with shared connection and lock.

        Args:
            conn: SQLite connection (shared across all repositories)
            lock: Threading lock for thread-safe operations
        """
        self._conn = conn
        self._lock = lock

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """
        Provide a transaction scope with thread safety.

        Usage:
            with repo.transaction() as conn:
                conn.execute(...)
                conn.execute(...)
            # Commits on success, rolls back on error

        Yields:
            The SQLite connection within the transaction
        """
        with self._lock:
            try:
                yield self._conn
                self._conn.commit()
            except Exception as exc:
                self._rollback()
                logger.error(f"Transaction failed: {exc}")
                raise

    def _write(
        self, action: str, sql: str, params: SqlParams = ()
    ) -> Result[sqlite3.Cursor, StoreError]:
        """
        Execute and commit a single mutating statement.

        Args:
            action: Short label used in log messages (e.g. "insert monster")
            sql: SQL statement to execute
            params: Parameters for the SQL statement

        Returns:
            Ok with the cursor, or Err(WRITE_FAILED) if a parameter could not
            be bound or the engine rejected the statement or the commit
        """
        with self._lock:
            try:
                cursor = self._conn.execute(sql, params)
                self._conn.commit()
            except (sqlite3.Error, OverflowError, UnicodeEncodeError) as exc:
                # Out-of-range ints and lone surrogates fail while binding
                logger.error(f"Failed to {action}: {exc}")
                self._rollback()
                return Err(StoreError.WRITE_FAILED)
            return Ok(cursor)

    def _rollback(self) -> None:
        try:
            self._conn.rollback()
        except sqlite3.ProgrammingError as exc:
            # Connection already closed; nothing to roll back.
            logger.debug(f"Rollback skipped: {exc}")

    def _execute_fetchone(
        self, sql: str, params: SqlParams = ()
    ) -> Optional[sqlite3.Row]:
        """
        Thread-safe fetchone helper.

        Returns:
            Single row result, or None if no rows
        """
        with self._lock:
            cursor = self._conn.execute(sql, params)
            try:
                return cast(Optional[sqlite3.Row], cursor.fetchone())
            finally:
                cursor.close()

    def _execute_fetchall(
        self, sql: str, params: SqlParams = ()
    ) -> List[sqlite3.Row]:
        """
        Thread-safe fetchall helper.

        The cursor is drained and closed before the lock is released, so
        callers never hold an open read handle.
        """
        with self._lock:
            cursor = self._conn.execute(sql, params)
            try:
                return cursor.fetchall()
            finally:
                cursor.close()
