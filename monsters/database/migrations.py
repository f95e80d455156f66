"""
Database migration runner for schema versioning.

Handles schema initialization and the drop-and-recreate upgrade between
versions. Upgrades are destructive: the ``monster`` table is discarded and
recreated empty, no rows are carried over.
"""
from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from threading import RLock
from typing import Iterator, Optional

from monsters.database.schema import (
    CREATE_MONSTER_TABLE_SQL,
    DROP_MONSTER_TABLE_SQL,
    SCHEMA_VERSION,
    SCHEMA_VERSION_SQL,
    TABLE_NAME,
)
from monsters.errors import SchemaDowngradeError

logger = logging.getLogger(__name__)


class MigrationRunner:
    """
    Handles database schema initialization and migrations.

    Responsible for:
    - Creating schema for fresh databases
    - Dropping and recreating the monster table on upgrade
    - Refusing downgrades
    - Tracking schema version
    """

    def __init__(
        self,
        conn: sqlite3.Connection,
        lock: RLock,
        target_version: int = SCHEMA_VERSION,
    ):
        """
        Initialize the migration runner.

        Args:
            conn: SQLite connection to migrate
            lock: Thread lock for safe execution
            target_version: Schema version the caller expects

        Raises:
            ValueError: If target_version is lower than 1
        """
        if target_version < 1:
            raise ValueError(f"Version must be >= 1, was {target_version}")
        self._conn = conn
        self._lock = lock
        self.target_version = target_version

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        """
        Provide an explicit transaction scope with thread safety.

        sqlite3 only opens transactions implicitly before DML, so DDL needs
        the explicit BEGIN to be rolled back with the rest.
        """
        with self._lock:
            if not self._conn.in_transaction:
                self._conn.execute("BEGIN")
            try:
                yield self._conn
                self._conn.commit()
            except Exception as exc:
                self._conn.rollback()
                logger.error(f"Migration transaction failed: {exc}")
                raise

    def initialize_schema(self) -> None:
        """Create tables if they don't exist or run migrations."""
        current_version = self.get_schema_version()

        if current_version == 0:
            logger.info("No schema detected - creating schema.")
            self._create_schema(self.target_version)
        elif current_version < self.target_version:
            logger.info(
                f"Migrating schema from v{current_version} to v{self.target_version}"
            )
            self.migrate_schema(current_version, self.target_version)
        elif current_version > self.target_version:
            raise SchemaDowngradeError(current_version, self.target_version)
        else:
            logger.debug(f"Schema v{current_version} is up-to-date.")

    def get_schema_version(self) -> int:
        """Return the schema version stored in the DB."""
        try:
            cursor = self._conn.execute(
                "SELECT version FROM schema_version ORDER BY id DESC LIMIT 1"
            )
            row = cursor.fetchone()
            return row[0] if row else 0
        except sqlite3.OperationalError:
            # No schema_version table yet
            return 0

    @staticmethod
    def _set_schema_version(conn: sqlite3.Connection, version: int) -> None:
        """Record the schema version inside the caller's transaction."""
        conn.execute(
            "INSERT INTO schema_version (version) VALUES (?)",
            (version,),
        )

    def _create_schema(self, version: int) -> None:
        """Create all tables for a fresh database and record its version."""
        logger.info("Creating database schema...")

        with self._transaction() as conn:
            conn.execute(SCHEMA_VERSION_SQL)
            conn.execute(CREATE_MONSTER_TABLE_SQL)
            self._set_schema_version(conn, version)

    def migrate_schema(self, old: int, new: int) -> None:
        """
        Migration path between schema versions.

        Every upgrade uses the same strategy: drop the monster table and
        recreate it empty. The drop, the recreate and the new version row
        commit together, so a failed upgrade leaves the old table and
        version in place.

        Args:
            old: Current schema version
            new: Target schema version
        """
        logger.info(f"Starting schema migration v{old} -> v{new}")
        self.drop_and_recreate(version=new)
        logger.info(f"Schema migration complete. Now at v{new}.")

    def drop_and_recreate(self, version: Optional[int] = None) -> None:
        """
        Discard the monster table and all its rows, then recreate it.

        Args:
            version: Schema version to record in the same transaction, or
                None to leave the stored version unchanged
        """
        with self._transaction() as conn:
            discarded = self._count_rows(conn)
            logger.warning(
                "Dropping table %s (%d row(s) discarded) and recreating it empty",
                TABLE_NAME,
                discarded,
            )
            conn.execute(DROP_MONSTER_TABLE_SQL)
            conn.execute(SCHEMA_VERSION_SQL)
            conn.execute(CREATE_MONSTER_TABLE_SQL)
            if version is not None:
                self._set_schema_version(conn, version)

    @staticmethod
    def _count_rows(conn: sqlite3.Connection) -> int:
        try:
            row = conn.execute(f"SELECT COUNT(*) FROM {TABLE_NAME}").fetchone()
            return row[0] if row else 0
        except sqlite3.OperationalError:
            return 0
