"""
SQLite-backed persistence for monster entries.

Responsibilities:
- Monster create / read / update / delete
- Vote and star counters (separate ratings extension)
- Schema initialization + versioning (drop-and-recreate on upgrade)

Thread Safety:
- One long-lived connection per instance, guarded by a threading.RLock
- Safe to share between threads; serialization beyond the lock is left
  to SQLite itself

Lifecycle:
- No global instance. Construct a MonsterDatabase, pass it to whoever needs
  it, and call close() (or use it as a context manager) when done.
"""
from __future__ import annotations

import logging
import random
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

from monsters.database.migrations import MigrationRunner
from monsters.database.repositories.monster_repository import MonsterRepository
from monsters.database.repositories.ratings_repository import RatingsRepository
from monsters.database.schema import DATABASE_NAME, SCHEMA_VERSION
from monsters.errors import StoreError
from monsters.models import Monster, MonsterInput

logger = logging.getLogger(__name__)

# Returned by add_monster when the row could not be written.
INSERT_FAILED = -1


def default_db_path() -> Path:
    """Return ~/.monster_store/monster.db."""
    return Path.home() / ".monster_store" / DATABASE_NAME


class MonsterDatabase:
    """
    Manages the ``monster`` table of one SQLite database file.

    The facade keeps the coarse contract callers expect (new id or -1,
    True/False). The ``monsters`` and ``ratings`` repositories expose the
    same operations with ``Result`` values that say why something failed.
    """

    def __init__(
        self,
        db_path: Optional[Path] = None,
        schema_version: int = SCHEMA_VERSION,
        rng: Optional[random.Random] = None,
    ):
        """
        Open (and if needed create or upgrade) a monster database.

        Args:
            db_path: Database file; defaults to ~/.monster_store/monster.db
            schema_version: Declared schema version. A value greater than the
                version stored in the file drops and recreates the table.
            rng: Random source for image names (for reproducible tests)

        Raises:
            ValueError: If schema_version is lower than 1
            SchemaDowngradeError: If the file holds a newer schema version
        """
        if db_path is None:
            db_path = default_db_path()

        self.db_path = Path(db_path)

        # Thread safety lock for all database operations
        self._lock = threading.RLock()

        # Ensure parent directory exists
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        self.conn = sqlite3.connect(str(self.db_path), check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        self._closed = False

        logger.info(f"Database initialized: {self.db_path}")

        self._migrations = MigrationRunner(self.conn, self._lock, schema_version)
        try:
            self._migrations.initialize_schema()
        except Exception:
            self.close()
            raise

        self.monsters = MonsterRepository(self.conn, self._lock, rng=rng)
        self.ratings = RatingsRepository(self.conn, self._lock)

    def __enter__(self) -> MonsterDatabase:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ----------------------------------------------------------------------
    # Context manager for transactions
    # ----------------------------------------------------------------------
    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """
        Provide a transaction scope with thread safety:

            with db.transaction() as conn:
                conn.execute(...)

        Commits on success, rolls back on error.
        """
        with self.monsters.transaction() as conn:
            yield conn

    @property
    def schema_version(self) -> int:
        """Schema version recorded in the database file."""
        return self._migrations.get_schema_version()

    # ----------------------------------------------------------------------
    # Monsters
    # ----------------------------------------------------------------------

    def add_monster(self, name: str, description: str, scariness: int) -> int:
        """
        Add a monster to the database.

        Args:
            name: Monster's name
            description: Monster's description
            scariness: Monster's scariness level

        Returns:
            The autogenerated id of the new monster, or INSERT_FAILED (-1)
        """
        payload = MonsterInput(name=name, description=description, scariness=scariness)
        return self.monsters.insert(payload).unwrap_or(INSERT_FAILED)

    def update_monster(
        self, monster_id: int, name: str, description: str, scariness: int
    ) -> bool:
        """
        Update a monster's name, description and scariness.

        Returns:
            True if exactly one monster was updated; False if the id does not
            exist or the write failed
        """
        payload = MonsterInput(name=name, description=description, scariness=scariness)
        return self.monsters.update(monster_id, payload).is_ok()

    def delete_monster(self, monster_id: int, missing_ok: bool = False) -> bool:
        """
        Delete a monster.

        Args:
            monster_id: Monster's primary key
            missing_ok: Treat a non-existent id as a successful no-op

        Returns:
            True if the monster was deleted (or was already absent and
            missing_ok is set); False otherwise
        """
        result = self.monsters.delete(monster_id)
        if result.is_ok():
            return True
        return missing_ok and result.error is StoreError.NOT_FOUND

    def get_monster(self, monster_id: int) -> Optional[Monster]:
        """Return the monster with the given id, or None if absent."""
        return self.monsters.get(monster_id).unwrap_or(None)

    def get_monsters(self) -> List[Monster]:
        """Return all monsters in storage order."""
        return self.monsters.list_all()

    # ----------------------------------------------------------------------
    # Ratings
    # ----------------------------------------------------------------------

    def vote(self, monster_id: int) -> bool:
        """Add one vote to a monster. Returns False if it could not be recorded."""
        return self.ratings.add_vote(monster_id).is_ok()

    def star(self, monster_id: int, count: int = 1) -> bool:
        """Add stars to a monster. Returns False if they could not be recorded."""
        return self.ratings.add_stars(monster_id, count).is_ok()

    # ----------------------------------------------------------------------
    # Schema
    # ----------------------------------------------------------------------

    def reset(self) -> None:
        """Drop and recreate the monster table, discarding every row."""
        self._migrations.drop_and_recreate()

    def close(self) -> None:
        """Close the underlying SQLite connection."""
        if self._closed:
            return
        try:
            self.conn.close()
        except sqlite3.Error as exc:
            logger.error(f"Error closing database connection: {exc}")
        self._closed = True
