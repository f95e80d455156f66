"""
Ratings repository for the ``VOTES`` and ``STARS`` columns.

Kept apart from MonsterRepository: the CRUD contract never touches these
columns, only the increments below do.
"""
from __future__ import annotations

import logging

from monsters.database.repositories.base_repository import BaseRepository
from monsters.database.schema import COL_ID, COL_STARS, COL_VOTES, TABLE_NAME
from monsters.errors import StoreError
from monsters.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class RatingsRepository(BaseRepository):
    """Repository for vote and star counters."""

    def add_vote(self, monster_id: int) -> Result[int, StoreError]:
        """
        Increment a monster's vote count by one.

        Returns:
            Ok with the new vote count, Err(NOT_FOUND) or Err(WRITE_FAILED)
        """
        return self._increment(COL_VOTES, monster_id, 1)

    def add_stars(self, monster_id: int, count: int = 1) -> Result[int, StoreError]:
        """
        Add stars to a monster's rating.

        Args:
            monster_id: Monster's primary key
            count: Number of stars to add, must be positive

        Returns:
            Ok with the new star total, Err(NOT_FOUND) or Err(WRITE_FAILED)

        Raises:
            ValueError: If count is not positive
        """
        if count < 1:
            raise ValueError(f"Star count must be positive, was {count}")
        return self._increment(COL_STARS, monster_id, count)

    def _increment(
        self, column: str, monster_id: int, amount: int
    ) -> Result[int, StoreError]:
        # column is one of the schema constants, never caller input
        with self._lock:
            result = self._write(
                f"increment {column} for monster {monster_id}",
                f"UPDATE {TABLE_NAME} SET {column} = COALESCE({column}, 0) + ? WHERE {COL_ID} = ?",
                (amount, monster_id),
            )
            if result.is_err():
                return Err(StoreError.WRITE_FAILED)
            if result.unwrap().rowcount != 1:
                return Err(StoreError.NOT_FOUND)

            row = self._execute_fetchone(
                f"SELECT {column} FROM {TABLE_NAME} WHERE {COL_ID} = ?",
                (monster_id,),
            )
        total = int(row[0]) if row else 0
        logger.debug(f"Monster {monster_id} {column} now {total}")
        return Ok(total)
