"""
Monster repository for create/read/update/delete on the ``monster`` table.

Every mutating method returns a ``Result`` so callers can distinguish a
missing row (``StoreError.NOT_FOUND``) from a failed write
(``StoreError.WRITE_FAILED``).
"""
from __future__ import annotations

import logging
import random
import sqlite3
import threading
from typing import List, Optional

from monsters.database.repositories.base_repository import BaseRepository
from monsters.database.schema import (
    COL_DESCRIPTION,
    COL_ID,
    COL_IMAGE,
    COL_NAME,
    COL_SCARINESS,
    COL_STARS,
    COL_VOTES,
    MONSTER_COLUMNS,
    TABLE_NAME,
)
from monsters.errors import StoreError
from monsters.images import random_image_name
from monsters.models import Monster, MonsterInput
from monsters.result import Err, Ok, Result

logger = logging.getLogger(__name__)

_SELECT_COLUMNS = ", ".join(MONSTER_COLUMNS)


class MonsterRepository(BaseRepository):
    """Repository for monster database operations."""

    def __init__(
        self,
        conn: sqlite3.Connection,
        lock: threading.RLock,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(conn, lock)
        self._rng = rng

    def insert(self, payload: MonsterInput) -> Result[int, StoreError]:
        """
        Add a monster with a freshly assigned image name.

        Votes and stars start at 0.

        Args:
            payload: Validated name, description and scariness

        Returns:
            Ok with the autogenerated id, or Err(WRITE_FAILED)
        """
        image_name = random_image_name(self._rng)
        result = self._write(
            "insert monster",
            f"""
            INSERT INTO {TABLE_NAME}
                ({COL_NAME}, {COL_DESCRIPTION}, {COL_SCARINESS}, {COL_IMAGE}, {COL_VOTES}, {COL_STARS})
            VALUES (?, ?, ?, ?, 0, 0)
            """,
            (payload.name, payload.description, payload.scariness, image_name),
        )
        if result.is_err():
            return Err(StoreError.WRITE_FAILED)

        monster_id = result.unwrap().lastrowid
        if monster_id is None:
            return Err(StoreError.WRITE_FAILED)
        logger.debug(f"Inserted monster {monster_id} ({payload.name!r}, {image_name})")
        return Ok(monster_id)

    def update(
        self, monster_id: int, payload: MonsterInput
    ) -> Result[None, StoreError]:
        """
        Replace name, description and scariness of a monster.

        The image name, votes and stars are left untouched.

        Returns:
            Ok(None) if exactly one row was updated, Err(NOT_FOUND) if the id
            does not exist, Err(WRITE_FAILED) if the write failed
        """
        result = self._write(
            f"update monster {monster_id}",
            f"""
            UPDATE {TABLE_NAME}
            SET {COL_NAME} = ?, {COL_DESCRIPTION} = ?, {COL_SCARINESS} = ?
            WHERE {COL_ID} = ?
            """,
            (payload.name, payload.description, payload.scariness, monster_id),
        )
        if result.is_err():
            return Err(StoreError.WRITE_FAILED)
        if result.unwrap().rowcount != 1:
            return Err(StoreError.NOT_FOUND)
        logger.debug(f"Updated monster {monster_id}")
        return Ok(None)

    def delete(self, monster_id: int) -> Result[None, StoreError]:
        """
        Delete a monster by primary key.

        Returns:
            Ok(None) if the row was removed, Err(NOT_FOUND) if no row had that
            id, Err(WRITE_FAILED) if the write failed
        """
        result = self._write(
            f"delete monster {monster_id}",
            f"DELETE FROM {TABLE_NAME} WHERE {COL_ID} = ?",
            (monster_id,),
        )
        if result.is_err():
            return Err(StoreError.WRITE_FAILED)
        if result.unwrap().rowcount == 0:
            return Err(StoreError.NOT_FOUND)
        logger.debug(f"Deleted monster {monster_id}")
        return Ok(None)

    def get(self, monster_id: int) -> Result[Monster, StoreError]:
        """Return the monster with the given id, or Err(NOT_FOUND)."""
        row = self._execute_fetchone(
            f"SELECT {_SELECT_COLUMNS} FROM {TABLE_NAME} WHERE {COL_ID} = ?",
            (monster_id,),
        )
        if row is None:
            return Err(StoreError.NOT_FOUND)
        return Ok(Monster.from_row(row))

    def list_all(self) -> List[Monster]:
        """
        Return every monster in storage order.

        Storage order follows the rowid and is not a guaranteed sort.
        """
        rows = self._execute_fetchall(
            f"SELECT {_SELECT_COLUMNS} FROM {TABLE_NAME}"
        )
        return [Monster.from_row(row) for row in rows]

