"""
Monster record and input models.

``Monster`` is the snapshot handed back by reads; it carries no reference
to the store. ``MonsterInput`` validates the caller-supplied fields before
any SQL runs.
"""
from __future__ import annotations

import sqlite3
from dataclasses import asdict, dataclass
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr


@dataclass(frozen=True)
class Monster:
    """A persisted monster entry."""

    id: int
    name: str
    description: str
    scariness: int
    image_name: str
    votes: int = 0
    stars: int = 0

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> Monster:
        """Map a ``monster`` table row (ID, NAME, ... STARS) to a record."""
        return cls(
            id=int(row["ID"]),
            name=row["NAME"],
            description=row["DESCRIPTION"],
            scariness=int(row["SCARINESS"]),
            image_name=row["IMAGE"],
            votes=int(row["VOTES"] or 0),
            stars=int(row["STARS"] or 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class MonsterInput(BaseModel):
    """Caller-supplied fields for create/update."""

    model_config = ConfigDict(frozen=True)

    name: StrictStr
    description: StrictStr
    # Any integer is accepted; there is no declared range.
    scariness: StrictInt
