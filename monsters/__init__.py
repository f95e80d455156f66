"""
Monster store: SQLite-backed persistence for monster entries.

Example:
    from monsters import MonsterDatabase
    with MonsterDatabase(path) as db:
        monster_id = db.add_monster("Grok", "A rock monster", 7)
        print(db.get_monster(monster_id))
"""
from monsters.database import INSERT_FAILED, SCHEMA_VERSION, MonsterDatabase
from monsters.errors import SchemaDowngradeError, StoreError
from monsters.models import Monster, MonsterInput

__version__ = "1.0.0"

__all__ = [
    "INSERT_FAILED",
    "Monster",
    "MonsterDatabase",
    "MonsterInput",
    "SCHEMA_VERSION",
    "SchemaDowngradeError",
    "StoreError",
]
