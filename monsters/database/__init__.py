"""
Database Package.

This package provides SQLite-backed persistence for monster entries.

Public API:
- MonsterDatabase: Main database class for all persistence operations
- INSERT_FAILED: Sentinel id returned when an insert fails
- SCHEMA_VERSION: Current schema version number

Example:
    from monsters.database import MonsterDatabase
    with MonsterDatabase(path) as db:
        monster_id = db.add_monster("Grok", "A rock monster", 7)
"""
from monsters.database.base import INSERT_FAILED, MonsterDatabase, default_db_path
from monsters.database.schema import SCHEMA_VERSION

__all__ = [
    "INSERT_FAILED",
    "MonsterDatabase",
    "SCHEMA_VERSION",
    "default_db_path",
]
