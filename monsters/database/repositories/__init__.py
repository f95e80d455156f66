"""
Database repositories package.

Provides domain-specific repository classes for database operations.
Each repository inherits from BaseRepository for thread-safe execution.

Public API:
- BaseRepository: Base class for all repositories
- MonsterRepository: Monster create/read/update/delete
- RatingsRepository: Vote and star counters
"""
from monsters.database.repositories.base_repository import BaseRepository
from monsters.database.repositories.monster_repository import MonsterRepository
from monsters.database.repositories.ratings_repository import RatingsRepository

__all__ = [
    "BaseRepository",
    "MonsterRepository",
    "RatingsRepository",
]
