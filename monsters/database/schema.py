"""
Database Schema Definitions.

Contains SQL statements for schema creation and the destructive upgrade.
Separated from the MonsterDatabase class for better maintainability.
"""

# Current schema version. Increment if schema structure changes.
SCHEMA_VERSION = 1

DATABASE_NAME = "monster.db"
TABLE_NAME = "monster"

# Column names, in row order
COL_ID = "ID"
COL_NAME = "NAME"
COL_DESCRIPTION = "DESCRIPTION"
COL_SCARINESS = "SCARINESS"
COL_IMAGE = "IMAGE"
COL_VOTES = "VOTES"
COL_STARS = "STARS"

MONSTER_COLUMNS: tuple[str, ...] = (
    COL_ID,
    COL_NAME,
    COL_DESCRIPTION,
    COL_SCARINESS,
    COL_IMAGE,
    COL_VOTES,
    COL_STARS,
)

SCHEMA_VERSION_SQL = """
CREATE TABLE IF NOT EXISTS schema_version (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    version INTEGER NOT NULL
);
"""

CREATE_MONSTER_TABLE_SQL = f"""
CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
    {COL_ID} INTEGER PRIMARY KEY AUTOINCREMENT,
    {COL_NAME} TEXT,
    {COL_DESCRIPTION} TEXT,
    {COL_SCARINESS} INTEGER,
    {COL_IMAGE} TEXT,
    {COL_VOTES} INTEGER DEFAULT 0,
    {COL_STARS} INTEGER DEFAULT 0
);
"""

DROP_MONSTER_TABLE_SQL = f"DROP TABLE IF EXISTS {TABLE_NAME};"
