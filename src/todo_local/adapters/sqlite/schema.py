"""Database schema definitions for the local task store.

The store keeps a single ``tasks`` table. ``entryid`` is the primary key, so
a task ID identifies at most one row.
"""

from __future__ import annotations

TABLE_NAME = "tasks"

COLUMN_ENTRY_ID = "entryid"
COLUMN_TITLE = "title"
COLUMN_DESCRIPTION = "description"
COLUMN_COMPLETED = "completed"

# Column order used by every SELECT
PROJECTION = (
    COLUMN_ENTRY_ID,
    COLUMN_TITLE,
    COLUMN_DESCRIPTION,
    COLUMN_COMPLETED,
)

# Tasks table
CREATE_TASKS_TABLE = f"""
CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
    {COLUMN_ENTRY_ID} TEXT PRIMARY KEY NOT NULL,
    {COLUMN_TITLE} TEXT NOT NULL DEFAULT '',
    {COLUMN_DESCRIPTION} TEXT NOT NULL DEFAULT '',
    {COLUMN_COMPLETED} INTEGER NOT NULL DEFAULT 0
        CHECK ({COLUMN_COMPLETED} IN (0, 1))
)
"""

# Indexes
CREATE_TASK_INDEXES = [
    f"CREATE INDEX IF NOT EXISTS idx_tasks_completed ON {TABLE_NAME}({COLUMN_COMPLETED})",
]

ALL_TABLES = [
    CREATE_TASKS_TABLE,
]

ALL_INDEXES = CREATE_TASK_INDEXES

# Applied migrations, maintained by the migration runner
CREATE_SCHEMA_VERSION_TABLE = """
CREATE TABLE IF NOT EXISTS schema_version (
    version INTEGER PRIMARY KEY,
    description TEXT NOT NULL,
    applied_at TEXT NOT NULL
)
"""
