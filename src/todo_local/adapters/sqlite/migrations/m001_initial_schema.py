"""Initial database schema migration.

Creates the ``tasks`` table and its index. The ``schema_version`` table is
created by the migration runner itself.
"""

import sqlite3

from todo_local.adapters.sqlite import schema

from .runner import Migration


class InitialSchemaMigration(Migration):
    """Migration 001: Create the tasks table."""

    @property
    def version(self) -> int:
        return 1

    @property
    def description(self) -> str:
        return "Initial tasks schema"

    def up(self, connection: sqlite3.Connection) -> None:
        for table_sql in schema.ALL_TABLES:
            connection.execute(table_sql)

        for index_sql in schema.ALL_INDEXES:
            connection.execute(index_sql)


initial_migration = InitialSchemaMigration()
