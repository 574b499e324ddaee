"""Database migration system for the local task store."""

from .m001_initial_schema import initial_migration
from .runner import AppliedMigration, Migration, MigrationRunner

# All migrations in order
ALL_MIGRATIONS = [
    initial_migration,
]

__all__ = [
    "ALL_MIGRATIONS",
    "AppliedMigration",
    "Migration",
    "MigrationRunner",
]
