"""Forward-only schema migrations for the task database.

Applied versions are recorded in ``schema_version``. A migration and its
version record are written in one explicit transaction, so a migration that
fails leaves neither schema changes nor a version row behind and can simply
be retried on the next open.
"""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import NamedTuple

from todo_local.adapters.sqlite import schema

logger = logging.getLogger(__name__)


class Migration(ABC):
    """One schema change, identified by a sequential version number."""

    @property
    @abstractmethod
    def version(self) -> int:
        """Version number, unique and greater than zero."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Short human-readable summary."""

    @abstractmethod
    def up(self, connection: sqlite3.Connection) -> None:
        """Apply the change.

        Called inside the runner's transaction. Must not commit.
        """


class AppliedMigration(NamedTuple):
    version: int
    description: str
    applied_at: str


class MigrationRunner:
    """Applies pending migrations to one connection."""

    def __init__(self, connection: sqlite3.Connection):
        self.connection = connection
        with self._transaction():
            connection.execute(schema.CREATE_SCHEMA_VERSION_TABLE)

    @contextmanager
    def _transaction(self) -> Iterator[None]:
        # sqlite3 opens implicit transactions for DML only; DDL needs BEGIN
        if self.connection.in_transaction:
            raise RuntimeError("Migrations cannot run inside an open transaction")
        self.connection.execute("BEGIN")
        try:
            yield
        except BaseException:
            self.connection.rollback()
            raise
        self.connection.commit()

    @property
    def current_version(self) -> int:
        """Highest applied version, 0 for a fresh database."""
        row = self.connection.execute("SELECT MAX(version) FROM schema_version").fetchone()
        return row[0] or 0

    def pending(self, migrations: Iterable[Migration]) -> list[Migration]:
        """Migrations above the current version, in version order.

        Raises:
            ValueError: If two migrations share a version number
        """
        ordered = sorted(migrations, key=lambda m: m.version)
        versions = [m.version for m in ordered]
        if len(set(versions)) != len(versions):
            raise ValueError(f"Duplicate migration versions in {versions}")

        current = self.current_version
        return [m for m in ordered if m.version > current]

    def apply(self, migration: Migration) -> None:
        """Apply one migration and record it.

        Raises:
            ValueError: If the version is not above the current version
            RuntimeError: If the migration fails; nothing it did is kept
        """
        current = self.current_version
        if migration.version <= current:
            raise ValueError(
                f"Migration version {migration.version} is not greater than "
                f"current version {current}"
            )

        try:
            with self._transaction():
                migration.up(self.connection)
                self.connection.execute(
                    "INSERT INTO schema_version (version, description, applied_at) "
                    "VALUES (?, ?, ?)",
                    (migration.version, migration.description, datetime.now(UTC).isoformat()),
                )
        except Exception as e:
            logger.error("migration %d failed: %s", migration.version, e)
            raise RuntimeError(f"Migration {migration.version} failed: {e}") from e

        logger.info("applied migration %d: %s", migration.version, migration.description)

    def migrate(self, migrations: Iterable[Migration]) -> list[int]:
        """Apply every pending migration, stopping at the first failure.

        Returns:
            Versions applied by this call, in order
        """
        applied = []
        for migration in self.pending(migrations):
            self.apply(migration)
            applied.append(migration.version)
        return applied

    def history(self) -> list[AppliedMigration]:
        """Applied migrations, oldest first."""
        rows = self.connection.execute(
            "SELECT version, description, applied_at FROM schema_version ORDER BY version"
        )
        return [AppliedMigration(*row) for row in rows]
