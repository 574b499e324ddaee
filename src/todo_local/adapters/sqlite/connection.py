"""Database connection management for the local task store.

Each ``DatabaseConnection`` owns exactly one SQLite connection, opened lazily
on first use and released on ``close()`` or when its ``with`` block exits.
There is no process-wide instance: whoever builds the store decides the
database path and passes the store along.
"""

from __future__ import annotations

import logging
import os
import sqlite3
from pathlib import Path

from platformdirs import user_data_dir

from todo_local.adapters.sqlite.migrations import ALL_MIGRATIONS
from todo_local.adapters.sqlite.migrations.runner import MigrationRunner

logger = logging.getLogger(__name__)

APP_NAME = "todo_local"
DB_FILENAME = "tasks.db"
MEMORY_DB = ":memory:"
JOURNAL_MODES = ("WAL", "DELETE", "TRUNCATE", "MEMORY")


def default_db_path() -> Path:
    """Default database location inside the platform data directory."""
    return Path(user_data_dir(APP_NAME)) / DB_FILENAME


class DatabaseConnection:
    """Connection manager for one local SQLite database.

    Provides:
    - One connection per manager, reused for every statement
    - WAL mode for file databases
    - Automatic directory creation
    - Owner-only file permissions on new database files
    - Schema migrations on open
    """

    def __init__(
        self,
        db_path: str | Path | None = None,
        *,
        journal_mode: str = "WAL",
        timeout: float = 30.0,
    ):
        """Initialize the connection manager.

        Args:
            db_path: Database file path, ``":memory:"`` for a private in-memory
                database, or None for the default location.
            journal_mode: SQLite journal mode for file databases
            timeout: Seconds to wait for a locked database
        """
        if journal_mode.upper() not in JOURNAL_MODES:
            raise ValueError(f"Unsupported journal mode: {journal_mode}")
        if db_path is None:
            db_path = default_db_path()
        self.db_path: Path | str = db_path if db_path == MEMORY_DB else Path(db_path)
        self.journal_mode = journal_mode.upper()
        self.timeout = timeout
        self._connection: sqlite3.Connection | None = None

    @property
    def is_memory(self) -> bool:
        return self.db_path == MEMORY_DB

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    @property
    def connection(self) -> sqlite3.Connection:
        """Get the connection, opening it on first access."""
        if self._connection is None:
            self._connection = self._open()
        return self._connection

    def _open(self) -> sqlite3.Connection:
        is_new_database = False
        if not self.is_memory:
            db_file = Path(self.db_path)
            db_file.parent.mkdir(parents=True, exist_ok=True)
            is_new_database = not db_file.exists()

        connection = sqlite3.connect(
            str(self.db_path),
            check_same_thread=False,  # Store serializes access with its own lock
            timeout=self.timeout,
        )
        connection.row_factory = sqlite3.Row

        if not self.is_memory:
            connection.execute(f"PRAGMA journal_mode = {self.journal_mode}")
            if is_new_database:
                os.chmod(self.db_path, 0o600)

        try:
            MigrationRunner(connection).migrate(ALL_MIGRATIONS)
        except Exception:
            connection.close()
            raise

        logger.debug("opened task database at %s", self.db_path)
        return connection

    def close(self) -> None:
        """Close the connection if it is open."""
        if self._connection is None:
            return
        try:
            self._connection.close()
        finally:
            self._connection = None
        logger.debug("closed task database at %s", self.db_path)

    def __enter__(self) -> DatabaseConnection:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
