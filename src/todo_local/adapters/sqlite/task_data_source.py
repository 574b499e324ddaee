"""SQLite implementation of TaskDataSource."""

from __future__ import annotations

import logging
import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from todo_local.adapters.sqlite import schema
from todo_local.adapters.sqlite.connection import DatabaseConnection
from todo_local.adapters.sqlite.utils import row_to_task, task_id_of, task_to_params
from todo_local.models import (
    DataNotAvailable,
    Task,
    TaskLoaded,
    TaskOutcome,
    TasksLoaded,
    TasksOutcome,
)
from todo_local.repositories import TaskDataSource

logger = logging.getLogger(__name__)

_COLUMNS = ", ".join(schema.PROJECTION)

_SELECT_ALL = f"SELECT {_COLUMNS} FROM {schema.TABLE_NAME} ORDER BY rowid"
_SELECT_ONE = (
    f"SELECT {_COLUMNS} FROM {schema.TABLE_NAME} "
    f"WHERE {schema.COLUMN_ENTRY_ID} = ? LIMIT 1"
)
_UPSERT = (
    f"INSERT INTO {schema.TABLE_NAME} ({_COLUMNS}) VALUES (?, ?, ?, ?) "
    f"ON CONFLICT({schema.COLUMN_ENTRY_ID}) DO UPDATE SET "
    f"{schema.COLUMN_TITLE} = excluded.{schema.COLUMN_TITLE}, "
    f"{schema.COLUMN_DESCRIPTION} = excluded.{schema.COLUMN_DESCRIPTION}, "
    f"{schema.COLUMN_COMPLETED} = excluded.{schema.COLUMN_COMPLETED}"
)
_SET_COMPLETED = (
    f"UPDATE {schema.TABLE_NAME} SET {schema.COLUMN_COMPLETED} = ? "
    f"WHERE {schema.COLUMN_ENTRY_ID} = ?"
)
_DELETE_COMPLETED = (
    f"DELETE FROM {schema.TABLE_NAME} WHERE {schema.COLUMN_COMPLETED} = 1"
)
_DELETE_ALL = f"DELETE FROM {schema.TABLE_NAME}"
_DELETE_ONE = (
    f"DELETE FROM {schema.TABLE_NAME} WHERE {schema.COLUMN_ENTRY_ID} = ?"
)


class SqliteTaskDataSource(TaskDataSource):
    """SQLite implementation of the task data source.

    Every operation is a single statement run in its own transaction on the
    connection owned by this store. Driver errors are not caught here.
    """

    def __init__(
        self,
        db_path: str | Path | None = None,
        *,
        journal_mode: str = "WAL",
        timeout: float = 30.0,
        database: DatabaseConnection | None = None,
    ):
        """Initialize SQLite task data source.

        Args:
            db_path: Optional database file path (``":memory:"`` for an
                isolated in-memory store). If None, uses default location.
            journal_mode: SQLite journal mode for file databases
            timeout: Seconds to wait for a locked database
            database: Pre-built connection manager, overrides the other args
        """
        if database is None:
            database = DatabaseConnection(
                db_path, journal_mode=journal_mode, timeout=timeout
            )
        self.database = database
        self._lock = threading.Lock()

    @property
    def connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        return self.database.connection

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        """Serialize access and commit (or roll back) on exit."""
        with self._lock:
            connection = self.connection
            with connection:
                yield connection

    def get_tasks(self) -> TasksOutcome:
        """List all tasks in storage order."""
        with self._transaction() as connection:
            rows = connection.execute(_SELECT_ALL).fetchall()

        tasks = [row_to_task(row) for row in rows]
        logger.debug("loaded %d tasks", len(tasks))

        if not tasks:
            # New or empty table
            return DataNotAvailable()
        return TasksLoaded(tasks=tasks)

    def get_task(self, task_id: str) -> TaskOutcome:
        """Get a specific task by ID."""
        with self._transaction() as connection:
            row = connection.execute(_SELECT_ONE, (task_id,)).fetchone()

        if row is None:
            logger.debug("task not found: %s", task_id)
            return DataNotAvailable()
        return TaskLoaded(task=row_to_task(row))

    def save_task(self, task: Task) -> None:
        """Insert the task, or overwrite the stored task with the same ID."""
        with self._transaction() as connection:
            connection.execute(_UPSERT, task_to_params(task))
        logger.debug("saved task %s", task.id)

    def complete_task(self, task: Task | str) -> None:
        """Mark a task as completed."""
        self._set_completed(task_id_of(task), True)

    def activate_task(self, task: Task | str) -> None:
        """Mark a task as active."""
        self._set_completed(task_id_of(task), False)

    def clear_completed_tasks(self) -> None:
        """Delete every completed task."""
        with self._transaction() as connection:
            cursor = connection.execute(_DELETE_COMPLETED)
        logger.debug("cleared %d completed tasks", cursor.rowcount)

    def refresh_tasks(self) -> None:
        """Nothing to refresh: every read goes straight to the database."""

    def delete_all_tasks(self) -> None:
        """Delete every task."""
        with self._transaction() as connection:
            cursor = connection.execute(_DELETE_ALL)
        logger.debug("deleted all tasks (%d rows)", cursor.rowcount)

    def delete_task(self, task_id: str) -> None:
        """Delete a task. Unknown IDs are ignored."""
        with self._transaction() as connection:
            cursor = connection.execute(_DELETE_ONE, (task_id,))
        logger.debug("deleted task %s (%d rows)", task_id, cursor.rowcount)

    def _set_completed(self, task_id: str, completed: bool) -> None:
        with self._transaction() as connection:
            cursor = connection.execute(_SET_COMPLETED, (int(completed), task_id))
        logger.debug(
            "set completed=%s on task %s (%d rows)", completed, task_id, cursor.rowcount
        )

    def close(self) -> None:
        """Release the database connection."""
        with self._lock:
            self.database.close()

    def __enter__(self) -> SqliteTaskDataSource:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
