"""Utility functions for the SQLite adapter."""

from __future__ import annotations

import sqlite3
from typing import Any

from todo_local.adapters.sqlite import schema
from todo_local.models import Task


def row_to_dict(row: sqlite3.Row | None) -> dict[str, Any]:
    """Convert sqlite3.Row to dictionary.

    Args:
        row: sqlite3.Row object

    Returns:
        Dictionary with column names as keys
    """
    if row is None:
        return {}
    return dict(row)


def row_to_task(row: sqlite3.Row) -> Task:
    """Build a Task from a ``tasks`` row.

    Raises:
        pydantic.ValidationError: If the row does not hold a valid task
    """
    data = row_to_dict(row)
    return Task(
        id=data[schema.COLUMN_ENTRY_ID],
        title=data[schema.COLUMN_TITLE],
        description=data[schema.COLUMN_DESCRIPTION],
        completed=data[schema.COLUMN_COMPLETED] == 1,
    )


def task_to_params(task: Task) -> tuple[str, str, str, int]:
    """Column values for a task, in PROJECTION order."""
    return (task.id, task.title, task.description, int(task.completed))


def task_id_of(task: Task | str) -> str:
    """Accept either a Task or a bare task ID."""
    if isinstance(task, Task):
        return task.id
    return task
