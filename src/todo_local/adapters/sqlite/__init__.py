"""SQLite adapter module - Local database storage implementation."""

from todo_local.adapters.sqlite.connection import DatabaseConnection, default_db_path
from todo_local.adapters.sqlite.task_data_source import SqliteTaskDataSource

__all__ = [
    "SqliteTaskDataSource",
    "DatabaseConnection",
    "default_db_path",
]
