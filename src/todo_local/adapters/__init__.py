"""Adapters module - TaskDataSource implementations for storage backends.

This package contains concrete implementations (adapters) of the data source
interface:
- sqlite: Local SQLite database storage
"""

from .sqlite import SqliteTaskDataSource

__all__ = [
    "SqliteTaskDataSource",
]
