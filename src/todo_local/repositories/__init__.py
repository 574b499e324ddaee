"""Data source interfaces for todo-local.

This package contains the abstract base class that defines the contract for
task persistence. Implementations live in ``todo_local.adapters``.
"""

from .repository import TaskDataSource

__all__ = [
    "TaskDataSource",
]
