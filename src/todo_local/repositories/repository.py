"""Data source abstraction layer for todo-local.

This module defines the abstract base class (interface) for task data sources,
following the hexagonal architecture (Ports & Adapters) pattern. The service
layer and the CLI depend only on this contract, never on SQLite directly.

Lookups report absence of data through ``DataNotAvailable`` rather than by
raising; write operations return nothing and are silent when no row matches.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from todo_local.models import Task, TaskOutcome, TasksOutcome


class TaskDataSource(ABC):
    """Abstract base class for task persistence operations."""

    @abstractmethod
    def get_tasks(self) -> TasksOutcome:
        """List every stored task.

        Returns:
            TasksLoaded with all tasks in storage order, or DataNotAvailable
            when the store holds no tasks
        """
        raise NotImplementedError(
            "TaskDataSource.get_tasks() must be implemented by adapter"
        )

    @abstractmethod
    def get_task(self, task_id: str) -> TaskOutcome:
        """Get a specific task by ID.

        Args:
            task_id: Unique identifier for the task

        Returns:
            TaskLoaded, or DataNotAvailable if no task has that ID
        """
        raise NotImplementedError(
            "TaskDataSource.get_task() must be implemented by adapter"
        )

    @abstractmethod
    def save_task(self, task: Task) -> None:
        """Store a task, replacing any stored task with the same ID.

        Args:
            task: Task to store
        """
        raise NotImplementedError(
            "TaskDataSource.save_task() must be implemented by adapter"
        )

    @abstractmethod
    def complete_task(self, task: Task | str) -> None:
        """Mark a task as completed.

        Args:
            task: Task or task ID
        """
        raise NotImplementedError(
            "TaskDataSource.complete_task() must be implemented by adapter"
        )

    @abstractmethod
    def activate_task(self, task: Task | str) -> None:
        """Mark a task as active (not completed).

        Args:
            task: Task or task ID
        """
        raise NotImplementedError(
            "TaskDataSource.activate_task() must be implemented by adapter"
        )

    @abstractmethod
    def clear_completed_tasks(self) -> None:
        """Delete every completed task."""
        raise NotImplementedError(
            "TaskDataSource.clear_completed_tasks() must be implemented by adapter"
        )

    @abstractmethod
    def refresh_tasks(self) -> None:
        """Invalidate any cached view of the tasks."""
        raise NotImplementedError(
            "TaskDataSource.refresh_tasks() must be implemented by adapter"
        )

    @abstractmethod
    def delete_all_tasks(self) -> None:
        """Delete every task."""
        raise NotImplementedError(
            "TaskDataSource.delete_all_tasks() must be implemented by adapter"
        )

    @abstractmethod
    def delete_task(self, task_id: str) -> None:
        """Delete a task.

        Args:
            task_id: Unique identifier for the task
        """
        raise NotImplementedError(
            "TaskDataSource.delete_task() must be implemented by adapter"
        )
