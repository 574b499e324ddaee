"""Task service - async access to a task data source.

The data source makes blocking database calls. This service runs each call
on a worker thread so callers on an event loop are never blocked, and hands
the data source's outcome back to the awaiting caller unchanged.
"""

from __future__ import annotations

import asyncio

from todo_local.models import (
    DataNotAvailable,
    Task,
    TaskOutcome,
    TasksLoaded,
    TasksOutcome,
)
from todo_local.repositories import TaskDataSource


class TaskService:
    """Service for task operations.

    Wraps a TaskDataSource; every method awaits the matching data source
    call on a worker thread.
    """

    def __init__(self, data_source: TaskDataSource):
        """Initialize the task service.

        Args:
            data_source: TaskDataSource implementation for data access
        """
        self.data_source = data_source

    async def list_tasks(self, *, status: str = "all") -> TasksOutcome:
        """List tasks, optionally only active or only completed ones.

        Args:
            status: "all", "active" or "completed"

        Returns:
            TasksLoaded, or DataNotAvailable when no task matches
        """
        if status not in ("all", "active", "completed"):
            raise ValueError(f"Unknown status filter: {status}")

        outcome = await asyncio.to_thread(self.data_source.get_tasks)
        if status == "all" or not outcome.available:
            return outcome

        want_completed = status == "completed"
        tasks = [t for t in outcome.tasks if t.completed == want_completed]
        if not tasks:
            return DataNotAvailable()
        return TasksLoaded(tasks=tasks)

    async def get_task(self, task_id: str) -> TaskOutcome:
        return await asyncio.to_thread(self.data_source.get_task, task_id)

    async def add_task(self, title: str, description: str = "") -> Task:
        """Create a task with a fresh ID and store it.

        Returns:
            The stored task

        Raises:
            ValueError: If both title and description are empty
        """
        task = Task(title=title, description=description)
        if task.is_empty:
            raise ValueError("A task needs a title or a description")
        await self.save_task(task)
        return task

    async def save_task(self, task: Task) -> None:
        await asyncio.to_thread(self.data_source.save_task, task)

    async def complete_task(self, task: Task | str) -> None:
        await asyncio.to_thread(self.data_source.complete_task, task)

    async def activate_task(self, task: Task | str) -> None:
        await asyncio.to_thread(self.data_source.activate_task, task)

    async def clear_completed_tasks(self) -> None:
        await asyncio.to_thread(self.data_source.clear_completed_tasks)

    async def refresh_tasks(self) -> None:
        await asyncio.to_thread(self.data_source.refresh_tasks)

    async def delete_all_tasks(self) -> None:
        await asyncio.to_thread(self.data_source.delete_all_tasks)

    async def delete_task(self, task_id: str) -> None:
        await asyncio.to_thread(self.data_source.delete_task, task_id)
