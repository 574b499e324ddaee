"""Task data models."""

from __future__ import annotations

import uuid
from typing import Literal

from pydantic import BaseModel, Field


class Task(BaseModel):
    """Task model representing a single to-do item.

    Attributes:
        id: Unique identifier for the task (UUID4 string when not given)
        title: Short task title, may be empty
        description: Longer task description, may be empty
        completed: Completion status
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), min_length=1)
    title: str = ""
    description: str = ""
    completed: bool = False

    @property
    def is_active(self) -> bool:
        """Whether the task is still open."""
        return not self.completed

    @property
    def title_for_list(self) -> str:
        """Title to show in lists, falling back to the description."""
        if self.title:
            return self.title
        return self.description

    @property
    def is_empty(self) -> bool:
        """Whether the task has neither a title nor a description."""
        return not self.title and not self.description


class TasksLoaded(BaseModel):
    """Outcome of a list query that found at least one task."""

    kind: Literal["loaded"] = "loaded"
    tasks: list[Task]

    @property
    def available(self) -> bool:
        return True


class TaskLoaded(BaseModel):
    """Outcome of a lookup that found the task."""

    kind: Literal["loaded"] = "loaded"
    task: Task

    @property
    def available(self) -> bool:
        return True


class DataNotAvailable(BaseModel):
    """Outcome of a query that matched nothing.

    Returned instead of an empty list or ``None``; absence of data is not
    an error.
    """

    kind: Literal["not_available"] = "not_available"

    @property
    def available(self) -> bool:
        return False


TasksOutcome = TasksLoaded | DataNotAvailable
TaskOutcome = TaskLoaded | DataNotAvailable
