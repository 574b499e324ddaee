"""Service layer for todo-local."""

from .config_service import ConfigService, get_config_service
from .task_service import TaskService

__all__ = [
    "ConfigService",
    "TaskService",
    "get_config_service",
]
