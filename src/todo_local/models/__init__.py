"""todo-local domain models.

This package contains the Pydantic models for the task record, the
two-branch outcomes returned by data sources, and the application config.
"""

from .config_models import AppConfig, DatabaseConfig, LoggingConfig, OutputConfig
from .task import (
    DataNotAvailable,
    Task,
    TaskLoaded,
    TaskOutcome,
    TasksLoaded,
    TasksOutcome,
)

__all__ = [
    # Task models
    "Task",
    # Outcomes
    "TaskLoaded",
    "TasksLoaded",
    "DataNotAvailable",
    "TaskOutcome",
    "TasksOutcome",
    # Config models
    "AppConfig",
    "DatabaseConfig",
    "LoggingConfig",
    "OutputConfig",
]
