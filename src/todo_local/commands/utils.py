"""Shared helpers for commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import typer

from todo_local.adapters.sqlite import SqliteTaskDataSource
from todo_local.services.config_service import get_config_service
from todo_local.services.task_service import TaskService


def db_override(ctx: typer.Context) -> str | None:
    """The ``--db`` value given to the root command, if any."""
    obj = ctx.find_root().obj or {}
    return obj.get("db")


@contextmanager
def open_task_service(ctx: typer.Context) -> Iterator[TaskService]:
    """Open the configured task store for the duration of one command."""
    config_service = get_config_service()
    db_config = config_service.config.database
    db_path = config_service.resolve_db_path(db_override(ctx))

    with SqliteTaskDataSource(
        db_path,
        journal_mode=db_config.journal_mode,
        timeout=db_config.timeout,
    ) as data_source:
        yield TaskService(data_source)


def resolve_output(output: str | None) -> str:
    """Explicit ``--output`` value, or the configured default format."""
    if output:
        return output
    return get_config_service().config.output.format
