"""Task management commands."""

import typer

from todo_local.models import Task
from todo_local.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from todo_local.utils.typer_helpers import SuggestingGroup
from todo_local.utils.ui.formatters import (
    OUTPUT_FORMATS,
    format_info,
    format_output,
    format_success,
    format_warning,
)

from .decorators import AppError, command_wrapper
from .utils import open_task_service, resolve_output

app = typer.Typer(cls=SuggestingGroup, help="Task management commands")

STATUS_CHOICES = ("all", "active", "completed")


def _check_output(output: str) -> str:
    if output not in OUTPUT_FORMATS:
        raise AppError(
            f"Unknown output format '{output}'. Choose from: {', '.join(OUTPUT_FORMATS)}",
            exit_code=ERROR_INVALID_ARGS,
        )
    return output


@app.command("list")
@command_wrapper
async def list_tasks(
    ctx: typer.Context,
    status: str = typer.Option("all", "--status", "-s", help="all, active or completed"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """List tasks."""
    if status not in STATUS_CHOICES:
        raise AppError(
            f"Unknown status '{status}'. Choose from: {', '.join(STATUS_CHOICES)}",
            exit_code=ERROR_INVALID_ARGS,
        )
    output = _check_output(resolve_output(output))

    with open_task_service(ctx) as service:
        outcome = await service.list_tasks(status=status)

    if not outcome.available:
        if output in ("json", "yaml"):
            format_output([], output)
        else:
            format_info("No tasks available")
        return

    format_output([task.model_dump() for task in outcome.tasks], output)


@app.command("show")
@command_wrapper
async def show_task(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Show a single task."""
    output = _check_output(resolve_output(output))

    with open_task_service(ctx) as service:
        outcome = await service.get_task(task_id)

    if not outcome.available:
        raise AppError(f"Task not found: {task_id}", exit_code=ERROR_NOT_FOUND)

    format_output(outcome.task.model_dump(), output)


@app.command("add")
@command_wrapper
async def add_task(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Task title"),
    description: str = typer.Option("", "--description", "-d", help="Task description"),
) -> None:
    """Create a task with a generated ID."""
    with open_task_service(ctx) as service:
        try:
            task = await service.add_task(title, description)
        except ValueError as e:
            raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e

    format_success(f"Created task {task.id}")


@app.command("save")
@command_wrapper
async def save_task(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID"),
    title: str = typer.Option("", "--title", "-t", help="Task title"),
    description: str = typer.Option("", "--description", "-d", help="Task description"),
    completed: bool = typer.Option(
        False, "--completed/--active", help="Completion status"
    ),
) -> None:
    """Store a task under an explicit ID, replacing any task with that ID."""
    task = Task(id=task_id, title=title, description=description, completed=completed)

    with open_task_service(ctx) as service:
        await service.save_task(task)

    format_success(f"Saved task {task.id}")


async def _require_task(service, task_id: str) -> Task:
    outcome = await service.get_task(task_id)
    if not outcome.available:
        raise AppError(f"Task not found: {task_id}", exit_code=ERROR_NOT_FOUND)
    return outcome.task


@app.command("complete")
@command_wrapper
async def complete_task(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID"),
) -> None:
    """Mark a task as completed."""
    with open_task_service(ctx) as service:
        task = await _require_task(service, task_id)
        await service.complete_task(task)

    format_success(f"Completed task {task_id}")


@app.command("activate")
@command_wrapper
async def activate_task(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID"),
) -> None:
    """Mark a completed task as active again."""
    with open_task_service(ctx) as service:
        task = await _require_task(service, task_id)
        await service.activate_task(task)

    format_success(f"Activated task {task_id}")


@app.command("delete")
@command_wrapper
async def delete_task(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID"),
) -> None:
    """Delete a task."""
    with open_task_service(ctx) as service:
        await _require_task(service, task_id)
        await service.delete_task(task_id)

    format_success(f"Deleted task {task_id}")


@app.command("clear-completed")
@command_wrapper
async def clear_completed(ctx: typer.Context) -> None:
    """Delete every completed task."""
    with open_task_service(ctx) as service:
        await service.clear_completed_tasks()

    format_success("Cleared completed tasks")


@app.command("purge")
@command_wrapper
async def purge_tasks(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
) -> None:
    """Delete every task."""
    if not yes and not typer.confirm("Delete ALL tasks?"):
        format_warning("Aborted")
        raise typer.Exit(0)

    with open_task_service(ctx) as service:
        await service.delete_all_tasks()

    format_success("Deleted all tasks")
