"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from todo_local.models import Task
from todo_local.utils.ui.console import get_console

console = get_console()

OUTPUT_FORMATS = ("pretty", "table", "json", "yaml")

STATUS_ICONS = {
    "active": "⬜",
    "completed": "☑️",
}


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif output_format == "table":
        format_table(data)
    else:
        format_pretty(data)


def format_table(data: Any) -> None:
    """Format a task dict, or a list of them, as a table."""
    if not data:
        console.print("[yellow]No items found[/yellow]")
        return

    if isinstance(data, dict):
        format_single_item(data)
        return

    columns = list(data[0].keys())
    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col.replace("_", " ").title())

    for item in data:
        table.add_row(*(Text(_cell(item.get(col))) for col in columns))

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        table.add_row(key.replace("_", " ").title(), Text(_cell(value)))

    console.print(table)


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if value is None or value == "":
        return "-"
    return str(value)


def format_pretty(data: Any) -> None:
    """Format task dicts with status icons."""
    if not data:
        console.print("[yellow]No tasks found[/yellow]")
        return

    if isinstance(data, dict):
        format_task_item(Task.model_validate(data), show_description=True)
        return

    tasks = [Task.model_validate(item) for item in data]
    active = [t for t in tasks if t.is_active]
    completed = [t for t in tasks if not t.is_active]

    header = Text()
    header.append("📋 Tasks ", style="bold cyan")
    header.append(f"({len(active)} active", style="dim")
    if completed:
        header.append(f", {len(completed)} completed", style="dim green")
    header.append(")", style="dim")
    console.print(header)
    console.print()

    for task in active + completed:
        format_task_item(task, indent="  ")


def format_task_item(task: Task, indent: str = "", show_description: bool = False) -> None:
    """Format a single task line."""
    icon = STATUS_ICONS["active" if task.is_active else "completed"]

    line = Text(indent)
    line.append(f"{icon} ")
    line.append(task.title_for_list or "(empty)", style="bold" if task.is_active else "dim strike")
    line.append(f"  {task.id}", style="dim")
    console.print(line)

    if show_description and task.title and task.description:
        console.print(Text(f"{indent}   {task.description}", style="italic"))


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {escape(message)}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {escape(message)}")
