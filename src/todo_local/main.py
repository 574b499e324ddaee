"""Main entry point for the todo-local CLI."""

import typer

from todo_local import __version__
from todo_local.commands import config, tasks
from todo_local.services.config_service import get_config_service
from todo_local.utils.exit_codes import ERROR_GENERAL
from todo_local.utils.logger import get_logger, set_level
from todo_local.utils.typer_helpers import SuggestingGroup
from todo_local.utils.ui.console import get_console, set_color
from todo_local.utils.ui.formatters import format_error, format_info

app = typer.Typer(
    name="todo-local",
    cls=SuggestingGroup,
    help="Manage a local SQLite to-do list",
    no_args_is_help=True,
)

console = get_console()

app.add_typer(tasks.app, name="tasks", help="Task management commands")
app.add_typer(config.app, name="config", help="Configuration management")


@app.callback()
def main(
    ctx: typer.Context,
    db: str | None = typer.Option(
        None, "--db", envvar="TODO_LOCAL_DB", help="SQLite database path"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Manage a local SQLite to-do list."""
    ctx.obj = {"db": db}
    try:
        app_config = get_config_service().config
    except RuntimeError as e:
        get_logger().error("could not load configuration: %s", e)
        format_error(str(e))
        format_info(f"Fix or delete {get_config_service().config_path}")
        raise typer.Exit(ERROR_GENERAL) from e

    set_level("DEBUG" if verbose else app_config.logging.level)
    set_color(app_config.output.color)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]todo-local[/bold] version [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
