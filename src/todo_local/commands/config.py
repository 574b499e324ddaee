"""Configuration commands."""

import typer
from pydantic import ValidationError

from todo_local.services.config_service import get_config_service
from todo_local.utils.exit_codes import ERROR_INVALID_ARGS
from todo_local.utils.typer_helpers import SuggestingGroup
from todo_local.utils.ui.formatters import format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration management")


@app.command("show")
@command_wrapper
def show_config(
    output: str = typer.Option("yaml", "--output", "-o", help="json or yaml"),
) -> None:
    """Show the current configuration."""
    if output not in ("json", "yaml", "table"):
        raise AppError(
            f"Unknown output format '{output}'. Choose from: json, yaml, table",
            exit_code=ERROR_INVALID_ARGS,
        )
    format_output(get_config_service().config.model_dump(), output)


@app.command("get")
@command_wrapper
def get_config(key: str = typer.Argument(..., help="Dot-separated key")) -> None:
    """Print one configuration value."""
    try:
        value = get_config_service().get(key)
    except KeyError as e:
        raise AppError(f"Unknown config key: {key}", exit_code=ERROR_INVALID_ARGS) from e
    typer.echo("" if value is None else str(value))


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Dot-separated key"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set one configuration value."""
    try:
        get_config_service().set(key, value)
    except KeyError as e:
        raise AppError(f"Unknown config key: {key}", exit_code=ERROR_INVALID_ARGS) from e
    except ValidationError as e:
        raise AppError(
            f"Invalid value for {key}: {e.errors()[0]['msg']}",
            exit_code=ERROR_INVALID_ARGS,
        ) from e
    format_success(f"Set {key} = {value}")


@app.command("reset")
@command_wrapper
def reset_config() -> None:
    """Reset configuration to defaults."""
    get_config_service().reset()
    format_success("Configuration reset to defaults")
