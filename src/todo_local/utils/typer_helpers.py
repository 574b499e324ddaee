"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from rich.markup import escape
from typer.core import TyperGroup

from todo_local.utils.exit_codes import ERROR_INVALID_ARGS
from todo_local.utils.ui.console import get_console


class SuggestingGroup(TyperGroup):
    """Command group that answers an unknown subcommand with close matches."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            suggestions = get_close_matches(args[0], self.commands, n=3) if args else []
            if not suggestions:
                raise

            console = get_console()
            console.print(
                f'[red]Error:[/red] unknown command "{escape(args[0])}" for "{ctx.info_name}"'
            )
            console.print()
            console.print("[yellow]Did you mean:[/yellow]")
            for suggestion in suggestions:
                console.print(f"        {suggestion}")
            raise typer.Exit(ERROR_INVALID_ARGS) from e
