"""Console utilities for todo-local."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=1)
def get_console() -> Console:
    """Get the shared Rich Console instance."""
    return Console()


def set_color(enabled: bool) -> None:
    """Turn colored output of the shared console on or off."""
    get_console().no_color = not enabled
