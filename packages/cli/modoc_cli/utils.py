"""Shared console helpers for CLI commands."""
import typer
from rich.console import Console

from modoc_common import ModocError

console = Console(stderr=True)


def error(message: str) -> None:
    console.print(f"[red]✘[/red] {message}")


def handle_error(e: Exception, verbose: bool = False) -> None:
    """Print an error and exit with status 1."""
    if isinstance(e, ModocError):
        error(f"{e.code}: {e.message}")
    else:
        error(f"Unexpected error: {e}")
    if verbose:
        console.print_exception()
    raise typer.Exit(code=1)
