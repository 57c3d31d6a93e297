"""Info commands - Version and built-in function listing."""
import typer
from rich.console import Console
from rich.table import Table

from modoc_common import MODOC_VERSION
from modoc_schema import Settings
from modoc_sdk import builtin_funcs

stdout = Console()


def version():
    """Show the modoc version."""
    typer.echo(f"modoc {MODOC_VERSION}")


def functions():
    """List the built-in template functions."""
    table = Table(title="Built-in template functions")
    table.add_column("Name", style="cyan")
    table.add_column("Description")

    for name, fn in sorted(builtin_funcs(Settings()).items()):
        table.add_row(name, (fn.__doc__ or "").strip())

    stdout.print(table)
