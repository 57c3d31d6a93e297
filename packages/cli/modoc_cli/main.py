"""modoc CLI - Main entry point."""
import os

import typer

from modoc_common import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL, configure_logging

from . import info_cmd, render_cmd

app = typer.Typer(
    name="modoc",
    help="modoc CLI - Render module documentation from template fragments",
    no_args_is_help=True,
    add_completion=False
)


@app.callback()
def configure(
    log_level: str = typer.Option(
        os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
        "--log-level",
        help="Log level (debug, info, warning, error)"
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Emit logs as JSON"
    ),
):
    """Configure logging for every command."""
    configure_logging(log_level, json_format=json_logs)


# Register all commands
app.command()(render_cmd.render)
app.command()(info_cmd.functions)
app.command()(info_cmd.version)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
