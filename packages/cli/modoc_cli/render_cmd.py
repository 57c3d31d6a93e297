"""Render command - Render module metadata through a template directory."""
from typing import Optional

import typer

from modoc_common import ENTRY_FRAGMENT, ModocError
from modoc_sdk import Composer, load_fragments, load_module, load_settings

from .utils import handle_error


def render(
    module_file: str = typer.Argument(
        ...,
        help="Path to module metadata (YAML or JSON)"
    ),
    templates: str = typer.Option(
        ...,
        "--templates", "-t",
        help="Directory of template fragments (*.tmpl, *.j2)"
    ),
    config: Optional[str] = typer.Option(
        None,
        "--config", "-c",
        help="Configuration file (defaults to .modoc.yml if present)"
    ),
    entry: str = typer.Option(
        ENTRY_FRAGMENT,
        "--entry", "-e",
        help="Fragment to render"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Show tracebacks on failure"
    ),
):
    """
    Render documentation for a module.

    Every file in the templates directory becomes a fragment named after
    its file stem; rendering starts from the entry fragment ("all").
    The result is written to stdout.
    """
    try:
        settings = load_settings(config)
        module = load_module(module_file)
        fragments = load_fragments(templates)

        composer = Composer(settings, *fragments)
        output = composer.render(module, entry=entry)
        typer.echo(output, nl=not output.endswith("\n"))
    except ModocError as e:
        handle_error(e, verbose)
