"""modoc SDK - Render module documentation from named template fragments.

This package provides tools for:
- Composing template fragments with built-in text functions
- Registering custom template functions
- Loading settings, module metadata and fragments from disk

Example:
    >>> from modoc_sdk import Fragment, render
    >>> text = render(module, [
    ...     Fragment("all", '{%- include "header" -%}'),
    ...     Fragment("header", "{{ module.header }}"),
    ... ])

Package Structure:
    modoc_sdk/
    ├── core/           - Loaders (settings, module metadata, fragments)
    └── templates/      - Function library, fragment registry, composer
"""

from typing import Any, Callable, Iterable, Mapping, Optional

from modoc_common import ENTRY_FRAGMENT
from modoc_schema import Settings

# Templates
from .templates import (
    Composer,
    Fragment,
    FragmentRegistry,
    FunctionTable,
    JinjaEngine,
    builtin_funcs,
    generate_indentation,
    sanitize_name,
)

# Loaders
from .core import load_fragments, load_module, load_settings


def render(
    module: Any,
    fragments: Iterable[Fragment],
    settings: Optional[Settings] = None,
    custom_funcs: Optional[Mapping[str, Callable[..., Any]]] = None,
    entry: str = ENTRY_FRAGMENT,
) -> str:
    """Compose ``fragments`` and render ``entry`` against ``module`` in one call."""
    composer = Composer(settings, *fragments)
    if custom_funcs:
        composer.custom_func(custom_funcs)
    return composer.render(module, entry=entry)


__version__ = "0.1.0"

__all__ = [
    # Templates
    "Composer",
    "Fragment",
    "FragmentRegistry",
    "FunctionTable",
    "JinjaEngine",
    "builtin_funcs",
    "generate_indentation",
    "sanitize_name",
    # Loaders
    "load_fragments",
    "load_module",
    "load_settings",
    # Convenience
    "render",
]
