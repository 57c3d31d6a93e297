"""
Template Function Library
=========================

Built-in string transformation functions available to every fragment,
parameterized by the rendering Settings.

Functions take the value they transform as their LAST argument, so they
read the same in call form and in pipe form:

    {{ trim(" ", module.header) }}
    {{ module.header | trim(" ") }}

Both call ``trim(" ", module.header)``.
"""

from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Union

from modoc_common import (
    DEFAULT_INDENT_LEVEL,
    MAX_INDENT_LEVEL,
    MIN_INDENT_LEVEL,
    ConfigurationError,
)
from modoc_schema import Settings

TemplateFunc = Callable[..., str]


# ============================================================================
# Helpers shared with other formatting paths
# ============================================================================


def sanitize_name(name: str, settings: Union[Settings, bool]) -> str:
    """
    Escape underscores in an identifier for Markdown output.

    Args:
        name: Identifier to sanitize
        settings: Settings, or the escape flag itself

    Returns:
        ``name`` with every ``_`` written as ``\\_`` when escaping is on
    """
    escape = settings if isinstance(settings, bool) else settings.escape_characters
    if escape:
        return name.replace("_", "\\_")
    return name


def generate_indentation(extra: int, char: str, settings: Settings) -> str:
    """
    Build a heading marker such as ``##`` or ``===``.

    The base depth is ``settings.indent_level``; values outside 1..5 fall
    back to 2. The marker is repeated ``base + extra`` times.
    """
    if char == "":
        return ""

    base = settings.indent_level
    if base < MIN_INDENT_LEVEL or base > MAX_INDENT_LEVEL:
        base = DEFAULT_INDENT_LEVEL

    return char * max(base + extra, 0)


def sanitize_table_cell(value: str, settings: Settings) -> str:
    """Make a string safe to place inside a single table cell."""
    value = value.strip().replace("\r\n", "\n").replace("\n", "<br>")
    if settings.escape_pipe:
        value = value.replace("|", "\\|")
    return value


# ============================================================================
# Function table
# ============================================================================


def _check_function(name: str, fn: Any) -> None:
    if not isinstance(name, str) or not name:
        raise ConfigurationError(f"Template function name must be a non-empty string, got {name!r}")
    if not callable(fn):
        raise ConfigurationError(
            f"Template function '{name}' must be callable, got {type(fn).__name__}"
        )


def _pipe_form(fn: TemplateFunc) -> Callable[..., str]:
    """Adapt a function to Jinja's filter convention (piped value first)."""

    def pipe(value: Any, *args: Any) -> str:
        return fn(*args, value)

    pipe.__name__ = getattr(fn, "__name__", "pipe")
    pipe.__doc__ = fn.__doc__
    return pipe


class FunctionTable(Mapping[str, TemplateFunc]):
    """
    Immutable mapping of template function names to callables.

    ``merge`` never modifies the table; it returns a new one where the
    given functions replace entries of the same name.
    """

    def __init__(self, funcs: Optional[Mapping[str, TemplateFunc]] = None):
        funcs = dict(funcs or {})
        for name, fn in funcs.items():
            _check_function(name, fn)
        self._funcs = MappingProxyType(funcs)

    def __getitem__(self, name: str) -> TemplateFunc:
        return self._funcs[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._funcs)

    def __len__(self) -> int:
        return len(self._funcs)

    def __repr__(self) -> str:
        return f"FunctionTable({sorted(self._funcs)})"

    def merge(self, overrides: Mapping[str, TemplateFunc]) -> "FunctionTable":
        merged = dict(self._funcs)
        merged.update(overrides)
        return FunctionTable(merged)

    def filters(self) -> Dict[str, Callable[..., str]]:
        """Pipe-form adapters for every function."""
        return {name: _pipe_form(fn) for name, fn in self._funcs.items()}


class FunctionTableBuilder:
    """Collects functions by name, refusing to register a name twice."""

    def __init__(self) -> None:
        self._funcs: Dict[str, TemplateFunc] = {}

    def register(self, name: str) -> Callable[[TemplateFunc], TemplateFunc]:
        def decorator(fn: TemplateFunc) -> TemplateFunc:
            _check_function(name, fn)
            if name in self._funcs:
                raise ConfigurationError(f"Template function '{name}' is already registered")
            self._funcs[name] = fn
            return fn

        return decorator

    def build(self) -> FunctionTable:
        return FunctionTable(self._funcs)


def builtin_funcs(settings: Settings) -> FunctionTable:
    """
    Build the built-in function table for the given settings.

    Args:
        settings: Rendering settings captured by the functions

    Returns:
        FunctionTable with default, indent, name, ternary, tostring,
        trim, trimLeft, trimRight, trimPrefix, trimSuffix and sanitizeTbl
    """
    builder = FunctionTableBuilder()
    register = builder.register

    @register("default")
    def default(fallback: str, value: str) -> str:
        """Value if non-empty, else the fallback."""
        if value != "":
            return value
        return fallback

    @register("indent")
    def indent(extra: int, char: str) -> str:
        """Heading marker repeated to the current depth plus extra."""
        return generate_indentation(extra, char, settings)

    @register("name")
    def name(value: str) -> str:
        """Identifier with underscores escaped when enabled."""
        return sanitize_name(value, settings)

    @register("ternary")
    def ternary(condition: Any, true_value: str, false_value: str) -> str:
        """First value if the condition is truthy, else the second."""
        return true_value if condition else false_value

    @register("tostring")
    def tostring(value: Any) -> str:
        """String form of a value; None becomes empty."""
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    # An empty cutset strips nothing
    @register("trim")
    def trim(cut: str, value: str) -> str:
        """Strip characters in cutset from both ends."""
        return value.strip(cut) if cut else value

    @register("trimLeft")
    def trim_left(cut: str, value: str) -> str:
        """Strip characters in cutset from the start."""
        return value.lstrip(cut) if cut else value

    @register("trimRight")
    def trim_right(cut: str, value: str) -> str:
        """Strip characters in cutset from the end."""
        return value.rstrip(cut) if cut else value

    @register("trimPrefix")
    def trim_prefix(prefix: str, value: str) -> str:
        """Remove one leading occurrence of prefix."""
        return value.removeprefix(prefix)

    @register("trimSuffix")
    def trim_suffix(suffix: str, value: str) -> str:
        """Remove one trailing occurrence of suffix."""
        return value.removesuffix(suffix)

    @register("sanitizeTbl")
    def sanitize_tbl(value: str) -> str:
        """Make text safe for a single table cell."""
        return sanitize_table_cell(value, settings)

    return builder.build()


__all__ = [
    "TemplateFunc",
    "FunctionTable",
    "FunctionTableBuilder",
    "builtin_funcs",
    "generate_indentation",
    "sanitize_name",
    "sanitize_table_cell",
]
