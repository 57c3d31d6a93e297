"""
Template Composer
=================

Merges the built-in function library, caller-supplied custom functions
and a set of named fragments into one renderable unit, then executes the
entry fragment against module metadata.

Example:
    >>> composer = Composer(
    ...     Settings(),
    ...     Fragment("all", '{%- include "header" -%}'),
    ...     Fragment("header", "{{ module.header | trim(' ') }}"),
    ... )
    >>> composer.custom_func({"shout": lambda s: s.upper()})
    >>> composer.render(module)

Fragments see two variables: ``module`` (the data passed to ``render``)
and ``settings``.
"""

from typing import Any, Callable, Mapping, Optional

from modoc_common import ENTRY_FRAGMENT, ConfigurationError, get_logger
from modoc_schema import Settings

from .engine import JinjaEngine, TemplateEngine
from .functions import FunctionTable, builtin_funcs
from .registry import Fragment, FragmentRegistry

logger = get_logger(__name__)


class Composer:
    """
    Renders a designated entry fragment with a merged function table.

    Configure the composer completely (all ``custom_func`` calls) before
    the first ``render``. Rendering never mutates the composer, so a
    configured composer can serve concurrent renders.

    Args:
        settings: Rendering settings (defaults to ``Settings()``)
        *fragments: Fragments to compose; at least one is required
        engine: Template engine (defaults to ``JinjaEngine()``)

    Raises:
        ConfigurationError: If no fragments are given
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *fragments: Fragment,
        engine: Optional[TemplateEngine] = None,
    ):
        if not fragments:
            raise ConfigurationError("At least one template fragment is required")

        self.settings = settings if settings is not None else Settings()
        self.engine = engine if engine is not None else JinjaEngine()
        self.registry = FragmentRegistry(fragments)
        self._builtins = builtin_funcs(self.settings)
        self._functions = self._builtins

        logger.debug("Composer created", fragments=self.registry.names())

    @property
    def functions(self) -> FunctionTable:
        """The merged built-in and custom function table."""
        return self._functions

    def custom_func(self, funcs: Mapping[str, Callable[..., Any]]) -> "Composer":
        """
        Add or override template functions.

        May be called several times; on a name collision the latest
        registration wins, including over built-ins.

        Raises:
            ConfigurationError: If a name is empty or a value is not callable
        """
        overridden = sorted(name for name in funcs if name in self._builtins)
        self._functions = self._functions.merge(funcs)

        if overridden:
            logger.debug("Custom functions override built-ins", names=overridden)
        return self

    def render(self, data: Any, entry: str = ENTRY_FRAGMENT) -> str:
        """
        Render the entry fragment against ``data``.

        Args:
            data: Module metadata, exposed to fragments as ``module``
            entry: Name of the fragment to execute

        Returns:
            Rendered text

        Raises:
            ParseError: If any fragment fails to parse
            ResolutionError: If the entry fragment is not registered
            ExecutionError: If execution fails
        """
        logger.debug("Rendering", entry=entry, fragments=len(self.registry))

        compiled = self.engine.build(self.registry, self._functions)
        return compiled.render(entry, {"module": data, "settings": self.settings})
