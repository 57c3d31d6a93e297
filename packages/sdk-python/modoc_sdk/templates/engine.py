"""
Template Engines
================

The composer talks to the underlying template grammar through two small
interfaces so another engine can be substituted:

- ``TemplateEngine.build(fragments, functions)`` parses every fragment
  into one named-template namespace and returns a ``CompiledTemplates``.
- ``CompiledTemplates.render(entry, context)`` executes one fragment.

Both raise modoc render errors (ParseError, ResolutionError,
ExecutionError) rather than engine-specific exceptions.

``JinjaEngine`` is the default implementation.
"""

from typing import Any, Dict, List, Protocol

from jinja2 import (
    DictLoader,
    Environment,
    StrictUndefined,
    Template,
    TemplateNotFound,
    TemplateSyntaxError,
)

from modoc_common import ExecutionError, ParseError, ResolutionError

from .functions import FunctionTable
from .registry import FragmentRegistry


class CompiledTemplates(Protocol):
    def names(self) -> List[str]: ...

    def render(self, entry: str, context: Dict[str, Any]) -> str: ...


class TemplateEngine(Protocol):
    def build(self, fragments: FragmentRegistry, functions: FunctionTable) -> CompiledTemplates: ...


class JinjaTemplates:
    """Parsed Jinja2 templates sharing one environment."""

    def __init__(self, env: Environment, templates: Dict[str, Template]):
        self.env = env
        self._templates = templates

    def names(self) -> List[str]:
        return list(self._templates)

    def render(self, entry: str, context: Dict[str, Any]) -> str:
        template = self._templates.get(entry)
        if template is None:
            raise ResolutionError(
                f"Entry fragment '{entry}' is not defined. "
                f"Available fragments: {', '.join(self._templates) or 'none'}",
                fragment=entry,
            )

        try:
            return template.render(**context)
        except TemplateNotFound as e:
            raise ExecutionError(f"Fragment '{entry}' includes unknown fragment '{e.name}'") from e
        except RecursionError as e:
            raise ExecutionError(
                f"Fragment '{entry}' exceeded the recursion limit; check for cyclic includes"
            ) from e
        except Exception as e:
            raise ExecutionError(f"Failed to execute fragment '{entry}': {e}") from e


class JinjaEngine:
    """
    Jinja2-backed template engine.

    Functions are exposed both as globals (call form) and as filters
    (pipe form, piped value passed last). Undefined attributes raise.

    Args:
        trim_blocks: Remove the first newline after a block tag
        lstrip_blocks: Strip whitespace before a block tag on its line
        keep_trailing_newline: Preserve a fragment's final newline
    """

    def __init__(
        self,
        trim_blocks: bool = False,
        lstrip_blocks: bool = False,
        keep_trailing_newline: bool = True,
    ):
        self.trim_blocks = trim_blocks
        self.lstrip_blocks = lstrip_blocks
        self.keep_trailing_newline = keep_trailing_newline

    def create_environment(self, fragments: FragmentRegistry, functions: FunctionTable) -> Environment:
        env = Environment(
            loader=DictLoader(dict(fragments.as_mapping())),
            autoescape=False,
            trim_blocks=self.trim_blocks,
            lstrip_blocks=self.lstrip_blocks,
            keep_trailing_newline=self.keep_trailing_newline,
            undefined=StrictUndefined,
        )
        env.globals.update(functions)
        env.filters.update(functions.filters())
        return env

    def build(self, fragments: FragmentRegistry, functions: FunctionTable) -> JinjaTemplates:
        env = self.create_environment(fragments, functions)

        templates: Dict[str, Template] = {}
        for name in fragments.names():
            try:
                templates[name] = env.get_template(name)
            except TemplateSyntaxError as e:
                raise ParseError(
                    f"Syntax error in fragment '{name}' at line {e.lineno}: {e.message}",
                    fragment=name,
                    lineno=e.lineno,
                ) from e

        return JinjaTemplates(env, templates)
