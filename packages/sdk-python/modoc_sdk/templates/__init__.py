"""
Template System Module
======================

Composes named template fragments with a library of text functions:
- Fragment / FragmentRegistry: named template sources
- builtin_funcs: string helpers parameterized by Settings
- Composer: merges both and renders an entry fragment
"""

from .composer import Composer
from .engine import CompiledTemplates, JinjaEngine, JinjaTemplates, TemplateEngine
from .functions import (
    FunctionTable,
    FunctionTableBuilder,
    builtin_funcs,
    generate_indentation,
    sanitize_name,
    sanitize_table_cell,
)
from .registry import Fragment, FragmentRegistry

__all__ = [
    "Composer",
    "CompiledTemplates",
    "JinjaEngine",
    "JinjaTemplates",
    "TemplateEngine",
    "FunctionTable",
    "FunctionTableBuilder",
    "builtin_funcs",
    "generate_indentation",
    "sanitize_name",
    "sanitize_table_cell",
    "Fragment",
    "FragmentRegistry",
]
