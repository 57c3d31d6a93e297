"""
modoc Schema Package

Pydantic models for rendering settings and module metadata.

Usage:
    from modoc_schema import Module, Settings

    module = Module.model_validate({"header": "# Network"})
    settings = Settings(indent_level=3)
"""

from modoc_common import ValidationError

from .module_v1 import (
    Input,
    Module,
    ModuleCall,
    Output,
    Provider,
    Requirement,
    Resource,
)
from .settings import Settings

__all__ = [
    "Input",
    "Module",
    "ModuleCall",
    "Output",
    "Provider",
    "Requirement",
    "Resource",
    "Settings",
    "ValidationError",
]
