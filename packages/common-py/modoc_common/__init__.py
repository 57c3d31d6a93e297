"""
modoc Common Package

Shared primitives used across all modoc packages.

This package provides:
- Exception classes for consistent error handling
- Constants for supported values and defaults
- A structured logger

Usage:
    from modoc_common import RenderError, get_logger, ENTRY_FRAGMENT
"""

# Error classes
from .errors import (
    ModocError,
    ValidationError,
    ConfigurationError,
    RenderError,
    ResolutionError,
    ParseError,
    ExecutionError,
)

# Constants
from .constants import (
    MODOC_VERSION,
    ENTRY_FRAGMENT,
    TEMPLATE_EXTENSIONS,
    DEFAULT_INDENT_LEVEL,
    MIN_INDENT_LEVEL,
    MAX_INDENT_LEVEL,
    RESOURCE_MODES,
    CONFIG_FILE_NAME,
    ENV_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_LEVELS,
)

# Logger
from .logger import (
    ModocLogger,
    get_logger,
    configure_logging,
)

__version__ = MODOC_VERSION

__all__ = [
    # Errors
    "ModocError",
    "ValidationError",
    "ConfigurationError",
    "RenderError",
    "ResolutionError",
    "ParseError",
    "ExecutionError",
    # Constants
    "MODOC_VERSION",
    "ENTRY_FRAGMENT",
    "TEMPLATE_EXTENSIONS",
    "DEFAULT_INDENT_LEVEL",
    "MIN_INDENT_LEVEL",
    "MAX_INDENT_LEVEL",
    "RESOURCE_MODES",
    "CONFIG_FILE_NAME",
    "ENV_LOG_LEVEL",
    "DEFAULT_LOG_LEVEL",
    "LOG_LEVELS",
    # Logger
    "ModocLogger",
    "get_logger",
    "configure_logging",
]
