"""
modoc Shared Constants

This module defines constants used across the modoc packages.
It serves as the single source of truth for supported values and defaults.

Usage:
    from modoc_common.constants import ENTRY_FRAGMENT, RESOURCE_MODES

    if mode not in RESOURCE_MODES:
        raise ValidationError(f"Unsupported resource mode: {mode}")
"""

# =============================================================================
# VERSION INFORMATION
# =============================================================================

MODOC_VERSION = "0.1.0"
"""Current modoc version"""


# =============================================================================
# RENDERING
# =============================================================================

ENTRY_FRAGMENT = "all"
"""Name of the fragment every render starts from"""

TEMPLATE_EXTENSIONS = [".tmpl", ".j2"]
"""File extensions picked up when loading fragments from a directory"""

DEFAULT_INDENT_LEVEL = 2
"""Base heading depth used when indent_level is outside the valid range"""

MIN_INDENT_LEVEL = 1
"""Smallest accepted indent_level"""

MAX_INDENT_LEVEL = 5
"""Largest accepted indent_level"""


# =============================================================================
# MODULE METADATA
# =============================================================================

RESOURCE_MODES = ["managed", "data"]
"""Resource modes: managed resources and data sources"""

RESOURCE_MODE_LABELS = {
    "managed": "resource",
    "data": "data source",
}
"""Human-readable label for each resource mode"""

RESOURCE_DOC_KINDS = {
    "managed": "resources",
    "data": "data-sources",
}
"""Registry documentation section for each resource mode"""

REGISTRY_URL = "https://registry.terraform.io/providers"
"""Base URL for provider documentation links"""

REGISTRY_NAMESPACE = "hashicorp/"
"""Only providers under this namespace get documentation links"""

DEFAULT_RESOURCE_VERSION = "latest"
"""Provider version used in documentation links when none is pinned"""


# =============================================================================
# CONFIGURATION
# =============================================================================

CONFIG_FILE_NAME = ".modoc.yml"
"""Default configuration file looked up in the working directory"""

ENV_LOG_LEVEL = "MODOC_LOG_LEVEL"
"""Environment variable for the CLI log level"""

DEFAULT_LOG_LEVEL = "warning"
"""Default logging level"""

LOG_LEVELS = ["debug", "info", "warning", "error"]
"""Valid log levels"""
