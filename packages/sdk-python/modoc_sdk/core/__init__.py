"""
Core SDK Functionality
======================

Loaders for settings, module metadata and template fragments.
"""

from .loader import load_fragments, load_module, load_settings

__all__ = [
    "load_fragments",
    "load_module",
    "load_settings",
]
