"""
modoc Exception Classes

All modoc errors derive from ModocError, which carries a human-readable
message and a stable machine-readable code.

Render failures share the RenderError base so callers can catch every
failure of a render call in one place:

    try:
        text = composer.render(module)
    except RenderError as e:
        print(e.code, e.message)
"""

from typing import Any, Dict, Optional


class ModocError(Exception):
    """Base exception for all modoc errors."""

    code = "MODOC_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for structured output."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
        }

    def __str__(self) -> str:
        return self.message


class ValidationError(ModocError):
    """Invalid metadata, settings or fragment definition."""

    code = "VALIDATION_ERROR"


class ConfigurationError(ModocError):
    """Composer or configuration file set up incorrectly."""

    code = "CONFIGURATION_ERROR"


class RenderError(ModocError):
    """Base class for failures during a render call."""

    code = "RENDER_ERROR"


class ResolutionError(RenderError):
    """Entry fragment is not registered."""

    code = "RESOLUTION_ERROR"

    def __init__(self, message: str, fragment: Optional[str] = None):
        super().__init__(message)
        self.fragment = fragment


class ParseError(RenderError):
    """A fragment's source violates the template grammar."""

    code = "PARSE_ERROR"

    def __init__(
        self,
        message: str,
        fragment: Optional[str] = None,
        lineno: Optional[int] = None,
    ):
        super().__init__(message)
        self.fragment = fragment
        self.lineno = lineno

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["fragment"] = self.fragment
        data["lineno"] = self.lineno
        return data


class ExecutionError(RenderError):
    """Runtime failure while executing the entry fragment."""

    code = "EXECUTION_ERROR"
