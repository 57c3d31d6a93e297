"""
modoc Rendering Settings

Read-only options consumed by every built-in template function and
available to templates as ``settings``.

Keys may be given in snake_case or in the camelCase form used by
configuration files:

    settings = Settings.from_dict({"escapeCharacters": False, "indentLevel": 3})
    settings.escape_characters   # False
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from modoc_common import DEFAULT_INDENT_LEVEL, ValidationError


class Settings(BaseModel):
    """
    Rendering settings.

    Frozen so a render always sees one consistent snapshot. Use
    ``model_copy(update=...)`` to derive a variant.
    """

    # Escaping
    escape_characters: bool = True
    escape_pipe: bool = True

    # Heading depth
    indent_level: int = DEFAULT_INDENT_LEVEL

    # Section toggles read by templates
    hide_empty: bool = False
    show_header: bool = True
    show_footer: bool = False
    show_inputs: bool = True
    show_outputs: bool = True
    show_providers: bool = True
    show_requirements: bool = True
    show_resources: bool = True
    show_modules: bool = True

    # Column toggles read by templates
    show_default: bool = True
    show_required: bool = True
    show_type: bool = True

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("indent_level")
    @classmethod
    def validate_indent_level(cls, v: int) -> int:
        """Reject negative heading depths"""
        if v < 0:
            raise ValidationError(f"indent_level must be zero or positive, got {v}")
        return v

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]] = None) -> "Settings":
        """Build settings from a (possibly camelCase) mapping."""
        return cls.model_validate(data or {})
