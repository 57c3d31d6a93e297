"""
modoc Module Metadata Schema v1

Pydantic models for the module metadata that templates render: header and
footer text, inputs, outputs, providers, requirements, resources and
module calls.

Design Principles:
- Pure validation: Receives dicts, validates structure, returns typed objects
- No file I/O: reading metadata files is the SDK's responsibility
- Extensible: Accepts unknown fields so extractors can attach extra data

Usage:
    from modoc_schema import Module

    module = Module.model_validate(data)
    for resource in module.resources:
        print(resource.spec, resource.url)
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from modoc_common import RESOURCE_MODES, ValidationError
from modoc_common.constants import (
    DEFAULT_RESOURCE_VERSION,
    REGISTRY_NAMESPACE,
    REGISTRY_URL,
    RESOURCE_DOC_KINDS,
    RESOURCE_MODE_LABELS,
)


def _validate_name(v: str, kind: str) -> str:
    if not v or not v.strip():
        raise ValidationError(f"{kind} name cannot be empty")
    return v


def _ensure_unique(items: List[Any], kind: str) -> None:
    seen = set()
    for item in items:
        if item.name in seen:
            raise ValidationError(f"Duplicate {kind} name: '{item.name}'")
        seen.add(item.name)


# =============================================================================
# INPUTS AND OUTPUTS
# =============================================================================

class Input(BaseModel):
    """A module input variable."""
    name: str
    type: str = "any"
    description: str = ""
    default: Optional[Any] = None
    required: bool = False
    sensitive: bool = False

    model_config = ConfigDict(extra="allow")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _validate_name(v, "Input")


class Output(BaseModel):
    """A module output value."""
    name: str
    description: str = ""
    value: Optional[Any] = None
    sensitive: bool = False

    model_config = ConfigDict(extra="allow")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _validate_name(v, "Output")


# =============================================================================
# PROVIDERS AND REQUIREMENTS
# =============================================================================

class Provider(BaseModel):
    """A provider used by the module, optionally aliased."""
    name: str
    alias: str = ""
    version: str = ""

    model_config = ConfigDict(extra="allow")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _validate_name(v, "Provider")

    @property
    def full_name(self) -> str:
        """``name.alias`` for aliased providers, else ``name``."""
        if self.alias:
            return f"{self.name}.{self.alias}"
        return self.name


class Requirement(BaseModel):
    """A version constraint declared by the module."""
    name: str
    version: str = ""

    model_config = ConfigDict(extra="allow")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _validate_name(v, "Requirement")


# =============================================================================
# RESOURCES
# =============================================================================

class Resource(BaseModel):
    """
    A managed resource or data source created by the module.

    ``mode`` is ``managed`` for resources and ``data`` for data sources.
    """
    type: str
    provider_name: str
    provider_source: str = ""
    mode: str = "managed"
    version: str = DEFAULT_RESOURCE_VERSION

    model_config = ConfigDict(extra="allow")

    @field_validator("mode")
    @classmethod
    def validate_mode(cls, v: str) -> str:
        """Validate resource mode is supported"""
        if v not in RESOURCE_MODES:
            raise ValidationError(
                f"Unsupported resource mode: '{v}'. "
                f"Supported modes: {', '.join(RESOURCE_MODES)}"
            )
        return v

    @property
    def spec(self) -> str:
        """Fully qualified resource type, e.g. ``aws_instance``."""
        return f"{self.provider_name}_{self.type}"

    @property
    def mode_label(self) -> str:
        return RESOURCE_MODE_LABELS[self.mode]

    @property
    def url(self) -> str:
        """
        Registry documentation link for the resource.

        Only providers published under the ``hashicorp/`` namespace have a
        predictable documentation location; other sources yield ``""``.
        """
        if not self.provider_source.startswith(REGISTRY_NAMESPACE):
            return ""
        version = self.version or DEFAULT_RESOURCE_VERSION
        kind = RESOURCE_DOC_KINDS[self.mode]
        return f"{REGISTRY_URL}/{self.provider_source}/{version}/docs/{kind}/{self.type}"


# =============================================================================
# MODULE CALLS
# =============================================================================

class ModuleCall(BaseModel):
    """A child module called by the module."""
    name: str
    source: str
    version: str = ""

    model_config = ConfigDict(extra="allow")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _validate_name(v, "Module call")


# =============================================================================
# ROOT MODULE MODEL
# =============================================================================

class Module(BaseModel):
    """
    Root model for module metadata.

    This is the data object templates receive as ``module``.

    Usage:
        module = Module(header="# Network", inputs=[Input(name="cidr")])
        module.required_inputs
    """
    header: str = ""
    footer: str = ""
    inputs: List[Input] = []
    outputs: List[Output] = []
    providers: List[Provider] = []
    requirements: List[Requirement] = []
    resources: List[Resource] = []
    module_calls: List[ModuleCall] = []

    model_config = ConfigDict(extra="allow")

    @field_validator("inputs")
    @classmethod
    def validate_unique_inputs(cls, v: List[Input]) -> List[Input]:
        _ensure_unique(v, "input")
        return v

    @field_validator("outputs")
    @classmethod
    def validate_unique_outputs(cls, v: List[Output]) -> List[Output]:
        _ensure_unique(v, "output")
        return v

    @property
    def has_header(self) -> bool:
        return bool(self.header)

    @property
    def has_footer(self) -> bool:
        return bool(self.footer)

    @property
    def has_inputs(self) -> bool:
        return bool(self.inputs)

    @property
    def has_outputs(self) -> bool:
        return bool(self.outputs)

    @property
    def has_providers(self) -> bool:
        return bool(self.providers)

    @property
    def has_requirements(self) -> bool:
        return bool(self.requirements)

    @property
    def has_resources(self) -> bool:
        return bool(self.resources)

    @property
    def has_module_calls(self) -> bool:
        return bool(self.module_calls)

    @property
    def required_inputs(self) -> List[Input]:
        return [i for i in self.inputs if i.required]

    @property
    def optional_inputs(self) -> List[Input]:
        return [i for i in self.inputs if not i.required]
