"""
File Loaders
============

Read settings, module metadata and template fragments from disk and
validate them into modoc objects.
"""

import json
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml

from modoc_common import (
    CONFIG_FILE_NAME,
    TEMPLATE_EXTENSIONS,
    ConfigurationError,
    ModocError,
    ValidationError,
    get_logger,
)
from modoc_schema import Module, Settings

from ..templates import Fragment

logger = get_logger(__name__)

PathLike = Union[str, Path]


def _read_document(path: Path, kind: str) -> Any:
    """Parse a YAML or JSON file, mapping failures to ConfigurationError."""
    if not path.exists():
        raise ConfigurationError(
            f"{kind} not found: {path}\n"
            f"Make sure the file exists and the path is correct."
        )

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Failed to read {kind.lower()}: {path}\nError: {e}") from e

    try:
        if path.suffix == ".json":
            return json.loads(content)
        return yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(
            f"Invalid syntax in {kind.lower()}: {path}\n"
            f"Error: {e}"
        ) from e


def load_settings(path: Optional[PathLike] = None) -> Settings:
    """
    Load rendering settings from a configuration file.

    The file holds a top-level ``settings`` mapping; camelCase and
    snake_case keys are both accepted:

        settings:
          escapeCharacters: false
          indentLevel: 3

    Args:
        path: Configuration file. When omitted, ``.modoc.yml`` in the
            working directory is used if present, else defaults.

    Returns:
        Validated Settings

    Raises:
        ConfigurationError: If the file is unreadable or malformed
        ValidationError: If a setting has an invalid value
    """
    if path is None:
        default_path = Path.cwd() / CONFIG_FILE_NAME
        if not default_path.exists():
            logger.debug("No configuration file found, using default settings")
            return Settings()
        path = default_path

    file_path = Path(path)
    data = _read_document(file_path, "Configuration file")

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file must contain a mapping: {file_path}")

    section = data.get("settings") or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"'settings' must be a mapping in {file_path}")

    try:
        settings = Settings.from_dict(section)
    except ModocError:
        raise
    except Exception as e:
        raise ValidationError(f"Invalid settings in {file_path}\nError: {e}") from e

    logger.debug("Loaded settings", path=str(file_path))
    return settings


def load_module(path: PathLike) -> Module:
    """
    Load module metadata from a YAML or JSON file.

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed
        ValidationError: If the metadata does not match the schema
    """
    file_path = Path(path)
    data = _read_document(file_path, "Module metadata file")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Module metadata must be a mapping: {file_path}")

    try:
        module = Module.model_validate(data)
    except ModocError:
        raise
    except Exception as e:
        raise ValidationError(
            f"Invalid module metadata: {file_path}\n"
            f"Error: {e}"
        ) from e

    logger.debug(
        "Loaded module metadata",
        path=str(file_path),
        inputs=len(module.inputs),
        outputs=len(module.outputs),
    )
    return module


def load_fragments(directory: PathLike) -> List[Fragment]:
    """
    Load every template file in a directory as a fragment.

    Files ending in ``.tmpl`` or ``.j2`` become fragments named after
    their stem: ``all.tmpl`` defines ``all``. Files are read in name order.

    Raises:
        ConfigurationError: If the directory is missing or holds no templates
    """
    dir_path = Path(directory)
    if not dir_path.is_dir():
        raise ConfigurationError(f"Template directory not found: {dir_path}")

    fragments: List[Fragment] = []
    for file_path in sorted(dir_path.iterdir()):
        if not file_path.is_file() or file_path.suffix not in TEMPLATE_EXTENSIONS:
            continue
        try:
            text = file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Failed to read template: {file_path}\nError: {e}") from e
        fragments.append(Fragment(name=file_path.stem, text=text))

    if not fragments:
        raise ConfigurationError(
            f"No templates found in {dir_path}. "
            f"Expected files ending in: {', '.join(TEMPLATE_EXTENSIONS)}"
        )

    logger.debug("Loaded fragments", directory=str(dir_path), names=[f.name for f in fragments])
    return fragments
