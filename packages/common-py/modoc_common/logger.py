"""
modoc Structured Logger

Thin wrapper over the standard logging module that accepts keyword context:

    logger = get_logger(__name__)
    logger.info("Rendering fragment", entry="all", fragments=3)

Context is appended as ``key=value`` pairs in text mode, or emitted as
fields of a JSON object when ``configure_logging(json_format=True)``.
"""

import json
import logging
import sys
from typing import Any, Dict, Optional

from .constants import LOG_LEVELS
from .errors import ConfigurationError

_ROOT_LOGGER_NAME = "modoc"
_CONTEXT_ATTR = "modoc_context"


class _TextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context: Dict[str, Any] = getattr(record, _CONTEXT_ATTR, {})
        if context:
            pairs = " ".join(f"{key}={value!r}" for key, value in context.items())
            message = f"{message} {pairs}"
        return message


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(getattr(record, _CONTEXT_ATTR, {}))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is at emit time."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


class ModocLogger:
    """
    Logger that carries keyword arguments as structured context.

    Standard ``exc_info`` and ``extra`` keywords are passed through to
    the underlying ``logging.Logger``; everything else becomes context.
    """

    def __init__(self, name: str):
        if name != _ROOT_LOGGER_NAME and not name.startswith(f"{_ROOT_LOGGER_NAME}."):
            name = f"{_ROOT_LOGGER_NAME}.{name}"
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, msg: str, exc_info: Any = None, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        extra = dict(kwargs.pop("extra", None) or {})
        extra[_CONTEXT_ATTR] = kwargs
        self._logger.log(level, msg, exc_info=exc_info, extra=extra)

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, **kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, exc_info=True, **kwargs)


def get_logger(name: str) -> ModocLogger:
    """Get a structured logger under the ``modoc`` namespace."""
    return ModocLogger(name)


def configure_logging(
    level: str = "warning",
    json_format: bool = False,
    stream: Optional[Any] = None,
) -> None:
    """
    Configure the ``modoc`` logger hierarchy.

    Args:
        level: Log level name (debug, info, warning, error)
        json_format: Emit one JSON object per record instead of text
        stream: Output stream (defaults to stderr)
    """
    if level.lower() not in LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid log level: '{level}'. Valid levels: {', '.join(LOG_LEVELS)}"
        )

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(level.upper())

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream) if stream is not None else _StderrHandler()
    if json_format:
        handler.setFormatter(_JsonFormatter())
    else:
        handler.setFormatter(_TextFormatter("%(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
