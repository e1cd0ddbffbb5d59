# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Structured Logging for onnxlate

Modules log through the standard library under the "onnxlate" logger
hierarchy. This module decides how those records are rendered: plain
text or one JSON object per line.

Example:
    from onnxlate.observability import configure_logging, Verbosity

    configure_logging(Verbosity.DEBUG, json_format=True)
"""

import json
import logging
import os
import sys
from dataclasses import dataclass, asdict, field
from datetime import datetime
from enum import IntEnum
from typing import Optional, TextIO

ROOT_LOGGER = "onnxlate"


class Verbosity(IntEnum):
    """
    Logging verbosity levels.

    Uses IntEnum for numeric comparison (e.g., if verbosity >= INFO).
    """

    SILENT = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4

    def to_logging_level(self) -> int:
        return {
            Verbosity.SILENT: logging.CRITICAL + 10,
            Verbosity.ERROR: logging.ERROR,
            Verbosity.WARNING: logging.WARNING,
            Verbosity.INFO: logging.INFO,
            Verbosity.DEBUG: logging.DEBUG,
        }[self]


@dataclass
class LogEntry:
    """
    Structured log entry.

    Attributes:
        level: Log level (ERROR, WARNING, INFO, DEBUG)
        message: Log message
        timestamp: ISO format timestamp
        component: Source module, relative to the onnxlate package
        extra: Additional context fields
    """

    level: str
    message: str
    timestamp: str
    component: str = "onnxlate"
    extra: dict = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> "LogEntry":
        component = record.name
        if component.startswith(ROOT_LOGGER + "."):
            component = component[len(ROOT_LOGGER) + 1:]
        return cls(
            level=record.levelname,
            message=record.getMessage(),
            timestamp=datetime.fromtimestamp(record.created).isoformat(),
            component=component,
            extra=dict(getattr(record, "context", None) or {}),
        )

    def to_json(self) -> str:
        """Convert to JSON string."""
        data = {k: v for k, v in asdict(self).items() if v is not None}
        if not data.get("extra"):
            data.pop("extra", None)
        return json.dumps(data, default=str)

    def to_text(self) -> str:
        """Convert to human-readable text format."""
        parts = [
            f"[{self.level}]",
            f"[{self.component}]",
            self.message,
        ]
        if self.extra:
            parts.append(" ".join(f"{k}={v}" for k, v in self.extra.items()))
        return " ".join(parts)


class StructuredFormatter(logging.Formatter):
    """Formats records as LogEntry text or JSON."""

    def __init__(self, json_format: bool = False):
        super().__init__()
        self.json_format = json_format

    def format(self, record: logging.LogRecord) -> str:
        entry = LogEntry.from_record(record)
        line = entry.to_json() if self.json_format else entry.to_text()
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


_handler: Optional[logging.Handler] = None


def _default_verbosity() -> Verbosity:
    env_verbosity = os.environ.get("ONNXLATE_VERBOSITY")
    if env_verbosity is not None:
        try:
            return Verbosity(int(env_verbosity))
        except ValueError:
            pass
    return Verbosity.WARNING


def configure_logging(
    verbosity: Optional[int] = None,
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach a single structured handler to the onnxlate logger.

    Calling again replaces the previous handler.

    Args:
        verbosity: Verbosity level (0-4); defaults to ONNXLATE_VERBOSITY.
        json_format: Emit JSON lines instead of text.
        stream: Output stream, stderr by default.
    """
    global _handler

    logger = logging.getLogger(ROOT_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setFormatter(StructuredFormatter(json_format=json_format))
    logger.addHandler(_handler)
    logger.propagate = False

    set_verbosity(_default_verbosity() if verbosity is None else verbosity)
    return logger


def set_verbosity(level: int) -> None:
    """
    Set global verbosity level.

    Args:
        level: Verbosity level (0=SILENT, 1=ERROR, 2=WARNING, 3=INFO, 4=DEBUG)
    """
    verbosity = Verbosity(max(0, min(4, int(level))))
    logging.getLogger(ROOT_LOGGER).setLevel(verbosity.to_logging_level())


def get_verbosity() -> Verbosity:
    """Get current verbosity level."""
    level = logging.getLogger(ROOT_LOGGER).getEffectiveLevel()
    for verbosity in sorted(Verbosity, reverse=True):
        if level <= verbosity.to_logging_level():
            return verbosity
    return Verbosity.SILENT
