# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Translator Configuration

Example:
    from onnxlate.config import TranslatorConfig
    from onnxlate.execution import build_registry

    config = TranslatorConfig.from_env()
    config.apply_logging()
    registry = build_registry(config)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError
from .observability import configure_logging

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError("expected a boolean", config_key=key, config_value=raw)


@dataclass
class TranslatorConfig:
    """
    Configuration for decoding and operator evaluation.

    Attributes:
        verbosity: Verbosity level (0-4)
        json_logs: Emit log records as JSON lines
        strict: Raise for unregistered operators instead of skipping them
        operators: Op types to enable; None enables every default operator
    """

    verbosity: int = 2
    json_logs: bool = False
    strict: bool = True
    operators: Optional[list[str]] = None

    def __post_init__(self):
        if not 0 <= self.verbosity <= 4:
            raise ConfigurationError(
                "verbosity must be between 0 and 4",
                config_key="verbosity",
                config_value=str(self.verbosity),
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TranslatorConfig":
        """
        Build a config from ONNXLATE_* environment variables.

        ONNXLATE_VERBOSITY, ONNXLATE_LOG_JSON, ONNXLATE_STRICT and
        ONNXLATE_OPERATORS (comma-separated) override the defaults.
        """
        env = os.environ if environ is None else environ
        config = cls()

        raw = env.get("ONNXLATE_VERBOSITY")
        if raw is not None:
            try:
                config.verbosity = int(raw)
            except ValueError as err:
                raise ConfigurationError(
                    "expected an integer",
                    config_key="ONNXLATE_VERBOSITY",
                    config_value=raw,
                ) from err

        raw = env.get("ONNXLATE_LOG_JSON")
        if raw is not None:
            config.json_logs = _parse_bool("ONNXLATE_LOG_JSON", raw)

        raw = env.get("ONNXLATE_STRICT")
        if raw is not None:
            config.strict = _parse_bool("ONNXLATE_STRICT", raw)

        raw = env.get("ONNXLATE_OPERATORS")
        if raw is not None:
            config.operators = [op.strip() for op in raw.split(",") if op.strip()]

        config.__post_init__()
        return config

    def apply_logging(self) -> None:
        """Configure the onnxlate logger from this config."""
        configure_logging(self.verbosity, json_format=self.json_logs)
