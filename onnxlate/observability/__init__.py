# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
onnxlate Observability Module

Components:
- Verbosity: Numeric verbosity levels
- LogEntry / StructuredFormatter: Text or JSON rendering of log records
- configure_logging: Installs the handler on the onnxlate logger
"""

from .logger import (
    Verbosity,
    LogEntry,
    StructuredFormatter,
    configure_logging,
    get_verbosity,
    set_verbosity,
)

__all__ = [
    "Verbosity",
    "LogEntry",
    "StructuredFormatter",
    "configure_logging",
    "get_verbosity",
    "set_verbosity",
]
