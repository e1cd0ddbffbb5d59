# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
onnxlate Execution

Operator protocol, registry and the operator implementations.

Components:
- Operator: configure/apply contract every operator implements
- OperatorRegistry: Maps ONNX op_type to operator factories
- build_registry: Registry populated from an explicit operator list
"""

from .operator import (
    Operator,
    ordered_children,
    require_child_count,
    require_no_nil_children,
)
from .registry import (
    DEFAULT_OPERATORS,
    OperatorFactory,
    OperatorRegistry,
    build_registry,
)
from .operators import ShapeOperator, SliceDescriptor, SliceOperator

__all__ = [
    "Operator",
    "ordered_children",
    "require_child_count",
    "require_no_nil_children",
    "DEFAULT_OPERATORS",
    "OperatorFactory",
    "OperatorRegistry",
    "build_registry",
    "ShapeOperator",
    "SliceDescriptor",
    "SliceOperator",
]
