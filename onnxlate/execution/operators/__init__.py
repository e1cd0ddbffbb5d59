# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
ONNX Operator Implementations

Operators are organized by category:
- shape_ops: Shape
- tensor_ops: Slice

Importing this package has no side effects; registries are populated
explicitly through build_registry().
"""

from .shape_ops import ShapeOperator
from .tensor_ops import SliceDescriptor, SliceOperator

__all__ = [
    "ShapeOperator",
    "SliceDescriptor",
    "SliceOperator",
]
