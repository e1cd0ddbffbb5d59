# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""onnxlate Core Module"""

from .types import (
    DataType,
    dtype_size,
    dtype_to_string,
    dtype_from_numpy,
    AttributeMap,
)
from .descriptor import TensorDescriptor
from .tensor import TensorValue
from .decoder import decode, reinterpret_le, supported_dtypes
from .node import Node
from .graph_ir import Graph

__all__ = [
    "DataType",
    "dtype_size",
    "dtype_to_string",
    "dtype_from_numpy",
    "AttributeMap",
    "TensorDescriptor",
    "TensorValue",
    "decode",
    "reinterpret_le",
    "supported_dtypes",
    "Node",
    "Graph",
]
