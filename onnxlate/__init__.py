# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
onnxlate: ONNX tensor decoding and operator evaluation

Decodes serialized ONNX tensors into owned in-memory values and applies
graph operators to nodes whose inputs are already computed.

Example:
    import onnx
    from onnxlate import Graph, TensorDescriptor, build_registry, decode

    value = decode(TensorDescriptor.from_proto(initializer))

    graph = Graph(name="example")
    graph.add_constant("x", value)
    graph.add_node("shape", op_type="Shape")
    graph.add_edge("shape", "x")

    registry = build_registry()
    registry.create("Shape").apply(graph, graph.get_node("shape"))
"""

__version__ = "0.1.0"

from .core import (
    DataType,
    Graph,
    Node,
    TensorDescriptor,
    TensorValue,
    decode,
    dtype_size,
    dtype_to_string,
)
from .execution import (
    Operator,
    OperatorRegistry,
    ShapeOperator,
    SliceDescriptor,
    SliceOperator,
    build_registry,
    ordered_children,
)
from .config import TranslatorConfig
from .observability import Verbosity, configure_logging, set_verbosity

# Errors
from .errors import (
    OnnxlateError,
    DecodeError,
    UndefinedDTypeError,
    UnsupportedFeatureError,
    CorruptedDataError,
    NoDataFoundError,
    OperatorError,
    ArityError,
    WrongRankError,
    LengthMismatchError,
    UnsupportedOperationError,
    ValidationError,
    ConfigurationError,
)

__all__ = [
    "__version__",
    # Core
    "DataType",
    "Graph",
    "Node",
    "TensorDescriptor",
    "TensorValue",
    "decode",
    "dtype_size",
    "dtype_to_string",
    # Execution
    "Operator",
    "OperatorRegistry",
    "ShapeOperator",
    "SliceDescriptor",
    "SliceOperator",
    "build_registry",
    "ordered_children",
    # Config / logging
    "TranslatorConfig",
    "Verbosity",
    "configure_logging",
    "set_verbosity",
    # Errors
    "OnnxlateError",
    "DecodeError",
    "UndefinedDTypeError",
    "UnsupportedFeatureError",
    "CorruptedDataError",
    "NoDataFoundError",
    "OperatorError",
    "ArityError",
    "WrongRankError",
    "LengthMismatchError",
    "UnsupportedOperationError",
    "ValidationError",
    "ConfigurationError",
]
