# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Shape Introspection Operators

Implements ONNX shape operators:
- Shape: Dimensions of the input as a 1-D int64 tensor
"""

from __future__ import annotations

import logging

import numpy as np

from ..operator import (
    Operator,
    ordered_children,
    require_child_count,
    require_no_nil_children,
)
from ...core import DataType, Graph, Node, TensorValue

logger = logging.getLogger("onnxlate.execution.operators.shape_ops")


class ShapeOperator(Operator):
    """
    Shape operator.

    ONNX Spec: shape = Shape(data)

    Only the input's dimensions are read, so shape-only inputs work too.
    """

    op_type = "Shape"

    def apply(self, graph: Graph, *nodes: Node) -> None:
        target = self.single_target(nodes)
        children = ordered_children(graph, target)
        require_child_count(children, 1, self.op_type, target.name)
        require_no_nil_children(children, self.op_type, target.name)

        dims = children[0].value.shape
        result = TensorValue(
            shape=(len(dims),),
            dtype=DataType.Int64,
            data=np.array(dims, dtype=np.int64),
        )
        logger.debug(f"Shape '{target.name}': {list(dims)}")
        target.install(result)
