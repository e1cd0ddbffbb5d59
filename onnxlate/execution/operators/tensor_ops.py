# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Tensor Selection Operators

Implements ONNX tensor operators:
- Slice: Strided range selection along chosen axes
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from ..operator import Operator, ordered_children, require_no_nil_children
from ...core import DataType, Graph, Node, TensorValue
from ...errors import (
    ArityError,
    LengthMismatchError,
    OperatorError,
    WrongRankError,
)

logger = logging.getLogger("onnxlate.execution.operators.tensor_ops")

SLICE_INPUTS = ("data", "starts", "ends", "axes", "steps")
INDEX_DTYPES = (DataType.Int32, DataType.Int64)


@dataclass(frozen=True)
class SliceDescriptor:
    """Half-open [start, end) range walked in increments of step."""

    start: int
    end: int
    step: int = 1

    def to_slice(self) -> slice:
        return slice(self.start, self.end, self.step)


class SliceOperator(Operator):
    """
    Slice operator.

    ONNX Spec: Y = Slice(data, starts, ends, axes, steps)

    Inputs are positional children of the node. axes defaults to
    0..len(starts)-1 and steps to all ones. Axes that are not listed are
    kept whole. Ranges go through numpy basic slicing unchanged: negative
    values and out-of-range bounds are not rewritten first.
    """

    op_type = "Slice"

    def apply(self, graph: Graph, *nodes: Node) -> None:
        target = self.single_target(nodes)
        children = ordered_children(graph, target)
        if len(children) < 3:
            raise ArityError(
                "slice requires at least three inputs",
                expected=">= 3",
                actual=len(children),
                op_type=self.op_type,
                node_name=target.name,
            )
        require_no_nil_children(children, self.op_type, target.name)

        data = children[0].value
        starts = self._read_indices(children[1], SLICE_INPUTS[1], None, target)
        ends = self._read_indices(children[2], SLICE_INPUTS[2], len(starts), target)

        if len(children) > 3:
            axes = self._read_indices(children[3], SLICE_INPUTS[3], len(starts), target)
        else:
            axes = list(range(len(starts)))

        if len(children) > 4:
            steps = self._read_indices(children[4], SLICE_INPUTS[4], len(starts), target)
        else:
            steps = [1] * len(starts)

        descriptors = [
            SliceDescriptor(start=s, end=e, step=st)
            for s, e, st in zip(starts, ends, steps)
        ]
        result = self._select(data, axes, descriptors, target)
        logger.debug(
            f"Slice '{target.name}': {data.shape} -> {result.shape} "
            f"axes={axes} ranges={[(d.start, d.end, d.step) for d in descriptors]}"
        )
        target.install(result)

    def _read_indices(
        self,
        child: Node,
        input_name: str,
        expected_len: Optional[int],
        target: Node,
    ) -> List[int]:
        """Read a 0-D or 1-D integer input as a list, one element per index."""
        value = child.value
        if value.rank > 1:
            raise WrongRankError(
                f"{input_name} must be a 1-D tensor",
                input_name=input_name,
                rank=value.rank,
                op_type=self.op_type,
                node_name=target.name,
            )
        if value.dtype not in INDEX_DTYPES:
            raise OperatorError(
                f"{input_name} must be int32 or int64, got {value.dtype.name.lower()}",
                op_type=self.op_type,
                node_name=target.name,
                context={"input": input_name},
            )
        indices = [int(v) for v in value.array.reshape(-1)]
        if expected_len is not None and len(indices) != expected_len:
            raise LengthMismatchError(
                input_name,
                expected=expected_len,
                actual=len(indices),
                op_type=self.op_type,
                node_name=target.name,
            )
        return indices

    def _select(
        self,
        data: TensorValue,
        axes: List[int],
        descriptors: List[SliceDescriptor],
        target: Node,
    ) -> TensorValue:
        slices = [slice(None)] * data.rank
        for axis, descriptor in zip(axes, descriptors):
            if not 0 <= axis < data.rank:
                raise WrongRankError(
                    f"axis {axis} is outside data of rank {data.rank}",
                    input_name=SLICE_INPUTS[3],
                    rank=data.rank,
                    op_type=self.op_type,
                    node_name=target.name,
                )
            if descriptor.step == 0:
                raise OperatorError(
                    f"slice step on axis {axis} must be non-zero",
                    op_type=self.op_type,
                    node_name=target.name,
                )
            slices[axis] = descriptor.to_slice()

        # Basic indexing with no slices on rank-0 data yields a numpy scalar
        selected = np.asarray(data.array[tuple(slices)])
        return TensorValue(shape=selected.shape, dtype=data.dtype, data=selected)
