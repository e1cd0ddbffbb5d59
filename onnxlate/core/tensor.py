# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Tensor Value

The decoded, owned in-memory tensor used everywhere downstream of the
decoder. Values are immutable once built.
"""

import math
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from .types import DataType, dtype_from_numpy, dtype_to_string
from ..errors import NoDataFoundError, format_shape_mismatch


@dataclass(frozen=True, eq=False)
class TensorValue:
    """
    Shape, element type and a flat backing buffer.

    The buffer holds either prod(shape) elements or none at all. An empty
    buffer with a non-empty shape is a shape-only value: its dimensions are
    known but it carries no elements.
    """

    shape: tuple
    dtype: DataType
    data: np.ndarray

    def __post_init__(self):
        shape = tuple(int(d) for d in self.shape)
        dtype = DataType(self.dtype)
        # Always copy so the value never aliases caller-owned memory
        data = np.array(self.data, dtype=dtype.numpy_dtype, copy=True).reshape(-1)
        if data.size not in (0, math.prod(shape)):
            raise format_shape_mismatch(
                (math.prod(shape),), (data.size,), tensor_name="data"
            )
        data.flags.writeable = False

        object.__setattr__(self, "shape", shape)
        object.__setattr__(self, "dtype", dtype)
        object.__setattr__(self, "data", data)

    @classmethod
    def from_array(cls, array: Any) -> "TensorValue":
        """Build a value from anything numpy can turn into an array."""
        array = np.asarray(array)
        return cls(shape=array.shape, dtype=dtype_from_numpy(array.dtype), data=array)

    @classmethod
    def from_list(
        cls, values: Sequence, dtype: DataType, shape: Sequence[int] = None
    ) -> "TensorValue":
        """Build a value from a flat list; shape defaults to rank 1."""
        if shape is None:
            shape = (len(values),)
        return cls(shape=tuple(shape), dtype=dtype, data=np.asarray(values))

    @property
    def rank(self) -> int:
        return len(self.shape)

    @property
    def numel(self) -> int:
        """Number of elements implied by the shape."""
        return math.prod(self.shape)

    @property
    def is_shape_only(self) -> bool:
        """True when the shape promises elements that the buffer lacks."""
        return self.data.size == 0 and self.numel != 0

    @property
    def array(self) -> np.ndarray:
        """Read-only view of the data in its real shape."""
        if self.is_shape_only:
            raise NoDataFoundError(dtype=dtype_to_string(self.dtype))
        return self.data.reshape(self.shape)

    def tolist(self) -> list:
        """Flat Python list of the elements."""
        return self.data.tolist()

    def __repr__(self) -> str:
        return (
            f"TensorValue(shape={self.shape}, dtype={dtype_to_string(self.dtype)}, "
            f"elements={self.data.size})"
        )
