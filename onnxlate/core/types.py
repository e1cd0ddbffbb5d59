# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
onnxlate Core Types

Tensor element types, numbered with the ONNX TensorProto.DataType tags so
that descriptor tags can be converted directly.
"""

from enum import IntEnum
from typing import Any, Optional, Union

import numpy as np


class DataType(IntEnum):
    """Tensor element types (values match TensorProto.DataType)."""

    Undefined = 0
    Float32 = 1
    UInt8 = 2
    Int8 = 3
    UInt16 = 4
    Int16 = 5
    Int32 = 6
    Int64 = 7
    String = 8
    Bool = 9
    Float16 = 10
    Float64 = 11
    UInt32 = 12
    UInt64 = 13
    Complex64 = 14
    Complex128 = 15
    BFloat16 = 16

    @classmethod
    def from_tag(cls, tag: int) -> Optional["DataType"]:
        """Convert a raw descriptor tag, or None if the tag is unknown."""
        try:
            return cls(tag)
        except ValueError:
            return None

    @property
    def numpy_dtype(self) -> np.dtype:
        """Matching numpy dtype."""
        if self not in _NUMPY_DTYPES:
            raise TypeError(f"{dtype_to_string(self)} has no numpy equivalent")
        return _NUMPY_DTYPES[self]


_NUMPY_DTYPES = {
    DataType.Float32: np.dtype(np.float32),
    DataType.UInt8: np.dtype(np.uint8),
    DataType.Int8: np.dtype(np.int8),
    DataType.UInt16: np.dtype(np.uint16),
    DataType.Int16: np.dtype(np.int16),
    DataType.Int32: np.dtype(np.int32),
    DataType.Int64: np.dtype(np.int64),
    DataType.Bool: np.dtype(np.bool_),
    DataType.Float16: np.dtype(np.float16),
    DataType.Float64: np.dtype(np.float64),
    DataType.UInt32: np.dtype(np.uint32),
    DataType.UInt64: np.dtype(np.uint64),
    DataType.Complex64: np.dtype(np.complex64),
    DataType.Complex128: np.dtype(np.complex128),
}


def dtype_size(dtype: DataType) -> int:
    """
    Get the in-memory size in bytes for a data type.

    This is the numpy element size, not the width of one element in a raw
    tensor buffer. Raw bool elements are 8 bytes wide even though a decoded
    bool takes 1 byte, so raw decoding uses its own widths.
    """
    sizes = {
        DataType.Float32: 4,
        DataType.Float16: 2,
        DataType.BFloat16: 2,
        DataType.Float64: 8,
        DataType.Int8: 1,
        DataType.Int16: 2,
        DataType.Int32: 4,
        DataType.Int64: 8,
        DataType.UInt8: 1,
        DataType.UInt16: 2,
        DataType.UInt32: 4,
        DataType.UInt64: 8,
        DataType.Complex64: 8,
        DataType.Complex128: 16,
        DataType.Bool: 1,
    }
    return sizes.get(dtype, 0)


def dtype_to_string(dtype: Union[DataType, int]) -> str:
    """Get string representation of data type."""
    if isinstance(dtype, DataType):
        return dtype.name.lower()
    known = DataType.from_tag(dtype)
    return known.name.lower() if known is not None else f"unknown({dtype})"


def dtype_from_numpy(np_dtype: Any) -> DataType:
    """Find the DataType for a numpy dtype."""
    np_dtype = np.dtype(np_dtype)
    for dtype, candidate in _NUMPY_DTYPES.items():
        if candidate == np_dtype:
            return dtype
    raise TypeError(f"numpy dtype {np_dtype} has no onnxlate DataType")


# Node attributes by name
AttributeMap = dict[str, Any]
