# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Tensor Decoder

Turns a serialized TensorDescriptor into an owned TensorValue.

Each supported data type reads exactly one data field. Which field wins
when several are populated, and what happens when none is, differs per
data type:

    dtype     first         second       raw width   nothing populated
    bool      int32_data    raw_data     8           NoDataFoundError
    float32   raw_data      float_data   4           empty tensor
    float64   double_data   raw_data     8           NoDataFoundError
    int64     raw_data      int64_data   8           NoDataFoundError
    int32     raw_data      int32_data   4           NoDataFoundError

Raw buffers are read as consecutive little-endian words of the raw width.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from .descriptor import TensorDescriptor
from .tensor import TensorValue
from .types import DataType, dtype_to_string
from ..errors import (
    CorruptedDataError,
    NoDataFoundError,
    UndefinedDTypeError,
    UnsupportedFeatureError,
)

logger = logging.getLogger("onnxlate.core.decoder")

_UINT_BY_WIDTH = {1: "<u1", 2: "<u2", 4: "<u4", 8: "<u8"}


def reinterpret_le(
    raw: bytes,
    width: int,
    convert: Callable[[np.ndarray], np.ndarray],
    tensor_name: Optional[str] = None,
    dtype: Optional[str] = None,
) -> np.ndarray:
    """
    Split a byte buffer into little-endian unsigned words and convert them.

    Args:
        raw: Buffer to read.
        width: Bytes per element.
        convert: Maps the array of unsigned words to the target elements.
        tensor_name: Used in error context.
        dtype: Used in error context.

    Returns:
        Freshly allocated array of converted elements.

    Raises:
        CorruptedDataError: If the buffer ends with a partial element.
    """
    if len(raw) % width:
        raise CorruptedDataError(
            f"raw buffer of {len(raw)} bytes is not a whole number of "
            f"{width}-byte elements ({len(raw) % width} trailing bytes)",
            tensor_name=tensor_name,
            dtype=dtype,
        )
    words = np.frombuffer(raw, dtype=_UINT_BY_WIDTH[width])
    return np.array(convert(words), copy=True)


def _bits_as(target: str) -> Callable[[np.ndarray], np.ndarray]:
    return lambda words: words.view(target)


def _last_byte_is_one(width: int) -> Callable[[np.ndarray], np.ndarray]:
    shift = np.uint64(8 * (width - 1))
    return lambda words: (words.astype(np.uint64) >> shift) == 1


@dataclass(frozen=True)
class _Extraction:
    """How one data type picks and converts its data field."""

    fields: tuple
    width: int
    convert_raw: Callable[[np.ndarray], np.ndarray]
    convert_typed: Callable[[tuple], np.ndarray]
    empty_when_missing: bool = False


_EXTRACTIONS = {
    DataType.Bool: _Extraction(
        fields=("int32_data", "raw_data"),
        width=8,
        convert_raw=_last_byte_is_one(8),
        convert_typed=lambda values: np.asarray(values) == 1,
    ),
    DataType.Float32: _Extraction(
        fields=("raw_data", "float_data"),
        width=4,
        convert_raw=_bits_as("<f4"),
        convert_typed=lambda values: np.asarray(values, dtype=np.float32),
        empty_when_missing=True,
    ),
    DataType.Float64: _Extraction(
        fields=("double_data", "raw_data"),
        width=8,
        convert_raw=_bits_as("<f8"),
        convert_typed=lambda values: np.asarray(values, dtype=np.float64),
    ),
    DataType.Int64: _Extraction(
        fields=("raw_data", "int64_data"),
        width=8,
        convert_raw=_bits_as("<i8"),
        convert_typed=lambda values: np.asarray(values, dtype=np.int64),
    ),
    DataType.Int32: _Extraction(
        fields=("raw_data", "int32_data"),
        width=4,
        convert_raw=_bits_as("<i4"),
        convert_typed=lambda values: np.asarray(values, dtype=np.int32),
    ),
}


def supported_dtypes() -> list[DataType]:
    """Data types the decoder can handle."""
    return list(_EXTRACTIONS)


def _extract(
    descriptor: TensorDescriptor, dtype: DataType, extraction: _Extraction
) -> np.ndarray:
    name = dtype_to_string(dtype)
    for field_name in extraction.fields:
        values = getattr(descriptor, field_name)
        if values is None:
            continue
        logger.debug(
            f"Decoding '{descriptor.name}' ({name}) from {field_name}"
        )
        if field_name == "raw_data":
            return reinterpret_le(
                values,
                extraction.width,
                extraction.convert_raw,
                tensor_name=descriptor.name,
                dtype=name,
            )
        return extraction.convert_typed(values)

    if extraction.empty_when_missing:
        return np.empty(0, dtype=dtype.numpy_dtype)
    raise NoDataFoundError(tensor_name=descriptor.name, dtype=name)


def decode(descriptor: TensorDescriptor) -> TensorValue:
    """
    Decode a tensor descriptor.

    Args:
        descriptor: Serialized tensor descriptor.

    Returns:
        TensorValue with the descriptor's dims and data type.

    Raises:
        UnsupportedFeatureError: Segmented tensor or unsupported data type.
        UndefinedDTypeError: Data type tag is UNDEFINED.
        CorruptedDataError: Raw buffer or element count is inconsistent.
        NoDataFoundError: No data field is populated.
    """
    if descriptor.is_segmented:
        raise UnsupportedFeatureError("segmented tensor", tensor_name=descriptor.name)

    if descriptor.data_type == DataType.Undefined:
        raise UndefinedDTypeError(tensor_name=descriptor.name)

    dtype = DataType.from_tag(descriptor.data_type)
    extraction = _EXTRACTIONS.get(dtype)
    if extraction is None:
        raise UnsupportedFeatureError(
            f"data type {dtype_to_string(descriptor.data_type)}",
            tensor_name=descriptor.name,
            dtype=dtype_to_string(descriptor.data_type),
        )

    data = _extract(descriptor, dtype, extraction)

    expected = math.prod(descriptor.dims)
    if data.size and data.size != expected:
        raise CorruptedDataError(
            f"{data.size} elements do not fill dims {list(descriptor.dims)} "
            f"({expected} elements)",
            tensor_name=descriptor.name,
            dtype=dtype_to_string(dtype),
        )

    value = TensorValue(shape=descriptor.dims, dtype=dtype, data=data)
    logger.debug(f"Decoded {descriptor.name or '<unnamed>'}: {value}")
    return value
