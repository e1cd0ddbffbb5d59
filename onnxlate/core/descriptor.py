# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Serialized Tensor Descriptor

Read-only view of an ONNX TensorProto. Each data field is None when the
protobuf did not populate it, so the decoder can tell "absent" from "empty".
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence


def _as_tuple(values: Optional[Sequence]) -> Optional[tuple]:
    if values is None:
        return None
    return tuple(values)


@dataclass(frozen=True)
class TensorDescriptor:
    """
    Describes a serialized tensor as produced by the model parser.

    Attributes:
        name: Tensor name (initializer or Constant output name).
        dims: Ordered dimension sizes.
        data_type: ONNX data type tag (0 = UNDEFINED).
        segment: (begin, end) when the tensor is one segment of a larger one.
        float_data: Inline float32 values.
        int32_data: Inline int32 values (also used for bool).
        int64_data: Inline int64 values.
        double_data: Inline float64 values.
        raw_data: Little-endian raw buffer.
    """

    name: str = ""
    dims: tuple = field(default_factory=tuple)
    data_type: int = 0
    segment: Optional[tuple] = None
    float_data: Optional[tuple] = None
    int32_data: Optional[tuple] = None
    int64_data: Optional[tuple] = None
    double_data: Optional[tuple] = None
    raw_data: Optional[bytes] = None

    def __post_init__(self):
        # Frozen: normalize through object.__setattr__
        object.__setattr__(self, "dims", tuple(int(d) for d in self.dims))
        for name in ("float_data", "int32_data", "int64_data", "double_data"):
            object.__setattr__(self, name, _as_tuple(getattr(self, name)))
        if self.segment is not None:
            object.__setattr__(self, "segment", tuple(self.segment))
        if self.raw_data is not None:
            object.__setattr__(self, "raw_data", bytes(self.raw_data))

    @property
    def is_segmented(self) -> bool:
        return self.segment is not None

    @classmethod
    def from_proto(cls, proto: Any) -> "TensorDescriptor":
        """
        Build a descriptor from an onnx.TensorProto.

        Repeated fields that are empty on the wire are reported as absent;
        raw_data and segment use protobuf field presence.
        """
        segment = None
        if proto.HasField("segment"):
            segment = (proto.segment.begin, proto.segment.end)

        raw_data = None
        if proto.HasField("raw_data"):
            raw_data = proto.raw_data

        return cls(
            name=proto.name,
            dims=tuple(proto.dims),
            data_type=proto.data_type,
            segment=segment,
            float_data=list(proto.float_data) or None,
            int32_data=list(proto.int32_data) or None,
            int64_data=list(proto.int64_data) or None,
            double_data=list(proto.double_data) or None,
            raw_data=raw_data,
        )

    def __repr__(self) -> str:
        populated = [
            name
            for name in ("float_data", "int32_data", "int64_data", "double_data", "raw_data")
            if getattr(self, name) is not None
        ]
        return (
            f"TensorDescriptor(name='{self.name}', dims={list(self.dims)}, "
            f"data_type={self.data_type}, fields={populated})"
        )
