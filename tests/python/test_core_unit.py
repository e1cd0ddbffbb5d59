# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Core Unit Tests

Unit testing for the core components:
- DataType: Tags, numpy mapping, sizes
- TensorDescriptor: Field normalization and presence
- TensorValue: Invariants, immutability, shape-only values
- Node / Graph: Ordered children, value slot, lookups
"""

import numpy as np
import pytest

from onnxlate.core import (
    DataType,
    Graph,
    Node,
    TensorDescriptor,
    TensorValue,
    dtype_from_numpy,
    dtype_size,
    decode,
    dtype_to_string,
    supported_dtypes,
)
from onnxlate.errors import NoDataFoundError, ValidationError


class TestDataType:
    """Unit tests for DataType."""

    def test_tags_match_onnx(self):
        from onnx import TensorProto

        assert DataType.Float32 == TensorProto.FLOAT
        assert DataType.Int64 == TensorProto.INT64
        assert DataType.Int32 == TensorProto.INT32
        assert DataType.Bool == TensorProto.BOOL
        assert DataType.Float64 == TensorProto.DOUBLE
        assert DataType.Undefined == TensorProto.UNDEFINED

    def test_from_tag(self):
        assert DataType.from_tag(7) is DataType.Int64
        assert DataType.from_tag(1234) is None

    def test_numpy_dtype(self):
        assert DataType.Float32.numpy_dtype == np.float32
        assert DataType.Bool.numpy_dtype == np.bool_

    def test_numpy_dtype_missing(self):
        with pytest.raises(TypeError):
            DataType.BFloat16.numpy_dtype

    def test_dtype_from_numpy(self):
        assert dtype_from_numpy(np.int32) is DataType.Int32
        assert dtype_from_numpy("float64") is DataType.Float64

    def test_dtype_size(self):
        assert dtype_size(DataType.Float32) == 4
        assert dtype_size(DataType.Int64) == 8
        assert dtype_size(DataType.Bool) == 1
        assert dtype_size(DataType.Undefined) == 0

    def test_dtype_size_is_not_raw_width(self):
        assert dtype_size(DataType.Bool) == np.dtype(DataType.Bool.numpy_dtype).itemsize
        raw = b"\x00" * 7 + b"\x01" + b"\x00" * 8
        desc = TensorDescriptor(dims=(2,), data_type=DataType.Bool, raw_data=raw)
        assert decode(desc).tolist() == [True, False]

    def test_dtype_to_string(self):
        assert dtype_to_string(DataType.Float32) == "float32"
        assert dtype_to_string(11) == "float64"
        assert dtype_to_string(99) == "unknown(99)"

    def test_supported_dtypes(self):
        assert set(supported_dtypes()) == {
            DataType.Bool,
            DataType.Float32,
            DataType.Float64,
            DataType.Int64,
            DataType.Int32,
        }


class TestTensorDescriptor:
    """Unit tests for TensorDescriptor."""

    def test_defaults_are_absent(self):
        desc = TensorDescriptor()
        assert desc.dims == ()
        assert desc.raw_data is None
        assert desc.float_data is None
        assert not desc.is_segmented

    def test_lists_become_tuples(self):
        desc = TensorDescriptor(dims=[2, 3], int64_data=[1, 2])
        assert desc.dims == (2, 3)
        assert desc.int64_data == (1, 2)

    def test_frozen(self):
        desc = TensorDescriptor(name="x")
        with pytest.raises(AttributeError):
            desc.name = "y"

    def test_repr_lists_populated_fields(self):
        desc = TensorDescriptor(name="x", raw_data=b"")
        assert "raw_data" in repr(desc)
        assert "float_data" not in repr(desc)


class TestTensorValue:
    """Unit tests for TensorValue."""

    def test_from_array(self):
        value = TensorValue.from_array(np.arange(6, dtype=np.int32).reshape(2, 3))
        assert value.shape == (2, 3)
        assert value.dtype is DataType.Int32
        assert value.rank == 2
        assert value.numel == 6
        assert value.data.shape == (6,)

    def test_from_list(self):
        value = TensorValue.from_list([1, 2, 3, 4], DataType.Float64, shape=(2, 2))
        assert value.array.tolist() == [[1.0, 2.0], [3.0, 4.0]]

    def test_copies_input(self):
        source = np.array([1.0, 2.0], dtype=np.float32)
        value = TensorValue.from_array(source)
        source[0] = 42.0
        assert value.tolist() == [1.0, 2.0]

    def test_read_only(self):
        value = TensorValue.from_array(np.zeros(3))
        with pytest.raises(ValueError):
            value.data[0] = 1.0
        with pytest.raises(ValueError):
            value.array[0] = 1.0

    def test_frozen(self):
        value = TensorValue.from_array(np.zeros(3))
        with pytest.raises(AttributeError):
            value.shape = (1,)

    def test_length_must_match_shape(self):
        with pytest.raises(ValidationError):
            TensorValue(shape=(2, 2), dtype=DataType.Float32, data=np.zeros(3))

    def test_shape_only(self):
        value = TensorValue(shape=(2, 5), dtype=DataType.Float32, data=np.empty(0))
        assert value.is_shape_only
        assert value.rank == 2
        with pytest.raises(NoDataFoundError):
            value.array

    def test_zero_sized_is_not_shape_only(self):
        value = TensorValue(shape=(0, 3), dtype=DataType.Int64, data=[])
        assert not value.is_shape_only
        assert value.array.shape == (0, 3)

    def test_scalar(self):
        value = TensorValue.from_array(np.int64(7))
        assert value.shape == ()
        assert value.numel == 1
        assert value.tolist() == [7]


class TestNode:
    """Unit tests for Node."""

    def test_defaults(self):
        node = Node(name="n", op_type="Shape")
        assert node.value is None
        assert not node.has_value
        assert node.is_op("Shape")

    def test_unique_ids(self):
        assert Node(name="a").id != Node(name="b").id

    def test_install_replaces_reference(self):
        node = Node(name="n")
        first = TensorValue.from_array(np.array([1]))
        second = TensorValue.from_array(np.array([2]))
        node.install(first)
        node.install(second)
        assert node.value is second
        assert first.tolist() == [1]

    def test_install_rejects_non_values(self):
        node = Node(name="n")
        with pytest.raises(ValidationError):
            node.install(np.array([1]))

    def test_attrs(self):
        node = Node(name="n", attrs={"axis": 1})
        assert node.get_attr("axis") == 1
        assert node.get_attr("missing", 0) == 0


class TestGraph:
    """Unit tests for Graph."""

    def test_add_node(self):
        graph = Graph(name="g")
        node = graph.add_node("shape", op_type="Shape")
        assert graph.get_node("shape") is node
        assert graph.num_nodes() == 1
        assert len(graph) == 1

    def test_duplicate_name(self):
        graph = Graph()
        graph.add_node("a")
        with pytest.raises(ValidationError):
            graph.add_node("a")

    def test_ordered_children_follow_registration(self):
        graph = Graph()
        parent = graph.add_node("p", op_type="Slice")
        for name in ["z", "a", "m"]:
            graph.add_node(name)
        graph.add_edge(parent, "z")
        graph.add_edge("p", "a")
        graph.add_edge(parent, graph.get_node("m"))
        assert [c.name for c in graph.ordered_children(parent)] == ["z", "a", "m"]

    def test_ordered_children_is_a_copy(self):
        graph = Graph()
        parent = graph.add_node("p")
        graph.add_node("c")
        graph.add_edge(parent, "c")
        graph.ordered_children(parent).clear()
        assert len(graph.ordered_children(parent)) == 1

    def test_same_child_twice(self):
        graph = Graph()
        parent = graph.add_node("p")
        graph.add_node("c")
        graph.add_edge(parent, "c")
        graph.add_edge(parent, "c")
        assert [c.name for c in graph.ordered_children("p")] == ["c", "c"]

    def test_unknown_node(self):
        graph = Graph()
        graph.add_node("p")
        with pytest.raises(ValidationError):
            graph.add_edge("p", "missing")

    def test_foreign_node(self):
        graph = Graph(name="g")
        other = Graph(name="other").add_node("p")
        with pytest.raises(ValidationError):
            graph.ordered_children(other)

    def test_add_constant(self):
        graph = Graph()
        value = TensorValue.from_array(np.ones(2))
        node = graph.add_constant("w", value)
        assert node.op_type == "Constant"
        assert node.value is value

    def test_find_and_count(self):
        graph = Graph(name="g")
        graph.add_node("s1", op_type="Slice")
        graph.add_node("s2", op_type="Slice")
        graph.add_node("sh", op_type="Shape")
        assert [n.name for n in graph.find_nodes_by_op("Slice")] == ["s1", "s2"]
        assert graph.count_ops() == {"Slice": 2, "Shape": 1}

    def test_summary(self):
        graph = Graph(name="g")
        graph.add_constant("w", TensorValue.from_array(np.ones(2)))
        graph.add_node("sh", op_type="Shape")
        graph.add_edge("sh", "w")
        summary = graph.summary()
        assert "Graph: g" in summary
        assert "Edges: 1" in summary
        assert "Evaluated: 1" in summary
        assert "Shape: 1" in summary
