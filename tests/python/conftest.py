# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Pytest configuration for onnxlate Python tests.
"""

import logging
import sys
from pathlib import Path

import numpy as np
import pytest

# Add the project root to sys.path so we can import onnxlate
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from onnxlate.core import Graph, TensorValue  # noqa: E402


@pytest.fixture(autouse=True)
def reset_onnxlate_logger():
    """Undo configure_logging() so caplog keeps working across tests."""
    yield
    logger = logging.getLogger("onnxlate")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def add_input(graph, target, name, values, dtype=np.int64):
    """Add a constant child holding `values` and wire it to target."""
    graph.add_constant(name, TensorValue.from_array(np.asarray(values, dtype=dtype)))
    graph.add_edge(target, name)


@pytest.fixture
def slice_graph():
    """Factory: graph with a Slice node wired to data and aux inputs."""

    def build(data, *aux):
        graph = Graph(name="slice-test")
        node = graph.add_node("slice", op_type="Slice")
        add_input(graph, node, "data", data, dtype=np.asarray(data).dtype)
        for name, values in zip(["starts", "ends", "axes", "steps"], aux):
            add_input(graph, node, name, values)
        return graph, node

    return build
