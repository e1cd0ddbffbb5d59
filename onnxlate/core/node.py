# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Node

Represents a single operator invocation in the dataflow graph, together
with the slot holding its computed value.
"""

from dataclasses import dataclass, field
from typing import Any, Optional
import itertools
import logging

from .types import AttributeMap
from .tensor import TensorValue
from ..errors import ValidationError

logger = logging.getLogger("onnxlate.core.node")

# Node ID counter
_node_id_counter = itertools.count()


@dataclass(eq=False)
class Node:
    """
    A vertex in the dataflow graph.

    The value slot is None until the node's operator has run (or the node
    was created holding a constant). Installing a value replaces the slot's
    reference; the TensorValue previously held is left untouched.
    """

    name: str = ""
    op_type: str = ""
    attrs: AttributeMap = field(default_factory=dict)
    value: Optional[TensorValue] = field(default=None, repr=False)

    # Auto-generated ID
    id: int = field(default_factory=lambda: next(_node_id_counter), init=False)

    def __post_init__(self):
        if self.value is not None:
            self._check(self.value)

    @property
    def has_value(self) -> bool:
        return self.value is not None

    def install(self, value: TensorValue) -> None:
        """Install a freshly computed value in the slot."""
        self._check(value)
        if self.value is not None:
            logger.debug(f"Replacing value of node '{self.name}'")
        self.value = value

    def _check(self, value: Any) -> None:
        if not isinstance(value, TensorValue):
            raise ValidationError(
                f"node '{self.name}' value must be a TensorValue",
                parameter="value",
                received=type(value).__name__,
            )

    def is_op(self, op: str) -> bool:
        """Check if this is a specific operation type."""
        return self.op_type == op

    def get_attr(self, key: str, default: Any = None) -> Any:
        """Get an attribute value."""
        return self.attrs.get(key, default)

    def __repr__(self) -> str:
        return f"Node(op='{self.op_type}', name='{self.name}')"
