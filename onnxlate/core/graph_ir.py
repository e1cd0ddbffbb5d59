# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Graph

Directed dataflow graph of Nodes. An edge parent -> child means the parent
consumes the child's value. Each node's children are kept in the order the
edges were registered, which is how operators map positional ONNX inputs
(data, starts, ends, axes, steps, ...).
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .node import Node
from .tensor import TensorValue
from ..errors import ValidationError


@dataclass
class Graph:
    """
    Owns nodes and the ordered edges between them.

    Graph construction and evaluation order belong to the caller; the graph
    only stores structure and answers ordered-children queries.
    """

    name: str = ""
    _nodes: list[Node] = field(default_factory=list, init=False, repr=False)
    _name_to_node: dict[str, Node] = field(default_factory=dict, init=False, repr=False)
    _children: dict[int, list[Node]] = field(default_factory=dict, init=False, repr=False)

    def add_node(
        self,
        name: str,
        op_type: str = "",
        attrs: Optional[dict[str, Any]] = None,
        value: Optional[TensorValue] = None,
    ) -> Node:
        """Add a node to the graph."""
        if name in self._name_to_node:
            raise ValidationError(f"Duplicate node name: {name}", parameter="name")
        node = Node(name=name, op_type=op_type, attrs=attrs or {}, value=value)
        self._nodes.append(node)
        self._name_to_node[name] = node
        self._children[node.id] = []
        return node

    def add_constant(self, name: str, value: TensorValue) -> Node:
        """Add a leaf node that already holds a value."""
        return self.add_node(name, op_type="Constant", value=value)

    def add_edge(self, parent: Union[Node, str], child: Union[Node, str]) -> None:
        """Register child as the parent's next positional input."""
        parent = self._resolve(parent)
        child = self._resolve(child)
        self._children[parent.id].append(child)

    def ordered_children(self, node: Union[Node, str]) -> list[Node]:
        """Children of a node, in edge registration order."""
        node = self._resolve(node)
        return list(self._children[node.id])

    def get_node(self, name: str) -> Optional[Node]:
        """Get node by name."""
        return self._name_to_node.get(name)

    @property
    def nodes(self) -> list[Node]:
        """Get all nodes."""
        return self._nodes

    def num_nodes(self) -> int:
        """Get number of nodes."""
        return len(self._nodes)

    def find_nodes_by_op(self, op_type: str) -> list[Node]:
        """Find all nodes of a specific operation type."""
        return [n for n in self._nodes if n.op_type == op_type]

    def count_ops(self) -> dict[str, int]:
        """Count nodes by operation type."""
        counts: dict[str, int] = {}
        for node in self._nodes:
            counts[node.op_type] = counts.get(node.op_type, 0) + 1
        return counts

    def summary(self) -> str:
        """Print graph summary."""
        evaluated = sum(1 for n in self._nodes if n.has_value)
        lines = [
            f"Graph: {self.name}",
            f"  Nodes: {len(self._nodes)}",
            f"  Edges: {sum(len(c) for c in self._children.values())}",
            f"  Evaluated: {evaluated}",
            "  Operations:",
        ]

        for op, count in self.count_ops().items():
            lines.append(f"    {op or '<none>'}: {count}")

        return "\n".join(lines)

    def _resolve(self, node: Union[Node, str]) -> Node:
        if isinstance(node, str):
            found = self._name_to_node.get(node)
            if found is None:
                raise ValidationError(f"Unknown node: {node}", parameter="node")
            return found
        if self._name_to_node.get(node.name) is not node:
            raise ValidationError(
                f"Node '{node.name}' does not belong to graph '{self.name}'",
                parameter="node",
            )
        return node

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(name='{self.name}', nodes={len(self._nodes)})"
