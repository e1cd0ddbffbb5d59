# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Operator Protocol

Every operator is configured once from its node attributes, then applied
to the node it was built for. apply() reads the values of the node's
ordered children and installs a new value on the target node only.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from ..core import Graph, Node
from ..errors import ArityError


class Operator(ABC):
    """
    Base class for graph operators.

    Example:
        class Identity(Operator):
            op_type = "Identity"

            def apply(self, graph, *nodes):
                target = self.single_target(nodes)
                children = ordered_children(graph, target)
                require_child_count(children, 1, self.op_type, target.name)
                require_no_nil_children(children, self.op_type, target.name)
                target.install(children[0].value)
    """

    op_type: str = ""

    def configure(self, attrs: Dict[str, Any]) -> None:
        """Read operator attributes from the model. No-op by default."""
        return None

    @abstractmethod
    def apply(self, graph: Graph, *nodes: Node) -> None:
        """Compute and install the value of the target node."""

    def single_target(self, nodes: Sequence[Node]) -> Node:
        """Return the only target node, or raise ArityError."""
        if len(nodes) != 1:
            raise ArityError(
                "wrong number of target nodes",
                expected="1",
                actual=len(nodes),
                op_type=self.op_type,
            )
        return nodes[0]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(op='{self.op_type}')"


def ordered_children(graph: Graph, node: Node) -> List[Node]:
    """Incoming dependencies of a node in registration order."""
    return graph.ordered_children(node)


def require_no_nil_children(
    children: Sequence[Optional[Node]],
    op_type: Optional[str] = None,
    node_name: Optional[str] = None,
) -> None:
    """Raise ArityError if a child is missing or has no computed value."""
    ready = sum(1 for c in children if c is not None and c.value is not None)
    if ready != len(children):
        raise ArityError(
            "inputs without a computed value",
            expected=str(len(children)),
            actual=ready,
            op_type=op_type,
            node_name=node_name,
        )


def require_child_count(
    children: Sequence[Node],
    expected: int,
    op_type: Optional[str] = None,
    node_name: Optional[str] = None,
) -> None:
    """Raise ArityError unless there are exactly `expected` children."""
    if len(children) != expected:
        raise ArityError(
            "wrong number of inputs",
            expected=str(expected),
            actual=len(children),
            op_type=op_type,
            node_name=node_name,
        )
