# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Operator Registry

Maps ONNX operator types to factories that build a fresh Operator per node.
A registry is an ordinary object: the entry point builds one from an
explicit list of operators (see build_registry) before any graph is
evaluated, and only reads from it afterwards.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, TYPE_CHECKING

from .operator import Operator
from .operators import ShapeOperator, SliceOperator
from ..errors import UnsupportedOperationError

if TYPE_CHECKING:
    from ..config import TranslatorConfig

logger = logging.getLogger("onnxlate.execution.registry")

# Signature: () -> Operator
OperatorFactory = Callable[[], Operator]

DEFAULT_OPERATORS: Tuple[Tuple[str, OperatorFactory], ...] = (
    ("Shape", ShapeOperator),
    ("Slice", SliceOperator),
)


class OperatorRegistry:
    """
    Registry for operator implementations.

    Example:
        registry = OperatorRegistry()
        registry.register("Shape", ShapeOperator)

        # Later, while building the graph
        op = registry.create("Shape", node.attrs)
        op.apply(graph, node)
    """

    def __init__(self, strict: bool = True):
        """
        Args:
            strict: If True, create() raises for unknown operators.
                    If False, it logs a warning and returns None.
        """
        self.strict = strict
        self._registry: Dict[str, OperatorFactory] = {}

    def register(self, op_type: str, factory: OperatorFactory) -> None:
        """Register a factory. Registering a name again replaces it."""
        if op_type in self._registry:
            logger.debug(f"Replacing factory for operator '{op_type}'")
        self._registry[op_type] = factory

    def lookup(self, op_type: str) -> Optional[OperatorFactory]:
        """Factory for op_type, or None."""
        return self._registry.get(op_type)

    def get(self, op_type: str) -> OperatorFactory:
        """
        Factory for op_type.

        Raises:
            UnsupportedOperationError: If operator not registered.
        """
        factory = self.lookup(op_type)
        if factory is None:
            raise UnsupportedOperationError(op_type, self.list_operators())
        return factory

    def create(
        self, op_type: str, attrs: Optional[Dict[str, Any]] = None
    ) -> Optional[Operator]:
        """Build and configure a fresh operator for one node."""
        if not self.strict and not self.is_supported(op_type):
            logger.warning(f"Operator '{op_type}' not supported, skipping")
            return None
        op = self.get(op_type)()
        op.configure(attrs or {})
        return op

    def is_supported(self, op_type: str) -> bool:
        """Check if an operator is supported."""
        return op_type in self._registry

    def list_operators(self) -> List[str]:
        """List all registered operators."""
        return sorted(self._registry.keys())

    def get_unsupported_ops(self, op_types: Sequence[str]) -> List[str]:
        """Operators from op_types that are not registered."""
        return [op for op in op_types if not self.is_supported(op)]

    def clear(self) -> None:
        """Clear all registered operators."""
        self._registry.clear()

    def count(self) -> int:
        """Get number of registered operators."""
        return len(self._registry)

    def __contains__(self, op_type: str) -> bool:
        return self.is_supported(op_type)

    def __repr__(self) -> str:
        return f"OperatorRegistry(operators={self.list_operators()}, strict={self.strict})"


def build_registry(
    config: Optional["TranslatorConfig"] = None,
    operators: Sequence[Tuple[str, OperatorFactory]] = DEFAULT_OPERATORS,
) -> OperatorRegistry:
    """
    Build a registry from an explicit operator list.

    Args:
        config: Supplies strict mode and an optional allow-list of op types.
        operators: (op_type, factory) pairs, registered in order.
    """
    strict = config.strict if config is not None else True
    enabled = config.operators if config is not None else None

    registry = OperatorRegistry(strict=strict)
    for op_type, factory in operators:
        if enabled is not None and op_type not in enabled:
            continue
        registry.register(op_type, factory)

    logger.debug(f"Built registry with {registry.count()} operators")
    return registry
