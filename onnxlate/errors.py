# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
onnxlate Error Hierarchy

Provides the error types raised while decoding tensors and applying
graph operators, with:
- Clear error categorization
- Helpful error messages with suggestions
- Context information for debugging

Error Categories:
- OnnxlateError: Base class for all onnxlate errors
- DecodeError: Tensor descriptor could not be decoded
    - UndefinedDTypeError, UnsupportedFeatureError,
      CorruptedDataError, NoDataFoundError
- OperatorError: Operator could not be applied to a node
    - ArityError, WrongRankError, LengthMismatchError
- UnsupportedOperationError: Operator type not registered
- ValidationError: Invalid graph or tensor construction
- ConfigurationError: Invalid configuration
"""

from typing import Optional


class OnnxlateError(Exception):
    """
    Base class for all onnxlate errors.

    Provides consistent error formatting and context tracking.

    Attributes:
        message: Human-readable error message
        suggestions: List of suggestions to fix the error
        context: Optional context dictionary for debugging
    """

    kind = "Error"

    def __init__(
        self,
        message: str,
        suggestions: Optional[list[str]] = None,
        context: Optional[dict] = None,
    ):
        self.message = message
        self.suggestions = suggestions or []
        self.context = context or {}

        full_message = self._format_message()
        super().__init__(full_message)

    def _format_message(self) -> str:
        """Format the error message with suggestions."""
        lines = [self.message]

        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for i, suggestion in enumerate(self.suggestions, 1):
                lines.append(f"  {i}. {suggestion}")

        if self.context:
            lines.append("")
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        return "\n".join(lines)


class DecodeError(OnnxlateError):
    """
    Error while decoding a serialized tensor descriptor.

    Raised when:
    - The descriptor uses an unsupported encoding or data type
    - The raw buffer is malformed
    - No data field is populated
    """

    kind = "Decode"

    def __init__(
        self,
        message: str,
        tensor_name: Optional[str] = None,
        dtype: Optional[str] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.tensor_name = tensor_name
        self.dtype = dtype

        context = {}
        if tensor_name:
            context["tensor"] = tensor_name
        if dtype:
            context["dtype"] = dtype

        super().__init__(
            message=f"Decoding failed: {message}",
            suggestions=suggestions,
            context=context,
        )


class UndefinedDTypeError(DecodeError):
    """The descriptor carries the UNDEFINED data type tag."""

    kind = "UndefinedDType"

    def __init__(self, tensor_name: Optional[str] = None):
        super().__init__(
            "tensor data type is undefined",
            tensor_name=tensor_name,
            suggestions=["Set data_type on the TensorProto before exporting"],
        )


class UnsupportedFeatureError(DecodeError):
    """Segmented tensors and data types without a decoder."""

    kind = "UnsupportedFeature"

    def __init__(
        self,
        feature: str,
        tensor_name: Optional[str] = None,
        dtype: Optional[str] = None,
    ):
        self.feature = feature
        super().__init__(
            f"{feature} is not supported",
            tensor_name=tensor_name,
            dtype=dtype,
            suggestions=[
                "Re-export the model with bool, float, double, int32 or int64 tensors",
            ],
        )


class CorruptedDataError(DecodeError):
    """Raw buffer length does not split into whole elements."""

    kind = "CorruptedData"

    def __init__(
        self,
        message: str,
        tensor_name: Optional[str] = None,
        dtype: Optional[str] = None,
    ):
        super().__init__(
            message,
            tensor_name=tensor_name,
            dtype=dtype,
            suggestions=["Check that the model file is not truncated"],
        )


class NoDataFoundError(DecodeError):
    """Neither a typed data list nor a raw buffer is populated."""

    kind = "NoDataFound"

    def __init__(
        self,
        tensor_name: Optional[str] = None,
        dtype: Optional[str] = None,
    ):
        super().__init__(
            "no data found",
            tensor_name=tensor_name,
            dtype=dtype,
        )


class OperatorError(OnnxlateError):
    """
    Error while applying an operator to a graph node.

    Raised when:
    - Node or input counts are wrong
    - Auxiliary input tensors have the wrong rank or length
    """

    kind = "Operator"

    def __init__(
        self,
        message: str,
        op_type: Optional[str] = None,
        node_name: Optional[str] = None,
        context: Optional[dict] = None,
    ):
        self.op_type = op_type
        self.node_name = node_name

        full_context = {}
        if op_type:
            full_context["operation"] = op_type
        if node_name:
            full_context["node"] = node_name
        if context:
            full_context.update(context)

        super().__init__(
            message=f"Operator failed: {message}",
            context=full_context,
        )


class ArityError(OperatorError):
    """Wrong number of target nodes or children."""

    kind = "Arity"

    def __init__(
        self,
        message: str,
        expected: str,
        actual: int,
        op_type: Optional[str] = None,
        node_name: Optional[str] = None,
    ):
        self.expected = expected
        self.actual = actual
        super().__init__(
            message,
            op_type=op_type,
            node_name=node_name,
            context={"expected": expected, "actual": actual},
        )


class WrongRankError(OperatorError):
    """An input tensor does not have the rank the operator needs."""

    kind = "WrongRank"

    def __init__(
        self,
        message: str,
        input_name: Optional[str] = None,
        rank: Optional[int] = None,
        op_type: Optional[str] = None,
        node_name: Optional[str] = None,
    ):
        self.input_name = input_name
        self.rank = rank

        context = {}
        if input_name:
            context["input"] = input_name
        if rank is not None:
            context["rank"] = rank

        super().__init__(
            message, op_type=op_type, node_name=node_name, context=context
        )


class LengthMismatchError(OperatorError):
    """Auxiliary input tensors of unequal length."""

    kind = "LengthMismatch"

    def __init__(
        self,
        input_name: str,
        expected: int,
        actual: int,
        op_type: Optional[str] = None,
        node_name: Optional[str] = None,
    ):
        self.input_name = input_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"'{input_name}' has length {actual}, expected {expected}",
            op_type=op_type,
            node_name=node_name,
            context={"input": input_name, "expected": expected, "actual": actual},
        )


class UnsupportedOperationError(OnnxlateError):
    """
    Operator type not present in the registry.

    Raised when a graph node names an operator with no registered factory.
    """

    kind = "UnsupportedOperation"

    def __init__(
        self,
        op_type: str,
        supported_ops: Optional[list[str]] = None,
    ):
        self.op_type = op_type
        self.supported_ops = supported_ops or []

        context = {"operation": op_type}

        suggestions = [
            f"Register a factory for '{op_type}' on the OperatorRegistry",
        ]

        if supported_ops:
            similar = self._find_similar_ops(op_type, supported_ops)
            if similar:
                suggestions.insert(0, f"Try using: {', '.join(similar)}")

        super().__init__(
            message=f"Operation '{op_type}' is not supported",
            suggestions=suggestions,
            context=context,
        )

    @staticmethod
    def _find_similar_ops(op_type: str, supported_ops: list[str]) -> list[str]:
        """Find similar supported operations."""
        op_lower = op_type.lower()
        similar = []
        for op in supported_ops:
            if op_lower in op.lower() or op.lower() in op_lower:
                similar.append(op)
        return similar[:3]


class ValidationError(OnnxlateError):
    """
    Input validation error.

    Raised when:
    - Tensor data does not match its shape
    - Graph nodes or edges are inconsistent
    """

    kind = "Validation"

    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        expected: Optional[str] = None,
        received: Optional[str] = None,
    ):
        context = {}
        if parameter:
            context["parameter"] = parameter
        if expected:
            context["expected"] = expected
        if received:
            context["received"] = received

        super().__init__(
            message=f"Validation failed: {message}",
            context=context,
        )


class ConfigurationError(OnnxlateError):
    """
    Configuration or setup error.

    Raised when an environment variable or config field cannot be parsed.
    """

    kind = "Configuration"

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[str] = None,
    ):
        context = {}
        if config_key:
            context["config_key"] = config_key
        if config_value:
            context["config_value"] = str(config_value)

        suggestions = [
            "Check configuration parameters",
            "Review the ONNXLATE_* environment variables",
        ]

        super().__init__(
            message=f"Configuration error: {message}",
            suggestions=suggestions,
            context=context,
        )


def format_shape_mismatch(
    expected_shape: tuple,
    actual_shape: tuple,
    tensor_name: Optional[str] = None,
) -> ValidationError:
    """Create a ValidationError for shape mismatch."""
    msg = f"Shape mismatch: expected {expected_shape}, got {actual_shape}"
    return ValidationError(
        message=msg,
        parameter=tensor_name or "tensor",
        expected=str(expected_shape),
        received=str(actual_shape),
    )
