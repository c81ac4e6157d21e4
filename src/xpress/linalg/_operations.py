"""Arithmetic on scalars and tensors.

Scalars are plain Python numbers. Tensors are anything satisfying `TensorLike`; results are
always fresh `Tensor` instances. There is no broadcasting: an operation that needs equal shapes
raises `ShapeMismatchError` when they differ.
"""

__all__ = [
    "shape_of",
    "add",
    "subtract",
    "multiply",
    "divide",
    "power",
    "negate",
    "elementwise",
    "dot",
]

from typing import Callable

from ._exceptions import ShapeMismatchError
from ._scalar import (
    Scalar,
    is_scalar,
    scalar_add,
    scalar_divide,
    scalar_multiply,
    scalar_negate,
    scalar_power,
    scalar_subtract,
)
from ._shape import multi_indexes
from ._tensor import Tensor, TensorLike

Value = Scalar | TensorLike


def shape_of(value: Value) -> tuple[int, ...]:
    if is_scalar(value):
        return ()
    elif isinstance(value, TensorLike):
        return tuple(value.shape)
    else:
        raise TypeError(f"Expected a scalar or a tensor, but got {value!r}")


def _elements(value: TensorLike) -> tuple[Scalar, ...]:
    if isinstance(value, Tensor):
        return value.values
    else:
        return tuple(value[index] for index in multi_indexes(tuple(value.shape)))


def elementwise(function: Callable[[Scalar], Scalar], value: Value) -> Value:
    if is_scalar(value):
        return function(value)
    else:
        return Tensor(shape_of(value), tuple(function(element) for element in _elements(value)))


def _zip_elementwise(
    name: str, function: Callable[[Scalar, Scalar], Scalar], left: TensorLike, right: TensorLike
) -> Tensor:
    left_shape = shape_of(left)
    right_shape = shape_of(right)
    if left_shape != right_shape:
        raise ShapeMismatchError(name, left_shape, right_shape)

    return Tensor(
        left_shape,
        tuple(function(a, b) for a, b in zip(_elements(left), _elements(right), strict=True)),
    )


def _both_scalar_or_both_tensor(
    name: str, function: Callable[[Scalar, Scalar], Scalar], left: Value, right: Value
) -> Value:
    if is_scalar(left) and is_scalar(right):
        return function(left, right)
    elif not is_scalar(left) and not is_scalar(right):
        return _zip_elementwise(name, function, left, right)
    else:
        raise ShapeMismatchError(name, shape_of(left), shape_of(right))


def add(left: Value, right: Value) -> Value:
    return _both_scalar_or_both_tensor("+", scalar_add, left, right)


def subtract(left: Value, right: Value) -> Value:
    return _both_scalar_or_both_tensor("-", scalar_subtract, left, right)


def dot(left: TensorLike, right: TensorLike) -> Scalar:
    """Contract two tensors of the same shape over all of their axes."""
    left_shape = shape_of(left)
    right_shape = shape_of(right)
    if left_shape != right_shape:
        raise ShapeMismatchError("*", left_shape, right_shape)

    result = 0
    for a, b in zip(_elements(left), _elements(right), strict=True):
        result += a * b
    return result


def multiply(left: Value, right: Value) -> Value:
    match (is_scalar(left), is_scalar(right)):
        case (True, True):
            return scalar_multiply(left, right)
        case (False, True):
            return elementwise(lambda element: scalar_multiply(element, right), left)
        case (True, False):
            return elementwise(lambda element: scalar_multiply(left, element), right)
        case (False, False):
            return dot(left, right)


def divide(left: Value, right: Value) -> Value:
    if is_scalar(right):
        return elementwise(lambda element: scalar_divide(element, right), left)
    else:
        raise ShapeMismatchError("/", shape_of(left), shape_of(right))


def power(base: Value, exponent: Value) -> Value:
    if is_scalar(exponent):
        return elementwise(lambda element: scalar_power(element, exponent), base)
    else:
        raise ShapeMismatchError("^", shape_of(base), shape_of(exponent))


def negate(value: Value) -> Value:
    return elementwise(scalar_negate, value)
