from __future__ import annotations

__all__ = ["Tensor", "TensorLike", "make_tensor"]

from dataclasses import dataclass
from numbers import Real
from typing import Any, Iterator, Protocol, runtime_checkable

from ._exceptions import ElementCountError, InconsistentLengthError
from ._scalar import Scalar
from ._shape import element_count, flat_index, multi_indexes


@runtime_checkable
class TensorLike(Protocol):
    """Anything indexable by a multi-index with a known shape.

    `Tensor` is the reference implementation, but numpy arrays qualify as well. Operators that
    accept tensor operands only rely on this protocol.
    """

    @property
    def shape(self) -> tuple[int, ...]: ...

    def __getitem__(self, index: tuple[int, ...]) -> Scalar: ...


@dataclass(frozen=True, slots=True)
class Tensor:
    """Dense tensor with a fixed shape.

    The elements are kept in a flat tuple in row-major order, so the last axis varies fastest. An
    instance is immutable; every arithmetic operation returns a new tensor.
    """

    shape: tuple[int, ...]
    values: tuple[Scalar, ...]

    def __post_init__(self):
        object.__setattr__(self, "shape", tuple(self.shape))
        object.__setattr__(self, "values", tuple(self.values))

        if len(self.values) != element_count(self.shape):
            raise ElementCountError(self.shape, len(self.values))

    @staticmethod
    def from_lol(lol, *, shape: tuple[int, ...] | None = None) -> Tensor:
        if shape is None:
            shape = default_lol_shape(lol)

        values = []

        def recurse(data, axis: int):
            if axis == len(shape):
                if isinstance(data, list):
                    raise InconsistentLengthError(lol)
                values.append(data)
            else:
                if not isinstance(data, list) or len(data) != shape[axis]:
                    raise InconsistentLengthError(lol)
                for element in data:
                    recurse(element, axis + 1)

        recurse(lol, 0)

        return Tensor(shape, tuple(values))

    @staticmethod
    def filled(shape: tuple[int, ...], value: Scalar) -> Tensor:
        return Tensor(shape, (value,) * element_count(shape))

    @staticmethod
    def from_numpy(array) -> Tensor:
        import numpy

        return Tensor(array.shape, tuple(numpy.asarray(array).flatten(order="C").tolist()))

    @staticmethod
    def from_tensor_like(value: TensorLike) -> Tensor:
        if isinstance(value, Tensor):
            return value

        shape = tuple(value.shape)
        return Tensor(shape, tuple(value[index] for index in multi_indexes(shape)))

    @property
    def order(self) -> int:
        return len(self.shape)

    @property
    def size(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int | tuple[int, ...]) -> Scalar:
        if not isinstance(index, tuple):
            index = (index,)
        return self.values[flat_index(self.shape, index)]

    def items(self) -> Iterator[tuple[tuple[int, ...], Scalar]]:
        return zip(multi_indexes(self.shape), self.values)

    def to_lol(self) -> Any:
        def recurse(axis: int, offset: int, stride: int):
            if axis == len(self.shape):
                return self.values[offset]
            else:
                sub_stride = stride // self.shape[axis] if self.shape[axis] > 0 else 0
                return [
                    recurse(axis + 1, offset + i * sub_stride, sub_stride)
                    for i in range(self.shape[axis])
                ]

        return recurse(0, 0, len(self.values))

    def to_numpy(self):
        import numpy

        return numpy.array(self.values).reshape(self.shape)

    def __add__(self, other) -> Tensor:
        from ._operations import add

        if not _is_operand(other):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other) -> Tensor:
        from ._operations import add

        if not _is_operand(other):
            return NotImplemented
        return add(other, self)

    def __sub__(self, other) -> Tensor:
        from ._operations import subtract

        if not _is_operand(other):
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other) -> Tensor:
        from ._operations import subtract

        if not _is_operand(other):
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other) -> Tensor | Scalar:
        from ._operations import multiply

        if not _is_operand(other):
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other) -> Tensor | Scalar:
        from ._operations import multiply

        if not _is_operand(other):
            return NotImplemented
        return multiply(other, self)

    def __truediv__(self, other) -> Tensor:
        from ._operations import divide

        if not _is_operand(other):
            return NotImplemented
        return divide(self, other)

    def __pow__(self, other) -> Tensor:
        from ._operations import power

        if not _is_operand(other):
            return NotImplemented
        return power(self, other)

    def __neg__(self) -> Tensor:
        return Tensor(self.shape, tuple(-value for value in self.values))

    def __float__(self):
        if self.order != 0:
            raise ValueError(f"Can only convert Tensor of order 0 to float, not order {self.order}")
        return float(self.values[0])

    def __str__(self):
        return str(self.to_lol())

    def __repr__(self):
        return f"Tensor.from_lol({self.to_lol()!r}, shape={self.shape})"


def _is_operand(value) -> bool:
    return isinstance(value, (Real, Tensor))


def make_tensor(shape: tuple[int, ...], *elements: Scalar) -> Tensor:
    """Build a tensor from its shape and its elements in row-major order."""
    return Tensor(shape, elements)


def default_lol_shape(lol) -> tuple[int, ...]:
    """Extract the shape from dense nested lists.

    The length of the top-level list is the extent of the first axis, the length of the first
    element of that list is the extent of the second axis, and so on until a scalar is encountered.
    For example, `default_lol_shape([[1,2,3],[4,5,6]])` returns `(2,3)`. A bare scalar has shape
    `()`.
    """
    shape = []
    subdata = lol
    while isinstance(subdata, list):
        shape.append(len(subdata))
        if len(subdata) > 0:
            subdata = subdata[0]
        else:
            break

    return tuple(shape)
