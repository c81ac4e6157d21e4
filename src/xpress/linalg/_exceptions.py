__all__ = [
    "ElementCountError",
    "IndexOutOfBoundsError",
    "InconsistentLengthError",
    "ShapeMismatchError",
]

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ElementCountError(Exception):
    shape: tuple[int, ...]
    count: int

    def __str__(self):
        return (
            f"Expected a tensor of shape {self.shape} to be given exactly the product of its "
            f"extents as elements, but got {self.count} elements"
        )


@dataclass(frozen=True, slots=True)
class IndexOutOfBoundsError(Exception):
    shape: tuple[int, ...]
    index: tuple[int, ...]

    def __str__(self):
        return (
            f"Expected a multi-index with one non-negative entry per axis, each less than the "
            f"extent of that axis, but got {self.index} for a tensor of shape {self.shape}"
        )


@dataclass(frozen=True, slots=True)
class InconsistentLengthError(Exception):
    data: Any

    def __str__(self):
        return (
            f"Expected nested lists to have the same length at every level of nesting, "
            f"but got {self.data}"
        )


@dataclass(frozen=True, slots=True)
class ShapeMismatchError(Exception):
    operation: str
    left: tuple[int, ...]
    right: tuple[int, ...]

    def __str__(self):
        return (
            f"Expected operands of {self.operation} to have compatible shapes, "
            f"but got {self.left} and {self.right}"
        )
