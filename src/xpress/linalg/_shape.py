__all__ = ["element_count", "flat_index", "multi_indexes", "strides"]

import itertools
from functools import reduce
from operator import mul
from typing import Iterator

from ._exceptions import IndexOutOfBoundsError


def element_count(shape: tuple[int, ...]) -> int:
    return reduce(mul, shape, 1)


def strides(shape: tuple[int, ...]) -> tuple[int, ...]:
    """Row-major strides of a shape.

    The stride of axis k is the product of the extents of all axes after k, so the last axis
    varies fastest in the flat store.
    """
    result = []
    stride = 1
    for extent in reversed(shape):
        result.append(stride)
        stride *= extent
    return tuple(reversed(result))


def flat_index(shape: tuple[int, ...], index: tuple[int, ...]) -> int:
    if len(index) != len(shape):
        raise IndexOutOfBoundsError(shape, index)

    offset = 0
    for i, extent, stride in zip(index, shape, strides(shape), strict=True):
        if not 0 <= i < extent:
            raise IndexOutOfBoundsError(shape, index)
        offset += i * stride
    return offset


def multi_indexes(shape: tuple[int, ...]) -> Iterator[tuple[int, ...]]:
    """Every multi-index of a shape in row-major order."""
    return itertools.product(*(range(extent) for extent in shape))
