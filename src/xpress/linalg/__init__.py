from ._exceptions import (
    ElementCountError,
    InconsistentLengthError,
    IndexOutOfBoundsError,
    ShapeMismatchError,
)
from ._operations import add, divide, dot, elementwise, multiply, negate, power, shape_of, subtract
from ._scalar import (
    Scalar,
    is_scalar,
    scalar_cos,
    scalar_exp,
    scalar_log,
    scalar_sin,
)
from ._shape import element_count, flat_index, multi_indexes, strides
from ._tensor import Tensor, TensorLike, make_tensor
