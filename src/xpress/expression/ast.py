from __future__ import annotations

__all__ = [
    "Expression",
    "Leaf",
    "Constant",
    "Variable",
    "Operation",
    "zero",
    "one",
    "make_constant",
    "make_variable",
    "as_expression",
]

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..linalg import Tensor, TensorLike, is_scalar

if TYPE_CHECKING:
    from ..operators import Operator


class Expression:
    __slots__ = ()

    @property
    def operands(self) -> tuple[Expression, ...]:
        return ()

    def variables(self) -> dict[str, Variable]:
        """Every variable in the expression, keyed by name, in order of first appearance."""
        variables_mapping = {}
        for operand in self.operands:
            for name, variable in operand.variables().items():
                variables_mapping.setdefault(name, variable)
        return variables_mapping

    def node_count(self) -> int:
        return 1 + sum(operand.node_count() for operand in self.operands)

    def __add__(self, other) -> Expression:
        from ..operators import add

        return add(self, other)

    def __radd__(self, other) -> Expression:
        from ..operators import add

        return add(other, self)

    def __sub__(self, other) -> Expression:
        from ..operators import subtract

        return subtract(self, other)

    def __rsub__(self, other) -> Expression:
        from ..operators import subtract

        return subtract(other, self)

    def __mul__(self, other) -> Expression:
        from ..operators import multiply

        return multiply(self, other)

    def __rmul__(self, other) -> Expression:
        from ..operators import multiply

        return multiply(other, self)

    def __truediv__(self, other) -> Expression:
        from ..operators import divide

        return divide(self, other)

    def __rtruediv__(self, other) -> Expression:
        from ..operators import divide

        return divide(other, self)

    def __pow__(self, other) -> Expression:
        from ..operators import power

        return power(self, other)

    def __rpow__(self, other) -> Expression:
        from ..operators import power

        return power(other, self)

    def __neg__(self) -> Expression:
        from ..operators import negate

        return negate(self)

    def __str__(self):
        from ..render import render

        return render(self)


class Leaf(Expression):
    __slots__ = ()


@dataclass(frozen=True, slots=True, repr=False)
class Constant(Leaf):
    value: int | float | Tensor

    def __post_init__(self):
        if is_scalar(self.value) or isinstance(self.value, Tensor):
            pass
        elif isinstance(self.value, TensorLike):
            object.__setattr__(self, "value", Tensor.from_tensor_like(self.value))
        else:
            raise TypeError(f"Expected a constant to be a number or a tensor, not {self.value!r}")

    @property
    def shape(self) -> tuple[int, ...]:
        if isinstance(self.value, Tensor):
            return self.value.shape
        else:
            return ()

    @property
    def is_zero(self) -> bool:
        return is_scalar(self.value) and self.value == 0

    @property
    def is_unit(self) -> bool:
        return is_scalar(self.value) and self.value == 1

    def __repr__(self):
        return f"Constant({self.value!r})"


@dataclass(frozen=True, slots=True, repr=False)
class Variable(Leaf):
    name: str
    # A declared shape enables shape checks at construction; it is not part of the identity
    shape: tuple[int, ...] | None = field(default=None, compare=False)

    def variables(self) -> dict[str, Variable]:
        return {self.name: self}

    def __repr__(self):
        if self.shape is None:
            return f"Variable({self.name!r})"
        else:
            return f"Variable({self.name!r}, shape={self.shape})"


@dataclass(frozen=True, slots=True, eq=False)
class Operation(Expression):
    """An operator applied to an ordered tuple of operands.

    Instances should be built through the operator's `build` method, which simplifies before
    allocating a node. Equality is structural; for commutative binary operators the order of the
    operands is ignored, so `x + y` equals `y + x`.
    """

    operator: Operator
    operands: tuple[Expression, ...]
    shape: tuple[int, ...] | None = field(init=False, repr=False)
    _hash: int = field(init=False, repr=False)

    def __post_init__(self):
        from ._exceptions import ArityError

        object.__setattr__(self, "operands", tuple(self.operands))

        if len(self.operands) != self.operator.arity:
            raise ArityError(self.operator.name, self.operator.arity, len(self.operands))

        object.__setattr__(
            self, "shape", self.operator.shape(*(operand.shape for operand in self.operands))
        )

        if self.operator.is_commutative:
            operand_hashes = tuple(sorted(hash(operand) for operand in self.operands))
        else:
            operand_hashes = tuple(hash(operand) for operand in self.operands)
        object.__setattr__(self, "_hash", hash((self.operator.name, operand_hashes)))

    def __eq__(self, other: object):
        if self is other:
            return True
        elif isinstance(other, Operation):
            if self._hash != other._hash or self.operator is not other.operator:
                return False
            elif self.operands == other.operands:
                return True
            elif self.operator.is_commutative and len(self.operands) == 2:
                return self.operands == other.operands[::-1]
            else:
                return False
        else:
            return NotImplemented

    def __hash__(self) -> int:
        return self._hash


zero = Constant(0)
one = Constant(1)


def make_constant(value: int | float | TensorLike) -> Constant:
    return Constant(value)


def make_variable(name: str, shape: tuple[int, ...] | None = None) -> Variable:
    if shape is not None:
        shape = tuple(shape)
    return Variable(name, shape)


def as_expression(value) -> Expression:
    """Wrap numbers and tensors as constants, leaving expressions alone."""
    if isinstance(value, Expression):
        return value
    else:
        return Constant(value)
