from __future__ import annotations

__all__ = [
    "Operator",
    "BinaryOperator",
    "UnaryOperator",
    "FunctionOperator",
    "Precedence",
    "precedence_of",
    "register_operator",
    "get_operator",
    "registered_operators",
    "function_operators",
]

from abc import abstractmethod
from enum import IntEnum
from typing import Callable

from ..expression._exceptions import ArityError, DuplicateOperatorError, UnknownOperatorError
from ..expression.ast import Constant, Expression, Operation, Variable, as_expression
from ..linalg import ShapeMismatchError, is_scalar

Shape = tuple[int, ...] | None
RenderOperand = Callable[[Expression], str]


class Precedence(IntEnum):
    additive = 10
    multiplicative = 20
    prefix = 30
    exponent = 40
    atom = 100


def precedence_of(expression: Expression) -> int:
    match expression:
        case Operation(operator=operator):
            return operator.precedence
        case Constant(value=value) if is_scalar(value) and value < 0:
            return Precedence.prefix
        case _:
            return Precedence.atom


def parenthesize(text: str) -> str:
    return f"({text})"


class Operator:
    """An algebraic operator.

    Subclasses supply evaluation, differentiation, rendering, and shape inference. Expressions are
    built with `build` (or by calling the operator), which runs `simplify` first and only
    allocates an `Operation` node when no simplification applies.
    """

    name: str
    arity: int
    precedence: int
    is_commutative: bool = False

    def __call__(self, *operands) -> Expression:
        return self.build(*operands)

    def build(self, *operands) -> Expression:
        operands = tuple(as_expression(operand) for operand in operands)
        if len(operands) != self.arity:
            raise ArityError(self.name, self.arity, len(operands))

        simplified = self.simplify(*operands)
        if simplified is not None:
            return simplified
        else:
            return Operation(self, operands)

    def simplify(self, *operands: Expression) -> Expression | None:
        """Rewrite the application to a simpler expression, or return None to keep it."""
        return None

    @abstractmethod
    def evaluate(self, *values):
        raise NotImplementedError()

    @abstractmethod
    def differentiate(self, operands: tuple[Expression, ...], variable: Variable) -> Expression:
        raise NotImplementedError()

    @abstractmethod
    def render(self, operands: tuple[Expression, ...], render_operand: RenderOperand) -> str:
        raise NotImplementedError()

    def shape(self, *shapes: Shape) -> Shape:
        """Shape of the result given the operand shapes, where None is an unknown shape."""
        return shapes[0]

    def __repr__(self):
        return f"{type(self).__name__}()"


class BinaryOperator(Operator):
    arity = 2
    symbol: str

    def render(self, operands: tuple[Expression, ...], render_operand: RenderOperand) -> str:
        left, right = operands

        left_string = render_operand(left)
        if precedence_of(left) < self.precedence:
            left_string = parenthesize(left_string)

        # Preserve the tree even where the operator is associative
        right_string = render_operand(right)
        if precedence_of(right) <= self.precedence:
            right_string = parenthesize(right_string)

        return f"{left_string} {self.symbol} {right_string}"


class UnaryOperator(Operator):
    arity = 1

    def shape(self, operand: Shape) -> Shape:
        return operand


class FunctionOperator(UnaryOperator):
    """A unary operator rendered and parsed with function-call notation, e.g. `log(x)`."""

    precedence = Precedence.atom

    def render(self, operands: tuple[Expression, ...], render_operand: RenderOperand) -> str:
        (operand,) = operands
        return f"{self.name}({render_operand(operand)})"


def same_shape(name: str, left: Shape, right: Shape) -> Shape:
    if left is None:
        return right
    elif right is None:
        return left
    elif left != right:
        raise ShapeMismatchError(name, left, right)
    else:
        return left


_operators: dict[str, Operator] = {}


def register_operator(operator: Operator) -> Operator:
    existing = _operators.get(operator.name)
    if existing is not None and existing is not operator:
        raise DuplicateOperatorError(operator.name)

    _operators[operator.name] = operator
    return operator


def get_operator(name: str) -> Operator:
    try:
        return _operators[name]
    except KeyError:
        raise UnknownOperatorError(name, tuple(_operators.keys())) from None


def registered_operators() -> dict[str, Operator]:
    return dict(_operators)


def function_operators() -> dict[str, FunctionOperator]:
    return {
        name: operator
        for name, operator in _operators.items()
        if isinstance(operator, FunctionOperator)
    }
