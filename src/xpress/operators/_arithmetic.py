__all__ = ["Add", "Subtract", "Multiply", "Divide", "Negate", "zero_of_shape"]

from .. import linalg
from ..derivative import derivative_of
from ..expression.ast import Constant, Expression, Operation, Variable, one, zero
from ._base import (
    BinaryOperator,
    Precedence,
    RenderOperand,
    Shape,
    UnaryOperator,
    parenthesize,
    precedence_of,
    same_shape,
)


def is_zero(expression: Expression) -> bool:
    return isinstance(expression, Constant) and expression.is_zero


def is_zeros(expression: Expression) -> bool:
    """Scalar zero or a tensor of zeros."""
    if isinstance(expression, Constant) and isinstance(expression.value, linalg.Tensor):
        return all(element == 0 for element in expression.value.values)
    else:
        return is_zero(expression)


def is_unit(expression: Expression) -> bool:
    return isinstance(expression, Constant) and expression.is_unit


def zero_of_shape(shape: Shape) -> Expression:
    """Additive identity that keeps a known tensor shape, so later shape checks still apply."""
    if shape is None or shape == ():
        return zero
    else:
        return Constant(linalg.Tensor.filled(shape, 0))


def is_additive_identity(expression: Expression, other: Expression) -> bool:
    """Whether `expression` can be dropped from a sum with `other`.

    The scalar zero is an identity for operands of any shape. A tensor of zeros is only an identity
    for an operand of the same shape, so that a mismatch is still reported.
    """
    if is_zero(expression):
        return True
    else:
        return is_zeros(expression) and other.shape == expression.shape


class Add(BinaryOperator):
    name = "add"
    symbol = "+"
    precedence = Precedence.additive
    is_commutative = True

    def simplify(self, left: Expression, right: Expression):
        from . import multiply

        if is_additive_identity(left, right):
            return right
        elif is_additive_identity(right, left):
            return left
        elif left == right:
            return multiply(Constant(2), left)
        else:
            return None

    def evaluate(self, left, right):
        return linalg.add(left, right)

    def differentiate(self, operands: tuple[Expression, ...], variable: Variable) -> Expression:
        left, right = operands
        return self.build(derivative_of(left, variable), derivative_of(right, variable))

    def shape(self, left: Shape, right: Shape) -> Shape:
        return same_shape(self.symbol, left, right)


class Subtract(BinaryOperator):
    name = "subtract"
    symbol = "-"
    precedence = Precedence.additive

    def simplify(self, left: Expression, right: Expression):
        from . import negate

        if is_additive_identity(right, left):
            return left
        elif is_additive_identity(left, right):
            return negate(right)
        elif left == right:
            return zero_of_shape(left.shape)
        else:
            return None

    def evaluate(self, left, right):
        return linalg.subtract(left, right)

    def differentiate(self, operands: tuple[Expression, ...], variable: Variable) -> Expression:
        left, right = operands
        return self.build(derivative_of(left, variable), derivative_of(right, variable))

    def shape(self, left: Shape, right: Shape) -> Shape:
        return same_shape(self.symbol, left, right)


class Multiply(BinaryOperator):
    """Product of scalars, scaling of a tensor, or contraction of two tensors."""

    name = "multiply"
    symbol = "*"
    precedence = Precedence.multiplicative
    is_commutative = True

    def simplify(self, left: Expression, right: Expression):
        if is_zeros(left) or is_zeros(right):
            return zero_of_shape(self.shape(left.shape, right.shape))
        elif is_unit(left):
            return right
        elif is_unit(right):
            return left
        else:
            return None

    def evaluate(self, left, right):
        return linalg.multiply(left, right)

    def differentiate(self, operands: tuple[Expression, ...], variable: Variable) -> Expression:
        from . import add

        left, right = operands
        left_derivative = derivative_of(left, variable)
        right_derivative = derivative_of(right, variable)

        # Product rule. A contraction of constants has a scalar derivative, not a scaled tensor.
        if is_zeros(left_derivative) and is_zeros(right_derivative):
            return zero_of_shape(self.shape(left.shape, right.shape))
        else:
            return add(self.build(left_derivative, right), self.build(left, right_derivative))

    def shape(self, left: Shape, right: Shape) -> Shape:
        if left == ():
            return right
        elif right == ():
            return left
        elif left is None or right is None:
            return None
        elif left != right:
            raise linalg.ShapeMismatchError(self.symbol, left, right)
        else:
            # Contraction of two tensors is a scalar
            return ()


class Divide(BinaryOperator):
    name = "divide"
    symbol = "/"
    precedence = Precedence.multiplicative

    def simplify(self, left: Expression, right: Expression):
        if is_zeros(left):
            return zero_of_shape(self.shape(left.shape, right.shape))
        elif is_unit(right):
            return left
        else:
            return None

    def evaluate(self, left, right):
        return linalg.divide(left, right)

    def differentiate(self, operands: tuple[Expression, ...], variable: Variable) -> Expression:
        from . import multiply, power, subtract

        left, right = operands
        numerator = subtract(
            multiply(derivative_of(left, variable), right),
            multiply(left, derivative_of(right, variable)),
        )
        return self.build(numerator, power(right, Constant(2)))

    def shape(self, left: Shape, right: Shape) -> Shape:
        if right is not None and right != ():
            raise linalg.ShapeMismatchError(self.symbol, left, right)
        return left


class Negate(UnaryOperator):
    name = "negate"
    symbol = "-"
    precedence = Precedence.prefix

    def simplify(self, operand: Expression):
        if isinstance(operand, Constant):
            # Negative literal
            return Constant(-operand.value)
        elif isinstance(operand, Operation) and operand.operator is self:
            return operand.operands[0]
        else:
            return None

    def evaluate(self, operand):
        return linalg.negate(operand)

    def differentiate(self, operands: tuple[Expression, ...], variable: Variable) -> Expression:
        (operand,) = operands
        return self.build(derivative_of(operand, variable))

    def render(self, operands: tuple[Expression, ...], render_operand: RenderOperand) -> str:
        (operand,) = operands
        operand_string = render_operand(operand)
        if precedence_of(operand) <= self.precedence:
            operand_string = parenthesize(operand_string)
        return f"{self.symbol}{operand_string}"
