__all__ = ["Power"]

from .. import linalg
from ..derivative import derivative_of
from ..expression.ast import Expression, Operation, Variable, one
from ._arithmetic import is_unit, is_zero, zero_of_shape
from ._base import BinaryOperator, Precedence, RenderOperand, Shape, parenthesize, precedence_of


class Power(BinaryOperator):
    """Raise a base to an exponent.

    A tensor base with a scalar exponent is raised elementwise. The exponent must be a scalar.
    """

    name = "power"
    symbol = "^"
    precedence = Precedence.exponent

    def simplify(self, base: Expression, exponent: Expression):
        if is_zero(base):
            return zero_of_shape(self.shape(base.shape, exponent.shape))
        elif is_unit(base) or is_unit(exponent):
            return base
        elif is_zero(exponent):
            return one
        else:
            return None

    def evaluate(self, base, exponent):
        return linalg.power(base, exponent)

    def differentiate(self, operands: tuple[Expression, ...], variable: Variable) -> Expression:
        from . import add, log, multiply, subtract

        base, exponent = operands

        # d(a^b) = b * a^(b - 1) * da + a^b * log(a) * db. When b does not depend on the variable,
        # db is zero and the second term vanishes at construction, so log(a) is never evaluated.
        base_term = multiply(
            multiply(exponent, self.build(base, subtract(exponent, one))),
            derivative_of(base, variable),
        )
        exponent_term = multiply(
            multiply(self.build(base, exponent), log(base)),
            derivative_of(exponent, variable),
        )
        return add(base_term, exponent_term)

    def render(self, operands: tuple[Expression, ...], render_operand: RenderOperand) -> str:
        base, exponent = operands

        base_string = render_operand(base)
        if precedence_of(base) <= self.precedence:
            base_string = parenthesize(base_string)

        exponent_string = render_operand(exponent)
        if isinstance(exponent, Operation):
            exponent_string = parenthesize(exponent_string)

        return f"{base_string}{self.symbol}{exponent_string}"

    def shape(self, base: Shape, exponent: Shape) -> Shape:
        if exponent is not None and exponent != ():
            raise linalg.ShapeMismatchError(self.symbol, base, exponent)
        return base
