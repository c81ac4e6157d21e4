__all__ = ["Log", "Exp", "Sin", "Cos"]

from .. import linalg
from ..derivative import derivative_of
from ..expression.ast import Expression, Variable, one, zero
from ._arithmetic import is_unit, is_zero
from ._base import FunctionOperator


class Log(FunctionOperator):
    """Natural logarithm."""

    name = "log"

    def simplify(self, operand: Expression):
        if is_unit(operand):
            return zero
        else:
            return None

    def evaluate(self, operand):
        return linalg.elementwise(linalg.scalar_log, operand)

    def differentiate(self, operands: tuple[Expression, ...], variable: Variable) -> Expression:
        from . import divide

        (operand,) = operands
        return divide(derivative_of(operand, variable), operand)


class Exp(FunctionOperator):
    name = "exp"

    def simplify(self, operand: Expression):
        if is_zero(operand):
            return one
        else:
            return None

    def evaluate(self, operand):
        return linalg.elementwise(linalg.scalar_exp, operand)

    def differentiate(self, operands: tuple[Expression, ...], variable: Variable) -> Expression:
        from . import multiply

        (operand,) = operands
        return multiply(self.build(operand), derivative_of(operand, variable))


class Sin(FunctionOperator):
    name = "sin"

    def simplify(self, operand: Expression):
        if is_zero(operand):
            return zero
        else:
            return None

    def evaluate(self, operand):
        return linalg.elementwise(linalg.scalar_sin, operand)

    def differentiate(self, operands: tuple[Expression, ...], variable: Variable) -> Expression:
        from . import cos, multiply

        (operand,) = operands
        return multiply(cos(operand), derivative_of(operand, variable))


class Cos(FunctionOperator):
    name = "cos"

    def simplify(self, operand: Expression):
        if is_zero(operand):
            return one
        else:
            return None

    def evaluate(self, operand):
        return linalg.elementwise(linalg.scalar_cos, operand)

    def differentiate(self, operands: tuple[Expression, ...], variable: Variable) -> Expression:
        from . import multiply, negate, sin

        (operand,) = operands
        return multiply(negate(sin(operand)), derivative_of(operand, variable))
