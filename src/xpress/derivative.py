__all__ = ["derivative_of"]

from functools import singledispatch

from .expression.ast import Constant, Expression, Operation, Variable, one, zero


def derivative_of(expression: Expression, variable: Variable | str) -> Expression:
    """Symbolic derivative of an expression with respect to a variable.

    Each operator supplies its own rule through `Operator.differentiate`, which recurses back into
    this function for its operands. The result is built through the operator factories, so it is
    simplified the same way as any other expression.
    """
    if isinstance(variable, str):
        variable = Variable(variable)

    return derivative_of_expression(expression, variable)


@singledispatch
def derivative_of_expression(expression: Expression, variable: Variable) -> Expression:
    raise NotImplementedError(f"No implementation of derivative_of: {expression}")


@derivative_of_expression.register(Constant)
def derivative_of_constant(expression: Constant, variable: Variable):
    return zero


@derivative_of_expression.register(Variable)
def derivative_of_variable(expression: Variable, variable: Variable):
    if expression == variable:
        return one
    else:
        return zero


@derivative_of_expression.register(Operation)
def derivative_of_operation(expression: Operation, variable: Variable):
    return expression.operator.differentiate(expression.operands, variable)
