__all__ = ["Bindings", "evaluate", "evaluate_expression", "lookup_binding"]

from functools import singledispatch
from typing import Mapping

from returns.result import Failure, Result, Success

from .expression._exceptions import UnboundVariableError
from .expression.ast import Constant, Expression, Operation, Variable
from .linalg import Scalar, ShapeMismatchError, Tensor, TensorLike, is_scalar, shape_of

Value = Scalar | TensorLike
Bindings = Mapping[Variable | str, Value]


def lookup_binding(variable: Variable, bindings: Bindings) -> Value:
    """Find the value of a variable, keyed either by the variable itself or by its name."""
    if variable in bindings:
        value = bindings[variable]
    elif variable.name in bindings:
        value = bindings[variable.name]
    else:
        bound = tuple(key.name if isinstance(key, Variable) else key for key in bindings.keys())
        raise UnboundVariableError(variable, bound)

    if variable.shape is not None and shape_of(value) != variable.shape:
        raise ShapeMismatchError(f"binding of {variable.name}", variable.shape, shape_of(value))

    return value


@singledispatch
def evaluate(expression: Expression, bindings: Bindings) -> Value:
    raise NotImplementedError(f"No implementation of evaluate: {expression}")


@evaluate.register(Constant)
def evaluate_constant(expression: Constant, bindings: Bindings):
    return expression.value


@evaluate.register(Variable)
def evaluate_variable(expression: Variable, bindings: Bindings):
    value = lookup_binding(expression, bindings)
    if not is_scalar(value) and not isinstance(value, Tensor):
        value = Tensor.from_tensor_like(value)
    return value


@evaluate.register(Operation)
def evaluate_operation(expression: Operation, bindings: Bindings):
    values = [evaluate(operand, bindings) for operand in expression.operands]
    return expression.operator.evaluate(*values)


def evaluate_expression(
    expression: Expression, bindings: Bindings
) -> Result[Value, UnboundVariableError | ShapeMismatchError]:
    try:
        return Success(evaluate(expression, bindings))
    except (UnboundVariableError, ShapeMismatchError) as error:
        return Failure(error)
