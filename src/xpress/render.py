__all__ = ["render", "render_value"]

from functools import singledispatch

from .evaluate import Bindings, lookup_binding
from .expression.ast import Constant, Expression, Operation, Variable
from .linalg import Tensor, is_scalar


def render_value(value) -> str:
    if is_scalar(value):
        return str(value)
    else:
        return str(Tensor.from_tensor_like(value))


@singledispatch
def render(expression: Expression, bindings: Bindings | None = None) -> str:
    """Convert an expression to text.

    Without bindings, variables are written by name. With bindings, each variable is written as
    its bound value.
    """
    raise NotImplementedError(f"No implementation of render: {expression}")


@render.register(Constant)
def render_constant(expression: Constant, bindings: Bindings | None = None):
    return render_value(expression.value)


@render.register(Variable)
def render_variable(expression: Variable, bindings: Bindings | None = None):
    if bindings is None:
        return expression.name
    else:
        return render_value(lookup_binding(expression, bindings))


@render.register(Operation)
def render_operation(expression: Operation, bindings: Bindings | None = None):
    operands = expression.operands
    if bindings is not None:
        # Substitute values first so that parenthesization sees them, e.g. (-2)^2
        operands = tuple(
            Constant(lookup_binding(operand, bindings)) if isinstance(operand, Variable) else operand
            for operand in operands
        )

    return expression.operator.render(operands, lambda operand: render(operand, bindings))
