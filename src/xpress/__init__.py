from .derivative import derivative_of
from .evaluate import evaluate, evaluate_expression
from .expression import (
    ArityError,
    DuplicateOperatorError,
    UnboundVariableError,
    UnknownOperatorError,
    parse_binding,
    parse_expression,
)
from .expression.ast import (
    Constant,
    Expression,
    Operation,
    Variable,
    make_constant,
    make_variable,
    one,
    zero,
)
from .linalg import (
    ElementCountError,
    InconsistentLengthError,
    IndexOutOfBoundsError,
    ShapeMismatchError,
    Tensor,
    TensorLike,
    make_tensor,
)
from .operators import (
    Operator,
    add,
    cos,
    divide,
    exp,
    get_operator,
    log,
    multiply,
    negate,
    power,
    register_operator,
    sin,
    subtract,
)
from .render import render
