from ._arithmetic import Add, Divide, Multiply, Negate, Subtract
from ._base import (
    BinaryOperator,
    FunctionOperator,
    Operator,
    Precedence,
    UnaryOperator,
    function_operators,
    get_operator,
    precedence_of,
    register_operator,
    registered_operators,
    same_shape,
)
from ._functions import Cos, Exp, Log, Sin
from ._power import Power

add = register_operator(Add())
subtract = register_operator(Subtract())
multiply = register_operator(Multiply())
divide = register_operator(Divide())
power = register_operator(Power())
negate = register_operator(Negate())
log = register_operator(Log())
exp = register_operator(Exp())
sin = register_operator(Sin())
cos = register_operator(Cos())
