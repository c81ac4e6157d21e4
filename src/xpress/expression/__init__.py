from . import ast
from ._exceptions import (
    ArityError,
    DuplicateOperatorError,
    UnboundVariableError,
    UnknownOperatorError,
)
from ._parser import parse_binding, parse_expression
