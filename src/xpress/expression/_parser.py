__all__ = ["parse_expression", "parse_binding"]

from parsita import ParseError, ParserContext, lit, opt, reg, rep, repsep
from parsita.util import splat
from returns import result

from ..linalg import (
    ElementCountError,
    InconsistentLengthError,
    Scalar,
    ShapeMismatchError,
    Tensor,
)
from ._exceptions import ArityError, UnboundVariableError, UnknownOperatorError
from .ast import Constant, Expression, Variable


def make_number(text: str) -> Scalar:
    try:
        return int(text)
    except ValueError:
        return float(text)


def make_negate(operand: Expression) -> Expression:
    from ..operators import negate

    return negate(operand)


def make_power(base: Expression, exponent: list[Expression]) -> Expression:
    from ..operators import power

    if len(exponent) == 0:
        return base
    else:
        return power(base, exponent[0])


def make_call(name: str, argument: Expression) -> Expression:
    from ..operators import function_operators

    functions = function_operators()
    if name not in functions:
        raise UnknownOperatorError(name, tuple(functions.keys()))

    return functions[name](argument)


def make_left_fold(first: Expression, rest: list[tuple[str, Expression]]) -> Expression:
    from ..operators import add, divide, multiply, subtract

    value = first
    for op, term in rest:
        match op:
            case "+":
                value = add(value, term)
            case "-":
                value = subtract(value, term)
            case "*":
                value = multiply(value, term)
            case "/":
                value = divide(value, term)
    return value


class ExpressionParsers(ParserContext, whitespace=r"[ \t]*"):
    name = reg(r"[A-Za-z_][A-Za-z0-9_]*")

    literal = reg(r"\d+((\.\d+([Ee][+-]?\d+)?)|((\.\d+)?[Ee][+-]?\d+))|\d+") > make_number
    signed_literal = reg(r"[+-]?(\d+((\.\d+([Ee][+-]?\d+)?)|((\.\d+)?[Ee][+-]?\d+))|\d+)") > (
        make_number
    )

    tensor_data = "[" >> repsep(tensor_data | signed_literal, ",") << "]"  # noqa: F821
    tensor = tensor_data > (lambda lol: Constant(Tensor.from_lol(lol)))

    number = literal > Constant
    call = name & "(" >> expression << ")" > splat(make_call)  # noqa: F821
    variable = name > Variable
    parentheses = "(" >> expression << ")"  # noqa: F821
    atom = call | number | tensor | variable | parentheses

    power = atom & opt("^" >> unary) > splat(make_power)  # noqa: F821
    unary = ("-" >> unary > make_negate) | power

    term = unary & rep(lit("*", "/") & unary) > splat(make_left_fold)
    expression = term & rep(lit("+", "-") & term) > splat(make_left_fold)

    binding = name << "=" & expression > tuple


ExpressionError = (
    ElementCountError
    | InconsistentLengthError
    | ShapeMismatchError
    | ArityError
    | UnknownOperatorError
)


def parse_expression(string: str, /) -> result.Result[Expression, ParseError | ExpressionError]:
    try:
        return ExpressionParsers.expression.parse(string)
    except (
        ElementCountError,
        InconsistentLengthError,
        ShapeMismatchError,
        ArityError,
        UnknownOperatorError,
    ) as e:
        return result.Failure(e)


def parse_binding(
    string: str, /
) -> result.Result[tuple[str, Scalar | Tensor], ParseError | ExpressionError | UnboundVariableError]:
    """Parse `name=value`, where the value is an expression without variables."""
    from ..evaluate import evaluate_expression

    try:
        parsed = ExpressionParsers.binding.parse(string)
    except (
        ElementCountError,
        InconsistentLengthError,
        ShapeMismatchError,
        ArityError,
        UnknownOperatorError,
    ) as e:
        return result.Failure(e)

    return parsed.bind(
        lambda pair: evaluate_expression(pair[1], {}).map(lambda value: (pair[0], value))
    )
