import pytest
from parsita import ParseError

from xpress import (
    Constant,
    InconsistentLengthError,
    ShapeMismatchError,
    UnboundVariableError,
    UnknownOperatorError,
    add,
    divide,
    exp,
    log,
    make_constant,
    make_tensor,
    make_variable,
    multiply,
    negate,
    parse_binding,
    parse_expression,
    power,
    render,
    subtract,
)

x = make_variable("x")
y = make_variable("y")
z = make_variable("z")

expression_strings = [
    ("x + y^2", add(x, power(y, 2))),
    ("x^(y + 1)", power(x, add(y, 1))),
    ("x^y^z", power(x, power(y, z))),
    ("(x^y)^z", power(power(x, y), z)),
    ("x - y - z", subtract(subtract(x, y), z)),
    ("x - (y - z)", subtract(x, subtract(y, z))),
    ("x * y / z", divide(multiply(x, y), z)),
    ("-x^2", negate(power(x, 2))),
    ("(-x)^2", power(negate(x), 2)),
    ("x^-1", power(x, Constant(-1))),
    ("2 * x", multiply(2, x)),
    ("log(x) * exp(y)", multiply(log(x), exp(y))),
    ("x1 + x_2", add(make_variable("x1"), make_variable("x_2"))),
    ("1.5e3 * x", multiply(1500.0, x)),
    ("0.25", Constant(0.25)),
    (
        "[[1, 2], [3, 4]] + [[4, 3], [2, 1]]",
        add(
            make_constant(make_tensor((2, 2), 1, 2, 3, 4)),
            make_constant(make_tensor((2, 2), 4, 3, 2, 1)),
        ),
    ),
    ("[-1, 2.5] * x", multiply(make_constant(make_tensor((2,), -1, 2.5)), x)),
]


@pytest.mark.parametrize(("string", "expression"), expression_strings)
def test_expression_parsing(string, expression):
    actual = parse_expression(string).unwrap()
    assert actual == expression


@pytest.mark.parametrize(
    "string",
    [
        "x + y^2",
        "x^(y + 1)",
        "x^(y^z)",
        "(x^y)^z",
        "x - y - z",
        "x - (y - z)",
        "x * y / z",
        "-x^2",
        "(-x)^2",
        "x^-1",
        "2 * x",
        "log(x) * exp(y)",
        "sin(x) / cos(y)",
        "-(x + y) * (x - 1)",
    ],
)
def test_render_round_trip(string):
    assert render(parse_expression(string).unwrap()) == string


def test_simplification_applies_while_parsing():
    assert parse_expression("x + 0").unwrap() == x
    assert parse_expression("x^1 * 1").unwrap() == x
    assert parse_expression("x + x").unwrap() == multiply(2, x)
    assert parse_expression("--x").unwrap() == x


def test_whitespace():
    assert parse_expression("  x+y ^ 2 ").unwrap() == add(x, power(y, 2))


@pytest.mark.parametrize("string", ["x +", "(x", "x y", "2x", "[1, 2", ""])
def test_syntax_error(string):
    assert isinstance(parse_expression(string).failure(), ParseError)


def test_unknown_function():
    assert isinstance(parse_expression("foo(x)").failure(), UnknownOperatorError)


def test_shape_mismatch():
    assert isinstance(parse_expression("[1, 2] + [1, 2, 3]").failure(), ShapeMismatchError)


def test_ragged_tensor():
    assert isinstance(parse_expression("[[1, 2], [3]]").failure(), InconsistentLengthError)


@pytest.mark.parametrize(
    ("string", "name", "value"),
    [
        ("x=2", "x", 2),
        ("y = -3.5", "y", -3.5),
        ("z=2^3", "z", 8),
        ("v=[1, 2]", "v", make_tensor((2,), 1, 2)),
    ],
)
def test_binding_parsing(string, name, value):
    assert parse_binding(string).unwrap() == (name, value)


def test_binding_with_variable():
    assert isinstance(parse_binding("x=y").failure(), UnboundVariableError)


def test_binding_syntax_error():
    assert isinstance(parse_binding("x:2").failure(), ParseError)
