import pytest

from xpress import (
    UnboundVariableError,
    cos,
    derivative_of,
    evaluate,
    log,
    make_constant,
    make_tensor,
    make_variable,
    negate,
    parse_expression,
    power,
    render,
    sin,
)

x = make_variable("x")
y = make_variable("y")
z = make_variable("z")


@pytest.mark.parametrize(
    ("expression", "string"),
    [
        (x + y, "x + y"),
        (x + power(y, 2), "x + y^2"),
        (power(x, y + 1), "x^(y + 1)"),
        (power(x + y, 2), "(x + y)^2"),
        (power(power(x, 2), 3), "(x^2)^3"),
        (power(x, power(y, 2)), "x^(y^2)"),
        (power(x, -1), "x^-1"),
        (power(-2, x), "(-2)^x"),
        (log(x) ** 2, "log(x)^2"),
        (x * (y + 1), "x * (y + 1)"),
        ((x + 1) * y, "(x + 1) * y"),
        (x - (y - z), "x - (y - z)"),
        ((x - y) - z, "x - y - z"),
        (x + (y + z), "x + (y + z)"),
        (x / (y * z), "x / (y * z)"),
        (x * y / z, "x * y / z"),
        (-x, "-x"),
        (-(x + y), "-(x + y)"),
        (-(x**2), "-x^2"),
        ((-x) ** 2, "(-x)^2"),
        (negate(x) * y, "-x * y"),
        (sin(x) / cos(y), "sin(x) / cos(y)"),
        (make_constant(2.5) * x, "2.5 * x"),
        (make_constant(make_tensor((2,), 1, 2)) * x, "[1, 2] * x"),
    ],
)
def test_render(expression, string):
    assert render(expression) == string
    assert str(expression) == string


def test_render_exponent_parentheses():
    e = x + power(y, 2)
    e2 = power(x, y + 1)

    text = render(e)
    assert text.index("x") < text.index("+")
    assert "^2" in text
    assert "(2)" not in text

    assert "^(y + 1)" in render(e2)


def test_render_derivative():
    assert render(derivative_of(x**3, x)) == "3 * x^(3 - 1)"


def test_render_with_bindings():
    e = x + power(y, 2)

    assert render(e, {"x": 1, "y": 2}) == "1 + 2^2"
    assert render(e) == "x + y^2"


def test_render_tensor_binding():
    assert render(x * 2, {"x": make_tensor((2, 2), 1, 2, 3, 4)}) == "[[1, 2], [3, 4]] * 2"


def test_render_with_missing_binding():
    with pytest.raises(UnboundVariableError):
        render(x + y, {"x": 1})


@pytest.mark.parametrize(
    ("expression", "bindings", "string"),
    [
        (power(x, 2), {"x": -2}, "(-2)^2"),
        (-x, {"x": -2}, "-(-2)"),
        (x - y, {"x": 1, "y": -2.5}, "1 - -2.5"),
        (power(2, x), {"x": -1}, "2^-1"),
    ],
)
def test_render_negative_bindings(expression, bindings, string):
    assert render(expression, bindings) == string


def test_rendered_bindings_parse_to_the_same_value():
    expression = power(x, 2) - y
    bindings = {"x": -2, "y": -3}

    reparsed = parse_expression(render(expression, bindings)).unwrap()

    assert evaluate(reparsed, {}) == evaluate(expression, bindings) == 7
