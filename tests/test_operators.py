import math

import pytest

from xpress import (
    DuplicateOperatorError,
    Operation,
    UnknownOperatorError,
    derivative_of,
    evaluate,
    get_operator,
    make_tensor,
    make_variable,
    multiply,
    one,
    parse_expression,
    power,
    register_operator,
    render,
    subtract,
    zero,
)
from xpress.linalg import elementwise
from xpress.operators import Add, FunctionOperator, registered_operators


class Tanh(FunctionOperator):
    name = "tanh"

    def simplify(self, operand):
        if operand == zero:
            return zero
        else:
            return None

    def evaluate(self, operand):
        return elementwise(math.tanh, operand)

    def differentiate(self, operands, variable):
        (operand,) = operands
        return multiply(subtract(one, power(self.build(operand), 2)), derivative_of(operand, variable))


tanh = register_operator(Tanh())

x = make_variable("x")


def test_builtin_operators_are_registered():
    assert set(registered_operators()) >= {
        "add",
        "subtract",
        "multiply",
        "divide",
        "power",
        "negate",
        "log",
        "exp",
        "sin",
        "cos",
    }


@pytest.mark.parametrize(
    ("name", "commutative"),
    [("add", True), ("multiply", True), ("subtract", False), ("divide", False), ("power", False)],
)
def test_commutativity_flags(name, commutative):
    assert get_operator(name).is_commutative is commutative


def test_operator_evaluate():
    assert get_operator("add").evaluate(2, 3) == 5
    assert get_operator("power").evaluate(2, 3) == 8
    assert get_operator("multiply").evaluate(
        make_tensor((2,), 1, 2), make_tensor((2,), 3, 4)
    ) == 11


def test_unknown_operator():
    with pytest.raises(UnknownOperatorError):
        get_operator("modulo")


def test_duplicate_operator():
    with pytest.raises(DuplicateOperatorError):
        register_operator(Add())


def test_reregistering_same_operator():
    assert register_operator(tanh) is tanh


def test_extension_simplifies():
    assert tanh(0) == zero
    assert isinstance(tanh(x), Operation)


def test_extension_evaluates():
    assert evaluate(tanh(x), {"x": 0.5}) == pytest.approx(math.tanh(0.5))
    assert evaluate(tanh(x), {"x": make_tensor((2,), 0.0, 1.0)}) == make_tensor(
        (2,), 0.0, math.tanh(1.0)
    )


def test_extension_differentiates():
    actual = derivative_of(tanh(x**2), x)

    expected = (1 - math.tanh(0.25) ** 2) * 2 * 0.5
    assert evaluate(actual, {"x": 0.5}) == pytest.approx(expected)


def test_extension_renders():
    assert render(tanh(x) + 1) == "tanh(x) + 1"


def test_extension_parses():
    assert parse_expression("tanh(x) + 1").unwrap() == tanh(x) + 1
