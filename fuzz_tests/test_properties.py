import math

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from xpress import (
    Constant,
    ShapeMismatchError,
    derivative_of,
    evaluate,
    make_constant,
    multiply,
    one,
    parse_expression,
    power,
    render,
    zero,
)
from xpress.linalg import element_count, flat_index, multi_indexes

from .strategies import (
    expressions,
    positive_values,
    renderable_expressions,
    smooth_expressions,
    tensors,
)


@given(expressions)
def test_additive_identity(a):
    assert a + zero == a
    assert zero + a == a


@given(expressions)
def test_self_addition_doubles(a):
    assert a + a == multiply(Constant(2), a)


@given(expressions)
def test_power_identities(a):
    assume(a != zero)
    assert power(a, one) == a
    assert power(a, zero) == one
    assert power(one, a) == one


@given(expressions)
def test_power_of_zero(b):
    assert power(zero, b) == zero


@given(expressions)
def test_equal_expressions_have_equal_hashes(a):
    assert hash(a + one) == hash(one + a)


@given(expressions, st.sampled_from(["x", "y", "z", "w"]))
def test_differentiation_is_total(a, variable):
    derivative_of(a, variable)


@settings(deadline=None)
@given(smooth_expressions, positive_values, positive_values)
def test_derivative_matches_finite_difference(expression, x, y):
    h = 1e-6

    value = evaluate(expression, {"x": x, "y": y})
    derivative = evaluate(derivative_of(expression, "x"), {"x": x, "y": y})
    forward = evaluate(expression, {"x": x + h, "y": y})
    backward = evaluate(expression, {"x": x - h, "y": y})
    assume(all(math.isfinite(v) and abs(v) < 1e8 for v in (value, derivative, forward, backward)))

    finite_difference = (forward - backward) / (2 * h)

    assert abs(derivative - finite_difference) <= 1e-4 * (1 + abs(value) + abs(finite_difference))


@given(renderable_expressions)
def test_render_parses_back(expression):
    assert parse_expression(render(expression)).unwrap() == expression


@given(tensors())
def test_row_major_offsets(tensor):
    assert [flat_index(tensor.shape, index) for index in multi_indexes(tensor.shape)] == list(
        range(element_count(tensor.shape))
    )
    for index, value in tensor.items():
        assert tensor[index] == value


@given(tensors(), tensors())
def test_tensor_sum_shapes(a, b):
    left = make_constant(a)
    right = make_constant(b)

    if a.shape == b.shape:
        assert evaluate(left + right, {}) == a + b
    else:
        try:
            left + right
        except ShapeMismatchError:
            pass
        else:
            raise AssertionError(f"Expected shape mismatch between {a.shape} and {b.shape}")
