import hypothesis.strategies as st

from xpress import (
    Constant,
    Tensor,
    Variable,
    add,
    divide,
    exp,
    log,
    multiply,
    negate,
    power,
    subtract,
)

variables = st.builds(Variable, st.sampled_from(["x", "y", "z"]))

special_constants = st.sampled_from([Constant(0), Constant(1)])
integer_constants = st.builds(Constant, st.integers(min_value=-10, max_value=10))
float_constants = st.builds(
    Constant, st.floats(min_value=-10, max_value=10, allow_nan=False, allow_infinity=False)
)
constants = special_constants | integer_constants | float_constants


def operator_trees(leaves, max_leaves=8):
    return st.recursive(
        leaves,
        lambda children: (
            st.builds(add, children, children)
            | st.builds(subtract, children, children)
            | st.builds(multiply, children, children)
            | st.builds(divide, children, children)
            | st.builds(power, children, children)
            | st.builds(negate, children)
            | st.builds(log, children)
            | st.builds(exp, children)
        ),
        max_leaves=max_leaves,
    )


expressions = operator_trees(variables | constants)

# Non-negative literals, so that rendered text parses back to the same tree
renderable_constants = st.builds(Constant, st.integers(min_value=0, max_value=100)) | st.builds(
    Constant, st.floats(min_value=0.001, max_value=1000, allow_nan=False, allow_infinity=False)
)
renderable_expressions = operator_trees(variables | renderable_constants)

# Built only from add and pow over positive leaves, so every base stays positive and the
# expression is smooth wherever it is evaluated
positive_values = st.floats(min_value=0.5, max_value=2.0, allow_nan=False, allow_infinity=False)
smooth_expressions = st.recursive(
    st.builds(Variable, st.sampled_from(["x", "y"])) | st.builds(Constant, positive_values),
    lambda children: st.builds(add, children, children) | st.builds(power, children, children),
    max_leaves=6,
)


@st.composite
def tensors(draw, shape: tuple[int, ...] | None = None) -> Tensor:
    if shape is None:
        shape = tuple(draw(st.lists(st.integers(min_value=0, max_value=3), max_size=3)))

    count = 1
    for extent in shape:
        count *= extent

    values = draw(
        st.lists(
            st.floats(min_value=-100, max_value=100, allow_nan=False, allow_infinity=False),
            min_size=count,
            max_size=count,
        )
    )

    return Tensor(shape, tuple(values))
