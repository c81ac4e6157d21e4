"""Scalar arithmetic following IEEE floating-point conventions.

Python raises on several inputs where C and numpy return a non-finite value
instead (e.g. `math.log(0.0)` or `1 / 0`). These helpers return `nan` or
`inf` in those places so that a domain error in one part of an evaluation
does not abort the rest of it.
"""

__all__ = [
    "Scalar",
    "is_scalar",
    "scalar_add",
    "scalar_subtract",
    "scalar_multiply",
    "scalar_divide",
    "scalar_power",
    "scalar_negate",
    "scalar_log",
    "scalar_exp",
    "scalar_sin",
    "scalar_cos",
]

import math
from numbers import Real

Scalar = int | float

nan = float("nan")
inf = float("inf")

# Integer results are exact; past this magnitude they no longer fit in a float
_max_exponent_bits = 1024


def is_scalar(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _clamp(result: Scalar) -> Scalar:
    if isinstance(result, int):
        try:
            float(result)
        except OverflowError:
            return inf if result > 0 else -inf
    return result


def _is_odd_integer(value: Scalar) -> bool:
    if isinstance(value, int):
        return value % 2 == 1
    else:
        return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def scalar_add(a: Scalar, b: Scalar) -> Scalar:
    return _clamp(a + b)


def scalar_subtract(a: Scalar, b: Scalar) -> Scalar:
    return _clamp(a - b)


def scalar_multiply(a: Scalar, b: Scalar) -> Scalar:
    return _clamp(a * b)


def scalar_divide(a: Scalar, b: Scalar) -> Scalar:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return nan
        else:
            return math.copysign(inf, a) * math.copysign(1.0, b)
    except OverflowError:
        # Integer quotient too large for a float
        return inf if (a > 0) == (b > 0) else -inf


def scalar_power(a: Scalar, b: Scalar) -> Scalar:
    if isinstance(a, int) and isinstance(b, int) and b > 0 and abs(a) > 1:
        # Skip the exact big-integer power when the result cannot be a float anyway
        if b >= _max_exponent_bits or b * math.log2(abs(a)) >= _max_exponent_bits:
            return -inf if a < 0 and b % 2 == 1 else inf

    try:
        result = a**b
    except ZeroDivisionError:
        # 0 ** negative keeps the sign of zero for odd exponents
        if _is_odd_integer(b):
            return math.copysign(inf, a)
        else:
            return inf
    except OverflowError:
        if a < 0 and _is_odd_integer(b):
            return -inf
        else:
            return inf

    if isinstance(result, complex):
        # Negative base with non-integer exponent
        return nan
    else:
        return _clamp(result)


def scalar_negate(a: Scalar) -> Scalar:
    return -a


def scalar_log(a: Scalar) -> Scalar:
    if math.isnan(a):
        return nan
    elif a == 0:
        return -inf
    elif a < 0:
        return nan
    else:
        return math.log(a)


def scalar_exp(a: Scalar) -> Scalar:
    try:
        return math.exp(a)
    except OverflowError:
        return inf if a > 0 else 0.0


def scalar_sin(a: Scalar) -> Scalar:
    try:
        return math.sin(a)
    except (ValueError, OverflowError):
        # sin(inf)
        return nan


def scalar_cos(a: Scalar) -> Scalar:
    try:
        return math.cos(a)
    except (ValueError, OverflowError):
        return nan
