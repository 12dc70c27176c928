"""Float arithmetic with non-finite result detection."""

import math
from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType

from radixcalc.exceptions import ArityError, NonFiniteResultError
from radixcalc.validators import validate_finite

FloatBinaryOp = Callable[[float, float], float]
FloatUnaryOp = Callable[[float], float]
FloatFunction = Callable[[Sequence[float]], float]


def add(a: float, b: float) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Raises:
        NonFiniteResultError: If the sum overflows to infinity
    """
    return validate_finite(a + b, "addition")


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Raises:
        NonFiniteResultError: If the difference overflows to infinity
    """
    return validate_finite(a - b, "subtraction")


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a

    Raises:
        NonFiniteResultError: If the product overflows to infinity
    """
    return validate_finite(a * b, "multiplication")


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    A zero divisor yields an infinite or undefined quotient, which is
    reported like any other non-finite result.

    Raises:
        NonFiniteResultError: If b is zero or the quotient overflows
    """
    if b == 0:
        raise NonFiniteResultError("division")
    return validate_finite(a / b, "division")


def modulo(a: float, b: float) -> float:
    """
    Floating-point remainder of a divided by b.

    The result takes the sign of the dividend: modulo(-7, 3) == -1.

    Raises:
        NonFiniteResultError: If b is zero
    """
    if b == 0:
        raise NonFiniteResultError("modulo")
    return validate_finite(math.fmod(a, b), "modulo")


def power(base: float, exponent: float) -> float:
    """
    Raise base to the power of exponent.

    Properties:
        - Identity: power(a, 1) == a
        - Zero exponent: power(a, 0) == 1

    Raises:
        NonFiniteResultError: If the result overflows or is undefined
            (0 to a negative power, negative base with fractional exponent)
    """
    try:
        result = math.pow(base, exponent)
    except (ValueError, OverflowError) as e:
        raise NonFiniteResultError("exponentiation") from e
    return validate_finite(result, "exponentiation")


def negate(a: float) -> float:
    return -a


def identity(a: float) -> float:
    return a


def round_half_up(x: float) -> float:
    """Round to the nearest integer, halves toward positive infinity."""
    whole = math.floor(x)
    # x - floor(x) is exact, so the half comparison does not round twice
    return float(whole + 1 if x - whole >= 0.5 else whole)


def _unary(name: str, fn: Callable[[float], float]) -> FloatFunction:
    """Wrap a one-argument math function, mapping domain errors to non-finite results."""

    def call(args: Sequence[float]) -> float:
        (x,) = args
        try:
            result = fn(x)
        except (ValueError, OverflowError) as e:
            raise NonFiniteResultError(name) from e
        return validate_finite(float(result), name)

    call.__name__ = name
    return call


def _fold(name: str, fn: Callable[[float, float], float]) -> FloatFunction:
    """Left fold of a variadic function over its arguments."""

    def call(args: Sequence[float]) -> float:
        if not args:
            raise ArityError(name, "at least 1", 0)
        result = args[0]
        for value in args[1:]:
            result = fn(result, value)
        return result

    call.__name__ = name
    return call


FUNCTIONS: Mapping[str, FloatFunction] = MappingProxyType({
    "sin": _unary("sin", math.sin),
    "cos": _unary("cos", math.cos),
    "tan": _unary("tan", math.tan),
    "asin": _unary("asin", math.asin),
    "acos": _unary("acos", math.acos),
    "atan": _unary("atan", math.atan),
    "sqrt": _unary("sqrt", math.sqrt),
    "abs": _unary("abs", abs),
    "floor": _unary("floor", math.floor),
    "ceil": _unary("ceil", math.ceil),
    "round": _unary("round", round_half_up),
    "log": _unary("log", math.log10),
    "ln": _unary("ln", math.log),
    "min": _fold("min", min),
    "max": _fold("max", max),
})

BINARY_OPERATIONS: Mapping[str, FloatBinaryOp] = MappingProxyType({
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
    "%": modulo,
    "^": power,
    "**": power,
})

UNARY_OPERATIONS: Mapping[str, FloatUnaryOp] = MappingProxyType({
    "u-": negate,
    "u+": identity,
})
