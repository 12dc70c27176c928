"""Validation helpers shared by the options layer and the evaluators."""

import math
from typing import TypeVar

from radixcalc.exceptions import (
    DivisionByZeroError,
    InvalidInputError,
    NonFiniteResultError,
    OutOfRangeError,
)

T = TypeVar("T", int, float)

# Largest integer a double represents exactly
MAX_SAFE_INTEGER = 2**53 - 1


def validate_finite(value: float, operation: str) -> float:
    """
    Validate that a float result is finite.

    Args:
        value: The computed value
        operation: Name of the operation that produced it, for the error

    Returns:
        The validated value

    Raises:
        NonFiniteResultError: If value is NaN or infinite
    """
    if math.isnan(value) or math.isinf(value):
        raise NonFiniteResultError(operation)
    return value


def validate_non_zero(value: int, operation: str) -> int:
    """
    Validate that an integer divisor is not zero.

    Args:
        value: The divisor
        operation: "Division" or "Modulo", used in the error message

    Returns:
        The validated value

    Raises:
        DivisionByZeroError: If value is zero
    """
    if value == 0:
        raise DivisionByZeroError(operation)
    return value


def validate_integer(value: object) -> int:
    """
    Validate that a value is a plain integer.

    ``bool`` is rejected even though it subclasses ``int``.

    Raises:
        InvalidInputError: If value is not an int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(value, f"Expected integer, got {type(value).__name__}")
    return value


def validate_range(
    value: T,
    min_val: int | None = None,
    max_val: int | None = None,
) -> T:
    """
    Validate that a value lies within an inclusive range.

    Args:
        value: The value to validate
        min_val: Minimum allowed value (None for no limit)
        max_val: Maximum allowed value (None for no limit)

    Returns:
        The validated value

    Raises:
        OutOfRangeError: If value is outside the range
    """
    if min_val is not None and value < min_val:
        raise OutOfRangeError(value, min_val, max_val)
    if max_val is not None and value > max_val:
        raise OutOfRangeError(value, min_val, max_val)
    return value


def validate_bit_width(value: object) -> int:
    """Validate that a bit width is a positive integer."""
    return validate_range(validate_integer(value), min_val=1)


def is_safe_integer(value: float) -> bool:
    """Whether a float is integral and within the exact-integer range."""
    return math.isfinite(value) and value.is_integer() and abs(value) <= MAX_SAFE_INTEGER
