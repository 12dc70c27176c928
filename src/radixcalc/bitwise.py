"""
Fixed-width integer arithmetic over canonical unsigned values.

Every value passed in and returned is canonical: the non-negative residue
modulo ``2**width``. The signed reading of a value is reconstructed on demand
with :func:`to_signed` and is never stored.
"""

from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType

from radixcalc.exceptions import ArityError, SemanticError
from radixcalc.validators import validate_non_zero

# Shift counts are reduced to 0..63 whatever the width
SHIFT_MASK = 0x3F

IntBinaryOp = Callable[[int, int, int, bool], int]
IntUnaryOp = Callable[[int, int, bool], int]
IntFunction = Callable[[Sequence[int], int, bool], int]


def mask(width: int) -> int:
    """All-ones mask for ``width`` bits."""
    return (1 << width) - 1


def canon(value: int, width: int) -> int:
    """
    Reduce any integer to canonical unsigned form.

    Properties:
        - Idempotent: canon(canon(x, w), w) == canon(x, w)
        - Range: 0 <= canon(x, w) < 2**w
    """
    return value & mask(width)


def to_signed(value: int, width: int) -> int:
    """
    Two's-complement reading of a canonical value.

    Properties:
        - Inverse of canon on the signed range:
          to_signed(canon(x, w), w) == x for -2**(w-1) <= x < 2**(w-1)
    """
    value = canon(value, width)
    if value >= 1 << (width - 1):
        return value - (1 << width)
    return value


def _truncating_divmod(a: int, b: int) -> tuple[int, int]:
    """Quotient rounded toward zero and the matching remainder."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - b * quotient


def add(a: int, b: int, width: int, signed: bool = False) -> int:
    """Wrapping addition."""
    return canon(a + b, width)


def subtract(a: int, b: int, width: int, signed: bool = False) -> int:
    """Wrapping subtraction."""
    return canon(a - b, width)


def multiply(a: int, b: int, width: int, signed: bool = False) -> int:
    """Wrapping multiplication."""
    return canon(a * b, width)


def divide(a: int, b: int, width: int, signed: bool = False) -> int:
    """
    Integer division.

    Signed operands are reconstructed and divided with truncation toward
    zero; unsigned operands are divided directly.

    Raises:
        DivisionByZeroError: If b is zero, in either sign mode
    """
    validate_non_zero(b, "Division")
    if signed:
        quotient, _ = _truncating_divmod(to_signed(a, width), to_signed(b, width))
        return canon(quotient, width)
    return a // b


def modulo(a: int, b: int, width: int, signed: bool = False) -> int:
    """
    Integer remainder; a signed remainder takes the sign of the dividend.

    Raises:
        DivisionByZeroError: If b is zero, in either sign mode
    """
    validate_non_zero(b, "Modulo")
    if signed:
        _, remainder = _truncating_divmod(to_signed(a, width), to_signed(b, width))
        return canon(remainder, width)
    return a % b


def power(base: int, exponent: int, width: int, signed: bool = False) -> int:
    """
    Exponentiation by repeated squaring, masked to ``width`` bits.

    Raises:
        SemanticError: If signed and the exponent reads as negative
    """
    if signed and to_signed(exponent, width) < 0:
        raise SemanticError("Negative exponent not allowed in integer mode")
    modulus = 1 << width
    result = 1
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return canon(result, width)


def shift_left(a: int, b: int, width: int, signed: bool = False) -> int:
    """Left shift by ``b & 63``, masked to ``width`` bits."""
    return canon(a << (b & SHIFT_MASK), width)


def shift_right(a: int, b: int, width: int, signed: bool = False) -> int:
    """Arithmetic right shift when signed, logical otherwise; count is ``b & 63``."""
    count = b & SHIFT_MASK
    if signed:
        return canon(to_signed(a, width) >> count, width)
    return a >> count


def bit_and(a: int, b: int, width: int, signed: bool = False) -> int:
    return canon(a & b, width)


def bit_or(a: int, b: int, width: int, signed: bool = False) -> int:
    return canon(a | b, width)


def bit_xor(a: int, b: int, width: int, signed: bool = False) -> int:
    return canon(a ^ b, width)


def negate(a: int, width: int, signed: bool = False) -> int:
    """
    Two's-complement negation.

    The minimum signed value negates to itself.
    """
    return canon(-to_signed(a, width), width)


def identity(a: int, width: int, signed: bool = False) -> int:
    return canon(a, width)


def complement(a: int, width: int, signed: bool = False) -> int:
    """Bitwise NOT within ``width`` bits."""
    return canon(~a, width)


def xor_function(args: Sequence[int], width: int, signed: bool = False) -> int:
    """The two-argument ``xor(a, b)`` call form."""
    a, b = args
    return bit_xor(a, b, width)


def abs_function(args: Sequence[int], width: int, signed: bool = False) -> int:
    """Absolute value of the signed reading; the identity when unsigned."""
    (a,) = args
    if not signed:
        return canon(a, width)
    return canon(abs(to_signed(a, width)), width)


def min_function(args: Sequence[int], width: int, signed: bool = False) -> int:
    """
    Smallest argument, compared as canonical unsigned values.

    The comparison ignores ``signed``: ``min(-1, 1)`` in 8-bit signed mode
    yields 1, because -1 is stored as 255.
    """
    if not args:
        raise ArityError("min", "at least 1", 0)
    return canon(min(args), width)


def max_function(args: Sequence[int], width: int, signed: bool = False) -> int:
    """Largest argument, compared as canonical unsigned values (see min_function)."""
    if not args:
        raise ArityError("max", "at least 1", 0)
    return canon(max(args), width)


BINARY_OPERATIONS: Mapping[str, IntBinaryOp] = MappingProxyType({
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
    "%": modulo,
    "^": power,
    "**": power,
    "<<": shift_left,
    ">>": shift_right,
    "&": bit_and,
    "|": bit_or,
    "xor": bit_xor,
})

UNARY_OPERATIONS: Mapping[str, IntUnaryOp] = MappingProxyType({
    "u-": negate,
    "u+": identity,
    "~": complement,
})
