"""
Property-based tests for fixed-width integer arithmetic.

Each property is checked against Python's unbounded integers reduced
modulo 2**width.
"""

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from radixcalc import DivisionByZeroError, bitwise
from radixcalc.bitwise import canon, to_signed

widths = st.integers(min_value=1, max_value=130)
any_ints = st.integers(min_value=-(2**200), max_value=2**200)


@st.composite
def width_and_value(draw):
    """A width and a canonical value at that width."""
    width = draw(widths)
    return width, draw(st.integers(min_value=0, max_value=2**width - 1))


@st.composite
def width_and_pair(draw):
    width = draw(widths)
    values = st.integers(min_value=0, max_value=2**width - 1)
    return width, draw(values), draw(values)


@pytest.mark.property
class TestCanonicalProperties:
    @given(x=any_ints, width=widths)
    def test_canon_is_idempotent(self, x, width):
        assert canon(canon(x, width), width) == canon(x, width)

    @given(x=any_ints, width=widths)
    def test_canon_is_in_range(self, x, width):
        assert 0 <= canon(x, width) < 2**width

    @given(data=st.data(), width=widths)
    def test_to_signed_inverts_canon(self, data, width):
        x = data.draw(st.integers(min_value=-(2 ** (width - 1)), max_value=2 ** (width - 1) - 1))
        assert to_signed(canon(x, width), width) == x


@pytest.mark.property
class TestArithmeticProperties:
    @given(args=width_and_pair())
    def test_add_matches_modular_sum(self, args):
        width, a, b = args
        assert bitwise.add(a, b, width) == (a + b) % 2**width

    @given(args=width_and_pair())
    def test_subtract_inverts_add(self, args):
        width, a, b = args
        assert bitwise.subtract(bitwise.add(a, b, width), b, width) == a

    @given(args=width_and_pair())
    def test_multiply_commutative(self, args):
        width, a, b = args
        assert bitwise.multiply(a, b, width) == bitwise.multiply(b, a, width)

    @given(args=width_and_pair(), signed=st.booleans())
    def test_division_identity(self, args, signed):
        width, a, b = args
        assume(b != 0)
        q = bitwise.divide(a, b, width, signed)
        r = bitwise.modulo(a, b, width, signed)
        assert bitwise.add(bitwise.multiply(q, b, width), r, width) == a

    @given(args=width_and_value(), signed=st.booleans())
    def test_zero_divisor_always_fails(self, args, signed):
        width, a = args
        with pytest.raises(DivisionByZeroError):
            bitwise.divide(a, 0, width, signed)
        with pytest.raises(DivisionByZeroError):
            bitwise.modulo(a, 0, width, signed)

    @given(args=width_and_value(), exponent=st.integers(min_value=0, max_value=300))
    def test_power_matches_builtin(self, args, exponent):
        width, a = args
        assert bitwise.power(a, exponent, width) == pow(a, exponent, 2**width)


@pytest.mark.property
class TestUnaryProperties:
    @given(args=width_and_value())
    def test_double_negation(self, args):
        width, a = args
        assert bitwise.negate(bitwise.negate(a, width), width) == a

    @given(width=widths)
    def test_minimum_signed_negates_to_itself(self, width):
        minimum = 1 << (width - 1)
        assert bitwise.negate(minimum, width) == minimum

    @given(args=width_and_value())
    def test_negate_is_additive_inverse(self, args):
        width, a = args
        assert bitwise.add(a, bitwise.negate(a, width), width) == 0

    @given(args=width_and_value())
    def test_complement_is_involution(self, args):
        width, a = args
        assert bitwise.complement(bitwise.complement(a, width), width) == a

    @given(args=width_and_value())
    def test_complement_plus_one_is_negation(self, args):
        width, a = args
        assert bitwise.add(bitwise.complement(a, width), 1, width) == bitwise.negate(a, width)

    @given(args=width_and_value(), count=st.integers(min_value=0, max_value=500))
    def test_shift_count_is_masked(self, args, count):
        width, a = args
        assert bitwise.shift_left(a, count, width) == bitwise.shift_left(a, count & 63, width)
