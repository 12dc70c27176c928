"""Unit tests for result formatting."""

import pytest

from radixcalc import (
    DisplayOptions,
    EvaluationOptions,
    FloatResult,
    IntegerResult,
    evaluate,
    format_result,
)
from radixcalc.formatter import (
    NON_INTEGER_NOTE,
    format_bit_pattern,
    format_float,
    format_int_as_base,
    group_digits,
)


def int_result(value, width=8, signed=True, display_base=10):
    options = EvaluationOptions(
        mode="int", bit_width=width, signed=signed, display_base=display_base
    )
    return IntegerResult(value, options)


class TestHelpers:
    @pytest.mark.parametrize(
        ("digits", "size", "expected"),
        [
            ("1", 4, "1"),
            ("1111", 4, "1111"),
            ("11111", 4, "1_1111"),
            ("12345678", 3, "12_345_678"),
        ],
    )
    def test_group_digits(self, digits, size, expected):
        assert group_digits(digits, size) == expected

    def test_hex_uppercase_grouped(self):
        assert format_int_as_base(0xDEADBEEF, 16) == "0xDEAD_BEEF"

    def test_octal_grouped_by_three(self):
        assert format_int_as_base(0o1234, 8) == "0o1_234"

    def test_binary_grouped_by_four(self):
        assert format_int_as_base(0b100101, 2) == "0b10_0101"

    def test_negative_prefix(self):
        assert format_int_as_base(-255, 16) == "-0xFF"

    def test_decimal_has_no_prefix(self):
        assert format_int_as_base(-12, 10) == "-12"

    def test_zero(self):
        assert format_int_as_base(0, 2) == "0b0"

    def test_bit_pattern(self):
        assert format_bit_pattern(5, 8) == "0000 0101"
        assert format_bit_pattern(-1, 6) == "1111 11"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (4.0, "4"),
            (-0.0, "0"),
            (3.5, "3.5"),
            (0.1 + 0.2, "0.30000000000000004"),
            (1e21, "1e+21"),
            (1e-7, "1e-7"),
            (1.5e300, "1.5e+300"),
        ],
    )
    def test_format_float(self, value, expected):
        assert format_float(value) == expected


class TestIntegerFormatting:
    def test_signed_decimal(self):
        formatted = format_result(int_result(255, signed=True))
        assert formatted.primary == "-1"
        assert formatted.alternates == (
            ("Dec", "-1"),
            ("Hex", "0xFF"),
            ("Oct", "0o377"),
            ("Bin", "0b1111_1111"),
        )
        assert formatted.bit_pattern == "1111 1111"
        assert formatted.note is None

    def test_unsigned_decimal(self):
        formatted = format_result(int_result(255, signed=False))
        assert formatted.primary == "255"

    def test_hex_display(self):
        formatted = format_result(int_result(255, display_base=16))
        assert formatted.primary == "0xFF"
        assert [label for label, _ in formatted.alternates] == ["Dec", "Oct", "Bin"]

    def test_binary_display(self):
        formatted = format_result(int_result(10, display_base=2))
        assert formatted.primary == "0b1010"
        assert [label for label, _ in formatted.alternates] == ["Dec", "Hex", "Oct"]

    def test_all_bases(self):
        formatted = format_result(int_result(200, display_base="all"))
        assert formatted.primary == "-56 (dec)"
        assert formatted.alternates == (
            ("Dec (signed)", "-56"),
            ("Dec (unsigned)", "200"),
            ("Hex", "0xC8"),
            ("Oct", "0o310"),
            ("Bin", "0b1100_1000"),
        )

    def test_bit_pattern_padded_to_width(self):
        formatted = format_result(int_result(1, width=16))
        assert formatted.bit_pattern == "0000 0000 0000 0001"

    def test_explicit_display_overrides_result_options(self):
        result = int_result(255, signed=True)
        formatted = format_result(result, DisplayOptions(display_base=10, signed=False, bit_width=8))
        assert formatted.primary == "255"

    def test_end_to_end(self):
        options = EvaluationOptions(mode="int", bit_width=8, signed=True)
        assert format_result(evaluate("-1", options)).primary == "-1"


class TestFloatFormatting:
    def test_decimal(self):
        formatted = format_result(FloatResult(4.0))
        assert formatted.primary == "4"
        assert formatted.bit_pattern is None
        assert ("Hex", "0x4") in formatted.alternates

    def test_decimal_fraction_has_no_alternates(self):
        assert format_result(FloatResult(2.5)).alternates == ()

    def test_hex_integral(self):
        formatted = format_result(FloatResult(255.0), DisplayOptions(display_base=16))
        assert formatted.primary == "255 (int: 0xFF)"
        assert [label for label, _ in formatted.alternates] == ["Dec", "Oct", "Bin"]

    def test_hex_fraction_gets_advisory(self):
        formatted = format_result(FloatResult(2.5), DisplayOptions(display_base=16))
        assert formatted.primary.startswith("2.5 ")
        assert "non-integer" in formatted.primary
        assert formatted.alternates == ()

    def test_negative_integral_in_binary(self):
        formatted = format_result(FloatResult(-5.0), DisplayOptions(display_base=2))
        assert formatted.primary == "-5 (int: -0b101)"

    def test_all_bases_integral(self):
        formatted = format_result(FloatResult(16.0), DisplayOptions(display_base="all"))
        assert formatted.alternates == (
            ("Dec", "16"),
            ("Hex", "0x10"),
            ("Oct", "0o20"),
            ("Bin", "0b1_0000"),
        )

    def test_all_bases_fraction(self):
        formatted = format_result(FloatResult(0.5), DisplayOptions(display_base="all"))
        assert formatted.alternates == (("Value", "0.5"), ("Note", NON_INTEGER_NOTE))

    def test_unsafe_integer_is_not_converted(self):
        formatted = format_result(FloatResult(2.0**60), DisplayOptions(display_base=16))
        assert "non-integer" in formatted.primary

    def test_note_is_surfaced(self):
        result = evaluate("0x20000000000001")
        formatted = format_result(result)
        assert formatted.note == result.note
        assert formatted.primary == "9007199254740992"

    def test_input_is_not_mutated(self):
        result = FloatResult(1.0, "n")
        format_result(result, DisplayOptions(display_base="all"))
        assert result == FloatResult(1.0, "n")
