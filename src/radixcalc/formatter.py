"""Render evaluation results as text in one or several bases."""

from __future__ import annotations

from dataclasses import dataclass

from radixcalc import bitwise
from radixcalc.evaluator import EvaluationResult, FloatResult, IntegerResult
from radixcalc.options import DisplayBase, DisplayOptions
from radixcalc.validators import is_safe_integer

BASE_LABELS = {2: "Bin", 8: "Oct", 10: "Dec", 16: "Hex"}
BASE_PREFIXES = {2: "0b", 8: "0o", 16: "0x"}
GROUP_SIZES = {2: 4, 8: 3, 16: 4}

# Order in which alternate bases are listed
ALTERNATE_BASES = (16, 8, 2)

NON_INTEGER_SUFFIX = "(non-integer: base views need an integral value)"
NON_INTEGER_NOTE = "Non-integer: base views show integer casts."


@dataclass(frozen=True)
class FormattedResult:
    """
    Text ready for display.

    ``alternates`` is an ordered tuple of (label, text) pairs;
    ``bit_pattern`` is only set for integer results.
    """

    primary: str
    alternates: tuple[tuple[str, str], ...] = ()
    bit_pattern: str | None = None
    note: str | None = None


def group_digits(digits: str, size: int, separator: str = "_") -> str:
    """
    Insert ``separator`` every ``size`` digits, counting from the right.

    >>> group_digits("1111111", 4)
    '111_1111'
    """
    head = len(digits) % size or size
    groups = [digits[:head]]
    groups.extend(digits[i : i + size] for i in range(head, len(digits), size))
    return separator.join(groups)


def format_int_as_base(value: int, base: int) -> str:
    """
    Render an integer with its base prefix and digit grouping.

    Hex digits are uppercase; a negative value gets ``-`` before the prefix.

    >>> format_int_as_base(255, 16)
    '0xFF'
    >>> format_int_as_base(-5, 2)
    '-0b101'
    """
    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    if base == 10:
        return f"{sign}{magnitude}"
    digits = format(magnitude, {2: "b", 8: "o", 16: "X"}[base])
    return f"{sign}{BASE_PREFIXES[base]}{group_digits(digits, GROUP_SIZES[base])}"


def format_bit_pattern(value: int, width: int) -> str:
    """Binary digits of the value at ``width`` bits, in 4-bit clusters from the left."""
    bits = format(bitwise.canon(value, width), "b").zfill(width)
    return " ".join(bits[i : i + 4] for i in range(0, width, 4))


def format_float(value: float) -> str:
    """
    Shortest text that reads back as the same double.

    Integral values print without a fractional part and exponents without
    zero padding: ``4.0`` is ``4`` and ``1e-07`` is ``1e-7``.
    """
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    mantissa, sep, exponent = text.partition("e")
    if not sep:
        return text
    sign = "-" if exponent.startswith("-") else "+"
    return f"{mantissa}e{sign}{exponent.lstrip('+-').lstrip('0') or '0'}"


def _selected_base(display: DisplayOptions) -> int | None:
    return None if display.display_base is DisplayBase.ALL else display.display_base.value


def _format_integer(result: IntegerResult, display: DisplayOptions) -> FormattedResult:
    value = bitwise.canon(result.value, display.bit_width)
    signed_value = bitwise.to_signed(value, display.bit_width)
    shown = signed_value if display.signed else value
    base = _selected_base(display)

    if base is None:
        primary = f"{shown} (dec)"
        alternates = [
            ("Dec (signed)", str(signed_value)),
            ("Dec (unsigned)", str(value)),
        ]
        alternates.extend((BASE_LABELS[b], format_int_as_base(value, b)) for b in ALTERNATE_BASES)
    else:
        primary = str(shown) if base == 10 else format_int_as_base(value, base)
        alternates = [("Dec", str(shown))]
        alternates.extend(
            (BASE_LABELS[b], format_int_as_base(value, b)) for b in ALTERNATE_BASES if b != base
        )

    return FormattedResult(
        primary=primary,
        alternates=tuple(alternates),
        bit_pattern=format_bit_pattern(value, display.bit_width),
    )


def _format_float(result: FloatResult, display: DisplayOptions) -> FormattedResult:
    value = result.value
    text = format_float(value)
    integral = is_safe_integer(value)
    base = _selected_base(display)

    alternates: list[tuple[str, str]] = []
    if base is None:
        primary = text
        if integral:
            alternates.append(("Dec", text))
            alternates.extend(
                (BASE_LABELS[b], format_int_as_base(int(value), b)) for b in ALTERNATE_BASES
            )
        else:
            alternates = [("Value", text), ("Note", NON_INTEGER_NOTE)]
    elif base == 10:
        primary = text
        if integral:
            alternates.extend(
                (BASE_LABELS[b], format_int_as_base(int(value), b)) for b in ALTERNATE_BASES
            )
    elif integral:
        primary = f"{text} (int: {format_int_as_base(int(value), base)})"
        alternates.append(("Dec", text))
        alternates.extend(
            (BASE_LABELS[b], format_int_as_base(int(value), b)) for b in ALTERNATE_BASES if b != base
        )
    else:
        primary = f"{text} {NON_INTEGER_SUFFIX}"

    return FormattedResult(primary=primary, alternates=tuple(alternates), note=result.note)


def format_result(result: EvaluationResult, display: DisplayOptions | None = None) -> FormattedResult:
    """
    Format an evaluation result.

    Args:
        result: A float or integer result; it is not modified
        display: Base, sign and width to render with. Defaults to the
            options an integer result was computed with, or plain decimal
            for a float result.

    Returns:
        The primary text, labelled alternate bases, the bit pattern
        (integer results only) and any advisory note
    """
    if display is None:
        display = result.options.display if isinstance(result, IntegerResult) else DisplayOptions()
    if isinstance(result, IntegerResult):
        return _format_integer(result, display)
    return _format_float(result, display)
