"""Per-call evaluation and display options."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any

from radixcalc.exceptions import InvalidInputError
from radixcalc.validators import validate_bit_width


class Mode(Enum):
    """Arithmetic mode used by the evaluator."""

    FLOAT = "float"
    INTEGER = "int"


class InputBase(Enum):
    """Radix applied to bare integer literals.

    Bare literals only scan the digits 0-9, so with ``HEX`` the value
    ``10`` reads as sixteen but ``ff`` is an identifier; write ``0xff`` for
    hex letters.
    """

    AUTO = "auto"
    BIN = 2
    OCT = 8
    DEC = 10
    HEX = 16

    @property
    def radix(self) -> int:
        """Numeric radix; ``AUTO`` reads bare literals as decimal."""
        return 10 if self is InputBase.AUTO else self.value


class DisplayBase(Enum):
    """Radix used for the primary result text."""

    BIN = 2
    OCT = 8
    DEC = 10
    HEX = 16
    ALL = "all"


def _coerce(enum_cls: type[Enum], value: Any) -> Any:
    """Convert a raw value ("int", 16, "16", "all") into a member of enum_cls."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        value = int(text) if text.isdigit() else text
    try:
        return enum_cls(value)
    except ValueError as e:
        choices = ", ".join(str(member.value) for member in enum_cls)
        raise InvalidInputError(value, f"Expected one of {choices}") from e


@dataclass(frozen=True)
class DisplayOptions:
    """Options consumed by the formatter."""

    display_base: DisplayBase = DisplayBase.DEC
    signed: bool = True
    bit_width: int = 64

    def __post_init__(self) -> None:
        object.__setattr__(self, "display_base", _coerce(DisplayBase, self.display_base))
        object.__setattr__(self, "bit_width", validate_bit_width(self.bit_width))
        object.__setattr__(self, "signed", bool(self.signed))


@dataclass(frozen=True)
class EvaluationOptions:
    """
    Options supplied fresh to every evaluation.

    Raw values are accepted and coerced, so ``EvaluationOptions(mode="int",
    input_base=16)`` is equivalent to passing the enum members.

    Raises:
        InvalidInputError: If a choice is unknown or bit_width is not an int
        OutOfRangeError: If bit_width is less than 1
    """

    input_base: InputBase = InputBase.AUTO
    display_base: DisplayBase = DisplayBase.DEC
    mode: Mode = Mode.FLOAT
    bit_width: int = 64
    signed: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "input_base", _coerce(InputBase, self.input_base))
        object.__setattr__(self, "display_base", _coerce(DisplayBase, self.display_base))
        object.__setattr__(self, "mode", _coerce(Mode, self.mode))
        object.__setattr__(self, "bit_width", validate_bit_width(self.bit_width))
        object.__setattr__(self, "signed", bool(self.signed))

    @property
    def display(self) -> DisplayOptions:
        """The subset of these options the formatter needs."""
        return DisplayOptions(self.display_base, self.signed, self.bit_width)

    def replace(self, **changes: Any) -> EvaluationOptions:
        """Return a validated copy with the given fields changed."""
        return dataclasses.replace(self, **changes)
