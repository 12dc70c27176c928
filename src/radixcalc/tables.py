"""Read-only operator, function and constant tables."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from radixcalc import bitwise, operations


class Associativity(Enum):
    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class OperatorInfo:
    """Parsing and mode metadata for one operator symbol."""

    precedence: int
    associativity: Associativity
    arity: int
    integer_only: bool = False


@dataclass(frozen=True)
class FunctionInfo:
    """
    A callable name.

    ``arity`` is None for variadic functions. A function is available in a
    mode only if it carries an implementation for that mode.
    """

    arity: int | None
    float_impl: operations.FloatFunction | None = None
    int_impl: bitwise.IntFunction | None = None

    @property
    def integer_only(self) -> bool:
        return self.float_impl is None

    @property
    def variadic(self) -> bool:
        return self.arity is None


L = Associativity.LEFT
R = Associativity.RIGHT

# Unary plus and minus are keyed "u+" and "u-" so they never collide with
# their binary forms.
OPERATORS: Mapping[str, OperatorInfo] = MappingProxyType({
    "+": OperatorInfo(10, L, 2),
    "-": OperatorInfo(10, L, 2),
    "*": OperatorInfo(20, L, 2),
    "/": OperatorInfo(20, L, 2),
    "%": OperatorInfo(20, L, 2),
    "^": OperatorInfo(30, R, 2),
    "**": OperatorInfo(30, R, 2),
    "<<": OperatorInfo(9, L, 2, integer_only=True),
    ">>": OperatorInfo(9, L, 2, integer_only=True),
    "&": OperatorInfo(8, L, 2, integer_only=True),
    "xor": OperatorInfo(7, L, 2, integer_only=True),
    "|": OperatorInfo(6, L, 2, integer_only=True),
    "u-": OperatorInfo(40, R, 1),
    "u+": OperatorInfo(40, R, 1),
    "~": OperatorInfo(40, R, 1, integer_only=True),
})

_float = operations.FUNCTIONS

FUNCTIONS: Mapping[str, FunctionInfo] = MappingProxyType({
    "sin": FunctionInfo(1, _float["sin"]),
    "cos": FunctionInfo(1, _float["cos"]),
    "tan": FunctionInfo(1, _float["tan"]),
    "asin": FunctionInfo(1, _float["asin"]),
    "acos": FunctionInfo(1, _float["acos"]),
    "atan": FunctionInfo(1, _float["atan"]),
    "sqrt": FunctionInfo(1, _float["sqrt"]),
    "abs": FunctionInfo(1, _float["abs"], bitwise.abs_function),
    "floor": FunctionInfo(1, _float["floor"]),
    "ceil": FunctionInfo(1, _float["ceil"]),
    "round": FunctionInfo(1, _float["round"]),
    "log": FunctionInfo(1, _float["log"]),
    "ln": FunctionInfo(1, _float["ln"]),
    "min": FunctionInfo(None, _float["min"], bitwise.min_function),
    "max": FunctionInfo(None, _float["max"], bitwise.max_function),
    "xor": FunctionInfo(2, None, bitwise.xor_function),
})

CONSTANTS: Mapping[str, float] = MappingProxyType({
    "pi": math.pi,
    "tau": math.tau,
    "e": math.e,
})
