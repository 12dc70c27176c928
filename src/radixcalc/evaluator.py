"""Stack machines that reduce an RPN instruction list to a single value."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar, Union

from radixcalc import bitwise, operations
from radixcalc.exceptions import (
    ArityError,
    ModeError,
    SemanticError,
    StackError,
    UnknownFunctionError,
    UnknownIdentifierError,
)
from radixcalc.options import EvaluationOptions
from radixcalc.parser import Call, ConstantRef, Instruction, NumberLiteral, Operator
from radixcalc.tables import CONSTANTS, FUNCTIONS, OPERATORS, FunctionInfo
from radixcalc.tokenizer import DIGITS, Token
from radixcalc.validators import MAX_SAFE_INTEGER, validate_finite

PRECISION_NOTE = "Precision risk: integer exceeds 2^53-1."

N = TypeVar("N", int, float)


@dataclass(frozen=True)
class FloatResult:
    """A float-mode result and the advisory note raised while computing it, if any."""

    value: float
    note: str | None = None


@dataclass(frozen=True)
class IntegerResult:
    """An integer-mode result in canonical unsigned form."""

    value: int
    options: EvaluationOptions

    @property
    def signed_value(self) -> int:
        """Two's-complement reading of the value at the configured width."""
        return bitwise.to_signed(self.value, self.options.bit_width)

    @property
    def note(self) -> str | None:
        return None


EvaluationResult = Union[FloatResult, IntegerResult]


def _pop(stack: list[N], count: int, consumer: str) -> list[N]:
    """Remove and return the top ``count`` values, oldest first."""
    if count == 0:
        return []
    if len(stack) < count:
        raise StackError(f"Invalid expression: '{consumer}' is missing operands", len(stack))
    values = stack[-count:]
    del stack[-count:]
    return values


def _single(stack: list[N]) -> N:
    if len(stack) != 1:
        raise StackError("Invalid expression", len(stack))
    return stack[0]


def _lookup_function(call: Call) -> FunctionInfo:
    info = FUNCTIONS.get(call.name)
    if info is None:
        raise UnknownFunctionError(call.name)
    return info


def _check_arity(call: Call, info: FunctionInfo) -> None:
    if info.variadic:
        if call.argc < 1:
            raise ArityError(call.name, "at least 1", call.argc)
    elif call.argc != info.arity:
        raise ArityError(call.name, info.arity, call.argc)


def _parse_digits(token: Token) -> int:
    """Parse an integral literal in its radix, validating the digit set."""
    if not set(token.text) <= DIGITS[token.radix]:
        raise SemanticError(f"Invalid digits for base {token.radix}", token.text)
    return int(token.text, token.radix)


def parse_float_literal(token: Token) -> tuple[float, str | None]:
    """
    Read a number token as a double.

    Integral literals in a non-decimal radix are parsed exactly first; the
    second element is the precision note when that integer is not exactly
    representable.
    """
    if token.fractional or (token.radix == 10 and not token.prefixed):
        return validate_finite(float(token.text), "literal"), None
    exact = _parse_digits(token)
    note = PRECISION_NOTE if exact > MAX_SAFE_INTEGER else None
    try:
        return float(exact), note
    except OverflowError as e:
        raise SemanticError("Literal too large for float mode", str(token)) from e


def parse_integer_literal(token: Token, width: int) -> int:
    """Read a number token as a canonical integer at ``width`` bits."""
    if token.fractional:
        raise SemanticError("Only integers allowed without prefix in integer mode", token.text)
    return bitwise.canon(_parse_digits(token), width)


def evaluate_float(rpn: Sequence[Instruction]) -> FloatResult:
    """
    Evaluate an RPN sequence with double-precision arithmetic.

    Raises:
        SemanticError: On unknown names, integer-only constructs, arity
            mismatches or any non-finite intermediate result
        StackError: If the sequence does not reduce to one value
    """
    stack: list[float] = []
    note: str | None = None

    for instruction in rpn:
        if isinstance(instruction, NumberLiteral):
            value, literal_note = parse_float_literal(instruction.token)
            note = literal_note or note
            stack.append(value)
        elif isinstance(instruction, ConstantRef):
            if instruction.name not in CONSTANTS:
                raise UnknownIdentifierError(instruction.name)
            stack.append(CONSTANTS[instruction.name])
        elif isinstance(instruction, Call):
            info = _lookup_function(instruction)
            if info.float_impl is None:
                raise ModeError(instruction.name, f"Function '{instruction.name}' is integer-only")
            _check_arity(instruction, info)
            args = _pop(stack, instruction.argc, instruction.name)
            stack.append(info.float_impl(args))
        elif isinstance(instruction, Operator):
            symbol = instruction.symbol
            info = OPERATORS[symbol]
            if info.integer_only:
                raise ModeError(symbol, f"Operator '{symbol}' is integer-only")
            if info.arity == 1:
                (a,) = _pop(stack, 1, symbol)
                stack.append(operations.UNARY_OPERATIONS[symbol](a))
            else:
                a, b = _pop(stack, 2, symbol)
                stack.append(operations.BINARY_OPERATIONS[symbol](a, b))

    return FloatResult(_single(stack), note)


def evaluate_integer(rpn: Sequence[Instruction], options: EvaluationOptions) -> IntegerResult:
    """
    Evaluate an RPN sequence with wrapping fixed-width integer arithmetic.

    Every intermediate value is canonicalized to ``options.bit_width`` bits;
    ``options.signed`` selects two's-complement semantics for division,
    modulo, right shift, abs and the exponent sign check.

    Raises:
        SemanticError: On identifiers, float-only functions, arity
            mismatches, zero divisors or negative signed exponents
        StackError: If the sequence does not reduce to one value
    """
    width, signed = options.bit_width, options.signed
    stack: list[int] = []

    for instruction in rpn:
        if isinstance(instruction, NumberLiteral):
            stack.append(parse_integer_literal(instruction.token, width))
        elif isinstance(instruction, ConstantRef):
            if instruction.name in CONSTANTS:
                raise ModeError(instruction.name, f"Constant '{instruction.name}' is float-only")
            raise UnknownIdentifierError(instruction.name)
        elif isinstance(instruction, Call):
            info = _lookup_function(instruction)
            if info.int_impl is None:
                raise ModeError(
                    instruction.name,
                    f"Function '{instruction.name}' is not available in integer mode",
                )
            _check_arity(instruction, info)
            args = _pop(stack, instruction.argc, instruction.name)
            stack.append(info.int_impl(args, width, signed))
        elif isinstance(instruction, Operator):
            symbol = instruction.symbol
            if OPERATORS[symbol].arity == 1:
                (a,) = _pop(stack, 1, symbol)
                stack.append(bitwise.UNARY_OPERATIONS[symbol](a, width, signed))
            else:
                a, b = _pop(stack, 2, symbol)
                stack.append(bitwise.BINARY_OPERATIONS[symbol](a, b, width, signed))

    return IntegerResult(bitwise.canon(_single(stack), width), options)
