"""Custom exceptions for the expression evaluator."""

from __future__ import annotations

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class InvalidInputError(CalculatorError):
    """Raised when an option value is invalid (wrong type or unknown choice)."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


class OutOfRangeError(CalculatorError):
    """Raised when an option value is outside its acceptable range."""

    def __init__(
        self, value: int, min_val: int | None = None, max_val: int | None = None
    ) -> None:
        range_str = f"[{min_val}, {max_val}]"
        super().__init__(f"Value out of range {range_str}", value)
        self.min_val = min_val
        self.max_val = max_val


class EvaluationError(CalculatorError):
    """Base for every error that terminates a single evaluation."""


class LexError(EvaluationError):
    """Raised when the expression text cannot be split into tokens."""

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class ExpressionSyntaxError(EvaluationError):
    """Raised for mismatched parentheses and misplaced commas."""


class SemanticError(EvaluationError):
    """Raised when a well-formed expression cannot be evaluated."""


class StackError(EvaluationError):
    """Raised when the value stack does not reduce to exactly one value."""

    def __init__(self, message: str, depth: int | None = None) -> None:
        super().__init__(message, depth)
        self.depth = depth


class DivisionByZeroError(SemanticError):
    """Raised when an integer division or modulo has a zero divisor."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} by zero")
        self.operation = operation


class NonFiniteResultError(SemanticError):
    """Raised when a float computation yields an infinite or undefined value."""

    def __init__(self, operation: str) -> None:
        super().__init__("Computation produced a non-finite result", operation)
        self.operation = operation


class UnknownIdentifierError(SemanticError):
    """Raised when an identifier does not name a constant."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown identifier '{name}'")
        self.name = name


class UnknownFunctionError(SemanticError):
    """Raised when a call names no known function."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown function '{name}'")
        self.name = name


class ArityError(SemanticError):
    """Raised when a function receives the wrong number of arguments."""

    def __init__(self, name: str, expected: int | str, got: int) -> None:
        super().__init__(f"Function '{name}' expects {expected} args, got {got}")
        self.name = name
        self.expected = expected
        self.got = got


class ModeError(SemanticError):
    """Raised when a construct is used in a mode that does not support it."""

    def __init__(self, construct: str, message: str) -> None:
        super().__init__(message)
        self.construct = construct
