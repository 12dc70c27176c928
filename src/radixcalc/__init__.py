"""
Arithmetic expression evaluator with float and fixed-width integer modes.

The pipeline runs tokenizer -> shunting-yard parser -> stack evaluator ->
multi-base formatter:

    >>> from radixcalc import EvaluationOptions, evaluate, format_result
    >>> result = evaluate("0xF0 | 0b1010", EvaluationOptions(mode="int", bit_width=8))
    >>> format_result(result).primary
    '-6'
"""

import logging

from radixcalc.bitwise import canon, to_signed
from radixcalc.core import Calculator, evaluate
from radixcalc.evaluator import EvaluationResult, FloatResult, IntegerResult
from radixcalc.exceptions import (
    ArityError,
    CalculatorError,
    DivisionByZeroError,
    EvaluationError,
    ExpressionSyntaxError,
    InvalidInputError,
    LexError,
    ModeError,
    NonFiniteResultError,
    OutOfRangeError,
    SemanticError,
    StackError,
    UnknownFunctionError,
    UnknownIdentifierError,
)
from radixcalc.formatter import FormattedResult, format_result
from radixcalc.options import DisplayBase, DisplayOptions, EvaluationOptions, InputBase, Mode
from radixcalc.parser import to_rpn
from radixcalc.tokenizer import Token, TokenKind, tokenize

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArityError",
    "Calculator",
    "CalculatorError",
    "DisplayBase",
    "DisplayOptions",
    "DivisionByZeroError",
    "EvaluationError",
    "EvaluationOptions",
    "EvaluationResult",
    "ExpressionSyntaxError",
    "FloatResult",
    "FormattedResult",
    "InputBase",
    "IntegerResult",
    "InvalidInputError",
    "LexError",
    "ModeError",
    "Mode",
    "NonFiniteResultError",
    "OutOfRangeError",
    "SemanticError",
    "StackError",
    "Token",
    "TokenKind",
    "UnknownFunctionError",
    "UnknownIdentifierError",
    "canon",
    "evaluate",
    "format_result",
    "to_rpn",
    "to_signed",
    "tokenize",
]

__version__ = "0.1.0"
