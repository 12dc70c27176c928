"""Entry points: evaluate an expression string and format its result."""

from __future__ import annotations

import logging

from radixcalc.evaluator import EvaluationResult, evaluate_float, evaluate_integer
from radixcalc.exceptions import ExpressionSyntaxError
from radixcalc.formatter import FormattedResult, format_result
from radixcalc.options import EvaluationOptions, Mode
from radixcalc.parser import to_rpn
from radixcalc.tokenizer import tokenize

logger = logging.getLogger(__name__)


def evaluate(expression: str, options: EvaluationOptions | None = None) -> EvaluationResult:
    """
    Evaluate an expression.

    Deterministic and side-effect free: the same text and options always
    give the same result or the same error.

    Args:
        expression: Infix expression text
        options: Input base, mode, bit width and sign handling
            (default: float mode, decimal input)

    Returns:
        A FloatResult or an IntegerResult

    Raises:
        LexError: If the text cannot be tokenized
        ExpressionSyntaxError: If the tokens do not form a valid grouping
        SemanticError: If the expression cannot be computed
        StackError: If operands and operators do not balance
    """
    options = options or EvaluationOptions()
    if not expression.strip():
        raise ExpressionSyntaxError("Empty expression")

    rpn = to_rpn(tokenize(expression, options.input_base))
    logger.debug(
        "evaluating in %s mode (width=%d, signed=%s)",
        options.mode.value,
        options.bit_width,
        options.signed,
    )
    if options.mode is Mode.INTEGER:
        return evaluate_integer(rpn, options)
    return evaluate_float(rpn)


class Calculator:
    """
    An expression calculator bound to a set of options.

    The calculator holds no state besides its options, so one instance may
    be shared freely.

    Example:
        >>> calc = Calculator(EvaluationOptions(mode="int", bit_width=8))
        >>> calc.run("200 + 100").primary
        '44'
        >>> calc.with_options(signed=True).run("-1").primary
        '-1'
    """

    def __init__(self, options: EvaluationOptions | None = None) -> None:
        self._options = options or EvaluationOptions()

    @property
    def options(self) -> EvaluationOptions:
        """Options applied to every evaluation."""
        return self._options

    def with_options(self, **changes: object) -> Calculator:
        """Return a calculator whose options differ by ``changes``."""
        return Calculator(self._options.replace(**changes))

    def evaluate(self, expression: str) -> EvaluationResult:
        return evaluate(expression, self._options)

    def format(self, result: EvaluationResult) -> FormattedResult:
        return format_result(result, self._options.display)

    def run(self, expression: str) -> FormattedResult:
        """Evaluate then format in one step."""
        return self.format(self.evaluate(expression))

    def __repr__(self) -> str:
        return f"Calculator(options={self._options!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calculator):
            return NotImplemented
        return self._options == other._options

    def __hash__(self) -> int:
        return hash(self._options)
