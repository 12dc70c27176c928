"""Shunting-yard conversion of a token sequence into RPN instructions."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from radixcalc.exceptions import ExpressionSyntaxError
from radixcalc.tables import OPERATORS, Associativity
from radixcalc.tokenizer import Token, TokenKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NumberLiteral:
    token: Token

    def __str__(self) -> str:
        return str(self.token)


@dataclass(frozen=True)
class ConstantRef:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Call:
    name: str
    argc: int

    def __str__(self) -> str:
        return f"{self.name}/{self.argc}"


@dataclass(frozen=True)
class Operator:
    symbol: str

    def __str__(self) -> str:
        return self.symbol


Instruction = Union[NumberLiteral, ConstantRef, Call, Operator]


def _pops_before(incoming: str, stacked: str) -> bool:
    """Whether the stacked operator must be output before pushing incoming."""
    o1, o2 = OPERATORS[incoming], OPERATORS[stacked]
    if o1.associativity is Associativity.LEFT:
        return o1.precedence <= o2.precedence
    return o1.precedence < o2.precedence


def to_rpn(tokens: Sequence[Token]) -> list[Instruction]:
    """
    Convert infix tokens to postfix order.

    Parentheses and commas are consumed; each call head becomes a
    :class:`Call` carrying the number of arguments it received.

    Raises:
        ExpressionSyntaxError: On mismatched parentheses, a comma outside a
            call's argument list, or an empty pair of parentheses
    """
    output: list[Instruction] = []
    stack: list[Token] = []
    arg_counts: list[int] = []
    previous: Token | None = None

    def unwind_to_paren() -> None:
        while stack and stack[-1].kind is not TokenKind.LPAREN:
            output.append(Operator(stack.pop().text))

    for token in tokens:
        kind = token.kind
        if kind is TokenKind.NUMBER:
            output.append(NumberLiteral(token))
        elif kind is TokenKind.IDENTIFIER:
            output.append(ConstantRef(token.text))
        elif kind is TokenKind.FUNCTION:
            stack.append(token)
            arg_counts.append(1)
        elif kind is TokenKind.COMMA:
            unwind_to_paren()
            if not stack:
                raise ExpressionSyntaxError("Misplaced comma or mismatched parentheses")
            if len(stack) < 2 or stack[-2].kind is not TokenKind.FUNCTION:
                raise ExpressionSyntaxError("Comma outside a function call")
            arg_counts[-1] += 1
        elif kind is TokenKind.OPERATOR:
            while (
                stack
                and stack[-1].kind is TokenKind.OPERATOR
                and _pops_before(token.text, stack[-1].text)
            ):
                output.append(Operator(stack.pop().text))
            stack.append(token)
        elif kind is TokenKind.LPAREN:
            stack.append(token)
        elif kind is TokenKind.RPAREN:
            unwind_to_paren()
            if not stack:
                raise ExpressionSyntaxError("Mismatched parentheses")
            stack.pop()
            is_call = bool(stack) and stack[-1].kind is TokenKind.FUNCTION
            empty = previous is not None and previous.kind is TokenKind.LPAREN
            if is_call:
                head = stack.pop()
                argc = arg_counts.pop()
                output.append(Call(head.text, 0 if empty else argc))
            elif empty:
                raise ExpressionSyntaxError("Empty parentheses")
        previous = token

    while stack:
        top = stack.pop()
        if top.kind is TokenKind.LPAREN:
            raise ExpressionSyntaxError("Mismatched parentheses")
        if top.kind is TokenKind.FUNCTION:
            raise ExpressionSyntaxError("Mismatched function call")
        output.append(Operator(top.text))

    logger.debug("rpn: %s", " ".join(map(str, output)))
    return output
