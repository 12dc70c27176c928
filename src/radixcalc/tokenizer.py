"""Split expression text into tokens."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from radixcalc.exceptions import LexError
from radixcalc.options import InputBase

logger = logging.getLogger(__name__)

TWO_CHAR_OPERATORS = ("**", "<<", ">>")
ONE_CHAR_OPERATORS = "+-*/%^&|~"

PREFIXES = {"0x": 16, "0b": 2, "0o": 8}
PREFIX_NAMES = {16: "hex", 2: "binary", 8: "octal"}
DIGITS = {
    2: frozenset("01"),
    8: frozenset("01234567"),
    10: frozenset("0123456789"),
    16: frozenset("0123456789abcdefABCDEF"),
}

_DECIMAL_LITERAL = re.compile(r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class TokenKind(Enum):
    NUMBER = "number"
    IDENTIFIER = "identifier"
    OPERATOR = "operator"
    FUNCTION = "function"
    LPAREN = "lparen"
    RPAREN = "rparen"
    COMMA = "comma"


DELIMITERS = {"(": TokenKind.LPAREN, ")": TokenKind.RPAREN, ",": TokenKind.COMMA}

# After any of these a following + or - is unary
_OPERAND_EXPECTED = (None, TokenKind.OPERATOR, TokenKind.LPAREN, TokenKind.COMMA)


@dataclass(frozen=True)
class Token:
    """
    One lexical unit.

    For NUMBER tokens ``text`` holds the digits with prefix and ``_``
    separators removed, ``radix`` the base they are written in, ``prefixed``
    whether the base came from a ``0x``/``0b``/``0o`` prefix, and
    ``fractional`` whether the literal has a decimal point or exponent.
    OPERATOR tokens spell unary signs as ``u+`` and ``u-``.
    """

    kind: TokenKind
    text: str = ""
    position: int = 0
    radix: int = 10
    prefixed: bool = False
    fractional: bool = False

    def __str__(self) -> str:
        if self.kind is TokenKind.NUMBER and self.prefixed:
            prefix = next(p for p, r in PREFIXES.items() if r == self.radix)
            return prefix + self.text
        return self.text


def _is_identifier_char(c: str) -> bool:
    return c.isascii() and (c.isalnum() or c == "_")


class Tokenizer:
    """Single-use scanner over one expression."""

    def __init__(self, text: str, input_base: InputBase = InputBase.AUTO) -> None:
        # (original index, char) pairs with whitespace dropped
        self._chars = [(i, c) for i, c in enumerate(text) if not c.isspace()]
        self._input_base = input_base
        self._pos = 0
        self._tokens: list[Token] = []

    def _peek(self, offset: int = 0) -> str:
        index = self._pos + offset
        return self._chars[index][1] if index < len(self._chars) else ""

    def _lookahead(self, count: int) -> str:
        return "".join(c for _, c in self._chars[self._pos : self._pos + count])

    def _position(self) -> int:
        """1-based position of the current char in the original text."""
        return self._chars[self._pos][0] + 1

    def _after_whitespace(self) -> bool:
        """Whether whitespace was dropped just before the current char."""
        pos = self._pos
        return 0 < pos < len(self._chars) and self._chars[pos][0] != self._chars[pos - 1][0] + 1

    def _take(self) -> str:
        c = self._chars[self._pos][1]
        self._pos += 1
        return c

    def _previous_kind(self) -> TokenKind | None:
        return self._tokens[-1].kind if self._tokens else None

    def _emit(self, kind: TokenKind, text: str, position: int, **fields: object) -> None:
        self._tokens.append(Token(kind, text, position, **fields))

    def tokenize(self) -> list[Token]:
        while self._pos < len(self._chars):
            c = self._peek()
            position = self._position()

            if c in DELIMITERS:
                self._take()
                self._emit(DELIMITERS[c], c, position)
            elif self._lookahead(2) in TWO_CHAR_OPERATORS:
                self._emit(TokenKind.OPERATOR, self._take() + self._take(), position)
            elif c in ONE_CHAR_OPERATORS:
                self._take()
                if c in "+-" and self._previous_kind() in _OPERAND_EXPECTED:
                    c = "u" + c
                self._emit(TokenKind.OPERATOR, c, position)
            elif _is_identifier_char(c) and c not in DIGITS[10]:
                self._identifier(position)
            elif c in DIGITS[10] or (c == "." and self._peek(1) in DIGITS[10]):
                self._number(position)
            else:
                raise LexError(f"Unexpected character '{c}' near position {position}", position)

        return self._mark_calls()

    def _identifier(self, position: int) -> None:
        name = self._take()
        # Whitespace still ends a name, so "3 xor 5" keeps xor apart from 5
        while _is_identifier_char(self._peek()) and not self._after_whitespace():
            name += self._take()
        name = name.lower()
        # Infix xor after an operand; xor(a, b) call form otherwise
        if name == "xor" and not (self._peek() == "(" and self._previous_kind() in _OPERAND_EXPECTED):
            self._emit(TokenKind.OPERATOR, name, position)
        else:
            self._emit(TokenKind.IDENTIFIER, name, position)

    def _number(self, position: int) -> None:
        radix = PREFIXES.get(self._lookahead(2).lower())
        if radix is not None:
            self._take()
            self._take()
            allowed = DIGITS[radix] | {"_"}
            body = ""
            while self._peek() in allowed:
                body += self._take()
            body = body.replace("_", "")
            if not body:
                raise LexError(f"Malformed {PREFIX_NAMES[radix]} literal", position)
            self._emit(TokenKind.NUMBER, body, position, radix=radix, prefixed=True)
            return

        body = ""
        has_dot = has_exp = False
        while self._peek():
            c = self._peek()
            if c == "_":
                self._take()
            elif c in DIGITS[10]:
                body += self._take()
            elif c == "." and not has_dot and not has_exp:
                has_dot = True
                body += self._take()
            elif c in "eE" and not has_exp:
                has_exp = True
                body += self._take()
                if self._peek() in ("+", "-"):
                    body += self._take()
            else:
                break

        if not _DECIMAL_LITERAL.fullmatch(body):
            raise LexError(f"Malformed number literal '{body}'", position)
        fractional = has_dot or has_exp
        radix = 10 if fractional else self._input_base.radix
        self._emit(TokenKind.NUMBER, body, position, radix=radix, fractional=fractional)

    def _mark_calls(self) -> list[Token]:
        """Turn every identifier directly followed by '(' into a call head."""
        tokens = self._tokens
        for i, token in enumerate(tokens[:-1]):
            if token.kind is TokenKind.IDENTIFIER and tokens[i + 1].kind is TokenKind.LPAREN:
                tokens[i] = Token(TokenKind.FUNCTION, token.text, token.position)
        return tokens


def tokenize(text: str, input_base: InputBase = InputBase.AUTO) -> list[Token]:
    """
    Tokenize an expression.

    Args:
        text: The expression; whitespace anywhere is ignored
        input_base: Radix for bare integer literals

    Returns:
        The token sequence, possibly empty

    Raises:
        LexError: On an unexpected character or a malformed literal
    """
    tokens = Tokenizer(text, input_base).tokenize()
    logger.debug("tokenized %r into %d tokens", text, len(tokens))
    return tokens
