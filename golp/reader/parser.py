"""
  Lisp Reader, Tokenizer and Atom Classifier

- Tokens are whitespace- and parenthesis-delimited; there is no quoting,
  escaping, comment or string syntax.
- Emits Python primitives:

    - true/false -> bool
    - integers -> int (signed 64-bit range)
    - floats -> float
    - everything else -> Symbol
    - lists -> Python list
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from golp import SExpression
from golp.types.errors import GolpSyntaxError, GolpUnexpectedCloseParen, GolpUnexpectedEOF
from golp.types.symbol import Symbol


INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

LPAREN = "("
RPAREN = ")"

BOOLEANS = {"true": True, "false": False}

INT_RE = re.compile(
    r"(?P<sign>[+-]?)(?:"
    r"0[xX](?P<hex>[0-9a-fA-F]+)"
    r"|0[bB](?P<bin>[01]+)"
    r"|0[oO]?(?P<oct>[0-7]+)"
    r"|(?P<dec>[1-9][0-9]*|0)"
    r")",
)

FLOAT_RE = re.compile(
    r"[+-]?(?:"
    r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|(?i:inf|infinity|nan)"
    r")",
)

_RADIX = (("hex", 16), ("bin", 2), ("oct", 8), ("dec", 10))

# Longest digit run that can still fit in int64, per base
_MAX_DIGITS = {2: 64, 8: 22, 10: 19, 16: 16}


def tokenize(source: str) -> list[str]:
    """Split `source` into '(' and ')' tokens and whitespace-free atoms."""
    return source.replace(LPAREN, f" {LPAREN} ").replace(RPAREN, f" {RPAREN} ").split()


def parse_int(token: str) -> Optional[int]:
    """Parse an integer literal with prefix-detected base, or return None."""
    m = INT_RE.fullmatch(token)
    if m is None:
        return None
    for group, base in _RADIX:
        digits = m.group(group)
        if digits is not None:
            # Longer runs are out of range; also keeps int() under its digit limit
            if len(digits.lstrip("0")) > _MAX_DIGITS[base]:
                return None
            value = int(digits, base)
            break
    if m.group("sign") == "-":
        value = -value
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def parse_float(token: str) -> Optional[float]:
    """Parse a floating-point literal, or return None."""
    if FLOAT_RE.fullmatch(token) is None:
        return None
    return float(token)


def atom(token: str) -> SExpression:
    """Bools, ints, and floats are converted; every other token is a symbol."""
    if token in BOOLEANS:
        return BOOLEANS[token]
    if (i := parse_int(token)) is not None:
        return i
    if (f := parse_float(token)) is not None:
        return f
    return Symbol(token)


class TokenStream:
    """Recursive-descent reader consuming tokens from the front."""

    def __init__(self, tokens: Iterable[str]):
        self.tokens: list[str] = list(tokens)
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> str:
        token = self.peek()
        if token is None:
            raise GolpUnexpectedEOF("unexpected EOF while reading")
        self.pos += 1
        return token

    def remaining(self) -> list[str]:
        return self.tokens[self.pos:]

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def parse_expr(self) -> SExpression:
        token = self.advance()

        if token == LPAREN:
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise GolpUnexpectedEOF("unexpected EOF while reading list")
                if nxt == RPAREN:
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if token == RPAREN:
            raise GolpUnexpectedCloseParen("unexpected )")

        return atom(token)


def read(tokens: Iterable[str]) -> tuple[SExpression, list[str]]:
    """Read one expression from `tokens`; return it with the unconsumed tokens."""
    stream = TokenStream(tokens)
    expr = stream.parse_expr()
    return expr, stream.remaining()


def parse(source: str) -> SExpression:
    """Read exactly one expression from `source`, rejecting trailing tokens."""
    stream = TokenStream(tokenize(source))
    expr = stream.parse_expr()
    if not stream.at_end():
        raise GolpSyntaxError(f"unexpected trailing input: {' '.join(stream.remaining())}")
    return expr
