"""
  Lisp Reader, Lexer and Parser

- Eager tokenizer, recursive-descent reader
- Emits Python primitives instead of dedicated node classes:

    - compound forms -> Python list
    - integers (unsigned 64-bit range) -> int
    - floats -> float
    - everything else -> Symbol

   There are no strings, comments, quote shorthands or escapes: parentheses
   and whitespace are the only structure in the source text.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator, Optional

from iota import SExpression
from iota.errors import IotaSyntaxError, IotaUnexpectedClose, IotaUnexpectedEOF
from iota.types.symbol import Symbol

logger = logging.getLogger(__name__)


TOKEN_RE = re.compile(
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<atom>[^\s()]+)"  # any other whitespace-delimited run
)

# Integer tier is an unsigned 64-bit magnitude; an optional '+' is allowed.
INTEGER_RE = re.compile(r"\+?[0-9]+\Z")
U64_LIMIT = 2**64

# Decimal/exponent floats plus inf/infinity/nan, no digit separators.
FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)\Z",
    re.IGNORECASE,
)


def lex(source: str) -> list[str]:
    """Split program text into '(' , ')' and atom tokens."""
    return [m.group(0) for m in TOKEN_RE.finditer(source)]


def atom(token: str) -> SExpression:
    """Classify a non-parenthesis token: integer, then float, then symbol."""
    # 2**64 - 1 has 20 digits; longer magnitudes go straight to the float tier
    if INTEGER_RE.match(token) and len(token.lstrip("+").lstrip("0")) <= 20:
        value = int(token)
        if value < U64_LIMIT:
            return value
    if FLOAT_RE.match(token):
        return float(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, tokens: Iterable[str]):
        self.tokens: list[str] = list(tokens)
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Optional[str]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def remaining(self) -> list[str]:
        """Tokens not consumed so far."""
        return self.tokens[self.pos:]

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def parse_expr(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            raise IotaUnexpectedEOF("unexpected EOF while reading")

        if tok == "(":
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise IotaSyntaxError("Unmatched '('")
                if nxt == ")":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok == ")":
            raise IotaUnexpectedClose("unexpected )")

        return atom(tok)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def read_from_tokens(tokens: Iterable[str]) -> tuple[SExpression, list[str]]:
    """Read one form from `tokens`, returning it with the unconsumed remainder."""
    stream = TokenStream(tokens)
    expr = stream.parse_expr()
    return expr, stream.remaining()


def parse(program: str) -> SExpression:
    """Parse the first form in `program`."""
    logger.debug("program: %s", program)
    tokens = lex(program)
    logger.debug("tokens: %s", tokens)
    expr, _ = read_from_tokens(tokens)
    logger.debug("ast: %r", expr)
    return expr


def parse_all(program: str) -> list[SExpression]:
    """Parse every top-level form in `program`, in order.

    Raises before returning anything if any form is malformed.
    """
    logger.debug("program: %s", program)
    tokens = lex(program)
    logger.debug("tokens: %s", tokens)
    exprs = list(TokenStream(tokens).parse_all())
    logger.debug("ast: %r", exprs)
    return exprs
