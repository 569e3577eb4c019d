"""
  Lispy Reader, Lexer and Parser

- Streaming, lazy tokenizing
- Emits runtime values directly:

    - numbers -> int (64-bit; out of range -> Error value "Invalid number")
    - symbols -> Symbol
    - ( ... ) -> SExpr
    - { ... } -> QExpr
    - a whole input line -> one SExpr holding every expression on it
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from lispy import LispValue
from lispy.config import get_max_nesting
from lispy.errors import LispySyntaxError
from lispy.types.error import Error, ErrorKind
from lispy.types.expr import Expr, QExpr, SExpr
from lispy.types.number import in_range
from lispy.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r"|(?P<number>-?[0-9]+)"  # numbers win over symbols, so 1x is 1 then x
    r"|(?P<symbol>[a-zA-Z0-9_+\-*/\\=<>!&]+)"  # symbols
    r")"
)

CLOSERS: dict[str, str] = {"lparen": "rparen", "lbrace": "rbrace"}
LISTS: dict[str, type[Expr]] = {"lparen": SExpr, "lbrace": QExpr}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            rest = source[pos:]
            if rest.isspace():
                break
            pos += len(rest) - len(rest.lstrip())
            raise LispySyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in ("lparen", "rparen", "lbrace", "rbrace", "number", "symbol"):
            if m.group(nm):
                yield nm, m.group(nm)
                break


def read_number(text: str) -> LispValue:
    """Read a decimal literal; out of the 64-bit range it becomes an Error value."""
    n = int(text)
    if not in_range(n):
        return Error(ErrorKind.INVALID_NUMBER, "Invalid number")
    return n


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []
        self.depth = 0
        self.max_nesting = get_max_nesting()

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[LispValue]:
        """Parse one expression, or return None at end of input."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "number":
            return read_number(tok_val)

        if tok_type == "symbol":
            return Symbol(tok_val)

        if tok_type in LISTS:
            self.depth += 1
            if self.depth > self.max_nesting:
                raise LispySyntaxError("Input nested too deeply")
            closer = CLOSERS[tok_type]
            items = LISTS[tok_type]()
            while True:
                next_type, next_val = self.peek()
                if next_type is None:
                    raise LispySyntaxError(f"Unmatched '{tok_val}'")
                if next_type == closer:
                    self.advance()
                    self.depth -= 1
                    return items
                if next_type in ("rparen", "rbrace"):
                    raise LispySyntaxError(f"Unexpected '{next_val}' inside '{tok_val}'")
                items.append(self.parse_expr())

        raise LispySyntaxError(f"Unexpected '{tok_val}'")

    def parse_all(self) -> Iterator[LispValue]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def read(source: str) -> SExpr:
    """Read a whole input into one S-expression, one child per top-level expression.

    Raises LispySyntaxError on malformed input, including brackets nested
    deeper than the configured limit.
    """
    return SExpr(TokenStream(lex(source)).parse_all())
