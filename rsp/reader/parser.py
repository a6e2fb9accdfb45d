"""
  Lisp Reader: lexer and parser

- Emits Python primitives, no Cons cells:

    - numbers  -> float
    - true/false -> bool
    - nil      -> Nil
    - strings  -> str
    - symbols  -> Symbol
    - lists    -> Python list
    - 'expr    -> [Symbol("quote"), expr]

- `;` starts a comment running to the end of the line.
- `parse_one` reads exactly one leading expression and hands back the
  unconsumed text, so callers can drive the reader one form at a time.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from rsp import SExpression
from rsp.errors import RspSyntaxError
from rsp.types.nil import Nil
from rsp.types.symbol import Symbol

logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<ws>\s+)"
    r"|(?P<quote>')"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>")'  # opening quote with no closing quote
    r"|(?P<atom>[^\s()'\";]+)",  # numbers, literals, symbols
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

LITERALS = {
    "true": True,
    "false": False,
    "nil": Nil,
}

ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

TRIVIA = ("comment", "ws")


def lex(source: str, keep_trivia: bool = False) -> Iterator[tuple[str, str, int]]:
    """Token generator: yields (token_type, token_text, start_offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            # Unreachable with the catch-all atom group, kept as a guard
            raise RspSyntaxError(f"Unexpected character {source[pos]!r}", pos)
        kind = m.lastgroup
        if keep_trivia or kind not in TRIVIA:
            yield kind, m.group(), pos
        pos = m.end()


def _unescape(body: str, start: int) -> str:
    out: list[str] = []
    i = 0
    while i < len(body):
        c = body[i]
        if c == "\\":
            nxt = body[i + 1]
            if nxt not in ESCAPES:
                raise RspSyntaxError(f"Unknown escape sequence '\\{nxt}' in string", start + i)
            out.append(ESCAPES[nxt])
            i += 2
        else:
            out.append(c)
            i += 1
    return "".join(out)


def read_atom(text: str) -> SExpression:
    """Turn an atom token into a number, literal or Symbol."""
    if NUMBER_RE.fullmatch(text):
        return float(text)
    if text in LITERALS:
        return LITERALS[text]
    return Symbol(text)


class Reader:
    """Position-tracking reader over a source string."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    @property
    def remaining(self) -> str:
        return self.source[self.pos:]

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def skip_trivia(self) -> None:
        while not self.at_end():
            m = TOKEN_RE.match(self.source, self.pos)
            if m is None or m.lastgroup not in TRIVIA:
                return
            self.pos = m.end()

    def _peek(self) -> Optional[re.Match]:
        self.skip_trivia()
        if self.at_end():
            return None
        return TOKEN_RE.match(self.source, self.pos)

    def parse_expr(self) -> Optional[SExpression]:
        """Read one expression plus its trailing trivia; None at end of input."""
        self.skip_trivia()
        if self.at_end():
            return None
        expr = self._read()
        self.skip_trivia()
        return expr

    def _read(self) -> SExpression:
        m = self._peek()
        if m is None:
            raise RspSyntaxError("Unexpected end of input", self.pos, incomplete=True)
        kind, text, start = m.lastgroup, m.group(), m.start()
        self.pos = m.end()

        if kind == "lparen":
            items: list[SExpression] = []
            while True:
                nxt = self._peek()
                if nxt is None:
                    raise RspSyntaxError("Unmatched '('", start, incomplete=True)
                if nxt.lastgroup == "rparen":
                    self.pos = nxt.end()
                    return items
                items.append(self._read())

        if kind == "rparen":
            raise RspSyntaxError("Unexpected ')'", start)

        if kind == "quote":
            if self._peek() is None:
                raise RspSyntaxError("Expected an expression after quote", start, incomplete=True)
            return [Symbol("quote"), self._read()]

        if kind == "string":
            return _unescape(text[1:-1], start + 1)

        if kind == "unterminated":
            raise RspSyntaxError("Unterminated string literal", start, incomplete=True)

        return read_atom(text)


def parse_one(source: str) -> tuple[str, Optional[SExpression]]:
    """Parse exactly one leading expression.

    Returns `(remaining_text, expr)`; `expr` is None when the input holds only
    whitespace and comments. Raises RspSyntaxError on malformed input.
    """
    reader = Reader(source)
    expr = reader.parse_expr()
    logger.debug("Parsed %r, %d chars remaining", expr, len(reader.remaining))
    return reader.remaining, expr


def parse_all(source: str) -> list[SExpression]:
    """Parse every expression in `source`."""
    reader = Reader(source)
    exprs: list[SExpression] = []
    while (expr := reader.parse_expr()) is not None:
        exprs.append(expr)
    return exprs
