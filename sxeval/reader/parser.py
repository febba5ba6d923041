"""
  sxeval Reader: Lexer and Parser

- Streaming, lazy parsing over a regex tokenizer
- Emits sxeval values directly:

    - nil            -> Nil
    - true / false   -> bool
    - integers       -> int
    - strings        -> str (escapes decoded, other text kept verbatim)
    - symbols        -> Symbol
    - lists          -> tuple
    - 'x             -> Quote(x)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from sxeval import SExpression
from sxeval.types.errors import SxSyntaxError
from sxeval.types.nil import Nil
from sxeval.types.symbol import Symbol
from sxeval.types.values import Quote


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<ws>\s+)"  # whitespace
    r"|(?P<quote>')"  # quote prefix
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<bad_string>")'  # unterminated string
    r"|(?P<atom>[^\s()'\";]+)",  # numbers, literals and symbols
    re.DOTALL,
)

INTEGER_RE = re.compile(r"[+-]?\d+")

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}

LITERALS: dict[str, SExpression] = {
    "nil": Nil,
    "true": True,
    "false": False,
}


def lex(source: str) -> Iterator[tuple[str, str, int]]:
    """Token generator: yields (token_type, token_value, position) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            raise SxSyntaxError(f"Unexpected char {source[pos]!r}", pos)
        kind = m.lastgroup
        if kind == "bad_string":
            raise SxSyntaxError("Unterminated string", pos)
        if kind not in ("comment", "ws"):
            yield kind, m.group(kind), pos
        pos = m.end()


def unescape(body: str, pos: int = 0) -> str:
    """Decode backslash escapes in a string literal body."""
    out: list[str] = []
    chars = iter(enumerate(body))
    for i, ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        _, esc = next(chars)
        if esc not in ESCAPES:
            raise SxSyntaxError(f"Unknown escape \\{esc}", pos + i + 1)
        out.append(ESCAPES[esc])
    return "".join(out)


def parse_atom(text: str) -> SExpression:
    if text in LITERALS:
        return LITERALS[text]
    if INTEGER_RE.fullmatch(text):
        return int(text)
    return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str, int]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str, int]] = []

    def peek(self) -> tuple[Optional[str], Optional[str], int]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, -1
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], int]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, -1))

    def parse_expr(self) -> Optional[SExpression]:
        """Parse the next expression, or return None at end of input.

        Open lists and pending quote prefixes are kept on an explicit stack,
        so nesting depth is not bounded by the host recursion limit.
        """
        # Frames are (None, pos) for a pending quote, (items, pos) for an open list
        stack: list[tuple[Optional[list], int]] = []
        while True:
            tok_type, tok_val, pos = self.advance()
            if tok_type is None:
                if not stack:
                    return None
                items, open_pos = stack[-1]
                if items is None:
                    raise SxSyntaxError("Nothing to quote", open_pos)
                raise SxSyntaxError("Unmatched '('", open_pos)

            if tok_type == "atom":
                value = parse_atom(tok_val)
            elif tok_type == "string":
                value = unescape(tok_val[1:-1], pos + 1)
            elif tok_type == "quote":
                stack.append((None, pos))
                continue
            elif tok_type == "lparen":
                stack.append(([], pos))
                continue
            elif tok_type == "rparen":
                if not stack or stack[-1][0] is None:
                    raise SxSyntaxError("Unexpected ')'", pos)
                value = tuple(stack.pop()[0])
            else:
                raise SxSyntaxError(f"Unknown token: {tok_type} {tok_val}", pos)

            while stack and stack[-1][0] is None:
                stack.pop()
                value = Quote(value)
            if not stack:
                return value
            stack[-1][0].append(value)

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type = self.peek()[0]
            if tok_type is None:
                break
            yield self.parse_expr()


def read_all(source: str) -> tuple[SExpression, ...]:
    """Parse every top-level expression in `source`."""
    return tuple(TokenStream(lex(source)).parse_all())


def read(source: str) -> SExpression:
    """Parse exactly one expression from `source`."""
    exprs = read_all(source)
    if len(exprs) != 1:
        raise SxSyntaxError(f"Expected exactly one expression, found {len(exprs)}")
    return exprs[0]
