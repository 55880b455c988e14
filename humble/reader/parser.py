"""
  Reader: tokenizer and parser

- Tokens are plain strings: "(", ")" or an atom
- Emits Python primitives instead of Cons cells:

    - numbers -> float
    - symbols -> Symbol
    - lists -> Python list

One call to `read` consumes exactly one top-level form and hands back the
remaining tokens, so a file can be read form by form.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Sequence

from humble import SExpression
from humble.errors import UnexpectedEndOfInput, UnbalancedExpression, UnexpectedCloseParen
from humble.types.symbol import Symbol


COMMENT_RE = re.compile(r";[^\n]*")  # ; to end of line

LPAREN = "("
RPAREN = ")"


def tokenize(source: str) -> list[str]:
    """Split source text into "(", ")" and atom tokens, dropping comments."""
    source = COMMENT_RE.sub("", source)
    source = source.replace(LPAREN, f" {LPAREN} ").replace(RPAREN, f" {RPAREN} ")
    return source.split()


def atom(token: str) -> SExpression:
    """A token that parses as a float is a number, anything else is a symbol."""
    try:
        return float(token)
    except ValueError:
        return Symbol(token)


class TokenStream:
    def __init__(self, tokens: Sequence[str]):
        self.tokens = list(tokens)
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
        return self.tokens[self.pos:]

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def parse_expr(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            raise UnexpectedEndOfInput("Unexpected end of input")

        if tok == LPAREN:
            items: list[SExpression] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise UnbalancedExpression("Unmatched '('")
                if nxt == RPAREN:
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok == RPAREN:
            raise UnexpectedCloseParen("Unexpected ')'")

        return atom(tok)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def read(tokens: Sequence[str]) -> tuple[SExpression, list[str]]:
    """Read one expression; return it with the unconsumed tokens."""
    stream = TokenStream(tokens)
    expr = stream.parse_expr()
    return expr, stream.remaining()


def read_all(tokens: Sequence[str]) -> Iterator[SExpression]:
    """Lazily read every top-level expression in order."""
    return TokenStream(tokens).parse_all()
