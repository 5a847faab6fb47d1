"""
  Schemer parser

Builds syntax nodes from the lexer's tokens:

    - identifiers -> Identifier
    - integers, booleans, strings -> *Literal
    - ( ... ) -> ListNode
    - 'datum -> ListNode([Identifier("quote"), datum])
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from schemer.errors import SchemerSyntaxError
from schemer.reader.lexer import Token
from schemer.reader.nodes import (
    BooleanLiteral,
    Identifier,
    IntegerLiteral,
    ListNode,
    Node,
    StringLiteral,
)

ATOMS = {
    "identifier": Identifier,
    "integer": IntegerLiteral,
    "boolean": BooleanLiteral,
    "string": StringLiteral,
}


class TokenStream:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens = iter(tokens)
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], object]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], object]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Node:
        tok_type, tok_val = self.advance()

        if tok_type is None:
            raise SchemerSyntaxError("Unexpected end of input")

        if tok_type in ATOMS:
            return ATOMS[tok_type](tok_val)

        if tok_type == "quote":
            if self.peek()[0] is None:
                raise SchemerSyntaxError("Unexpected end of input after quote")
            return ListNode((Identifier("quote"), self.parse_expr()))

        if tok_type == "lparen":
            items = []
            while True:
                next_type = self.peek()[0]
                if next_type is None:
                    raise SchemerSyntaxError("Unexpected end of input: missing ')'")
                if next_type == "rparen":
                    self.advance()
                    return ListNode(tuple(items))
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise SchemerSyntaxError("Unexpected ')'")

        raise SchemerSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[Node]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(tokens: Iterable[Token]) -> list[Node]:
    """Parse every top-level datum in `tokens`."""
    return list(TokenStream(tokens).parse_all())
