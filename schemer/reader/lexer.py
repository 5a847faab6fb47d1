"""
  Schemer lexer

Turns source text into a flat list of (token_type, token_value) tuples:

    ("lparen", "(")   ("rparen", ")")   ("quote", "'")
    ("identifier", str)   ("integer", int)   ("boolean", bool)   ("string", str)

Every atom (identifier, integer, boolean, string) must be followed by
whitespace, ')' or the end of input, so `22+` or `"a"b` are syntax errors
rather than two tokens. Errors carry the line and column of the offending
character.
"""

from __future__ import annotations

from typing import Iterator, Optional

from schemer.errors import SchemerSyntaxError

Token = tuple[str, object]

WHITESPACE = " \t\n\r"
DIGITS = "0123456789"
# Symbol characters allowed to start an identifier (besides letters)
IDENTIFIER_START = "!$%&*/:<=>?_^"
# ...and those allowed anywhere after the first character
IDENTIFIER_REST = IDENTIFIER_START + "+-#"


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.pos = -1
        self.current: Optional[str] = None
        self.line = 1
        self.column = 0

    def error(self, message: str) -> SchemerSyntaxError:
        return SchemerSyntaxError(message, self.line, self.column)

    def advance(self) -> None:
        if self.current == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1
        self.current = self.source[self.pos] if self.pos < len(self.source) else None

    def peek(self) -> Optional[str]:
        nxt = self.pos + 1
        return self.source[nxt] if nxt < len(self.source) else None

    def tokens(self) -> Iterator[Token]:
        self.advance()
        while self.current is not None:
            c = self.current
            if c == "(":
                self.advance()
                yield "lparen", "("
            elif c == ")":
                self.advance()
                yield "rparen", ")"
            elif c == "'":
                self.advance()
                yield "quote", "'"
            elif c in "+-":
                if self.peek() is not None and self.peek() in DIGITS:
                    # skip the sign and read the digits
                    self.advance()
                    value = self.read_number()
                    yield "integer", -value if c == "-" else value
                else:
                    self.advance()
                    yield "identifier", c
                yield from self.read_delimiter()
            elif c == "#":
                yield "boolean", self.read_boolean()
                yield from self.read_delimiter()
            elif c.isalpha() or c in IDENTIFIER_START:
                yield "identifier", self.read_identifier()
                yield from self.read_delimiter()
            elif c in DIGITS:
                yield "integer", self.read_number()
                yield from self.read_delimiter()
            elif c == '"':
                yield "string", self.read_string()
                yield from self.read_delimiter()
            elif c in WHITESPACE:
                self.advance()
            else:
                raise self.error(f"Unexpected character: {c}")

    def read_number(self) -> int:
        start = self.pos
        while self.current is not None and self.current in DIGITS:
            self.advance()
        return int(self.source[start:self.pos])

    def read_boolean(self) -> bool:
        self.advance()  # consume '#'
        if self.current == "t":
            self.advance()
            return True
        if self.current == "f":
            self.advance()
            return False
        found = "EOF" if self.current is None else self.current
        raise self.error(f"Unexpected character when looking for t/f: {found}")

    def read_identifier(self) -> str:
        start = self.pos
        while self.current is not None and (
            self.current.isalpha() or self.current in DIGITS or self.current in IDENTIFIER_REST
        ):
            self.advance()
        return self.source[start:self.pos]

    def read_string(self) -> str:
        self.advance()  # consume opening quote
        start = self.pos
        while self.current != '"':
            if self.current is None:
                raise self.error("Expected end quote, but found EOF instead")
            self.advance()
        value = self.source[start:self.pos]
        self.advance()  # consume closing quote
        return value

    def read_delimiter(self) -> Iterator[Token]:
        if self.current is None or self.current in WHITESPACE:
            return
        if self.current == ")":
            self.advance()
            yield "rparen", ")"
            return
        raise self.error(f"Unexpected character when looking for a delimiter: {self.current}")


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples."""
    return Lexer(source).tokens()


def tokenize(source: str) -> list[Token]:
    """Tokenize the whole of `source`, failing on the first syntax error."""
    return list(lex(source))
