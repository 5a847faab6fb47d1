"""Reader: source text -> tokens -> syntax nodes."""

from schemer.reader.lexer import lex, tokenize
from schemer.reader.parser import TokenStream, parse


def read(source: str):
    """Tokenize and parse `source` into a list of syntax nodes."""
    return parse(tokenize(source))


__all__ = ["TokenStream", "lex", "parse", "read", "tokenize"]
