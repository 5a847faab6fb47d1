import pytest
from hypothesis import given, strategies as st

from schemer.errors import SchemerSyntaxError
from schemer.reader.lexer import tokenize

L = ("lparen", "(")
R = ("rparen", ")")
Q = ("quote", "'")


def ident(name):
    return "identifier", name


def integer(n):
    return "integer", n


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 2 3)", [L, ident("+"), integer(2), integer(3), R]),
        ("(+ 21 325)", [L, ident("+"), integer(21), integer(325), R]),
        ("(- 7 42)", [L, ident("-"), integer(7), integer(42), R]),
        ("(+ -8 +2 -33)", [L, ident("+"), integer(-8), integer(2), integer(-33), R]),
        ("#t", [("boolean", True)]),
        ("#f", [("boolean", False)]),
        ('"hello"', [("string", "hello")]),
        ('"a _ $ snthoeau(*&G#$()*^!"', [("string", "a _ $ snthoeau(*&G#$()*^!")]),
        ("'(a)", [Q, L, ident("a"), R]),
        ("'('a 'b)", [Q, L, Q, ident("a"), Q, ident("b"), R]),
        ("(list 'a b)", [L, ident("list"), Q, ident("a"), ident("b"), R]),
        ("(λ (x) x)", [L, ident("λ"), L, ident("x"), R, ident("x"), R]),
        ("", []),
    ],
)
def test_lexer_basic(source, expected):
    assert tokenize(source) == expected


@pytest.mark.parametrize("name", ["*", "<", "<=", "if", "while", "$t$%*=:t059s", "set!", "a-b+c#"])
def test_identifiers(name):
    assert tokenize(name) == [ident(name)]


def test_whitespace():
    tokens = tokenize("(+ 1 1)\n(+\n    2\t2 \n )\r\n  \n")
    assert tokens == [
        L, ident("+"), integer(1), integer(1), R,
        L, ident("+"), integer(2), integer(2), R,
    ]


def test_closing_parens_after_atoms():
    assert tokenize("(a (b c))") == [L, ident("a"), L, ident("b"), ident("c"), R, R]


def test_complex_code_block():
    source = "(define (squares n)\n  (if (< n 0)\n      '()\n      (list n)))"
    assert tokenize(source) == [
        L, ident("define"), L, ident("squares"), ident("n"), R,
        L, ident("if"), L, ident("<"), ident("n"), integer(0), R,
        Q, L, R,
        L, ident("list"), ident("n"), R, R, R,
    ]


@pytest.mark.parametrize(
    "source,message",
    [
        ('"truncated', "SyntaxError: Expected end quote, but found EOF instead (line: 1, column: 11)"),
        ("(\\)", "SyntaxError: Unexpected character: \\ (line: 1, column: 2)"),
        ("(+-)", "SyntaxError: Unexpected character when looking for a delimiter: - (line: 1, column: 3)"),
        ("(-22+)", "SyntaxError: Unexpected character when looking for a delimiter: + (line: 1, column: 5)"),
        ("(22+)", "SyntaxError: Unexpected character when looking for a delimiter: + (line: 1, column: 4)"),
        ("(+ 2 3)\n(+ 1 2-)", "SyntaxError: Unexpected character when looking for a delimiter: - (line: 2, column: 7)"),
        ("#x", "SyntaxError: Unexpected character when looking for t/f: x (line: 1, column: 2)"),
    ],
)
def test_syntax_errors(source, message):
    with pytest.raises(SchemerSyntaxError) as excinfo:
        tokenize(source)
    assert excinfo.value.describe() == message


def test_syntax_error_position_attributes():
    with pytest.raises(SchemerSyntaxError) as excinfo:
        tokenize("(a\n  b\"c\")")
    assert excinfo.value.line == 2
    assert excinfo.value.column == 4


@given(st.integers(min_value=-10**12, max_value=10**12))
def test_integers_round_trip(n):
    assert tokenize(str(n)) == [integer(n)]
    assert tokenize(f"({n})") == [L, integer(n), R]


@given(st.text(alphabet="abcxyz!$%&*/:<=>?_^", min_size=1).map(lambda s: s + "+-#0"))
def test_generated_identifiers(name):
    assert tokenize(name) == [ident(name)]
