import re

import pytest

from schemer.errors import SchemerSyntaxError
from schemer.reader import read
from schemer.reader.nodes import (
    BooleanLiteral,
    Identifier,
    IntegerLiteral,
    ListNode,
    StringLiteral,
)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [Identifier("a")]),
        ("-45", [IntegerLiteral(-45)]),
        ("#t #f", [BooleanLiteral(True), BooleanLiteral(False)]),
        ('"hi there"', [StringLiteral("hi there")]),
        ("()", [ListNode(())]),
        ("(a 1)", [ListNode((Identifier("a"), IntegerLiteral(1)))]),
        ("'a", [ListNode((Identifier("quote"), Identifier("a")))]),
        (
            "'(1 'b)",
            [ListNode((
                Identifier("quote"),
                ListNode((IntegerLiteral(1), ListNode((Identifier("quote"), Identifier("b"))))),
            ))],
        ),
        ("(a) (b)", [ListNode((Identifier("a"),)), ListNode((Identifier("b"),))]),
        ("", []),
    ],
)
def test_parse(source, expected):
    assert read(source) == expected


def test_nested_lists():
    (node,) = read("(define f (lambda (x) (+ x 1)))")
    assert isinstance(node, ListNode)
    assert node.items[0] == Identifier("define")
    lam = node.items[2]
    assert lam.items[1] == ListNode((Identifier("x"),))


@pytest.mark.parametrize(
    "source,message",
    [
        ("(a b", "Unexpected end of input: missing ')'"),
        (")", "Unexpected ')'"),
        ("(a))", "Unexpected ')'"),
        ("'", "Unexpected end of input after quote"),
    ],
)
def test_parse_errors(source, message):
    with pytest.raises(SchemerSyntaxError, match=re.escape(message)):
        read(source)
