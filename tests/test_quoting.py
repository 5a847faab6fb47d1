import pytest

from schemer import errors
from schemer.evaluation.special_forms.quote_forms import quote_value
from schemer.types import Environment, Integer, Nil, SchemeList, String, Symbol


def lst(*items):
    return SchemeList(tuple(items))


a, b, unquote = Symbol("a"), Symbol("b"), Symbol("unquote")


def test_quote_list(interp):
    assert interp.eval("(quote (1 2 3))") == lst(Integer(1), Integer(2), Integer(3))


def test_quote_shorthand(interp):
    assert interp.eval("'a") == a
    assert interp.eval("'(a 'b)") == lst(a, lst(Symbol("quote"), b))


def test_quote_keeps_unquote_literal(interp):
    interp.eval("(define b 5)")
    assert interp.eval("(quote (a (unquote b)))") == lst(a, lst(unquote, b))


def test_quote_empty_list(interp):
    assert interp.eval("'()") is Nil


def test_quasiquote_with_unquote(interp):
    interp.eval("(define b 5)")
    assert interp.eval("(quasiquote (a (unquote b)))") == lst(a, Integer(5))


def test_quasiquote_without_unquote_is_literal(interp):
    assert interp.eval("(quasiquote (a (b 1)))") == lst(a, lst(b, Integer(1)))


def test_quasiquote_top_level_unquote(interp):
    assert interp.eval("(quasiquote (unquote (+ 1 2)))") == Integer(3)


def test_quasiquote_nested_unquote_is_resolved(interp):
    interp.eval("(define b 5)")
    result = interp.eval("(quasiquote (a (quasiquote (unquote b))))")
    assert result == lst(a, lst(Symbol("quasiquote"), Integer(5)))


def test_quasiquote_in_closure(interp):
    interp.eval("(define wrap (lambda (x) (quasiquote (1 (unquote x) 3))))")
    assert interp.eval("(wrap 10)") == lst(Integer(1), Integer(10), Integer(3))


def test_unquote_value_is_not_requoted(interp):
    interp.eval("(define xs (list 1 2))")
    assert interp.eval("(quasiquote (a (unquote xs)))") == lst(a, lst(Integer(1), Integer(2)))


@pytest.mark.parametrize("source", ["(quasiquote (a (unquote)))", "(quasiquote (unquote 1 2))"])
def test_malformed_unquote(interp, source):
    with pytest.raises(errors.SchemerArityError, match="exactly one argument to unquote"):
        interp.eval(source)


@pytest.mark.parametrize("source", ["(quote)", "(quote 1 2)", "(quasiquote)", "(quasiquote 1 2)"])
def test_quote_arity(interp, source):
    with pytest.raises(errors.SchemerArityError):
        interp.eval(source)


def test_unquote_outside_quasiquote_is_unbound(interp):
    with pytest.raises(errors.SchemerUnboundSymbol):
        interp.eval("(unquote 1)")


def test_quote_value_atoms_unchanged():
    env = Environment()
    for value in (Integer(1), String("s"), a, Nil):
        assert quote_value(value, True, env) == value


def test_quote_value_plain_quote_never_evaluates():
    # `b` is unbound: evaluating it would fail
    value = lst(unquote, b)
    assert quote_value(value, False, Environment()) == value
