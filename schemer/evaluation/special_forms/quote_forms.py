"""quote and quasiquote.

Both walk their operand with `quote_value`. Plain quote is fully literal.
Quasiquote is literal except at `(unquote x)`, where `x` is evaluated and its
result replaces the whole form. There is no nesting depth: an unquote inside
a nested quasiquote is still resolved by the outermost one.
"""

from typing import Sequence

from schemer.errors import SchemerArityError
from schemer.evaluation.evaluator import evaluate
from schemer.printer import render_args
from schemer.types import Environment, SchemeList, Symbol

UNQUOTE = Symbol("unquote")


def quote_value(value, quasi: bool, env: Environment):
    """Return `value` as data, resolving unquote escapes when `quasi` is set."""
    if not isinstance(value, SchemeList):
        return value

    if quasi and value.items and value.items[0] == UNQUOTE:
        if len(value) != 2:
            raise SchemerArityError(
                f"Must supply exactly one argument to unquote: {render_args(value)}"
            )
        return evaluate(value.items[1], env)

    return SchemeList.of(quote_value(item, quasi, env) for item in value)


def quote_form(tail: Sequence, env: Environment):
    if len(tail) != 1:
        raise SchemerArityError(f"Must supply exactly one argument to quote: {render_args(tail)}")
    return quote_value(tail[0], False, env)


def quasiquote_form(tail: Sequence, env: Environment):
    if len(tail) != 1:
        raise SchemerArityError(
            f"Must supply exactly one argument to quasiquote: {render_args(tail)}"
        )
    return quote_value(tail[0], True, env)
