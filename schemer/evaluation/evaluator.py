"""Core evaluator for the Schemer interpreter.

Atoms evaluate to themselves, symbols are looked up in the environment chain
and a non-empty list is an expression: its head is evaluated and must yield a
procedure, which then receives the remaining elements unevaluated. Deciding
what to evaluate is left to each procedure (see evaluation.apply).
"""

from __future__ import annotations

from typing import Iterable

from schemer.errors import SchemerTypeError
from schemer.evaluation.apply import apply
from schemer.printer import render
from schemer.types import (
    Boolean,
    Environment,
    Integer,
    Lambda,
    NativeProcedure,
    Nil,
    Procedure,
    SchemeList,
    String,
    Symbol,
    Value,
)


def evaluate_sequence(values: Iterable[Value], env: Environment) -> Value:
    """Evaluate `values` left to right and return the last result (or `()`)."""
    result = Nil
    for value in values:
        result = evaluate(value, env)
    return result


def evaluate(value: Value, env: Environment) -> Value:
    """Reduce a single value to its result in `env`."""
    match value:
        case Symbol():
            return env.lookup(value)
        case Integer() | Boolean() | String():
            return value
        case SchemeList(items=()):
            return value
        case SchemeList(items=items):
            return evaluate_expression(items, env)
        case NativeProcedure() | Lambda():
            return value
    raise SchemerTypeError(f"Cannot evaluate {value!r}")


def evaluate_expression(items: tuple[Value, ...], env: Environment) -> Value:
    """Evaluate the operator of `items` and apply it to the raw operands."""
    head = evaluate(items[0], env)
    if not isinstance(head, Procedure):
        raise SchemerTypeError(
            f"First element in an expression must be a procedure: {render(head)}"
        )
    return apply(head, items[1:], env)
