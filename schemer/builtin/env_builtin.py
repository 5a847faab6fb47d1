"""Built-in procedures for the Schemer runtime environment.

This module defines the arithmetic, list and error procedures and the static
table of every predefined binding, special forms included. `register` copies
the table into a fresh root environment; nothing here is shared between two
root environments except the (immutable) native procedure objects.
"""
from __future__ import annotations

from typing import Sequence

from schemer.errors import SchemerArityError, SchemerTypeError, SchemerUserError
from schemer.evaluation.evaluator import evaluate
from schemer.evaluation.special_forms import SPECIAL_FORMS
from schemer.printer import render, render_args
from schemer.types import Environment, Integer, NativeProcedure, SchemeList, Symbol


def _integer_operand(value, name: str, args: Sequence) -> int:
    if not isinstance(value, Integer):
        raise SchemerTypeError(f"Unexpected value during {name}: {render(value)} in {render_args(args)}")
    return value.value


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: Sequence, env: Environment) -> Integer:
    """Sum two or more integers, evaluating operands left to right."""
    if len(args) < 2:
        raise SchemerArityError(f"Must supply at least two arguments to +: {render_args(args)}")
    total = 0
    for arg in args:
        total += _integer_operand(evaluate(arg, env), "+", args)
    return Integer(total)


def sub(args: Sequence, env: Environment) -> Integer:
    """Subtract the second integer from the first."""
    if len(args) != 2:
        raise SchemerArityError(f"Must supply exactly two arguments to -: {render_args(args)}")
    left = evaluate(args[0], env)
    right = evaluate(args[1], env)
    return Integer(_integer_operand(left, "-", args) - _integer_operand(right, "-", args))


# -------------------------------
# Lists
# -------------------------------
def make_list(args: Sequence, env: Environment) -> SchemeList:
    """Evaluate every operand and collect the results in order."""
    return SchemeList.of(evaluate(arg, env) for arg in args)


# -------------------------------
# Errors
# -------------------------------
def raise_error(args: Sequence, env: Environment):
    """Evaluate the operand and fail with its rendered form as the message."""
    if len(args) != 1:
        raise SchemerArityError(f"Must supply exactly one argument to error: {render_args(args)}")
    raise SchemerUserError(render(evaluate(args[0], env)))


BUILTINS = (
    ("+", add),
    ("-", sub),
    ("list", make_list),
    ("error", raise_error),
)

PREDEFINED_PROCEDURES = (*SPECIAL_FORMS, *BUILTINS)


def register(env: Environment) -> None:
    """Bind every predefined procedure in `env`."""
    for name, operation in PREDEFINED_PROCEDURES:
        env.bind(Symbol(name), NativeProcedure(name, operation))


def root_environment() -> Environment:
    """Create a fresh root environment seeded with the predefined procedures."""
    env = Environment()
    register(env)
    return env
