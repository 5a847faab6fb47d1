from typing import Sequence

from schemer.errors import SchemerArityError, SchemerTypeError, SchemerUnboundSymbol
from schemer.evaluation.evaluator import evaluate
from schemer.printer import render_args
from schemer.types import Environment, Nil, Symbol


def set_form(tail: Sequence, env: Environment):
    if len(tail) != 2:
        raise SchemerArityError(f"Must supply exactly two arguments to set!: {render_args(tail)}")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise SchemerTypeError(f"Unexpected value for name in set!: {render_args(tail)}")
    if env.find(var_sym) is None:
        raise SchemerUnboundSymbol(f"Can't set! an undefined variable: {var_sym}")

    env.set(var_sym, evaluate(val_expr, env))
    return Nil
