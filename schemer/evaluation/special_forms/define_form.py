from typing import Sequence

from schemer.errors import SchemerArityError, SchemerTypeError, SchemerDuplicateDefinition
from schemer.evaluation.evaluator import evaluate
from schemer.printer import render_args
from schemer.types import Environment, Nil, Symbol


def define_form(tail: Sequence, env: Environment):
    """
    (define name value)
    Binds in the current scope only; redefining a local name is an error.
    """
    if len(tail) != 2:
        raise SchemerArityError(f"Must supply exactly two arguments to define: {render_args(tail)}")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise SchemerTypeError(f"Unexpected value for name in define: {render_args(tail)}")
    if env.has(name):
        raise SchemerDuplicateDefinition(f"Duplicate define: {name}")

    # Checked before evaluating; the value expression may bind `name` itself
    env.bind(name, evaluate(val_expr, env))
    return Nil
