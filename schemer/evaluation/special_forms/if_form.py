from typing import Sequence

from schemer.errors import SchemerArityError
from schemer.evaluation.evaluator import evaluate
from schemer.printer import render_args
from schemer.types import Environment, is_truthy


def if_form(tail: Sequence, env: Environment):
    if len(tail) != 3:
        raise SchemerArityError(f"Must supply exactly three arguments to if: {render_args(tail)}")

    cond = evaluate(tail[0], env)
    # Only #f is false: 0 and '() take the then-branch
    if is_truthy(cond):
        return evaluate(tail[1], env)
    return evaluate(tail[2], env)
