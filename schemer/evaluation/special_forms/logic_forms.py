from typing import Sequence

from schemer.evaluation.evaluator import evaluate
from schemer.types import Environment, FALSE, TRUE, is_truthy


def and_form(tail: Sequence, env: Environment):
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right and returns #f as
    soon as one is #f; the remaining operands are not evaluated. Otherwise it
    returns the value of the last operand. With zero operands, returns #t.
    """
    result = TRUE
    for expr in tail:
        val = evaluate(expr, env)
        if not is_truthy(val):
            return FALSE
        result = val
    return result


def or_form(tail: Sequence, env: Environment):
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    value that is not #f. If there is none (or no operands), returns #f.
    """
    for expr in tail:
        val = evaluate(expr, env)
        if is_truthy(val):
            return val
    return FALSE
