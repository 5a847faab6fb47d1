"""Application engine for Schemer.

Every procedure is applied to its operands *unevaluated*:

- a NativeProcedure receives the raw operands and the caller's environment
  and evaluates whatever it needs (this is how `if`, `define`, `quote` and
  friends work);
- a Lambda evaluates every operand in the caller's environment, left to
  right, binds the results in a fresh child of its captured environment and
  runs its body there.
"""

from __future__ import annotations

from typing import Sequence

from schemer.errors import SchemerArityError
from schemer.printer import render_args
from schemer.types import Environment, Lambda, NativeProcedure, Procedure, Value


def apply_lambda(fn: Lambda, args: Sequence[Value], caller_env: Environment) -> Value:
    """Apply a closure to unevaluated operands from `caller_env`."""
    # Imported here: the evaluator itself depends on this module
    from schemer.evaluation.evaluator import evaluate, evaluate_sequence

    if len(args) != fn.arity:
        raise SchemerArityError(
            f"Must supply exactly {fn.arity} arguments to function: {render_args(args)}"
        )

    call_env = Environment(outer=fn.env)
    for name, arg in zip(fn.formals, args):
        # A repeated parameter name keeps the last argument
        call_env.bind(name, evaluate(arg, caller_env))

    return evaluate_sequence(fn.body, call_env)


def apply(head: Procedure, args: Sequence[Value], env: Environment) -> Value:
    """Apply either a native procedure or a closure.

    `head` is already known to be a procedure: evaluate_expression rejects
    anything else before calling here.
    """
    if isinstance(head, NativeProcedure):
        return head.operation(args, env)
    return apply_lambda(head, args, env)
