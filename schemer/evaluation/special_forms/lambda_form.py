from typing import Sequence

from schemer.errors import SchemerArityError, SchemerTypeError
from schemer.printer import render, render_args
from schemer.types import Environment, Lambda, SchemeList, Symbol


def lambda_form(tail: Sequence, env: Environment):
    """
    (lambda (params...) body...)
    The body is one or more expressions evaluated in order; the closure keeps
    a reference to `env`, not a copy.
    """
    if len(tail) < 2:
        raise SchemerArityError(f"Must supply at least two arguments to lambda: {render_args(tail)}")

    params = tail[0]
    if not isinstance(params, SchemeList):
        raise SchemerTypeError(f"Unexpected value for arguments in lambda: {render_args(tail)}")

    for param in params:
        if not isinstance(param, Symbol):
            raise SchemerTypeError(f"Unexpected argument in lambda arguments: {render(param)}")

    return Lambda(params.items, tail[1:], env)
