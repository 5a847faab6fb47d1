"""Procedure values: native operations and closures.

Both kinds are called the same way: the evaluator hands them the operand
expressions unevaluated. A native procedure decides for itself which operands
to evaluate, which is how special forms such as `if` and `define` are
expressed without a macro layer. A closure always evaluates every operand.

Procedures are opaque and compare by identity.
"""

from __future__ import annotations

from typing import Callable, Sequence

from schemer.types.environment import Environment
from schemer.types.symbol import Symbol

# Signature of every native operation: raw operands and the calling environment
NativeOperation = Callable[[Sequence, Environment], object]


class NativeProcedure:
    """A host-level operation registered under `name`."""

    __slots__ = ("name", "operation")

    def __init__(self, name: str, operation: NativeOperation):
        self.name = name
        self.operation = operation

    def __repr__(self) -> str:
        return f"<native procedure {self.name}>"


class Lambda:
    """A closure with formal parameters, a body and its defining environment."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: Sequence[Symbol], body: Sequence, env: Environment):
        self.formals: tuple[Symbol, ...] = tuple(formals)
        self.body: tuple = tuple(body)
        # Shared with the defining scope, never copied
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.formals)

    def __repr__(self) -> str:
        params = " ".join(str(f) for f in self.formals)
        return f"<lambda ({params})>"


Procedure = NativeProcedure | Lambda
