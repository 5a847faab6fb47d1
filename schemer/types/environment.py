"""Runtime environment for Schemer.

An Environment maps Symbols to evaluated values and links to its enclosing
scope through `outer`. Environments are never copied: closures and call
frames hold references to the same object, so a mutation made through one
holder is visible to all of them. The chain only points from child to parent,
so reference counting reclaims a scope once nothing refers to it.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from schemer.errors import SchemerDuplicateDefinition, SchemerUnboundSymbol
from schemer.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Schemer values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, object] = {}
        self.outer: Environment | None = outer

    def has(self, name: Symbol) -> bool:
        """Return True if `name` is bound in this frame (parents are not consulted)."""
        return name in self.vars

    def bind(self, name: Symbol, value) -> None:
        """Bind `name` in this frame, replacing any existing local binding."""
        self.vars[name] = value

    def define(self, name: Symbol, value) -> None:
        """Bind `name` in this frame.

        Raises SchemerDuplicateDefinition if `name` is already bound here. A
        binding of the same name in an outer scope is shadowed, not touched.
        """
        if name in self.vars:
            raise SchemerDuplicateDefinition(f"Duplicate define: {name}")
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value) -> None:
        """Rebind `name` in the scope where it is already bound.

        Raises SchemerUnboundSymbol if no scope in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise SchemerUnboundSymbol(f"Can't set! an undefined variable: {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol):
        """Return the value bound to `name`, innermost binding first."""
        env = self.find(name)
        if env is None:
            raise SchemerUnboundSymbol(f"Identifier not found: '{name}")
        return env.vars[name]

    def depth(self) -> int:
        """Number of scopes between this one and the root."""
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(str(k) for k in self.vars))
        buffer.write("}")

    def __str__(self) -> str:
        """Names bound in this frame, with an indicator for a parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env = self
            while env is not None:
                with StringIO() as frame:
                    env._write_vars(frame)
                    chain.append(frame.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
