"""Identifiers of the Schemer data model.

A symbol evaluates by environment lookup and renders as `'name`. Symbols are
the keys of every Environment frame.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Symbol:
    name: str

    def __post_init__(self):
        # Shared string objects keep frame lookups to a pointer comparison
        object.__setattr__(self, "name", sys.intern(self.name))

    def __str__(self) -> str:
        return self.name
