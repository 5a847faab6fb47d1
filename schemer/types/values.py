"""Atomic and list values of the Schemer data model.

Integers, booleans and strings are self-evaluating. Lists double as data and
as unevaluated code. All of them are immutable and compare structurally;
values of different kinds never compare equal, so `Integer(1)` is not
`Boolean(True)` even though Python would equate 1 and True.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, slots=True)
class Integer:
    value: int


@dataclass(frozen=True, slots=True)
class Boolean:
    value: bool


@dataclass(frozen=True, slots=True)
class String:
    value: str


@dataclass(frozen=True, slots=True)
class SchemeList:
    items: tuple = ()

    @classmethod
    def of(cls, items: Iterable) -> SchemeList:
        items = tuple(items)
        if not items:
            return Nil
        return cls(items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]


# The empty list is the canonical "no meaningful result"
Nil = SchemeList(())

TRUE = Boolean(True)
FALSE = Boolean(False)


def is_truthy(value) -> bool:
    """Only #f is false; 0 and the empty list are true."""
    return value != FALSE
