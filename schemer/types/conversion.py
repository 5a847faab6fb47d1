"""Translation of parser nodes into runtime values.

The translation is purely structural: no evaluation happens here, so a list
node becomes a list value whether it is meant as code or as data.
"""

from __future__ import annotations

from typing import Iterable

from schemer.reader.nodes import (
    BooleanLiteral,
    Identifier,
    IntegerLiteral,
    ListNode,
    StringLiteral,
)
from schemer.errors import SchemerTypeError
from schemer.types.symbol import Symbol
from schemer.types.values import Boolean, Integer, SchemeList, String


def from_node(node):
    match node:
        case Identifier(name=name):
            return Symbol(name)
        case IntegerLiteral(value=value):
            return Integer(value)
        case BooleanLiteral(value=value):
            return Boolean(value)
        case StringLiteral(value=value):
            return String(value)
        case ListNode(items=items):
            return SchemeList.of(from_nodes(items))
    raise SchemerTypeError(f"Cannot convert syntax node {node!r}")


def from_nodes(nodes: Iterable) -> list:
    return [from_node(node) for node in nodes]
