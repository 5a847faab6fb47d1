"""Syntax tree nodes produced by the parser and consumed by the evaluator."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class IntegerLiteral:
    value: int


@dataclass(frozen=True)
class BooleanLiteral:
    value: bool


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class ListNode:
    items: tuple = field(default_factory=tuple)


Node = Identifier | IntegerLiteral | BooleanLiteral | StringLiteral | ListNode
