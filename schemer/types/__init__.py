# Core types for Schemer's data model.
#
# A value is one of: Symbol, Integer, Boolean, String, SchemeList or a
# procedure (NativeProcedure / Lambda). Code and data share the same
# representation: an unevaluated expression is just a SchemeList.

from schemer.types.symbol import Symbol
from schemer.types.values import (
    Boolean,
    FALSE,
    Integer,
    Nil,
    SchemeList,
    String,
    TRUE,
    is_truthy,
)
from schemer.types.environment import Environment
from schemer.types.procedure import Lambda, NativeProcedure, NativeOperation, Procedure

Value = Symbol | Integer | Boolean | String | SchemeList | NativeProcedure | Lambda

__all__ = [
    "Boolean",
    "Environment",
    "FALSE",
    "Integer",
    "Lambda",
    "NativeOperation",
    "NativeProcedure",
    "Nil",
    "Procedure",
    "SchemeList",
    "String",
    "Symbol",
    "TRUE",
    "Value",
    "is_truthy",
]
