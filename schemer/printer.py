"""Textual rendering of Schemer values.

Symbols and lists render with a leading quote to mark them as data; the
elements inside a list render without it. Rendering is for diagnostics and
REPL echo only.
"""

from __future__ import annotations

from schemer.types import (
    Boolean,
    Integer,
    Lambda,
    NativeProcedure,
    SchemeList,
    String,
    Symbol,
)


def render(value) -> str:
    """Render a value as the REPL shows it, e.g. `'(1 a "s")`."""
    if isinstance(value, (Symbol, SchemeList)):
        return f"'{render_raw(value)}"
    return render_raw(value)


def render_raw(value) -> str:
    """Render a value without the leading quote marker."""
    match value:
        case Symbol():
            return value.name
        case Integer(value=n):
            return str(n)
        case Boolean(value=b):
            return "#t" if b else "#f"
        case String(value=s):
            return f'"{s}"'
        case SchemeList(items=items):
            return "(" + " ".join(render_raw(item) for item in items) + ")"
        case NativeProcedure() | Lambda():
            return "#<procedure>"
    return repr(value)


def render_args(args) -> str:
    """Render a raw operand sequence for error messages."""
    return "(" + " ".join(render_raw(arg) for arg in args) + ")"
