"""Text rendering of bl values for the REPL."""

from __future__ import annotations

from io import StringIO

from bl import LispValue
from bl.errors import InvariantViolation
from bl.types.error_value import ErrorValue
from bl.types.function import Closure, Native
from bl.types.pair import Pair
from bl.types.symbol import Symbol

FUNCTION_PLACEHOLDER = "[function]"


def render(value: LispValue) -> str:
    """Render `value`: pairs as (A . D), NIL for the empty list, ERROR: msg for errors."""
    with StringIO() as buffer:
        _write(buffer, value)
        return buffer.getvalue()


def _write(buffer: StringIO, value: LispValue) -> None:
    # Walk the rest spine in a loop so long lists stay off the call stack.
    closers = 0
    while isinstance(value, Pair):
        buffer.write("(")
        _write(buffer, value.first)
        buffer.write(" . ")
        value = value.rest
        closers += 1
    _write_atom(buffer, value)
    buffer.write(")" * closers)


def _write_atom(buffer: StringIO, value: LispValue) -> None:
    if value is None:
        buffer.write("NIL")
    elif isinstance(value, int):
        buffer.write(str(value))
    elif isinstance(value, Symbol):
        buffer.write(value.name)
    elif isinstance(value, (Native, Closure)):
        buffer.write(FUNCTION_PLACEHOLDER)
    elif isinstance(value, ErrorValue):
        buffer.write(f"ERROR: {value.message}")
    else:
        raise InvariantViolation(f"unhandled value type {type(value).__name__}")
