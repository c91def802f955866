"""Built-in functions for the bl root environment.

Each builtin takes the evaluated argument list (a Pair chain, or None when
there are no arguments) and returns a value or an ErrorValue.
"""
from __future__ import annotations

from typing import Callable

from bl import LispValue
from bl.errors import InvariantViolation
from bl.types.environment import Environment
from bl.types.error_value import ErrorValue
from bl.types.function import Native
from bl.types.pair import Pair
from bl.types.symbol import SymbolTable


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: Pair | None) -> LispValue:
    """Return the sum of all arguments; (+) is 0."""
    total = 0
    for value in Pair.iter_list(args):
        if not isinstance(value, int):
            return ErrorValue("expected int")
        total += value
    return total


# -------------------------------
# List access
# -------------------------------
def _sole_pair(args: Pair | None) -> Pair | ErrorValue:
    if args is None:
        return ErrorValue("expected one argument")
    if not isinstance(args, Pair):
        raise InvariantViolation(f"argument list is not a pair: {args!r}")
    if args.rest is not None:
        return ErrorValue("expected only one argument")
    if not isinstance(args.first, Pair):
        return ErrorValue("expected cons")
    return args.first


def car(args: Pair | None) -> LispValue:
    """(car p) => first component of pair p."""
    pair = _sole_pair(args)
    if isinstance(pair, ErrorValue):
        return pair
    return pair.first


def cdr(args: Pair | None) -> LispValue:
    """(cdr p) => rest component of pair p."""
    pair = _sole_pair(args)
    if isinstance(pair, ErrorValue):
        return pair
    return pair.rest


BUILTINS: dict[str, Callable[[Pair | None], LispValue]] = {
    "+": add,
    "car": car,
    "cdr": cdr,
}


def register(env: Environment, symbols: SymbolTable) -> None:
    """Bind every builtin into `env` under its interned name."""
    for name, fn in BUILTINS.items():
        env.define(symbols.intern(name), Native(name, fn))
