"""Function values: host-provided natives and user closures."""

from __future__ import annotations

from typing import Callable

from bl import SExpression, LispValue
from bl.types.pair import Pair
from bl.types.symbol import Symbol


class Native:
    """A builtin operation. `fn` receives the evaluated argument list."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[Pair | None], LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, args: Pair | None) -> LispValue:
        return self.fn(args)

    def __repr__(self):
        return f"<native {self.name}>"


class Closure:
    """A lambda value: parameter names and a single body expression.

    No environment is captured; the body runs in a frame pushed onto the
    chain active at the call site.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: tuple[Symbol, ...], body: SExpression):
        self.params: tuple[Symbol, ...] = params
        self.body: SExpression = body

    @property
    def arity(self) -> int:
        return len(self.params)

    def __repr__(self):
        names = " ".join(str(p) for p in self.params)
        return f"<lambda ({names}) {self.body!r}>"
