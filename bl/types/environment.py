"""Runtime environment for bl.

An Environment is one frame of Symbol -> value bindings plus an `outer` link.
Function calls push a new frame in front of the chain active at the call
site; the caller keeps its own reference, so the pushed frame is dropped on
every return path, error results included.
"""

from __future__ import annotations

from typing import Iterable, Optional

from bl import LispValue
from bl.errors import InvariantViolation
from bl.types.symbol import Symbol


class _NotFound:
    def __repr__(self):
        return "NOT_FOUND"

    def __bool__(self):
        return False


NOT_FOUND = _NotFound()


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` in this frame. Used to populate frames at creation time."""
        if not isinstance(name, Symbol):
            raise InvariantViolation(f"cannot bind non-symbol {name!r}")
        self.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Return the innermost binding of `name`, or NOT_FOUND."""
        env: Optional[Environment] = self
        while env is not None:
            # Bound values may be None (the empty list), so test membership.
            if name in env.vars:
                return env.vars[name]
            env = env.outer
        return NOT_FOUND

    def extend(self, names: Iterable[Symbol], values: Iterable[LispValue]) -> Environment:
        """Return a new frame in front of this chain binding names positionally."""
        frame = Environment(self)
        for name, value in zip(names, values):
            frame.define(name, value)
        return frame

    def depth(self) -> int:
        n = 0
        env: Optional[Environment] = self
        while env is not None:
            n += 1
            env = env.outer
        return n

    def __repr__(self) -> str:
        names = " ".join(str(k) for k in self.vars)
        return f"<Environment ({names}) depth={self.depth()}>"
