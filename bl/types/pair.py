"""Cons cells.

Pairs are built once and never mutated. Lists are right-growing chains of
Pairs terminated by None, which doubles as the empty list and false.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from bl import LispValue
from bl.errors import InvariantViolation


class Pair:
    __slots__ = ("first", "rest")
    __match_args__ = ("first", "rest")

    def __init__(self, first: LispValue, rest: LispValue = None):
        self.first = first
        self.rest = rest

    def __repr__(self):
        return f"Pair({self.first!r}, {self.rest!r})"

    @staticmethod
    def from_iterable(items: Iterable[LispValue], tail: LispValue = None) -> Pair | None:
        """Build a proper list (or a dotted one ending in `tail`) from `items`."""
        result = tail
        for item in reversed(list(items)):
            result = Pair(item, result)
        return result

    @staticmethod
    def iter_list(chain: Pair | None) -> Iterator[LispValue]:
        """Yield the elements of a list whose shape is guaranteed by construction.

        Raises InvariantViolation on an improper tail; user-supplied structure
        must be checked by the caller instead.
        """
        while chain is not None:
            if not isinstance(chain, Pair):
                raise InvariantViolation(f"expected a proper list, found tail {chain!r}")
            yield chain.first
            chain = chain.rest

    @staticmethod
    def length(chain: Pair | None) -> int:
        n = 0
        for _ in Pair.iter_list(chain):
            n += 1
        return n
