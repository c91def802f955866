"""Shape checks for user-written forms.

Each helper returns either the requested parts or an ErrorValue, which the
caller forwards unchanged.
"""

from __future__ import annotations

from bl import SExpression
from bl.types.error_value import ErrorValue
from bl.types.pair import Pair


def take(node: SExpression, n: int) -> list[SExpression] | ErrorValue:
    """Return the first `n` elements of list `node`; anything after them is ignored."""
    parts = []
    for _ in range(n):
        if not isinstance(node, Pair):
            return ErrorValue("CAR: expected cons")
        parts.append(node.first)
        node = node.rest
    return parts
