"""Core evaluator for the bl interpreter.

Every step returns a value; an ErrorValue returned by any sub-evaluation is
forwarded unchanged by its caller, so the first error short-circuits the
rest of the enclosing evaluation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bl import SExpression, LispValue
from bl.errors import InvariantViolation
from bl.evaluation.apply import apply_form
from bl.types.environment import Environment, NOT_FOUND
from bl.types.error_value import ErrorValue
from bl.types.function import Closure, Native
from bl.types.pair import Pair
from bl.types.symbol import Symbol

if TYPE_CHECKING:
    from bl.runtime_context import RuntimeContext


def evaluate(expr: SExpression, env: Environment, ctx: RuntimeContext) -> LispValue:
    if expr is None:
        return None

    if isinstance(expr, Symbol):
        if expr is ctx.nil:
            return None
        if expr is ctx.t:
            return expr
        value = env.lookup(expr)
        if value is NOT_FOUND:
            return ErrorValue("undefined symbol")
        return value

    if isinstance(expr, Pair):
        head = expr.first
        if isinstance(head, Symbol):
            form = ctx.special_forms.get(head)
            if form is not None:
                return form(expr, env, ctx, evaluate)
        return apply_form(expr, env, ctx, evaluate)

    # --- Atoms return as-is ---
    if isinstance(expr, (int, Native, Closure, ErrorValue)):
        return expr

    raise InvariantViolation(f"cannot evaluate {expr!r}")
