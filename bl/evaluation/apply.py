"""Application engine for bl.

Evaluates the operator and the arguments of a combination, then applies:
- Native functions receive the evaluated argument list as a Pair chain.
- Closures get one new frame, pushed in front of the caller's chain (dynamic
  scope), with parameters bound positionally after an exact arity check.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bl import LispValue, EvaluatorFn
from bl.errors import InvariantViolation
from bl.types.environment import Environment
from bl.types.error_value import ErrorValue
from bl.types.function import Closure, Native
from bl.types.pair import Pair

if TYPE_CHECKING:
    from bl.runtime_context import RuntimeContext


def apply_form(
    form: Pair,
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Evaluate `(f a1 ... an)`; the first error met left to right is the result."""
    fn = evaluate_fn(form.first, env, ctx)
    if isinstance(fn, ErrorValue):
        return fn
    if not isinstance(fn, (Native, Closure)):
        return ErrorValue("expected function")

    args: list[LispValue] = []
    node = form.rest
    while node is not None:
        if not isinstance(node, Pair):
            return ErrorValue("expected list")
        value = evaluate_fn(node.first, env, ctx)
        if isinstance(value, ErrorValue):
            return value
        args.append(value)
        node = node.rest

    return apply(fn, args, env, ctx, evaluate_fn)


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(args) > fn.arity:
        return ErrorValue("too many lambda args")
    if len(args) < fn.arity:
        return ErrorValue("too few lambda args")
    frame = env.extend(fn.params, args)
    return evaluate_fn(fn.body, frame, ctx)


def apply(
    fn: Native | Closure,
    args: list[LispValue],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if isinstance(fn, Native):
        return fn(Pair.from_iterable(args))
    if isinstance(fn, Closure):
        return apply_closure(fn, args, env, ctx, evaluate_fn)
    raise InvariantViolation(f"cannot apply {fn!r}")
