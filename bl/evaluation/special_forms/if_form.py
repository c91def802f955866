from bl import EvaluatorFn
from bl import LispValue
from bl.evaluation.structure import take
from bl.types.environment import Environment
from bl.types.error_value import ErrorValue
from bl.types.pair import Pair


def if_form(
    form: Pair,
    env: Environment,
    ctx,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    parts = take(form.rest, 3)
    if isinstance(parts, ErrorValue):
        return parts
    cond, then_expr, else_expr = parts

    test = evaluate_fn(cond, env, ctx)
    if isinstance(test, ErrorValue):
        return test
    # Only the empty list is false.
    if test is not None:
        return evaluate_fn(then_expr, env, ctx)
    return evaluate_fn(else_expr, env, ctx)
