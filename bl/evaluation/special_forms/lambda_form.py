from bl import EvaluatorFn
from bl import LispValue
from bl.types.environment import Environment
from bl.types.error_value import ErrorValue
from bl.types.function import Closure
from bl.types.pair import Pair
from bl.types.symbol import Symbol


def lambda_form(
    form: Pair,
    env: Environment,
    ctx,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params...) body): exactly one body form, no captured environment.
    rest = form.rest
    if not isinstance(rest, Pair):
        return ErrorValue("CAR: expected cons")

    params: list[Symbol] = []
    node = rest.first
    while node is not None:
        if not isinstance(node, Pair):
            return ErrorValue("CAR: expected cons")
        if not isinstance(node.first, Symbol):
            return ErrorValue("expected symbol")
        params.append(node.first)
        node = node.rest

    body = rest.rest
    if not isinstance(body, Pair):
        return ErrorValue("CAR: expected cons")
    if body.rest is not None:
        return ErrorValue("too many args")

    return Closure(tuple(params), body.first)
