from bl import EvaluatorFn
from bl import LispValue
from bl.types.environment import Environment
from bl.types.pair import Pair


def quote_form(
    form: Pair,
    env: Environment,
    ctx,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # The rest of the form, not its first element: (quote x) => (x . NIL).
    return form.rest
