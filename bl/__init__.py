# Core type aliases for bl's data model.
# Code and data share one representation: int, Symbol, Pair, Native, Closure,
# ErrorValue, and None for the empty list.
#
# Naming guidance:
# - SExpression: Use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: used by special forms and the application engine
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
