from bl.types.symbol import Symbol, SymbolTable
from bl.types.pair import Pair
from bl.types.function import Native, Closure
from bl.types.error_value import ErrorValue
from bl.types.environment import Environment, NOT_FOUND

__all__ = [
    "Symbol",
    "SymbolTable",
    "Pair",
    "Native",
    "Closure",
    "ErrorValue",
    "Environment",
    "NOT_FOUND",
]
