from __future__ import annotations

from loguru import logger

from bl import SExpression, LispValue
from bl.builtins import register
from bl.config import Settings
from bl.evaluation.evaluator import evaluate
from bl.reader.line_source import IterLineSource, LineSource
from bl.reader.parser import Reader
from bl.runtime_context import RuntimeContext
from bl.types.environment import Environment
from bl.types.error_value import ErrorValue
from bl.types.symbol import SymbolTable


class Interpreter:
    """
    Owns the symbol table, special forms and root environment, and
    evaluates bl forms against them.
    """

    def __init__(self, symbols: SymbolTable | None = None):
        self.ctx = RuntimeContext(symbols)
        self.symbols: SymbolTable = self.ctx.symbols
        self.env: Environment = Environment()
        register(self.env, self.symbols)

    def reader(self, source: LineSource, settings: Settings | None = None) -> Reader:
        """Return a Reader over `source` that interns into this interpreter's table."""
        settings = settings or Settings()
        return Reader(
            source,
            self.symbols,
            primary_prompt=settings.prompt,
            continuation_prompt=settings.continuation_prompt,
        )

    def read_all(self, code: str) -> list[SExpression]:
        """Parse every form in `code`."""
        return list(self.reader(IterLineSource(code.splitlines())))

    def eval_form(self, expr: SExpression) -> LispValue:
        """Evaluate one top-level form against the root environment."""
        try:
            return evaluate(expr, self.env, self.ctx)
        except RecursionError:
            logger.warning("eval.recursion_too_deep")
            return ErrorValue("recursion too deep")

    def eval(self, code: str) -> list[LispValue]:
        """Feed code to the interpreter and return the result of each form."""
        return [self.eval_form(expr) for expr in self.read_all(code)]
