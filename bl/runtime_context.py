"""Per-interpreter state threaded through the reader and evaluator.

Replaces process-wide registries: each RuntimeContext owns its symbol table,
the canonical special symbols, and the special-form table keyed by them.
"""

from __future__ import annotations

from bl.evaluation.special_forms import SPECIAL_FORMS
from bl.types.symbol import SymbolTable


class RuntimeContext:
    __slots__ = ("symbols", "t", "nil", "special_forms")

    def __init__(self, symbols: SymbolTable | None = None):
        self.symbols: SymbolTable = symbols if symbols is not None else SymbolTable()
        intern = self.symbols.intern
        self.t = intern("t")
        self.nil = intern("nil")
        self.special_forms = {intern(name): form for name, form in SPECIAL_FORMS.items()}
