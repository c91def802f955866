"""Read-eval-print loop."""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

from bl import LispValue
from bl.config import Settings
from bl.errors import BlSyntaxError, EndOfInput
from bl.interpreter import Interpreter
from bl.printer import render
from bl.reader.line_source import LineSource
from bl.types.error_value import ErrorValue


class Repl:
    def __init__(
        self,
        interpreter: Interpreter,
        source: LineSource,
        out: TextIO | None = None,
        settings: Settings | None = None,
    ):
        self.interpreter = interpreter
        self.reader = interpreter.reader(source, settings)
        self.out = out if out is not None else sys.stdout

    def emit(self, value: LispValue) -> None:
        # Errors get the same single trailing newline as any other result.
        self.out.write(render(value))
        self.out.write("\n")
        self.out.flush()

    def run(self) -> int:
        """Loop until the line source is exhausted; returns the exit status.

        InvariantViolation is not handled here and ends the loop.
        """
        logger.debug("repl.started")
        count = 0
        while True:
            try:
                expr = self.reader.read()
            except EndOfInput:
                logger.debug("repl.end_of_input forms={}", count)
                return 0
            except BlSyntaxError as e:
                logger.info("repl.syntax_error error={}", e)
                self.reader.reset()
                self.emit(ErrorValue(str(e)))
                continue
            except RecursionError:
                logger.warning("repl.nesting_too_deep")
                self.reader.reset()
                self.emit(ErrorValue("nesting too deep"))
                continue
            except KeyboardInterrupt:
                self.reader.reset()
                continue

            result = self.interpreter.eval_form(expr)
            self.emit(result)
            count += 1
