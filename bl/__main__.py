from __future__ import annotations

import sys

from loguru import logger

from bl.config import load_settings
from bl.errors import BlError, InvariantViolation
from bl.interpreter import Interpreter
from bl.log import configure_logging
from bl.reader.line_source import PromptLineSource, StreamLineSource
from bl.repl import Repl


def main() -> int:
    try:
        settings = load_settings()
        configure_logging(settings.log_level)
        if settings.recursion_limit is not None:
            sys.setrecursionlimit(settings.recursion_limit)
    except (BlError, ValueError, RecursionError) as e:
        print(f"bl: configuration error: {e}", file=sys.stderr)
        return 1
    # Integers are unbounded; lift the decimal conversion cap.
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)

    if sys.stdin.isatty():
        source = PromptLineSource()
    else:
        source = StreamLineSource(sys.stdin)

    repl = Repl(Interpreter(), source, sys.stdout, settings)
    try:
        return repl.run()
    except InvariantViolation as e:
        logger.critical("repl.invariant_violation error={}", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
