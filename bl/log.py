"""Logging setup for the command line entry point."""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

LOG_FORMAT = "<level>{level: <8}</level> {name}:{line} {message}"


def configure_logging(level: str = "WARNING", sink: TextIO | None = None) -> int:
    """Replace loguru's default sink with one at `level`; returns the sink id."""
    logger.remove()
    return logger.add(sink if sink is not None else sys.stderr, level=level, format=LOG_FORMAT)
