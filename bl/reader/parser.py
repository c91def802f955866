"""
  Lisp Reader and Lexer

- Pulls lines from a LineSource on demand, so one form may span many lines
  and one line may hold many forms.
- Tokens are single delimiters ( ) ' or maximal runs of anything else that
  is not a space.
- Emits bl values:

    - integers -> int (GMP base-0 literal rules: 0x hex, 0b binary, 0 octal)
    - other atoms -> interned Symbol
    - lists -> chains of Pair ending in None; () -> None
    - 'x -> (quote x)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from loguru import logger

from bl import SExpression
from bl.errors import BlSyntaxError, EndOfInput
from bl.reader.line_source import LineSource
from bl.types.pair import Pair
from bl.types.symbol import SymbolTable


TOKEN_RE = re.compile(
    r" *(?:"
    r"(?P<delim>[()'])"  # ( ) '
    r"|(?P<atom>[^()' ]+)"  # everything else up to a delimiter or space
    r")"
)

INTEGER_RE = re.compile(
    r"-?(?:"
    r"0[xX](?P<hex>[0-9a-fA-F]*)"
    r"|0[bB](?P<bin>[01]*)"
    r"|0(?P<oct>[0-7]*)"
    r"|(?P<dec>[1-9][0-9]*)"
    r")"
)

_BASES = {"hex": 16, "bin": 2, "oct": 8, "dec": 10}

PRIMARY_PROMPT = "* "
CONTINUATION_PROMPT = ""


class _RParen:
    """Sentinel produced by a closing parenthesis; never a user-visible value."""

    def __repr__(self):
        return "RPAREN"


RPAREN = _RParen()


def lex(source: str) -> Iterator[str]:
    """Token generator over a single line of text."""
    pos = 0
    while True:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            return
        pos = m.end()
        yield m.group("delim") or m.group("atom")


def parse_integer(token: str) -> Optional[int]:
    """Parse `token` as an integer literal, or return None.

    The first character after an optional '-' must be a decimal digit. A bare
    prefix such as '0x' has no digits and reads as zero.
    """
    m = INTEGER_RE.fullmatch(token)
    if m is None:
        return None
    kind = m.lastgroup
    digits = m.group(kind)
    value = int(digits, _BASES[kind]) if digits else 0
    return -value if token.startswith("-") else value


class Reader:
    """Reads one s-expression at a time from a LineSource."""

    def __init__(
        self,
        source: LineSource,
        symbols: SymbolTable,
        primary_prompt: str = PRIMARY_PROMPT,
        continuation_prompt: str = CONTINUATION_PROMPT,
    ):
        self.source = source
        self.symbols = symbols
        self.primary_prompt = primary_prompt
        self.continuation_prompt = continuation_prompt
        self.line = ""
        self.pos = 0
        self._prompt = primary_prompt
        self._quote = symbols.intern("quote")

    def reset(self) -> None:
        """Discard whatever is left of the current line."""
        self.line = ""
        self.pos = 0

    def next_token(self) -> str:
        while True:
            m = TOKEN_RE.match(self.line, self.pos)
            if m is not None:
                self.pos = m.end()
                return m.group("delim") or m.group("atom")
            line = self.source.readline(self._prompt)
            self._prompt = self.continuation_prompt
            if line is None:
                raise EndOfInput("end of input")
            self.line, self.pos = line, 0

    def read(self) -> SExpression:
        """Read one top-level form, skipping stray closing parentheses."""
        self._prompt = self.primary_prompt
        while True:
            expr = self.read_one()
            if expr is RPAREN:
                logger.warning("reader.stray_rparen line={!r}", self.line)
                self._prompt = self.primary_prompt
                continue
            return expr

    def read_one(self) -> SExpression:
        """Read one form; a closing parenthesis yields RPAREN."""
        tok = self.next_token()
        if tok == "(":
            items = []
            while True:
                item = self.read_one()
                if item is RPAREN:
                    return Pair.from_iterable(items)
                items.append(item)
        if tok == ")":
            return RPAREN
        if tok == "'":
            quoted = self.read_one()
            if quoted is RPAREN:
                raise BlSyntaxError("unexpected )")
            return Pair(self._quote, Pair(quoted))
        value = parse_integer(tok)
        if value is not None:
            return value
        return self.symbols.intern(tok)

    def __iter__(self) -> Iterator[SExpression]:
        """Yield top-level forms until the source is exhausted."""
        while True:
            try:
                yield self.read()
            except EndOfInput:
                return
