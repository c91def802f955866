"""Line sources feeding the reader.

A line source hands out one line of text per call, without its trailing
newline, and returns None once input is exhausted.
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.history import History, InMemoryHistory


class LineSource(Protocol):
    def readline(self, prompt: str) -> Optional[str]: ...


class PromptLineSource:
    """Interactive terminal input with in-memory history.

    Every non-empty line is recorded, repeats included.
    """

    def __init__(self, history: History | None = None, **session_kwargs):
        self.history = history if history is not None else InMemoryHistory()
        self._session: PromptSession[str] = PromptSession(history=self.history, **session_kwargs)

    def readline(self, prompt: str) -> Optional[str]:
        recorded = len(list(self.history.get_strings()))
        try:
            line = self._session.prompt(prompt)
        except EOFError:
            return None
        # The prompt buffer skips a line equal to the previous entry.
        if line and len(list(self.history.get_strings())) == recorded:
            self.history.append_string(line)
        return line


class StreamLineSource:
    """Reads lines from a text stream, e.g. piped stdin."""

    def __init__(self, stream: TextIO, prompt_out: TextIO | None = None):
        self.stream = stream
        self.prompt_out = prompt_out

    def readline(self, prompt: str) -> Optional[str]:
        if self.prompt_out is not None and prompt:
            self.prompt_out.write(prompt)
            self.prompt_out.flush()
        line = self.stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")


class IterLineSource:
    """Serves lines from an iterable and records the prompt used for each."""

    def __init__(self, lines: Iterable[str]):
        self._lines = iter(lines)
        self.prompts: list[str] = []

    def readline(self, prompt: str) -> Optional[str]:
        line = next(self._lines, None)
        if line is not None:
            self.prompts.append(prompt)
        return line
