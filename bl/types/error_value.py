from __future__ import annotations


class ErrorValue:
    """A recoverable evaluation failure, returned as an ordinary value."""

    __slots__ = ("message",)
    __match_args__ = ("message",)

    def __init__(self, message: str):
        self.message = message

    def __eq__(self, other) -> bool:
        return isinstance(other, ErrorValue) and self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)

    def __repr__(self):
        return f"ErrorValue({self.message!r})"
