"""
Read-only views over a caller-owned source buffer.

A :class:`Span` never owns or copies characters: it records a ``(start, end)``
boundary pair into one immutable ``str``. Cursors are spans running to the end
of the buffer; moving forward means building a new span with a later start.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """
    A borrowed slice of a source buffer.

    Attributes:
        buffer: The source text this span points into
        start: Offset of the first character (inclusive)
        end: Offset one past the last character (exclusive)
    """

    buffer: str
    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end <= len(self.buffer):
            raise ValueError(
                f"Invalid span bounds {self.start}:{self.end} for buffer of length {len(self.buffer)}"
            )

    @classmethod
    def of(cls, buffer: str) -> Span:
        """Create a cursor covering the whole buffer."""
        if not isinstance(buffer, str):
            raise TypeError(f"Span buffer must be str, got {type(buffer).__name__}")
        return cls(buffer, 0, len(buffer))

    def __len__(self) -> int:
        return self.end - self.start

    def __bool__(self) -> bool:
        return self.end > self.start

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Span({self.start}:{self.end}, {self.text!r})"

    @property
    def text(self) -> str:
        """Materialise the characters covered by this span."""
        return self.buffer[self.start : self.end]

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def line(self) -> int:
        """1-based line number of the span start, counted from the buffer start."""
        return self.buffer.count("\n", 0, self.start) + 1

    def peek(self, offset: int = 0) -> str | None:
        """Character at ``start + offset`` or None when outside the span."""
        pos = self.start + offset
        if pos >= self.end:
            return None
        return self.buffer[pos]

    def advance(self, count: int) -> Span:
        """Return a span with its start moved forward by ``count`` characters."""
        if count < 0:
            raise ValueError("Spans only move forward")
        return Span(self.buffer, min(self.start + count, self.end), self.end)

    def until(self, other: Span) -> Span:
        """Span from this start up to the start of ``other``."""
        return Span(self.buffer, self.start, other.start)

    def take(self, count: int) -> Span:
        """Leading ``count`` characters of this span."""
        return Span(self.buffer, self.start, min(self.start + count, self.end))

    def rest_of_line(self) -> Span:
        """Characters from the start up to (not including) the next newline."""
        newline = self.buffer.find("\n", self.start, self.end)
        if newline == -1:
            return self
        return Span(self.buffer, self.start, newline)
