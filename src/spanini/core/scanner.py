"""
Character-level scanning primitives.

Each primitive inspects a cursor and returns the number of characters it
would consume. Callers advance with :meth:`Span.advance`, so a failed attempt
never needs undoing.
"""

from __future__ import annotations

from .span import Span

LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
LETTERS = LOWERCASE + UPPERCASE
ALPHANUMERIC = LETTERS + DIGITS

# ASCII whitespace minus the newline, which is a token of its own.
WHITESPACE = " \t\r\v\f"

COMMENT_START = "#"


def skip_whitespace(cursor: Span) -> int:
    """Count leading blanks, stopping at a newline."""
    return scan(cursor, accept=WHITESPACE)


def skip_comment(cursor: Span) -> int:
    """Count a ``#`` comment up to, but not including, the end of line."""
    if cursor.peek() != COMMENT_START:
        return 0
    return scan(cursor, reject="\n")


def scan(cursor: Span, accept: str | None = None, reject: str | None = None) -> int:
    """
    Measure the run of characters allowed by the accept/reject sets.

    Args:
        cursor: Where to start scanning
        accept: Characters allowed in the run (None allows any)
        reject: Characters that end the run (None rejects none)

    Returns:
        Length of the run
    """
    buffer = cursor.buffer
    pos = cursor.start
    while pos < cursor.end:
        ch = buffer[pos]
        if accept is not None and ch not in accept:
            break
        if reject is not None and ch in reject:
            break
        pos += 1
    return pos - cursor.start


def _ascii_upper(text: str) -> str:
    return "".join(UPPERCASE[LOWERCASE.index(ch)] if ch in LOWERCASE else ch for ch in text)


def matches_keyword(span: Span, text: str, case_insensitive: bool = False) -> bool:
    """Compare the whole span against ``text``, optionally ignoring ASCII case."""
    if len(span) != len(text):
        return False
    if case_insensitive:
        return _ascii_upper(span.text) == _ascii_upper(text)
    return span.text == text
