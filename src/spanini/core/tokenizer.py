"""
Tokenizer for spanini INI documents.

Produces one classified token per call. Classifiers are attempted in a fixed
priority order; :func:`next_token_from` resumes that order after a given kind
so the grammar can re-classify the same input position more broadly.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from .scanner import (
    ALPHANUMERIC,
    DIGITS,
    LETTERS,
    matches_keyword,
    scan,
    skip_comment,
    skip_whitespace,
)
from .span import Span


class TokenKind(StrEnum):
    """Token kinds, listed in classification priority order."""

    NONE = "none"
    IDENTIFIER = "identifier"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    CHAR = "char"


_KIND_ORDER: tuple[TokenKind, ...] = tuple(TokenKind)

BOOLEAN_KEYWORDS = ("true", "false")


def next_kind(kind: TokenKind) -> TokenKind | None:
    """Kind to attempt after ``kind``, or None once CHAR has been tried."""
    index = _KIND_ORDER.index(kind) + 1
    if index >= len(_KIND_ORDER):
        return None
    return _KIND_ORDER[index]


@dataclass(frozen=True, slots=True)
class Token:
    """
    A classified region of the source buffer.

    Attributes:
        span: Characters of the token (string tokens exclude their quotes)
        kind: Classification of the token
    """

    span: Span
    kind: TokenKind

    @property
    def text(self) -> str:
        return self.span.text

    def is_char(self, ch: str) -> bool:
        return self.kind == TokenKind.CHAR and self.span.text == ch

    def __repr__(self) -> str:
        return f"Token({self.kind.value}, {self.span.text!r}, {self.span.start})"


# A classifier returns the token and the cursor just past it, or None.
Scanned = tuple[Token, Span]
Classifier = Callable[[Span], Scanned | None]


def _scan_identifier(cursor: Span) -> Scanned | None:
    if cursor.peek() is None or cursor.peek() not in LETTERS:
        return None
    length = scan(cursor, accept=ALPHANUMERIC)
    return Token(cursor.take(length), TokenKind.IDENTIFIER), cursor.advance(length)


def _scan_number(cursor: Span) -> Scanned | None:
    first = cursor.peek()
    if first is None or first not in "+-." + DIGITS:
        return None
    rest = cursor
    if first in "+-":
        rest = rest.advance(1)
    integral = scan(rest, accept=DIGITS)
    rest = rest.advance(integral)
    fraction = 0
    if rest.peek() == ".":
        fraction = scan(rest.advance(1), accept=DIGITS)
        if integral == 0 and fraction == 0:
            return None
        rest = rest.advance(1 + fraction)
    elif integral == 0:
        return None
    return Token(cursor.until(rest), TokenKind.NUMBER), rest


def _scan_string(cursor: Span) -> Scanned | None:
    if cursor.peek() != '"':
        return None
    body = cursor.advance(1)
    length = scan(body, reject='\n"')
    closing = body.advance(length)
    if closing.peek() != '"':
        return None
    return Token(body.take(length), TokenKind.STRING), closing.advance(1)


def _scan_boolean(cursor: Span) -> Scanned | None:
    scanned = _scan_identifier(cursor)
    if scanned is None:
        return None
    token, rest = scanned
    if not any(matches_keyword(token.span, word, case_insensitive=True) for word in BOOLEAN_KEYWORDS):
        return None
    return Token(token.span, TokenKind.BOOLEAN), rest


def _scan_char(cursor: Span) -> Scanned | None:
    if cursor.is_empty:
        return None
    return Token(cursor.take(1), TokenKind.CHAR), cursor.advance(1)


_CLASSIFIERS: dict[TokenKind, Classifier] = {
    TokenKind.IDENTIFIER: _scan_identifier,
    TokenKind.NUMBER: _scan_number,
    TokenKind.STRING: _scan_string,
    TokenKind.BOOLEAN: _scan_boolean,
    TokenKind.CHAR: _scan_char,
}


def skip_trivia(cursor: Span) -> Span:
    """Skip blanks and then a trailing comment."""
    cursor = cursor.advance(skip_whitespace(cursor))
    return cursor.advance(skip_comment(cursor))


def next_token_from(cursor: Span, after_kind: TokenKind) -> Scanned | None:
    """
    Classify the next token, trying only kinds ranked after ``after_kind``.

    Args:
        cursor: Current position
        after_kind: Last kind already attempted (NONE tries every kind)

    Returns:
        ``(token, rest)`` for the first classifier that succeeds, or None when
        input is exhausted or no remaining kind matches
    """
    cursor = skip_trivia(cursor)
    if cursor.is_empty:
        return None
    kind = next_kind(after_kind)
    while kind is not None:
        scanned = _CLASSIFIERS[kind](cursor)
        if scanned is not None:
            return scanned
        kind = next_kind(kind)
    return None


def next_token(cursor: Span) -> Scanned | None:
    """Classify the next token starting from the highest-priority kind."""
    return next_token_from(cursor, TokenKind.NONE)


def scan_tokens(cursor: Span, count: int) -> tuple[list[Token], Span]:
    """Read up to ``count`` tokens; the list is shorter when input runs out."""
    tokens: list[Token] = []
    for _ in range(count):
        scanned = next_token(cursor)
        if scanned is None:
            break
        token, cursor = scanned
        tokens.append(token)
    return tokens, cursor


def tokenize(text: str) -> list[Token]:
    """Tokenize a whole buffer, mainly useful for inspection and tests."""
    tokens, _ = scan_tokens(Span.of(text), len(text) + 1)
    return tokens
