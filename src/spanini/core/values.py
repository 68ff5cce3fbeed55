"""
Typed property values.

Text values alias the source buffer through a :class:`Span`; numbers and
booleans are decoded into native Python types.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .scanner import matches_keyword
from .span import Span
from .tokenizer import Token, TokenKind


class ValueKind(StrEnum):
    """Kinds of decoded property values."""

    NONE = "none"
    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"


@dataclass(frozen=True, slots=True)
class Value:
    """
    A decoded property value.

    Only the field matching ``kind`` is populated.
    """

    kind: ValueKind
    span: Span | None = None
    number: float | None = None
    boolean: bool | None = None

    @classmethod
    def none(cls) -> Value:
        """
        A value with no payload.

        The parser never delivers it: ``key =`` with nothing after the sign
        fails the property instead of reporting an empty value.
        """
        return cls(ValueKind.NONE)

    @classmethod
    def text(cls, span: Span) -> Value:
        return cls(ValueKind.TEXT, span=span)

    @classmethod
    def of_number(cls, number: float) -> Value:
        return cls(ValueKind.NUMBER, number=number)

    @classmethod
    def of_boolean(cls, boolean: bool) -> Value:
        return cls(ValueKind.BOOLEAN, boolean=boolean)

    def to_python(self) -> str | float | bool | None:
        """Convert to the equivalent plain Python value."""
        if self.kind == ValueKind.TEXT:
            return self.span.text if self.span is not None else None
        if self.kind == ValueKind.NUMBER:
            return self.number
        if self.kind == ValueKind.BOOLEAN:
            return self.boolean
        return None

    def __repr__(self) -> str:
        return f"Value({self.kind.value}, {self.to_python()!r})"


def decode_token(token: Token) -> Value:
    """Decode a value token; identifiers and strings stay as borrowed text."""
    if token.kind in (TokenKind.STRING, TokenKind.IDENTIFIER):
        return Value.text(token.span)
    if token.kind == TokenKind.NUMBER:
        return Value.of_number(float(token.span.text))
    if token.kind == TokenKind.BOOLEAN:
        return Value.of_boolean(matches_keyword(token.span, "true", case_insensitive=True))
    return Value.none()
