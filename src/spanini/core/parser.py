"""
Backtracking recursive descent parser for spanini INI documents.

Grammar:
    document    → (empty_line | section | property)*
    empty_line  → "\\n"
    section     → "[" IDENTIFIER "]"
    property    → IDENTIFIER "=" value
    value       → NUMBER | STRING | BOOLEAN | IDENTIFIER

Each production snapshots the cursor on entry and puts it back on failure, so
the driver loop never sees partial consumption. Properties are delivered
through a callback in document order; no tree is built.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TextIO

from .errors import ParseError, make_parse_error
from .span import Span
from .tokenizer import Token, TokenKind, next_token, next_token_from, scan_tokens, skip_trivia
from .values import Value, decode_token

logger = logging.getLogger(__name__)

PropertyCallback = Callable[[Any, Span, Span, Value], None]

LITERAL_KINDS = frozenset({TokenKind.NUMBER, TokenKind.STRING, TokenKind.BOOLEAN})

PROPERTY_BEFORE_SECTION = "property found before any section"


@dataclass
class ParseContext:
    """
    Mutable state of a single parse call.

    Attributes:
        cursor: Unconsumed remainder of the buffer
        user_data: Opaque caller state handed back to the callback
        callback: Receiver of property events
        section: Identifier span of the latest section header
        line: 1-based line of the cursor
        reason: Explanation recorded by a production for the diagnostic
    """

    cursor: Span
    user_data: Any
    callback: PropertyCallback
    section: Span | None = None
    line: int = 1
    reason: str | None = None

    @property
    def at_end(self) -> bool:
        # trailing blanks or a final comment without a newline end the document
        return skip_trivia(self.cursor).is_empty

    def error(self) -> ParseError:
        """Build the error describing the current cursor position."""
        line_start = self.cursor.buffer.rfind("\n", 0, self.cursor.start) + 1
        return make_parse_error(
            line=self.line,
            column=self.cursor.start - line_start + 1,
            snippet=self.cursor.rest_of_line().text,
            reason=self.reason,
        )


def parse_empty_line(ctx: ParseContext) -> bool:
    """empty_line → "\\n" """
    scanned = next_token(ctx.cursor)
    if scanned is None or not scanned[0].is_char("\n"):
        return False
    ctx.cursor = scanned[1]
    ctx.line += 1
    return True


def parse_section(ctx: ParseContext) -> bool:
    """section → "[" IDENTIFIER "]" """
    tokens, rest = scan_tokens(ctx.cursor, 3)
    if len(tokens) != 3:
        return False
    open_bracket, name, close_bracket = tokens
    if not (
        open_bracket.is_char("[")
        and name.kind == TokenKind.IDENTIFIER
        and close_bracket.is_char("]")
    ):
        return False
    ctx.section = name.span
    ctx.cursor = rest
    logger.debug("Entered section %r on line %d", name.text, ctx.line)
    return True


def resolve_value(value: Token, rest: Span) -> tuple[Token, Span] | None:
    """
    Re-classify a value token until it becomes a literal.

    The token is re-read from its own start, resuming classification after
    its current kind each time. An identifier that never becomes a literal
    is kept as a bare word.

    Returns:
        The literal (or bare identifier) token and the cursor after it, or
        None when the value is neither
    """
    token, after = value, rest
    while token.kind not in LITERAL_KINDS:
        cursor = Span(token.span.buffer, token.span.start, after.end)
        scanned = next_token_from(cursor, token.kind)
        if scanned is None:
            break
        token, after = scanned
    if token.kind in LITERAL_KINDS:
        return token, after
    if value.kind == TokenKind.IDENTIFIER:
        return value, rest
    return None


def parse_property(ctx: ParseContext) -> bool:
    """
    property → IDENTIFIER "=" value

    A missing value (``key =`` followed by a newline) fails the production;
    the newline is a lone character, not a literal or bare word.
    """
    tokens, rest = scan_tokens(ctx.cursor, 3)
    if len(tokens) != 3:
        return False
    key, equals, value = tokens
    if key.kind != TokenKind.IDENTIFIER or not equals.is_char("="):
        return False
    resolved = resolve_value(value, rest)
    if resolved is None:
        return False
    value, rest = resolved
    if ctx.section is None or ctx.section.is_empty:
        ctx.reason = PROPERTY_BEFORE_SECTION
        logger.debug("Property %r on line %d precedes any section", key.text, ctx.line)
        return False
    ctx.callback(ctx.user_data, ctx.section, key.span, decode_token(value))
    ctx.cursor = rest
    return True


_PRODUCTIONS: tuple[Callable[[ParseContext], bool], ...] = (
    parse_empty_line,
    parse_section,
    parse_property,
)


def run(ctx: ParseContext) -> ParseError | None:
    """
    Drive the productions until the buffer is consumed.

    Returns:
        None on success, otherwise the error for the first position at which
        every production failed
    """
    while not ctx.at_end:
        if not any(production(ctx) for production in _PRODUCTIONS):
            error = ctx.error()
            logger.debug("No production matched at offset %d: %s", ctx.cursor.start, error.diagnostic)
            return error
    return None


def parse(
    buffer: str,
    user_data: Any,
    callback: PropertyCallback,
    *,
    diagnostics: TextIO | None = None,
) -> bool:
    """
    Parse an INI buffer, reporting each property to ``callback``.

    Args:
        buffer: Source text; spans handed to the callback point into it
        user_data: Passed through unchanged as the callback's first argument
        callback: Called as ``callback(user_data, section, key, value)``
        diagnostics: Stream for the syntax error diagnostic (default: stderr)

    Returns:
        True when the whole buffer parsed, False at the first syntax error
    """
    ctx = ParseContext(cursor=Span.of(buffer), user_data=user_data, callback=callback)
    error = run(ctx)
    if error is None:
        return True
    stream = diagnostics if diagnostics is not None else sys.stderr
    stream.write(error.diagnostic + "\n")
    return False
