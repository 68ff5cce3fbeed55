"""
Error types for spanini parsing.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class SpaniniError(Exception):
    """Base exception for all spanini errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(SpaniniError):
    """
    Raised when an INI document cannot be parsed.

    Examples:
    - A line matching none of empty line, section header or property
    - A property before any section header
    - An unterminated string value
    """

    @property
    def diagnostic(self) -> str:
        """The human-readable diagnostic, without any file location."""
        if self.context:
            return self.context.diagnostic()
        return self.message


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Remaining text of the offending line
        reason: Optional explanation beyond a plain syntax error
        file: Optional path to the source file
    """

    line: int
    column: int
    snippet: str = ""
    reason: str | None = None
    file: Path | None = None

    def headline(self) -> str:
        """First diagnostic line, e.g. ``Syntax error on line 3``."""
        return f"Syntax error on line {self.line}"

    def diagnostic(self) -> str:
        return f"{self.headline()}\n{self.snippet}"

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "settings.ini:10:5"
        """
        location = f"{self.file or '<buffer>'}:{self.line}:{self.column}"
        return f"{location}\n{self._format_snippet()}"

    def _format_snippet(self) -> str:
        """Format the snippet with its line number and an error marker."""
        prefix = f"{self.line:4d} | "
        marker = " " * len(prefix) + "^^^"
        return f"{prefix}{self.snippet}\n{marker}"


def make_parse_error(
    line: int,
    column: int,
    snippet: str,
    reason: str | None = None,
    file: Path | None = None,
) -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Remaining text of the offending line
        reason: Optional explanation
        file: Optional source file path

    Returns:
        ParseError with context attached
    """
    context = ErrorContext(line=line, column=column, snippet=snippet, reason=reason, file=file)
    message = context.headline()
    if reason:
        message += f": {reason}"
    return ParseError(message, context)
