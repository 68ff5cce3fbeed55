"""
Convenience loaders that collect parser events into an :class:`IniDocument`.

These sit outside the core parser: they own the buffer (reading files when
asked) and turn borrowed spans into plain strings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ParseError
from .ir import IniDocument, PropertySpec
from .parser import ParseContext, run
from .span import Span
from .values import Value

logger = logging.getLogger(__name__)


@dataclass
class LineTracker:
    """
    Running line counter for spans delivered in document order.

    Only the characters between the previous span and the next one are
    counted, so a whole document costs one pass over the buffer.

    Attributes:
        offset: Buffer offset of the last span looked up
        line: 1-based line number at ``offset``
        scanned: Total characters examined so far
    """

    offset: int = 0
    line: int = 1
    scanned: int = 0

    def line_of(self, span: Span) -> int:
        if span.start < self.offset:
            raise ValueError("Spans must be looked up in document order")
        self.line += span.buffer.count("\n", self.offset, span.start)
        self.scanned += span.start - self.offset
        self.offset = span.start
        return self.line


@dataclass
class _Collector:
    properties: list[PropertySpec] = field(default_factory=list)
    lines: LineTracker = field(default_factory=LineTracker)


def _collect_property(collector: _Collector, section: Span, key: Span, value: Value) -> None:
    collector.properties.append(
        PropertySpec(
            section=section.text,
            key=key.text,
            kind=value.kind,
            value=value.to_python(),
            line=collector.lines.line_of(key),
        )
    )


def collect(text: str, file: Path | None = None) -> IniDocument:
    """
    Parse INI text into a document.

    Args:
        text: Source text
        file: Optional source path, attached to errors

    Returns:
        IniDocument with every property in source order

    Raises:
        ParseError: At the first syntax error
    """
    collector = _Collector()
    ctx = ParseContext(cursor=Span.of(text), user_data=collector, callback=_collect_property)
    error = run(ctx)
    if error is not None:
        if file is not None and error.context is not None:
            error.context.file = file
            error = ParseError(error.message, error.context)
        raise error
    return IniDocument(properties=collector.properties)


def load_text(text: str) -> IniDocument:
    """Parse INI text held in memory."""
    return collect(text)


def load_file(path: Path | str, encoding: str = "utf-8") -> IniDocument:
    """Read and parse an INI file."""
    path = Path(path)
    text = path.read_text(encoding=encoding)
    logger.debug("Loaded %d characters from %s", len(text), path)
    return collect(text, file=path)
