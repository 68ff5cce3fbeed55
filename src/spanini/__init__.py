"""
spanini - zero-copy INI parsing with typed property events.

Parses a restricted INI dialect into (section, key, value) callbacks whose
text values point back into the caller's buffer.
"""

from __future__ import annotations

from ._version import get_version
from .core import (
    IniDocument,
    ParseError,
    PropertySpec,
    Span,
    SpaniniError,
    Value,
    ValueKind,
    load_file,
    load_text,
    parse,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "IniDocument",
    "ParseError",
    "PropertySpec",
    "Span",
    "SpaniniError",
    "Value",
    "ValueKind",
    "load_file",
    "load_text",
    "parse",
]
