"""
spanini core: span-based INI tokenizer and backtracking parser.

Usage:
    from spanini.core import parse

    def on_property(state, section, key, value):
        state.append((section.text, key.text, value.to_python()))

    events = []
    ok = parse("[foo]\nbar = 10\n", events, on_property)
    # ok is True, events == [("foo", "bar", 10.0)]
"""

from .errors import ErrorContext, ParseError, SpaniniError
from .ir import IniDocument, PropertySpec
from .loader import collect, load_file, load_text
from .parser import ParseContext, PropertyCallback, parse
from .span import Span
from .tokenizer import Token, TokenKind, next_kind, next_token, next_token_from, tokenize
from .values import Value, ValueKind

__all__ = [
    "ErrorContext",
    "IniDocument",
    "ParseContext",
    "ParseError",
    "PropertyCallback",
    "PropertySpec",
    "Span",
    "SpaniniError",
    "Token",
    "TokenKind",
    "Value",
    "ValueKind",
    "collect",
    "load_file",
    "load_text",
    "next_kind",
    "next_token",
    "next_token_from",
    "parse",
    "tokenize",
]
