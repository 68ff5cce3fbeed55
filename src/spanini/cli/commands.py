"""
Parse and inspect INI documents from the command line.

- dump:  print every property event of a file
- check: report whether a file parses
- demo:  parse the built-in sample document
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import TextIO

import typer
from rich.console import Console

from spanini.core.errors import ParseError
from spanini.core.loader import collect
from spanini.core.parser import parse
from spanini.core.span import Span
from spanini.core.values import Value, ValueKind

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

SAMPLE_DOCUMENT = (
    "[foo]\n"
    "bar = 10 # This line has spaces and a comment\n"
    "\n"
    "[cheese]    \n"
    'foo      =      "This is a string"\n'
    "bar=true\n"
    "bar=TrUe\n"
    "bar=TRUE\n"
    "bar=false\n"
    "bar=FaLsE\n"
    "baz=10\n"
    "baz=.3\n"
    "qux=-.75\n"
    "baz=+100.0\n"
)


def format_event(section: Span, key: Span, value: Value) -> str:
    """Render one property event, e.g. ``[foo] bar (double) 10.000000``."""
    line = f"[{section.text}] {key.text}"
    if value.kind == ValueKind.TEXT and value.span is not None:
        return f'{line} (string) "{value.span.text}"'
    if value.kind == ValueKind.NUMBER:
        return f"{line} (double) {value.number:f}"
    if value.kind == ValueKind.BOOLEAN:
        return f"{line} (boolean) {'true' if value.boolean else 'false'}"
    return f"{line} (none)"


def _print_event(out: TextIO, section: Span, key: Span, value: Value) -> None:
    out.write(format_event(section, key, value) + "\n")


def _read_source(source: str) -> str:
    if source == "-":
        return typer.get_text_stream("stdin").read()
    path = Path(source)
    if not path.exists():
        err_console.print(f"Error: File not found: {path}", style="red", markup=False, soft_wrap=True)
        raise typer.Exit(code=1)
    return path.read_text(encoding="utf-8")


def _emit(text: str) -> bool:
    out = io.StringIO()
    diagnostics = io.StringIO()
    ok = parse(text, out, _print_event, diagnostics=diagnostics)
    if out.getvalue():
        console.print(out.getvalue(), end="", markup=False, soft_wrap=True)
    if diagnostics.getvalue():
        err_console.print(diagnostics.getvalue(), end="", style="red", markup=False, soft_wrap=True)
    return ok


def dump(
    source: str = typer.Argument(..., help="INI file to parse, or '-' for stdin"),
    as_json: bool = typer.Option(False, "--json", help="Print the collected document as JSON"),
) -> None:
    """Print every property of an INI file."""
    text = _read_source(source)
    if as_json:
        try:
            document = collect(text, file=None if source == "-" else Path(source))
        except ParseError as e:
            err_console.print(str(e), style="red", markup=False, soft_wrap=True)
            raise typer.Exit(code=1)
        console.print_json(document.model_dump_json())
        return
    if not _emit(text):
        raise typer.Exit(code=1)


def check(
    source: str = typer.Argument(..., help="INI file to check, or '-' for stdin"),
) -> None:
    """Report whether an INI file parses."""
    text = _read_source(source)
    try:
        collect(text, file=None if source == "-" else Path(source))
    except ParseError as e:
        err_console.print(e.diagnostic, style="red", markup=False, soft_wrap=True)
        if e.context and e.context.reason:
            err_console.print(f"Reason: {e.context.reason}", style="red", markup=False, soft_wrap=True)
        raise typer.Exit(code=1)
    console.print("OK", style="green", markup=False, soft_wrap=True)


def demo() -> None:
    """Parse the built-in sample document and print its events."""
    ok = _emit(SAMPLE_DOCUMENT)
    console.print("1" if ok else "0", markup=False, soft_wrap=True)
