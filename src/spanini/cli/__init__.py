"""
spanini CLI package.

- commands.py: dump, check and demo commands
- utils.py: version and logging helpers
"""

from __future__ import annotations

import typer

from spanini.cli.commands import check, demo, dump
from spanini.cli.utils import configure_logging, version_callback
from spanini._version import get_version

__version__ = get_version()

app = typer.Typer(
    name="spanini",
    help="Zero-copy INI parser with typed property events.",
    no_args_is_help=True,
    add_completion=False,
)

app.command("dump")(dump)
app.command("check")(check)
app.command("demo")(demo)


@app.callback()
def common(
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (default: $SPANINI_LOG_LEVEL or WARNING)",
    ),
) -> None:
    """Zero-copy INI parser with typed property events."""
    configure_logging(log_level)


def main(argv: list[str] | None = None) -> None:
    """Console script entry point."""
    app(args=argv)


__all__ = ["__version__", "app", "main"]
