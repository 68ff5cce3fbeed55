"""
spanini CLI utilities.

Shared helpers used across CLI modules.
"""

import logging
import os
import platform

import typer

from spanini._version import get_version

LOG_LEVEL_ENV = "SPANINI_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"spanini version {get_version()}")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


def configure_logging(level: str | None = None) -> int:
    """
    Configure root logging for CLI runs.

    Args:
        level: Level name; falls back to SPANINI_LOG_LEVEL, then WARNING

    Returns:
        The numeric level applied
    """
    name = (level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    numeric = getattr(logging, name, None)
    if not isinstance(numeric, int):
        typer.echo(f"Unknown log level '{name}', using {DEFAULT_LOG_LEVEL}", err=True)
        numeric = getattr(logging, DEFAULT_LOG_LEVEL)
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("spanini").setLevel(numeric)
    return numeric
