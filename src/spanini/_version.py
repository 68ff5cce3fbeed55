"""Version lookup for spanini."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Prefer the checkout's pyproject.toml, then installed metadata."""
    if _PYPROJECT.exists():
        with _PYPROJECT.open("rb") as handle:
            project = tomllib.load(handle).get("project", {})
        if project.get("name") == "spanini" and "version" in project:
            return str(project["version"])
    try:
        return _metadata_version("spanini")
    except PackageNotFoundError:
        return "0.0.0"
