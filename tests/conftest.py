"""Shared pytest fixtures for spanini tests."""

from pathlib import Path

import pytest


@pytest.fixture
def sample_text() -> str:
    """Return the sample document used across tests."""
    return (
        "[foo]\n"
        "bar = 10 # comment\n"
        "\n"
        "[cheese]\n"
        "baz=.3\n"
        "qux=-.75\n"
    )


@pytest.fixture
def sample_file(tmp_path: Path, sample_text: str) -> Path:
    """Write the sample document to a temporary file."""
    path = tmp_path / "settings.ini"
    path.write_text(sample_text)
    return path
