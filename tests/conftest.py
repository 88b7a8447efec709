"""
Shared fixtures for ff-sql tests.
"""

import pytest

from ff_sql import reset_settings


def squash(text: str) -> str:
    """Collapse whitespace runs so assertions only compare tokens."""
    return " ".join(text.split())


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Run every test with default settings and no FF_SQL_* environment."""
    for name in ("FF_SQL_PERSONALITY", "FF_SQL_LOG_QUERIES"):
        monkeypatch.delenv(name, raising=False)
    # settings also read .env from the working directory
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def stripped():
    """The whitespace squashing helper."""
    return squash
