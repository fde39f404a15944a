"""Pytest fixtures for clawmemory tests."""

import pytest


@pytest.fixture
def home(tmp_path):
    """Isolated home directory with no existing database."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def preferred_db(home):
    """Create the preferred database directory under ``home``."""
    db = home / ".openclaw" / "memory" / "lancedb"
    db.mkdir(parents=True)
    return db


@pytest.fixture
def openai_raw():
    """Minimal valid openai config."""
    return {"embedding": {"provider": "openai", "apiKey": "sk-test"}}
