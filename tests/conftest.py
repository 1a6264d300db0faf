"""Pytest fixtures for sani tests."""

import pytest
from pathlib import Path

import sani.config


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Isolate every test from the environment and the cached settings."""
    for name in ("SANI_PARAGRAPH_MODE", "SANI_ENCODING", "SANI_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # keep a stray .env in the working directory out of the tests
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sani.config, "_settings", None)
    yield


@pytest.fixture
def sample_markup() -> str:
    """Two paragraphs of markup covering every inline rule."""
    return (
        "**lorem** ipsum *dolor*\n"
        "sit ~~amet~~ \\*literal\\*\n"
        "\n"
        "~consectetur~ adipiscing"
    )


@pytest.fixture
def tmp_markup_file(tmp_path: Path, sample_markup: str) -> Path:
    """Create a temporary markup file for testing."""
    file_path = tmp_path / "notes.md"
    file_path.write_text(sample_markup, encoding="utf-8")
    return file_path
