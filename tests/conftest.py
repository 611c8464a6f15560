"""Shared fixtures for resumesync tests."""

import shutil
from pathlib import Path

import pytest
from loguru import logger

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def resume_markdown() -> str:
    return (FIXTURES_PATH / "resume.md").read_text(encoding="utf-8")


@pytest.fixture
def site_html() -> str:
    return (FIXTURES_PATH / "index.html").read_text(encoding="utf-8")


@pytest.fixture
def site_files(tmp_path):
    """Copies of the fixture resume and page that a test may overwrite."""
    source = tmp_path / "resume.md"
    target = tmp_path / "index.html"
    shutil.copy(FIXTURES_PATH / "resume.md", source)
    shutil.copy(FIXTURES_PATH / "index.html", target)
    return source, target


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by a test (e.g. the CLI's captured stdout)."""
    yield
    logger.remove()
