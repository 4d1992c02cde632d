"""Shared test fixtures."""

import logging
import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from valref import SemanticsRegistry


@pytest.fixture
def registry():
    """Fresh SemanticsRegistry instance."""
    return SemanticsRegistry()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Drop VALREF_* variables and run from a directory without a .env file."""
    for key in ("VALREF_LOG_LEVEL", "VALREF_HEADINGS", "VALREF_DEMOS"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture(autouse=True)
def restore_package_log_level():
    """The CLI sets the valref logger level; undo it after each test."""
    package_logger = logging.getLogger("valref")
    level = package_logger.level
    yield
    package_logger.setLevel(level)
