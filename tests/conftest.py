"""Pytest configuration and shared fixtures."""

import json
import logging
from pathlib import Path

import pytest

from columnsmith.matching import ColumnMatcher, default_registry, reset_matcher


@pytest.fixture(autouse=True)
def fresh_global_matcher():
    """Rebuild the global matcher from settings for every test."""
    reset_matcher()
    yield
    reset_matcher()


@pytest.fixture
def matcher() -> ColumnMatcher:
    """Create a matcher over the built-in registry with the standard thresholds."""
    return ColumnMatcher(
        registry=default_registry(),
        acceptance_threshold=0.5,
        suggestion_threshold=0.2,
        max_suggestions=3,
        max_headers=500,
        max_fields=200,
    )


@pytest.fixture
def alias_file(tmp_path: Path) -> Path:
    """Write a small custom alias registry to disk."""
    path = tmp_path / "aliases.json"
    path.write_text(
        json.dumps(
            {
                "admissionNumber": ["enrolment code"],
                "busRoute": ["bus route", "route", "transport route"],
            }
        )
    )
    return path


@pytest.fixture
def restore_root_logger():
    """Put the root logger level back after a test changes it."""
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)
