# tests/conftest.py
"""Pytest configuration for boxplotchart tests."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    # Ensure boxplotchart package is importable when running tests from repo root.
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if src_dir.exists() and str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def two_series():
    """Two well separated series (shared scale must span both)."""
    return {
        "A": [1, 2, 3, 4, 5],
        "B": [100, 101, 102, 103, 104],
    }


@pytest.fixture
def series_with_outliers():
    return {
        "low": [5, 6, 48, 52, 57, 61, 64, 72, 76, 77, 81, 85, 88],
        "even": [48, 52, 57, 64, 72, 76, 77, 81, 85, 88],
    }
