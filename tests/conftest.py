"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the data directory."""
    return project_root / "data"


@pytest.fixture
def open_grid() -> list[list[int]]:
    """Return a 3x3 grid where every room costs 1."""
    return [
        [1, 1, 1],
        [1, 1, 1],
        [1, 1, 1],
    ]


@pytest.fixture
def detour_grid() -> list[list[int]]:
    """Return a grid where the shortest route in steps is not the cheapest."""
    return [
        [1, 9, 1],
        [1, 1, 1],
    ]


@pytest.fixture
def split_grid() -> list[list[int]]:
    """Return a grid cut in two by a column of impassable rooms."""
    return [
        [1, 0, 1],
        [1, 0, 1],
    ]


@pytest.fixture
def sample_times() -> list[list[int]]:
    """Return room times for a three-floor house, top floor first."""
    return [
        [300, 0, 200],
        [400, 0, 100],
        [500, 600, 700],
    ]
