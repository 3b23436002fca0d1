"""
Grid file loading and saving.

Grids are stored as a list of rows of integer costs in one of three
formats, picked by file suffix:
- .json: plain JSON list of lists
- .msgpack: msgpack-encoded list of lists
- .npy: 2D integer numpy array

Usage:
    from liftpath.data import load_grid

    grid = load_grid("data/times.json")
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path

import msgpack
import numpy as np

from liftpath.config import GRID_FORMATS
from liftpath.errors import InvalidGridError
from liftpath.graph import validate_grid

logger = logging.getLogger(__name__)


def grid_from_array(array: np.ndarray) -> list[list[int]]:
    """
    Convert a 2D integer numpy array into a list-of-lists grid.

    Raises:
        InvalidGridError: If the array is not 2D integer or holds negative costs
    """
    if array.ndim != 2:
        raise InvalidGridError(f"Grid array must be 2D, got shape {array.shape}")
    if not np.issubdtype(array.dtype, np.integer):
        raise InvalidGridError(f"Grid array must hold integers, got dtype {array.dtype}")

    grid = array.tolist()
    validate_grid(grid)
    return grid


def _check_format(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in GRID_FORMATS:
        supported = ", ".join(GRID_FORMATS)
        raise InvalidGridError(f"Unsupported grid format '{suffix}'. Supported: {supported}")
    return suffix


def load_grid(path: str | Path) -> list[list[int]]:
    """
    Load a grid file.

    Args:
        path: Path to a .json, .msgpack or .npy grid file

    Returns:
        The grid as a list of rows

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidGridError: If the format is unknown or the grid is malformed
    """
    path = Path(path)
    suffix = _check_format(path)

    logger.info(f"Loading grid from {path}...")

    try:
        if suffix == ".npy":
            array = np.load(path)
        elif suffix == ".json":
            with open(path, encoding="utf-8") as f:
                grid = json.load(f)
        else:
            with open(path, "rb") as f:
                grid = msgpack.load(f)
    except (ValueError, msgpack.UnpackException) as e:
        raise InvalidGridError(f"Grid file {path} could not be decoded: {e}") from e

    if suffix == ".npy":
        grid = grid_from_array(array)
    else:
        if not isinstance(grid, list):
            raise InvalidGridError(f"Grid file {path} does not hold a list of rows")
        validate_grid(grid)

    cols = len(grid[0]) if grid else 0
    logger.info(f"Loaded {len(grid)}x{cols} grid")
    return grid


def save_grid(grid: Sequence[Sequence[int]], path: str | Path) -> Path:
    """
    Write a grid file in the format given by the path's suffix.

    Returns:
        The path written to

    Raises:
        InvalidGridError: If the format is unknown or the grid is malformed
    """
    path = Path(path)
    suffix = _check_format(path)
    validate_grid(grid)

    rows = [[int(value) for value in row] for row in grid]

    if suffix == ".npy":
        cols = len(rows[0]) if rows else 0
        np.save(path, np.array(rows, dtype=np.int64).reshape(len(rows), cols))
    elif suffix == ".json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump(rows, f)
    else:
        with open(path, "wb") as f:
            msgpack.dump(rows, f)

    logger.info(f"Saved grid to {path}")
    return path
