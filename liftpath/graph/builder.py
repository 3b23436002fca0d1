"""
Builds a navigable graph out of a grid of room traversal costs.

Usage:
    from liftpath.graph import build_graph

    graph = build_graph([[1, 1], [1, 0]])
    graph.node_at((0, 0)).neighbors
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from numbers import Integral

import numpy as np

from liftpath.config import IMPASSABLE
from liftpath.errors import InvalidGridError
from liftpath.graph.model import Cell, Graph, Node

logger = logging.getLogger(__name__)

# Scan order for neighbors. Also the tie-break order between equal-cost routes.
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (-1, 0),  # up
    (1, 0),   # down
    (0, -1),  # left
    (0, 1),   # right
)


def validate_grid(grid: Sequence[Sequence[int]] | np.ndarray) -> None:
    """
    Check that the grid is a rectangular matrix of non-negative integers.

    Lists of rows and 2D numpy integer arrays are both accepted.

    Raises:
        InvalidGridError: If any row has a different length or any cell
            is negative or not an integer
    """
    if isinstance(grid, np.ndarray):
        if grid.ndim != 2:
            raise InvalidGridError(f"Grid array must be 2D, got shape {grid.shape}")
    elif isinstance(grid, (str, bytes)) or not isinstance(grid, Sequence):
        raise InvalidGridError("Grid must be a sequence of rows")

    width = None
    for row_idx, row in enumerate(grid):
        if isinstance(row, (str, bytes)) or not isinstance(row, (Sequence, np.ndarray)):
            raise InvalidGridError(f"Row {row_idx} is not a sequence of costs")

        if width is None:
            width = len(row)
        elif len(row) != width:
            raise InvalidGridError(
                f"Grid is not rectangular: row {row_idx} has {len(row)} cells, expected {width}"
            )

        for col_idx, value in enumerate(row):
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise InvalidGridError(
                    f"Cell ({row_idx}, {col_idx}) is not an integer: {value!r}"
                )
            if value < 0:
                raise InvalidGridError(
                    f"Cell ({row_idx}, {col_idx}) has negative cost {value}"
                )


def build_graph(grid: Sequence[Sequence[int]] | np.ndarray) -> Graph:
    """
    Convert a cost grid into a graph of traversable cells.

    Every cell with a positive cost becomes a node weighted by that cost.
    Nodes are linked to their orthogonal neighbors that are traversable too.
    Impassable cells get no node and no edges.

    Args:
        grid: Rows of non-negative integer costs, 0 meaning impassable

    Returns:
        The built graph. Building twice from the same grid yields equal graphs.

    Raises:
        InvalidGridError: If the grid is malformed
    """
    validate_grid(grid)

    rows = len(grid)
    cols = len(grid[0]) if rows else 0

    # Node ids follow row-major order
    ids: dict[Cell, int] = {}
    for row in range(rows):
        for col in range(cols):
            if grid[row][col] != IMPASSABLE:
                ids[Cell(row, col)] = len(ids)

    nodes = []
    for cell, node_id in ids.items():
        neighbors = []
        for d_row, d_col in DIRECTIONS:
            neighbor_id = ids.get((cell.row + d_row, cell.col + d_col))
            if neighbor_id is not None:
                neighbors.append(neighbor_id)

        nodes.append(
            Node(
                id=node_id,
                cell=cell,
                weight=int(grid[cell.row][cell.col]),
                neighbors=tuple(neighbors),
            )
        )

    graph = Graph(nodes, rows, cols)
    logger.debug(f"Built graph from {rows}x{cols} grid: {len(graph)} nodes, {graph.edge_count()} edges")
    return graph
