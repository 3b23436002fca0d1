"""
Graph dataclasses for the room grid.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import NamedTuple


class Cell(NamedTuple):
    """Zero-based grid coordinate. Compares equal to a plain (row, col) tuple."""

    row: int
    col: int


@dataclass(frozen=True)
class Node:
    """
    One traversable grid cell.

    Attributes:
        id: Position of the node in the graph's node list
        cell: Grid coordinate of the node
        weight: Cost of moving into this node
        neighbors: Ids of traversable cells one orthogonal step away,
            in up, down, left, right order
    """

    id: int
    cell: Cell
    weight: int
    neighbors: tuple[int, ...]


class Graph:
    """
    Read-only graph of traversable cells.

    Nodes live in a single list and reference each other by index.
    A built graph is never mutated, so one instance may be shared
    between any number of solves.
    """

    def __init__(self, nodes: list[Node], rows: int, cols: int) -> None:
        self._nodes = tuple(nodes)
        self._index: dict[Cell, int] = {node.cell: node.id for node in nodes}
        self._rows = rows
        self._cols = cols

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols) of the grid the graph was built from."""
        return self._rows, self._cols

    def in_bounds(self, cell: tuple[int, int]) -> bool:
        row, col = cell
        return 0 <= row < self._rows and 0 <= col < self._cols

    def contains(self, cell: tuple[int, int]) -> bool:
        """Check if the cell is traversable."""
        return tuple(cell) in self._index

    def node(self, node_id: int) -> Node:
        return self._nodes[node_id]

    def node_at(self, cell: tuple[int, int]) -> Node | None:
        """Get the node for a cell, or None if the cell is impassable or outside the grid."""
        node_id = self._index.get(tuple(cell))
        if node_id is None:
            return None
        return self._nodes[node_id]

    def edge_count(self) -> int:
        return sum(len(node.neighbors) for node in self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(shape={self.shape}, nodes={len(self)}, edges={self.edge_count()})"
