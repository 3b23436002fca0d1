"""
Router that owns the graph built for one grid.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from liftpath.graph import Cell, Graph, build_graph, validate_grid
from liftpath.pathfinding.solver import path_cost, shortest_path

logger = logging.getLogger(__name__)


class GridRouter:
    """
    Routes over a fixed grid, building its graph on first use.

    The grid must not change for the lifetime of the router. The built
    graph is read-only, so routes may be requested from several threads.
    """

    def __init__(self, grid: Sequence[Sequence[int]]) -> None:
        """
        Initialize the router.

        Args:
            grid: Rows of non-negative integer costs, 0 meaning impassable

        Raises:
            InvalidGridError: If the grid is malformed
        """
        validate_grid(grid)
        self._grid = grid
        self._graph: Graph | None = None

    @property
    def graph(self) -> Graph:
        """The graph for this grid, built on first access."""
        if self._graph is None:
            logger.debug("Building graph on first route request")
            self._graph = build_graph(self._grid)
        return self._graph

    def route(self, start: tuple[int, int], end: tuple[int, int]) -> list[Cell]:
        """Cheapest route from start to end, or an empty list if there is none."""
        return shortest_path(self.graph, start, end)

    def cost(self, path: Sequence[tuple[int, int]]) -> int:
        """Total cost of a route on this grid."""
        return path_cost(self.graph, path)

    def __repr__(self) -> str:
        built = self._graph is not None
        return f"{self.__class__.__name__}(built={built})"
