"""
Least-cost routes between two cells of a built graph.

The cost of a route is the sum of the weights of every cell entered
after the start. The search is a Dijkstra relaxation over a stable
min-heap, so among equal-cost routes the one whose cells were relaxed
first (up, down, left, right from each expanded cell) is returned.

Usage:
    from liftpath.pathfinding import shortest_path, solve

    graph = build_graph(grid)
    shortest_path(graph, (0, 0), (3, 2))

    # One-off solve without keeping the graph
    solve(grid, (0, 0), (3, 2))
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from liftpath.errors import InvalidPathError
from liftpath.graph import Cell, Graph, build_graph
from liftpath.pathfinding.frontier import Frontier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeightRecord:
    """
    Best known way of reaching a node during one solve.

    Attributes:
        cost: Accumulated cost from the start node
        previous: Id of the predecessor node, None for the start node
    """

    cost: int
    previous: int | None = None


def compute_weights(
    graph: Graph,
    start: tuple[int, int],
    end: tuple[int, int],
) -> dict[int, WeightRecord]:
    """
    Relax costs outward from the start until the end node is settled.

    Returns:
        Weight records keyed by node id. Empty if the start cell has no node.
        The end node has a record only if it is reachable.
    """
    start_node = graph.node_at(start)
    if start_node is None:
        logger.debug(f"Start {tuple(start)} is not traversable")
        return {}

    weights = {start_node.id: WeightRecord(cost=0)}

    end_node = graph.node_at(end)
    if end_node is None:
        logger.debug(f"End {tuple(end)} is not traversable")
        return weights

    frontier = Frontier()
    frontier.push(start_node.id, 0)
    visited: set[int] = set()

    while frontier:
        node_id, cost = frontier.pop()

        # Stale entry left behind by a later improvement
        if node_id in visited:
            continue
        visited.add(node_id)

        if node_id == end_node.id:
            break

        for neighbor_id in graph.node(node_id).neighbors:
            if neighbor_id in visited:
                continue

            candidate = cost + graph.node(neighbor_id).weight
            record = weights.get(neighbor_id)
            if record is None or candidate < record.cost:
                weights[neighbor_id] = WeightRecord(cost=candidate, previous=node_id)
                frontier.push(neighbor_id, candidate)

    logger.debug(f"Relaxation settled {len(visited)} of {len(graph)} nodes")
    return weights


def reconstruct_path(
    graph: Graph,
    weights: dict[int, WeightRecord],
    start: tuple[int, int],
    end: tuple[int, int],
) -> list[Cell]:
    """
    Follow predecessors back from the end node.

    Returns:
        Cells from start to end inclusive, or an empty list if either
        endpoint has no weight record
    """
    start_node = graph.node_at(start)
    end_node = graph.node_at(end)
    if start_node is None or end_node is None:
        return []
    if start_node.id not in weights or end_node.id not in weights:
        return []

    path = []
    node_id: int | None = end_node.id
    while node_id is not None:
        path.append(graph.node(node_id).cell)
        node_id = weights[node_id].previous

    path.reverse()
    return path


def shortest_path(
    graph: Graph,
    start: tuple[int, int],
    end: tuple[int, int],
) -> list[Cell]:
    """
    Find the cheapest route between two cells.

    Args:
        graph: Graph built from the cost grid
        start: (row, col) to start from
        end: (row, col) to reach

    Returns:
        Cells from start to end inclusive. Empty if start or end is
        impassable or outside the grid, or no route connects them.
    """
    weights = compute_weights(graph, start, end)
    path = reconstruct_path(graph, weights, start, end)

    if path:
        logger.debug(
            f"Route {tuple(start)} -> {tuple(end)}: {len(path)} cells, "
            f"cost {weights[graph.node_at(end).id].cost}"
        )
    else:
        logger.debug(f"No route {tuple(start)} -> {tuple(end)}")

    return path


def path_cost(graph: Graph, path: Sequence[tuple[int, int]]) -> int:
    """
    Sum the weights of every cell entered after the first.

    Raises:
        InvalidPathError: If a cell on the path is not traversable
    """
    total = 0
    for cell in path[1:]:
        node = graph.node_at(cell)
        if node is None:
            raise InvalidPathError(f"Cell {tuple(cell)} is not traversable")
        total += node.weight
    return total


def solve(
    grid: Sequence[Sequence[int]],
    start: tuple[int, int],
    end: tuple[int, int],
) -> list[Cell]:
    """
    Build a graph for the grid and find the cheapest route on it.

    Callers solving repeatedly over one grid should hold a GridRouter
    (or a built Graph) instead, so the graph is built only once.
    """
    return shortest_path(build_graph(grid), start, end)
