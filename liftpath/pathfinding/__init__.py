"""
Pathfinding module.

Provides least-cost routing over a built room graph:
- shortest_path: Cheapest route on a built graph
- solve: One-off route straight from a grid
- GridRouter: Holds the graph of one grid for repeated routing
"""

from liftpath.pathfinding.frontier import Frontier
from liftpath.pathfinding.router import GridRouter
from liftpath.pathfinding.solver import (
    WeightRecord,
    compute_weights,
    path_cost,
    reconstruct_path,
    shortest_path,
    solve,
)

__all__ = [
    "Frontier",
    "GridRouter",
    "WeightRecord",
    "compute_weights",
    "path_cost",
    "reconstruct_path",
    "shortest_path",
    "solve",
]
