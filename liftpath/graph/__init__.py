"""
Graph module.

Turns a grid of room costs into a graph of traversable cells:
- Cell: (row, col) coordinate
- Node: Traversable cell with its weight and neighbors
- Graph: Read-only collection of nodes
- build_graph: Grid -> Graph
"""

from liftpath.graph.builder import DIRECTIONS, build_graph, validate_grid
from liftpath.graph.model import Cell, Graph, Node

__all__ = [
    "Cell",
    "Node",
    "Graph",
    "DIRECTIONS",
    "build_graph",
    "validate_grid",
]
