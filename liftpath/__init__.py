"""
Lift pathfinding toolkit.

Builds a navigable graph out of a grid of room traversal costs and finds
the cheapest route for a lift moving between rooms on different floors.
"""

__version__ = "0.1.0"
