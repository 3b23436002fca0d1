"""
Data loading module.

Reads and writes room cost grids in JSON, msgpack and numpy formats.

Usage:
    from liftpath.data import load_grid

    grid = load_grid("data/times.json")
"""

from liftpath.data.loader import grid_from_array, load_grid, save_grid

__all__ = ["grid_from_array", "load_grid", "save_grid"]
