"""
grid/
-----
Core data layer.  Public API:

    from grid import Grid, Cell, CellState
    from grid import GRID_SIZES
"""

from grid.cell import Cell, CellState, Coord, INF
from grid.grid import Grid, GRID_SIZES, DIRECTIONS, default_endpoints

__all__ = [
    "Cell",      "CellState",
    "Coord",     "INF",
    "Grid",      "GRID_SIZES",
    "DIRECTIONS", "default_endpoints",
]
