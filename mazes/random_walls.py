"""
random_walls.py — Sparse random obstacles
==========================================
Not a maze: an open board where every cell except start and end turns
into a wall with a fixed probability.  No connectivity guarantee.
"""

import random
from typing import Optional

from grid import Grid

WALL_PROBABILITY = 0.3


def random_walls(
    rows: int,
    cols: int,
    rng: Optional[random.Random] = None,
    probability: float = WALL_PROBABILITY,
) -> Grid:
    rng = rng or random.Random()
    grid = Grid.create(rows, cols)
    for cell in grid:
        if not cell.is_start and not cell.is_end:
            cell.is_wall = rng.random() < probability
    return grid
