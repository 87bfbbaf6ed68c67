"""
prims.py — Randomized Prim's maze
==================================
Grows the maze outward from (1, 1).  The frontier holds candidate walls
`(wall_r, wall_c, far_r, far_c)`; each round one is picked uniformly at
random and carved only if the cell behind it is still solid, which
keeps the passage graph a tree.
"""

import random
from typing import List, Optional, Tuple

from grid import Grid

STEPS: List[Tuple[int, int]] = [(0, 2), (2, 0), (0, -2), (-2, 0)]

Candidate = Tuple[int, int, int, int]


def prims(rows: int, cols: int, rng: Optional[random.Random] = None) -> Grid:
    rng = rng or random.Random()
    walls = [[True] * cols for _ in range(rows)]
    frontier: List[Candidate] = []

    def add_candidates(r: int, c: int) -> None:
        for dr, dc in STEPS:
            nr, nc = r + dr, c + dc
            if 0 < nr < rows - 1 and 0 < nc < cols - 1 and walls[nr][nc]:
                frontier.append((r + dr // 2, c + dc // 2, nr, nc))

    walls[1][1] = False
    add_candidates(1, 1)

    while frontier:
        # swap-remove: order inside the frontier carries no meaning
        idx = rng.randrange(len(frontier))
        frontier[idx], frontier[-1] = frontier[-1], frontier[idx]
        wr, wc, cr, cc = frontier.pop()
        if walls[cr][cc]:
            walls[wr][wc] = False
            walls[cr][cc] = False
            add_candidates(cr, cc)

    return Grid.from_walls(walls)
