"""
recursive_backtracking.py — Depth-first maze carver
====================================================
Starts from (1, 1) and walks two cells at a time, knocking out the wall
in between.  Directions are shuffled at every step; when none leads to
an uncarved cell the walker backtracks by popping the stack.

Produces long winding corridors and a perfect maze over every odd cell
inside the border.
"""

import random
from typing import List, Optional, Tuple

from grid import Grid

STEPS: List[Tuple[int, int]] = [(0, 2), (2, 0), (0, -2), (-2, 0)]


def recursive_backtracking(rows: int, cols: int, rng: Optional[random.Random] = None) -> Grid:
    rng = rng or random.Random()
    walls = [[True] * cols for _ in range(rows)]

    walls[1][1] = False
    stack = [(1, 1)]
    directions = list(STEPS)

    while stack:
        r, c = stack[-1]
        rng.shuffle(directions)
        for dr, dc in directions:
            nr, nc = r + dr, c + dc
            if 0 < nr < rows - 1 and 0 < nc < cols - 1 and walls[nr][nc]:
                walls[r + dr // 2][c + dc // 2] = False
                walls[nr][nc] = False
                stack.append((nr, nc))
                break
        else:
            stack.pop()

    return Grid.from_walls(walls)
