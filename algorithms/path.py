"""
path.py — Path Reconstruction
==============================
Walks `previous` links from the goal back to the root and reverses.
"""

from typing import List

from grid import Grid, Cell


def reconstruct(grid: Grid, end: Cell) -> List[Cell]:
    """
    Start-first list of cells ending at `end`.

    Empty when `end` was never visited; the caller reads that as
    "no path found".  When start == end the result is just [end].
    """
    if not end.is_visited:
        return []

    path: List[Cell] = []
    cur = end
    while cur is not None:
        path.append(cur)
        cur = grid.at(cur.previous)
    path.reverse()
    return path


def is_connected_chain(path: List[Cell]) -> bool:
    """True when every consecutive pair is orthogonally adjacent."""
    return all(a.manhattan(b) == 1 for a, b in zip(path, path[1:]))
