"""
dfs.py — Depth-First Search
============================
Stack-based DFS.  A cell can sit on the stack several times (once per
visited neighbour that saw it); only the first pop processes it, the
stale copies are dropped by the visited / wall check.

`previous` follows the most recent push, which is always the entry
popped first, so the reconstructed path is exactly the branch DFS
walked down.  Not shortest-path.
"""

from typing import Generator, List

from grid import Grid, Cell


def dfs(grid: Grid, start: Cell, end: Cell) -> Generator[Cell, None, None]:
    """
    Yields each cell as DFS marks it visited, following the newest branch.

    Args:
        grid  : The grid to search.
        start : Origin cell.
        end   : Goal cell.

    Yields:
        Cell – one per visit.  `previous` tracks the branch actually walked.
    """
    stack: List[Cell] = [start]
    start.distance = 0

    while stack:
        cell = stack.pop()
        if cell.is_visited or cell.is_wall:
            continue

        cell.is_visited = True
        yield cell
        if cell is end:
            return

        for nbr in grid.neighbours(cell):
            if not nbr.is_visited and not nbr.is_wall:
                nbr.previous = cell.coord
                nbr.distance = cell.distance + 1
                stack.append(nbr)
