"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS.  Yields each Cell at the moment it is marked
visited, so draining the generator gives the visitation trace.

  1. Dequeue a cell  →  skip if already visited (or a wall)
  2. Mark visited, yield it
  3. Stop right after yielding the goal
  4. Enqueue every undiscovered open neighbour (distance + 1, previous = cell)

Distance is the hop count from start, so the first visit of the goal
is along a shortest path.
"""

from collections import deque
from typing import Generator

from grid import Grid, Cell, INF


def bfs(grid: Grid, start: Cell, end: Cell) -> Generator[Cell, None, None]:
    """
    Yields each cell as BFS marks it visited, nearest layers first.

    Args:
        grid  : The grid to search; search state is written into its cells.
        start : Origin cell.
        end   : Goal cell.  The search stops right after visiting it.

    Yields:
        Cell – one per visit, in visitation order.
    """
    queue = deque([start])
    start.distance = 0

    while queue:
        cell = queue.popleft()
        if cell.is_visited or cell.is_wall:
            continue

        cell.is_visited = True
        yield cell
        if cell is end:
            return

        for nbr in grid.neighbours(cell):
            if nbr.is_visited or nbr.is_wall:
                continue
            # first discovery wins; later sightings are never shorter
            if nbr.distance == INF:
                nbr.distance = cell.distance + 1
                nbr.previous = cell.coord
                queue.append(nbr)
