"""
greedy_bfs.py — Greedy Best-First Search
=========================================
Always expands the open cell that *looks* closest to the goal: pure
Manhattan heuristic, no cost-so-far term.

The frontier is a plain list re-sorted (stable) before every pop, so
equal-heuristic cells come out in the order they were discovered.  A
companion set keeps the "already in the frontier?" check O(1); a cell
enters the frontier at most once and keeps the predecessor that
discovered it.

Fast on open boards, NOT optimal; compare with A* to see the difference.
"""

from typing import Generator, List, Set

from grid import Grid, Cell, Coord


def greedy_bfs(grid: Grid, start: Cell, end: Cell) -> Generator[Cell, None, None]:
    """
    Args:
        grid  : The grid to search.
        start : Origin cell.
        end   : Goal cell; also the heuristic target.

    Yields:
        Cell – one per visit, lowest Manhattan estimate first.
    """
    start.heuristic = start.manhattan(end)
    frontier: List[Cell] = [start]
    in_frontier: Set[Coord] = {start.coord}

    while frontier:
        frontier.sort(key=lambda c: c.heuristic)
        cell = frontier.pop(0)
        in_frontier.discard(cell.coord)
        if cell.is_visited or cell.is_wall:
            continue

        cell.is_visited = True
        yield cell
        if cell is end:
            return

        for nbr in grid.neighbours(cell):
            if nbr.is_visited or nbr.is_wall or nbr.coord in in_frontier:
                continue
            nbr.heuristic = nbr.manhattan(end)
            nbr.previous = cell.coord
            frontier.append(nbr)
            in_frontier.add(nbr.coord)
