"""
astar.py — A* Search
=====================
Frontier ordered by f = g + h where g is `distance` (hops from start) and
h is the Manhattan distance to the goal.  Manhattan never overestimates
on a 4-connected unit grid, so the first visit of the goal is optimal.

Relaxation only fires on a strict improvement (ties keep the earlier
predecessor).  A cell already waiting in the frontier is re-scored in
place, never duplicated; the list is re-sorted (stable) before each pop.
"""

from typing import Generator, List, Set

from grid import Grid, Cell, Coord


def f_score(cell: Cell) -> float:
    return cell.distance + cell.heuristic


def astar(grid: Grid, start: Cell, end: Cell) -> Generator[Cell, None, None]:
    """
    Yields each cell as A* marks it visited, lowest f = g + h first.

    Args:
        grid  : The grid to search.
        start : Origin cell.
        end   : Goal cell; also the heuristic target.

    Yields:
        Cell – one per visit.  On reaching `end`, `end.distance` is the
        shortest path length in steps.
    """
    start.distance = 0
    start.heuristic = start.manhattan(end)
    frontier: List[Cell] = [start]
    in_frontier: Set[Coord] = {start.coord}

    while frontier:
        frontier.sort(key=f_score)
        cell = frontier.pop(0)
        in_frontier.discard(cell.coord)
        if cell.is_visited or cell.is_wall:
            continue

        cell.is_visited = True
        yield cell
        if cell is end:
            return

        for nbr in grid.neighbours(cell):
            if nbr.is_visited or nbr.is_wall:
                continue
            tentative = cell.distance + 1
            if tentative < nbr.distance:
                nbr.distance = tentative
                nbr.heuristic = nbr.manhattan(end)
                nbr.previous = cell.coord
                if nbr.coord not in in_frontier:
                    frontier.append(nbr)
                    in_frontier.add(nbr.coord)
