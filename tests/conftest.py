from collections import deque

import pytest

from grid import Grid


class FakeClock:
    """Manual millisecond clock; `sleep` takes seconds like time.sleep."""

    def __init__(self, now: float = 0.0):
        self.now = now
        self.slept = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.slept.append(seconds)
        self.now += seconds * 1000.0


def flood(grid: Grid):
    """Coordinates of every open cell reachable from start."""
    seen = {grid.start_coord}
    queue = deque([grid.start])
    while queue:
        cell = queue.popleft()
        for nbr in grid.neighbours(cell):
            if not nbr.is_wall and nbr.coord not in seen:
                seen.add(nbr.coord)
                queue.append(nbr)
    return seen


def open_cells(grid: Grid):
    return {c.coord for c in grid if not c.is_wall}


def enclose_end(grid: Grid) -> None:
    for nbr in grid.neighbours(grid.end):
        grid.toggle_wall(nbr.row, nbr.col)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def open_grid():
    return Grid.create(21, 21)
