"""
mazes/__init__.py — Maze Generator Registry
============================================
    from mazes import MAZES, generate_maze

Every generator is `fn(rows, cols, rng=None) -> Grid` and always returns
a brand-new grid with start at (1, 1) and end at (rows-2, cols-2), both
open.  Pass a seed to `generate_maze` for a reproducible layout.
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from grid import Grid

from mazes.recursive_backtracking import recursive_backtracking as _backtrack
from mazes.prims                  import prims                  as _prims
from mazes.kruskals               import kruskals               as _kruskals
from mazes.random_walls           import random_walls           as _random_walls, WALL_PROBABILITY

logger = logging.getLogger(__name__)


@dataclass
class MazeInfo:
    key:          str
    label:        str
    fn:           Callable
    perfect:      bool = True      # spanning tree over the rooms?
    description:  str  = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "label": self.label, "perfect": self.perfect, "description": self.description}


MAZES: Dict[str, MazeInfo] = {
    "recursive": MazeInfo(
        key="recursive", label="Recursive Backtracking", fn=_backtrack,
        description="DFS-based, long corridors.",
    ),
    "prims": MazeInfo(
        key="prims", label="Prim's", fn=_prims,
        description="Random frontier growth, short dead ends.",
    ),
    "kruskals": MazeInfo(
        key="kruskals", label="Kruskal's", fn=_kruskals,
        description="Union-find over rooms, evenly spread branching.",
    ),
    "random": MazeInfo(
        key="random", label="Random Walls", fn=_random_walls, perfect=False,
        description=f"Each cell is a wall with probability {WALL_PROBABILITY}.",
    ),
}


def get_maze(key: str) -> Optional[MazeInfo]:
    return MAZES.get(key)


def list_mazes() -> List[MazeInfo]:
    return list(MAZES.values())


def generate_maze(key: str, rows: int, cols: int, seed: Optional[int] = None, **options) -> Grid:
    """Build a fresh grid with the named generator.  `options` go to the generator."""
    info = get_maze(key)
    if info is None:
        raise ValueError(f"Unknown maze generator: {key}")
    grid = info.fn(rows, cols, rng=random.Random(seed), **options)
    logger.debug("generated %s maze %dx%d (seed=%s, walls=%d)", key, rows, cols, seed, grid.wall_count())
    return grid


__all__ = [
    "MazeInfo",
    "MAZES",
    "get_maze",
    "list_mazes",
    "generate_maze",
    "WALL_PROBABILITY",
]
