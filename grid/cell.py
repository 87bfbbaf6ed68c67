"""
cell.py — Grid Cell
===================
One addressable square of the grid.  Carries its structural flags
(start / end / wall) plus the search state that algorithms write while
they run.

Design decisions:
  - `previous` is a (row, col) tuple, NOT a Cell reference.  The owning
    Grid resolves it.  Cloning a grid therefore never drags stale
    references from the old grid along.
  - Search state has a single reset point (`reset_search_state`) so a
    clone and a fresh cell are indistinguishable to an algorithm.
"""

from enum import Enum
from typing import Optional, Tuple


Coord = Tuple[int, int]

INF = float("inf")


# ---------------------------------------------------------------------------
# Cell State Enum: what the renderer needs to pick a colour
# ---------------------------------------------------------------------------
class CellState(Enum):
    EMPTY   = "empty"
    WALL    = "wall"
    START   = "start"
    END     = "end"
    VISITED = "visited"
    PATH    = "path"


# ---------------------------------------------------------------------------
# Cell
# ---------------------------------------------------------------------------
class Cell:
    """
    Attributes:
        row, col   : Position inside the owning grid (never changes).
        is_start   : Search origin.  Exactly one per grid.
        is_end     : Search goal.  Exactly one per grid.
        is_wall    : Blocks traversal.
        is_visited : Set when a search marks the cell processed.
        is_path    : Set when the cell lies on the reconstructed path.
        distance   : Cost from start (BFS / A*).
        heuristic  : Manhattan estimate to the goal (greedy / A*).
        previous   : (row, col) of the predecessor, or None.
    """

    __slots__ = (
        "row", "col", "is_start", "is_end", "is_wall",
        "is_visited", "is_path", "distance", "heuristic", "previous",
    )

    def __init__(self, row: int, col: int, is_wall: bool = False):
        self.row: int        = row
        self.col: int        = col
        self.is_start: bool  = False
        self.is_end: bool    = False
        self.is_wall: bool   = is_wall
        self.reset_search_state()

    # ------------------------------------------------------------------
    # State helpers
    # ------------------------------------------------------------------
    def reset_search_state(self) -> None:
        """Wipe everything a search or an animation wrote; keep layout."""
        self.is_visited: bool          = False
        self.is_path: bool             = False
        self.distance: float           = INF
        self.heuristic: float          = 0
        self.previous: Optional[Coord] = None

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    @property
    def state(self) -> CellState:
        if self.is_start:
            return CellState.START
        if self.is_end:
            return CellState.END
        if self.is_wall:
            return CellState.WALL
        if self.is_path:
            return CellState.PATH
        if self.is_visited:
            return CellState.VISITED
        return CellState.EMPTY

    def manhattan(self, other: "Cell") -> int:
        """|Δrow| + |Δcol|, admissible on a 4-connected unit grid."""
        return abs(self.row - other.row) + abs(self.col - other.col)

    def copy_layout(self) -> "Cell":
        """New cell with the same layout flags and fresh search state."""
        cell = Cell(self.row, self.col, is_wall=self.is_wall)
        cell.is_start = self.is_start
        cell.is_end   = self.is_end
        return cell

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col}, state={self.state.value})"
