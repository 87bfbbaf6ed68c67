"""
grid.py — Grid Container
========================
Single source of truth for one board.  Search engines, maze generators
and the animation layer all talk to this object.

Responsibilities:
  1. Construction                (blank, bordered, carved wall matrix, size presets)
  2. Neighbour queries           (fixed up / down / left / right order)
  3. Clone-and-reset             (fresh search state, same layout)
  4. Layout edits                (wall toggle, start / end moves)
  5. Serialisation             (to_dict, layout plus display flags)

Design decisions:
  - Cells live in a row-major list of lists; `cells[r][c].coord == (r, c)`
    always holds.
  - Start / end coordinates are tracked on the grid so lookups are O(1)
    and the one-start / one-end invariant is enforced in a single place.
  - Edits never raise.  An invalid edit returns False and leaves the grid
    untouched.
"""

from typing import Dict, List, Tuple, Optional, Iterator, Any

from grid.cell import Cell, Coord


# ---------------------------------------------------------------------------
# Size presets (rows, cols)
# ---------------------------------------------------------------------------
GRID_SIZES: Dict[str, Tuple[int, int]] = {
    "compact": (21, 21),
    "wide":    (21, 41),
}

# neighbour order is part of the contract: it decides traversal tie-breaks
DIRECTIONS: List[Coord] = [(-1, 0), (1, 0), (0, -1), (0, 1)]   # up, down, left, right


def default_endpoints(rows: int, cols: int) -> Tuple[Coord, Coord]:
    """Start and end sit one cell inside opposite corners."""
    return (1, 1), (rows - 2, cols - 2)


class Grid:
    """
    Attributes:
        rows, cols : Fixed dimensions.
        cells      : [[Cell, …], …] row-major.
        start_coord, end_coord : where the endpoints currently are.
    """

    def __init__(self, rows: int, cols: int):
        if rows < 4 or cols < 4:
            raise ValueError(f"Grid must be at least 4x4, got {rows}x{cols}")
        self.rows: int = rows
        self.cols: int = cols
        self.cells: List[List[Cell]] = [
            [Cell(r, c) for c in range(cols)] for r in range(rows)
        ]
        self.start_coord: Coord
        self.end_coord: Coord
        start, end = default_endpoints(rows, cols)
        self._place_endpoints(start, end)

    # ==================================================================
    # FACTORIES
    # ==================================================================
    @classmethod
    def create(cls, rows: int, cols: int, border_walls: bool = False) -> "Grid":
        """
        Blank grid with start at (1, 1) and end at (rows-2, cols-2).
        With `border_walls` the outermost ring is solid wall.
        """
        grid = cls(rows, cols)
        if border_walls:
            for cell in grid:
                if cell.row in (0, rows - 1) or cell.col in (0, cols - 1):
                    cell.is_wall = True
        return grid

    @classmethod
    def from_size(cls, size: str = "compact", border_walls: bool = False) -> "Grid":
        if size not in GRID_SIZES:
            raise ValueError(f"Unknown grid size: {size}")
        rows, cols = GRID_SIZES[size]
        return cls.create(rows, cols, border_walls=border_walls)

    @classmethod
    def from_walls(cls, walls: List[List[bool]]) -> "Grid":
        """
        Wrap a carved wall matrix.  Endpoints go to their default spots and
        are forced open even if the carving never reached them.
        """
        rows, cols = len(walls), len(walls[0])
        grid = cls(rows, cols)
        for cell in grid:
            cell.is_wall = bool(walls[cell.row][cell.col])
        grid._place_endpoints(grid.start_coord, grid.end_coord)
        return grid

    # ==================================================================
    # LOOKUP
    # ==================================================================
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def at(self, coord: Optional[Coord]) -> Optional[Cell]:
        """Resolve a (row, col) back-reference, None-safe."""
        if coord is None:
            return None
        return self.cells[coord[0]][coord[1]]

    @property
    def start(self) -> Cell:
        return self.cell(*self.start_coord)

    @property
    def end(self) -> Cell:
        return self.cell(*self.end_coord)

    def neighbours(self, cell: Cell) -> List[Cell]:
        """In-bounds orthogonal neighbours, always up, down, left, right."""
        result = []
        for dr, dc in DIRECTIONS:
            r, c = cell.row + dr, cell.col + dc
            if self.in_bounds(r, c):
                result.append(self.cells[r][c])
        return result

    # ==================================================================
    # CLONE
    # ==================================================================
    def clone(self) -> "Grid":
        """Deep copy with walls / endpoints kept and search state reset."""
        twin = Grid.__new__(Grid)
        twin.rows = self.rows
        twin.cols = self.cols
        twin.cells = [[cell.copy_layout() for cell in row] for row in self.cells]
        twin.start_coord = self.start_coord
        twin.end_coord = self.end_coord
        return twin

    # ==================================================================
    # LAYOUT EDITS  (silently rejected when invalid)
    # ==================================================================
    def toggle_wall(self, row: int, col: int) -> bool:
        if not self.in_bounds(row, col):
            return False
        cell = self.cells[row][col]
        if cell.is_start or cell.is_end:
            return False
        cell.is_wall = not cell.is_wall
        return True

    def move_start(self, row: int, col: int) -> bool:
        if not self.in_bounds(row, col):
            return False
        target = self.cells[row][col]
        if target.is_end or target.is_wall:
            return False
        self.start.is_start = False
        target.is_start = True
        self.start_coord = (row, col)
        return True

    def move_end(self, row: int, col: int) -> bool:
        if not self.in_bounds(row, col):
            return False
        target = self.cells[row][col]
        if target.is_start or target.is_wall:
            return False
        self.end.is_end = False
        target.is_end = True
        self.end_coord = (row, col)
        return True

    def _place_endpoints(self, start: Coord, end: Coord) -> None:
        """Used by constructors only: endpoints are forced open."""
        self.start_coord = start
        self.end_coord = end
        s, e = self.cell(*start), self.cell(*end)
        s.is_start, s.is_wall = True, False
        e.is_end, e.is_wall = True, False

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> Dict[str, Any]:
        return {
            "rows":  self.rows,
            "cols":  self.cols,
            "start": list(self.start_coord),
            "end":   list(self.end_coord),
            "walls": [[c.is_wall for c in row] for row in self.cells],
            "states": [[c.state.value for c in row] for row in self.cells],
            "visited": [list(c.coord) for c in self if c.is_visited],
            "path":    [list(c.coord) for c in self if c.is_path],
        }

    # ==================================================================
    # UTILITY
    # ==================================================================
    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def wall_count(self) -> int:
        return sum(1 for c in self if c.is_wall)

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, start={self.start_coord}, end={self.end_coord})"
