"""
session.py — Visualizer Session
================================
Everything one user's board needs between requests: the base layout,
the two display grids, algorithm choices, speed, per-side stats and the
"run in progress" flag.  The HTTP layer is a thin wrapper around this.

Rules enforced here:
  - Every entry point that replaces grids or paths cancels the running
    timeline first, so a stale frame can never land on a new grid.
  - Layout edits (walls, start, end) and the comparison-mode toggle are
    refused while a run is active.
  - `is_running` only drops once every animation in the timeline is done.

Time is passed in as milliseconds (`now_ms`); when omitted the session's
clock is used.  Tests inject a fake clock.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from grid import Grid, GRID_SIZES
from algorithms import get_algorithm
from mazes import generate_maze
from engine.recorder import Recorder, RunRecord, ComparisonResult, compare
from engine.scheduler import (
    Animation, Timeline, RunStats, build_schedule, resolve_speed,
    monotonic_ms, PATH_DELAY_MS,
)

logger = logging.getLogger(__name__)


class Visualizer:
    """
    Attributes:
        base_grid       : Layout the user edits; never searched directly.
        grids           : [left, right] display grids the animations paint.
        stats           : [left, right] RunStats, replaced when a run completes.
        algo            : Search for the left board.
        compare_algo    : Search for the right board (comparison mode only).
        comparison_mode : Run both boards side by side?
        speed_ms        : Delay per visited cell.
        is_running      : True while any animation is still playing.
    """

    def __init__(
        self,
        rows: int = 21,
        cols: int = 21,
        border_walls: bool = False,
        algo: str = "astar",
        compare_algo: str = "bfs",
        speed_ms: float = 15,
        path_delay_ms: float = PATH_DELAY_MS,
        wall_probability: float = 0.3,
        clock: Callable[[], float] = monotonic_ms,
    ):
        self.rows = rows
        self.cols = cols
        self.border_walls = border_walls
        self.path_delay_ms = path_delay_ms
        self.wall_probability = wall_probability
        self.clock = clock

        self.algo: str = "astar"
        self.compare_algo: str = "bfs"
        self.set_algorithms(algo, compare_algo)
        self.speed_ms: float = resolve_speed(speed_ms)
        self.comparison_mode: bool = False

        self.recorder = Recorder()
        self.timeline: Optional[Timeline] = None
        self.is_running: bool = False
        self.runs: List[RunRecord] = []
        self.comparison: Optional[ComparisonResult] = None

        self.base_grid: Grid = Grid.create(rows, cols, border_walls=border_walls)
        self.grids: List[Grid] = []
        self.stats: List[RunStats] = []
        self._sync(self.base_grid)

    @classmethod
    def from_config(cls, config: Mapping[str, Any], **kwargs) -> "Visualizer":
        rows, cols = GRID_SIZES[config.get("GRID_SIZE", "compact")]
        return cls(
            rows=rows,
            cols=cols,
            border_walls=config.get("BORDER_WALLS", False),
            algo=config.get("DEFAULT_ALGO", "astar"),
            compare_algo=config.get("DEFAULT_COMPARE_ALGO", "bfs"),
            speed_ms=config.get("SPEED_MS", 15),
            path_delay_ms=config.get("PATH_DELAY_MS", PATH_DELAY_MS),
            wall_probability=config.get("WALL_PROBABILITY", 0.3),
            **kwargs,
        )

    # ==================================================================
    # SETTINGS
    # ==================================================================
    def set_algorithms(self, algo: Optional[str] = None, compare_algo: Optional[str] = None) -> None:
        for key in (algo, compare_algo):
            if key is not None and get_algorithm(key) is None:
                raise ValueError(f"Unknown algorithm: {key}")
        if algo is not None:
            self.algo = algo
        if compare_algo is not None:
            self.compare_algo = compare_algo

    def set_speed(self, speed) -> None:
        """Takes effect on the next run."""
        self.speed_ms = resolve_speed(speed)

    def set_comparison_mode(self, enabled: bool) -> bool:
        """Refused while running: the board count must not change mid-animation."""
        if self.is_running:
            return False
        self.comparison_mode = bool(enabled)
        return True

    # ==================================================================
    # GRID / PATH MUTATIONS  (all cancel the timeline first)
    # ==================================================================
    def reset_grid(self) -> None:
        self.cancel()
        self._sync(Grid.create(self.rows, self.cols, border_walls=self.border_walls))
        logger.info("grid reset")

    def clear_path(self) -> None:
        self.cancel()
        self._sync(self.base_grid)

    def generate_maze(self, key: str, seed: Optional[int] = None) -> Grid:
        options = {"probability": self.wall_probability} if key == "random" else {}
        grid = generate_maze(key, self.rows, self.cols, seed=seed, **options)
        self.cancel()
        self._sync(grid)
        logger.info("maze generated: %s (seed=%s)", key, seed)
        return grid

    def move_start(self, row: int, col: int) -> bool:
        if self.is_running:
            return False
        self.cancel()
        if not self.base_grid.move_start(row, col):
            return False
        self._sync(self.base_grid)
        return True

    def move_end(self, row: int, col: int) -> bool:
        if self.is_running:
            return False
        self.cancel()
        if not self.base_grid.move_end(row, col):
            return False
        self._sync(self.base_grid)
        return True

    def toggle_wall(self, row: int, col: int) -> bool:
        # only reachable while idle, so there is no timeline to cancel
        if self.is_running:
            return False
        if not self.base_grid.toggle_wall(row, col):
            return False
        self._sync(self.base_grid)
        return True

    # ==================================================================
    # RUN
    # ==================================================================
    def visualize(self, now_ms: Optional[float] = None) -> bool:
        """
        Search synchronously, then schedule the animation(s) from `now_ms`.
        Returns False (and does nothing) if a run is already in progress.
        """
        if self.is_running:
            return False
        self.clear_path()

        keys = [self.algo, self.compare_algo] if self.comparison_mode else [self.algo]
        self.runs = [self.recorder.record(key, self.base_grid) for key in keys]
        self.comparison = None

        animations = [self._animation(side, run) for side, run in enumerate(self.runs)]
        self.timeline = Timeline(animations, on_all_done=self._on_all_done)
        self.is_running = True
        self.timeline.start(self.clock() if now_ms is None else now_ms)
        logger.info("run started: %s", " vs ".join(keys))
        return True

    def tick(self, now_ms: Optional[float] = None) -> int:
        """Deliver every frame due by `now_ms`.  Returns frames delivered."""
        if self.timeline is None:
            return 0
        return self.timeline.tick(self.clock() if now_ms is None else now_ms)

    def cancel(self) -> None:
        """Void every outstanding frame and drop the run-active flag."""
        if self.timeline is not None:
            if self.is_running:
                logger.info("run cancelled")
            self.timeline.cancel()
            self.timeline = None
        self.is_running = False

    # ==================================================================
    # VIEW
    # ==================================================================
    def snapshot(self) -> Dict[str, Any]:
        boards = 2 if self.comparison_mode else 1
        data: Dict[str, Any] = {
            "is_running":      self.is_running,
            "comparison_mode": self.comparison_mode,
            "algo":            self.algo,
            "compare_algo":    self.compare_algo,
            "speed_ms":        self.speed_ms,
            "grids":           [g.to_dict() for g in self.grids[:boards]],
            "stats":           [s.to_dict() for s in self.stats[:boards]],
        }
        if self.comparison is not None:
            data["comparison"] = {
                "visited": self.comparison.winner_visited,
                "path":    self.comparison.winner_path,
                "time":    self.comparison.winner_time,
            }
        return data

    # ==================================================================
    # Internal
    # ==================================================================
    def _sync(self, base: Grid) -> None:
        """Install a new base layout and fresh display grids; stats reset."""
        self.base_grid = base
        self.grids = [base.clone(), base.clone()]
        self.stats = [RunStats(), RunStats()]

    def _animation(self, side: int, run: RunRecord) -> Animation:
        display = self.grids[side]

        def on_visit(coord):
            display.cell(*coord).is_visited = True

        def on_path(coord):
            display.cell(*coord).is_path = True

        def on_complete(stats: RunStats):
            self.stats[side] = stats

        events = build_schedule(run.trace, run.path, self.speed_ms, self.path_delay_ms)
        return Animation(events, run.stats, on_visit, on_path, on_complete)

    def _on_all_done(self) -> None:
        self.is_running = False
        if len(self.runs) == 2:
            self.comparison = compare(self.runs[0], self.runs[1])
        logger.info(
            "run finished: %s",
            ", ".join(f"{r.algo_key} visited={r.stats.visited_count} path={r.stats.path_length}" for r in self.runs),
        )
