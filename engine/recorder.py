"""
recorder.py — Run Recorder & Analytics
========================================
Runs one search to completion on a private clone of the base grid and
keeps everything the animation and the stats panel need.

Usage:
    rec = Recorder()
    run = rec.record("astar", base_grid)
    run.trace, run.path, run.stats

Comparison Mode:
    The session records two runs on the SAME base grid (each on its own
    clone), then calls compare(left, right) → ComparisonResult.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import List

from grid import Grid, Cell
from algorithms import get_algorithm, run_search, reconstruct
from engine.scheduler import RunStats

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# RunRecord: one finished search
# ---------------------------------------------------------------------------
@dataclass
class RunRecord:
    algo_key:   str
    algo_label: str
    grid:       Grid                          # the clone the search wrote into
    trace:      List[Cell] = field(default_factory=list)
    path:       List[Cell] = field(default_factory=list)
    stats:      RunStats   = field(default_factory=RunStats)

    @property
    def path_found(self) -> bool:
        return bool(self.path) and self.path[-1] is self.grid.end


# ---------------------------------------------------------------------------
# ComparisonResult: side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunStats = field(default_factory=RunStats)
    right: RunStats = field(default_factory=RunStats)
    # derived
    winner_visited: str = ""   # which algo visited fewer cells
    winner_path:    str = ""   # which algo found the shorter path
    winner_time:    str = ""   # which algo computed faster


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """Stateless; one instance is shared by both boards of a session."""

    def record(self, algo_key: str, base_grid: Grid) -> RunRecord:
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        grid = base_grid.clone()
        start, end = grid.start, grid.end

        t0 = time.perf_counter()
        trace = run_search(algo_key, grid, start, end)
        elapsed_ms = (time.perf_counter() - t0) * 1000

        path = reconstruct(grid, end)
        stats = RunStats(
            visited_count=len(trace),
            path_length=len(path),
            elapsed_ms=elapsed_ms,
        )
        logger.debug(
            "%s: visited=%d path=%d time=%.2fms",
            algo_key, stats.visited_count, stats.path_length, elapsed_ms,
        )

        return RunRecord(
            algo_key=info.key,
            algo_label=info.label,
            grid=grid,
            trace=trace,
            path=path,
            stats=stats,
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: RunRecord, right: RunRecord) -> ComparisonResult:
    """Given two finished runs, say who did better on each metric."""
    l, r = left.stats, right.stats

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return left.algo_label if l_val < r_val else right.algo_label

    # an unreached goal never wins on path length
    l_path = l.path_length if left.path_found else float("inf")
    r_path = r.path_length if right.path_found else float("inf")

    return ComparisonResult(
        left=l,
        right=r,
        winner_visited=winner(l.visited_count, r.visited_count),
        winner_path=winner(l_path, r_path),
        winner_time=winner(l.elapsed_ms, r.elapsed_ms),
    )
