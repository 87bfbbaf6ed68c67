"""
algorithms/__init__.py — Search Registry
=========================================
Single source of truth for every search the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm, run_search

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, tags, optimal, …),
        …
    }

Every `fn` is a generator `(grid, start, end) -> yields Cell` that marks
cells visited as it goes.  `run_search` drains it into the trace list.
Adding a search is: write the generator, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Dict, Optional

from grid import Grid, Cell

from algorithms.bfs        import bfs        as _bfs
from algorithms.dfs        import dfs        as _dfs
from algorithms.greedy_bfs import greedy_bfs as _greedy
from algorithms.astar      import astar      as _astar
from algorithms.path       import reconstruct, is_connected_chain


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each search
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "bfs"
    label:             str                    # human label, e.g. "Breadth-First Search"
    fn:                Callable               # the generator function
    tags:              List[str] = field(default_factory=list)
    optimal:           bool     = False       # guarantees a shortest path?
    has_heuristic:     bool     = False       # reads Cell.heuristic?
    complexity_time:   str      = ""
    complexity_space:  str      = ""
    description:       str      = ""          # one-liner for the UI card

    def to_dict(self) -> Dict[str, Any]:
        """Card data for the algorithm picker; `fn` stays server-side."""
        return {
            "key":           self.key,
            "label":         self.label,
            "tags":          list(self.tags),
            "optimal":       self.optimal,
            "has_heuristic": self.has_heuristic,
            "complexity":    {"time": self.complexity_time, "space": self.complexity_space},
            "description":   self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "astar": AlgoInfo(
        key="astar", label="A*", fn=_astar,
        tags=["heuristic", "shortest-path"],
        optimal=True, has_heuristic=True,
        complexity_time="O(V² log V)", complexity_space="O(V)",
        description="Optimal: heuristic + distance.",
    ),

    "bfs": AlgoInfo(
        key="bfs", label="BFS", fn=_bfs,
        tags=["unweighted", "shortest-path", "traversal"],
        optimal=True,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Optimal: level by level.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="DFS", fn=_dfs,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Not optimal: goes deep before backtracking.",
    ),

    "greedy": AlgoInfo(
        key="greedy", label="Greedy Best-First", fn=_greedy,
        tags=["heuristic", "suboptimal"],
        has_heuristic=True,
        complexity_time="O(V² log V)", complexity_space="O(V)",
        description="Not optimal: heuristic only.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered searches in insertion order."""
    return list(REGISTRY.values())


def run_search(key: str, grid: Grid, start: Cell, end: Cell) -> List[Cell]:
    """Run a search to completion and return its visitation trace."""
    info = get_algorithm(key)
    if info is None:
        raise ValueError(f"Unknown algorithm: {key}")
    return list(info.fn(grid, start, end))


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "run_search",
    "reconstruct",
    "is_connected_chain",
]
