"""
kruskals.py — Randomized Kruskal's maze
========================================
Every odd (row, col) inside the border is a room.  All walls separating
two horizontally or vertically adjacent rooms are listed, shuffled, and
scanned once: a wall is knocked out iff the rooms on either side are
still in different sets, after which the sets merge.

When the scan finishes every room belongs to one set and the carved
passages form a spanning tree over the rooms.
"""

import random
from typing import Dict, List, Optional, Tuple

from grid import Grid, Coord


class UnionFind:
    """Disjoint sets over room coordinates (path halving + union by size)."""

    def __init__(self, items: List[Coord]):
        self.parent: Dict[Coord, Coord] = {item: item for item in items}
        self.size: Dict[Coord, int] = {item: 1 for item in items}

    def find(self, item: Coord) -> Coord:
        while self.parent[item] != item:
            self.parent[item] = self.parent[self.parent[item]]
            item = self.parent[item]
        return item

    def union(self, a: Coord, b: Coord) -> bool:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.size[ra] < self.size[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        self.size[ra] += self.size[rb]
        return True

    def set_count(self) -> int:
        return sum(1 for item in self.parent if self.find(item) == item)


def rooms(rows: int, cols: int) -> List[Coord]:
    return [(r, c) for r in range(1, rows - 1, 2) for c in range(1, cols - 1, 2)]


def kruskals(rows: int, cols: int, rng: Optional[random.Random] = None) -> Grid:
    rng = rng or random.Random()
    walls = [[True] * cols for _ in range(rows)]
    room_list = rooms(rows, cols)
    for r, c in room_list:
        walls[r][c] = False

    # (wall_r, wall_c, room_a, room_b)
    candidates: List[Tuple[int, int, Coord, Coord]] = []
    for r, c in room_list:
        if c + 2 < cols - 1:
            candidates.append((r, c + 1, (r, c), (r, c + 2)))
        if r + 2 < rows - 1:
            candidates.append((r + 1, c, (r, c), (r + 2, c)))
    rng.shuffle(candidates)

    sets = UnionFind(room_list)
    for wr, wc, a, b in candidates:
        if sets.union(a, b):
            walls[wr][wc] = False

    return Grid.from_walls(walls)
