import pytest

from grid import Grid
from algorithms import REGISTRY, run_search, reconstruct, is_connected_chain, get_algorithm
from mazes import generate_maze
from tests.conftest import enclose_end, flood

ALGOS = list(REGISTRY)


def search(key, grid):
    return run_search(key, grid, grid.start, grid.end)


def coords(cells):
    return [c.coord for c in cells]


def path_len(key, base):
    grid = base.clone()
    search(key, grid)
    return len(reconstruct(grid, grid.end))


@pytest.mark.parametrize("key", ALGOS)
def test_trace_cells_visited_unique_and_open(key, open_grid):
    open_grid.toggle_wall(5, 5)
    open_grid.toggle_wall(5, 6)
    trace = search(key, open_grid)
    assert all(c.is_visited for c in trace)
    assert not any(c.is_wall for c in trace)
    assert len(set(coords(trace))) == len(trace)
    assert trace[0] is open_grid.start
    assert trace[-1] is open_grid.end
    assert sum(c.is_visited for c in open_grid) == len(trace)


@pytest.mark.parametrize("key", ALGOS)
def test_start_equals_end(key, open_grid):
    start = open_grid.start
    trace = run_search(key, open_grid, start, start)
    assert trace == [start]
    assert reconstruct(open_grid, start) == [start]


@pytest.mark.parametrize("key", ALGOS)
def test_enclosed_end_exhausts_reachable_cells(key, open_grid):
    enclose_end(open_grid)
    trace = search(key, open_grid)
    reachable = flood(open_grid)
    assert set(coords(trace)) == reachable
    # (20, 20) is sealed off too once its two neighbours are walls
    assert len(trace) == len(reachable) == 21 * 21 - 4 - 2
    assert not open_grid.end.is_visited
    assert reconstruct(open_grid, open_grid.end) == []


@pytest.mark.parametrize("key", ALGOS)
def test_path_is_connected_chain(key):
    base = generate_maze("random", 21, 21, seed=7, probability=0.2)
    grid = base.clone()
    search(key, grid)
    path = reconstruct(grid, grid.end)
    if path:
        assert path[0] is grid.start
        assert path[-1] is grid.end
        assert is_connected_chain(path)
        assert all(c.is_visited for c in path)


@pytest.mark.parametrize("key", ALGOS)
def test_rerun_on_clone_is_deterministic(key):
    base = generate_maze("random", 21, 41, seed=3)
    first = base.clone()
    second = base.clone()
    t1 = search(key, first)
    t2 = search(key, second)
    assert coords(t1) == coords(t2)
    assert coords(reconstruct(first, first.end)) == coords(reconstruct(second, second.end))


def test_open_grid_bfs_scenario(open_grid):
    trace = search("bfs", open_grid)
    path = reconstruct(open_grid, open_grid.end)
    assert len(trace) <= 21 * 21
    assert len(path) == 37
    assert open_grid.end.distance == 36


def test_bordered_grid_bfs_trace_bound():
    grid = Grid.create(21, 21, border_walls=True)
    trace = search("bfs", grid)
    assert len(trace) <= 361
    assert len(reconstruct(grid, grid.end)) == 37


def test_astar_matches_bfs_on_open_grid(open_grid):
    trace = search("astar", open_grid)
    assert len(reconstruct(open_grid, open_grid.end)) == 37
    assert open_grid.end.distance == 36
    assert len(trace) <= len(search("bfs", Grid.create(21, 21)))


@pytest.mark.parametrize("seed", range(8))
def test_optimality_relations(seed):
    base = generate_maze("random", 21, 21, seed=seed, probability=0.25)
    bfs_len = path_len("bfs", base)
    astar_len = path_len("astar", base)
    assert bfs_len == astar_len
    if bfs_len:
        for key in ("dfs", "greedy"):
            other = path_len(key, base)
            assert other and bfs_len - 1 <= other - 1


@pytest.mark.parametrize("kind", ["recursive", "prims", "kruskals"])
def test_every_search_solves_generated_mazes(kind):
    base = generate_maze(kind, 21, 21, seed=11)
    lengths = {key: path_len(key, base) for key in ALGOS}
    # perfect maze: exactly one simple path, so everybody agrees
    assert len(set(lengths.values())) == 1
    assert lengths["bfs"] > 0


def test_bfs_visits_neighbours_up_down_left_right(open_grid):
    trace = search("bfs", open_grid)
    assert coords(trace[:5]) == [(1, 1), (0, 1), (2, 1), (1, 0), (1, 2)]


def test_dfs_follows_last_pushed_neighbour(open_grid):
    trace = search("dfs", open_grid)
    # right is pushed last, so it is explored first
    assert coords(trace[:3]) == [(1, 1), (1, 2), (1, 3)]
    path = reconstruct(open_grid, open_grid.end)
    assert is_connected_chain(path)


def test_greedy_ties_break_by_insertion_order(open_grid):
    trace = search("greedy", open_grid)
    # down (2,1) and right (1,2) both have h=35; down was discovered first
    assert coords(trace[:2]) == [(1, 1), (2, 1)]
    assert open_grid.cell(2, 1).heuristic == 35


def test_astar_ties_break_by_insertion_order(open_grid):
    trace = search("astar", open_grid)
    assert coords(trace[:2]) == [(1, 1), (2, 1)]
    assert open_grid.start.heuristic == 36


def test_unknown_algorithm_rejected(open_grid):
    assert get_algorithm("dijkstra") is None
    with pytest.raises(ValueError):
        search("dijkstra", open_grid)


def test_registry_flags():
    assert REGISTRY["bfs"].optimal and REGISTRY["astar"].optimal
    assert not REGISTRY["dfs"].optimal and not REGISTRY["greedy"].optimal
    assert REGISTRY["astar"].has_heuristic and REGISTRY["greedy"].has_heuristic
