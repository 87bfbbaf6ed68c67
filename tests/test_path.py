from grid import Grid
from algorithms import reconstruct, is_connected_chain
from algorithms.bfs import bfs


def test_unreached_end_gives_empty_path():
    grid = Grid.create(6, 6)
    assert reconstruct(grid, grid.end) == []


def test_follows_previous_links_start_first():
    grid = Grid.create(6, 6)
    chain = [(1, 1), (1, 2), (2, 2), (3, 2)]
    for prev, cur in zip(chain, chain[1:]):
        grid.cell(*cur).previous = prev
    for coord in chain:
        grid.cell(*coord).is_visited = True
    path = reconstruct(grid, grid.cell(3, 2))
    assert [c.coord for c in path] == chain
    assert is_connected_chain(path)


def test_bfs_path_marks_nothing_on_path_flag():
    grid = Grid.create(6, 6)
    list(bfs(grid, grid.start, grid.end))
    path = reconstruct(grid, grid.end)
    assert len(path) == grid.start.manhattan(grid.end) + 1
    # reconstruction is read-only; is_path belongs to the display grid
    assert not any(c.is_path for c in grid)


def test_chain_check_detects_gaps():
    grid = Grid.create(6, 6)
    cells = [grid.cell(1, 1), grid.cell(1, 2), grid.cell(2, 3)]
    assert not is_connected_chain(cells)
    assert is_connected_chain(cells[:2])
    assert is_connected_chain([])
