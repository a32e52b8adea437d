"""
Cross-check A* against breadth-first search on seeded random grids.

Every returned path must be valid and as short as the BFS path, and A*
must find a path exactly when BFS does.
"""

import random

import pytest

from bestpath.domain.astar import find_path
from bestpath.domain.path import validate_path
from bestpath.domain.render import format_path_map
from bestpath.domain.types import PASSABLE, AlgoConfig, Position
from bestpath.utils.grid_factory import find_path_bfs, generate_random_grid

SEEDS = range(20)


def passable_positions(grid):
    return [
        Position(x, y)
        for y, row in enumerate(grid.rows)
        for x, cell in enumerate(row)
        if cell == PASSABLE
    ]


def endpoint_pairs(grid, seed, count=8):
    rng = random.Random(seed)
    cells = passable_positions(grid)
    return [(rng.choice(cells), rng.choice(cells)) for _ in range(count)]


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("heuristic", ["manhattan", "euclidean"])
def test_optimal_and_complete(seed, heuristic):
    grid = generate_random_grid(9, 7, 0.3, seed=seed)
    config = AlgoConfig(heuristic=heuristic)

    for start, goal in endpoint_pairs(grid, seed):
        path = find_path(grid, start, goal, config)
        expected = find_path_bfs(grid, start, goal)

        assert (path is None) == (expected is None)
        if path is not None:
            assert len(path) == len(expected)
            assert path[0] == start
            assert path[-1] == goal
            assert validate_path(path, grid)


@pytest.mark.parametrize("seed", SEEDS)
def test_closed_set_is_still_optimal(seed):
    grid = generate_random_grid(10, 10, 0.25, seed=seed)
    config = AlgoConfig(use_closed_set=True)

    for start, goal in endpoint_pairs(grid, seed + 100):
        path = find_path(grid, start, goal, config)
        expected = find_path_bfs(grid, start, goal)
        assert (path is None) == (expected is None)
        if path is not None:
            assert len(path) == len(expected)


@pytest.mark.parametrize("seed", SEEDS)
def test_reflexive_on_every_open_cell(seed):
    grid = generate_random_grid(5, 5, 0.4, seed=seed)
    for pos in passable_positions(grid):
        assert find_path(grid, pos, pos) == [pos]


@pytest.mark.parametrize("seed", SEEDS)
def test_render_only_touches_path_cells(seed):
    grid = generate_random_grid(8, 8, 0.2, seed=seed)
    for start, goal in endpoint_pairs(grid, seed, count=4):
        path = find_path(grid, start, goal)
        if path is None:
            continue
        rendered = format_path_map(grid, path)
        on_path = set(path)
        for y, row in enumerate(grid.rows):
            for x, cell in enumerate(row):
                if Position(x, y) not in on_path:
                    assert rendered[y][x] == cell
                else:
                    assert rendered[y][x] != cell
