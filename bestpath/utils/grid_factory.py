"""Grid factory for parsing, creating and randomizing grids."""

import random
from collections import deque
from typing import Iterable, List, Optional

from ..domain.neighbors import get_neighbors
from ..domain.types import PASSABLE, WALL_MARKER, Grid, Position


def parse_grid(text: str) -> Grid:
    """
    Parse a text grid, one row per line.

    Each character is one cell: a space is passable, anything else is a
    wall. Lines keep their own length, so ragged text gives a jagged grid.
    Only LF ends a row (a CR before it is dropped), so form feeds and
    other Unicode line breaks stay in the row as walls.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return Grid.from_rows([line[:-1] if line.endswith("\r") else line for line in lines])


def create_empty_grid(width: int, height: int) -> Grid:
    """
    Create a new grid with every cell passable.

    Raises:
        ValueError: If width or height <= 0
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

    return Grid.from_rows([PASSABLE * width for _ in range(height)])


def add_random_walls(grid: Grid, density: float, rng: Optional[random.Random] = None,
                     keep: Iterable[Position] = ()) -> Grid:
    """
    Return a copy of the grid with random walls added.

    Args:
        grid: Source grid (not modified)
        density: Fraction of all cells to turn into walls (0.0 to 1.0)
        rng: Random number generator to use (module-level random if None)
        keep: Positions that must stay passable
    """
    if not (0.0 <= density <= 1.0):
        raise ValueError(f"Density must be between 0.0 and 1.0, got {density}")

    total_cells = sum(len(row) for row in grid.rows)
    num_walls = int(total_cells * density)

    kept = {Position.of(p) for p in keep}
    empty = [
        Position(x, y)
        for y, row in enumerate(grid.rows)
        for x, cell in enumerate(row)
        if cell == PASSABLE and Position(x, y) not in kept
    ]
    num_walls = min(num_walls, len(empty))

    cells = grid.to_lists()
    sample = rng.sample if rng is not None else random.sample
    for pos in sample(empty, num_walls):
        cells[pos.y][pos.x] = WALL_MARKER
    return Grid.from_rows(cells)


def generate_random_grid(width: int, height: int, density: float,
                         seed: Optional[int] = None,
                         keep: Iterable[Position] = ()) -> Grid:
    """Create a width x height grid with randomly placed walls."""
    rng = random.Random(seed)
    return add_random_walls(create_empty_grid(width, height), density, rng, keep)


def find_path_bfs(grid: Grid, start: Position, goal: Position) -> Optional[List[Position]]:
    """
    Breadth-first search for a shortest path.
    Used to check connectivity and to cross-check A* results.
    """
    start = Position.of(start)
    goal = Position.of(goal)
    if not grid.is_passable(start):
        return None

    queue = deque([start])
    parent = {start: None}

    while queue:
        current = queue.popleft()
        if current == goal:
            path = []
            node = current
            while node is not None:
                path.append(node)
                node = parent[node]
            path.reverse()
            return path

        for neighbor in get_neighbors(grid, current):
            if neighbor not in parent:
                parent[neighbor] = current
                queue.append(neighbor)

    return None
