"""Overlay a path onto a grid for display."""

from typing import List, Sequence

from .types import (
    GOAL_MARKER,
    PATH_MARKER,
    START_MARKER,
    Grid,
    InvalidCoordinatesError,
    MalformedPathError,
    Position,
)


def format_path_map(grid: Grid, path: Sequence[Position]) -> List[List[str]]:
    """
    Generate a copy of the grid with the path filled in.

    The start is shown with '@', the goal with 'X' and every other point on
    the path with 'o'. When start and goal are the same cell it keeps the
    start marker. The input grid is not modified.
    """
    if not path:
        raise MalformedPathError("Cannot render an empty path")
    if not isinstance(grid, Grid):
        grid = Grid.from_rows(grid)

    cells = grid.to_lists()
    last = len(path) - 1
    for i, pos in enumerate(path):
        pos = Position.of(pos)
        if not grid.in_bounds(pos):
            raise InvalidCoordinatesError(f"Path position {pos} is outside the grid")
        if i == 0:
            marker = START_MARKER
        elif i == last:
            marker = GOAL_MARKER
        else:
            marker = PATH_MARKER
        cells[pos.y][pos.x] = marker
    return cells


def format_grid(grid) -> str:
    """Render grid rows as text lines."""
    rows = grid.rows if isinstance(grid, Grid) else grid
    return "\n".join("".join(row) for row in rows)


def print_grid(grid):
    print(format_grid(grid))
