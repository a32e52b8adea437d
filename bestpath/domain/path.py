"""Path reconstruction and path utilities."""

from typing import Dict, List, Tuple

from .neighbors import get_direction_vector, is_adjacent
from .types import Grid, Position

DIRECTION_LETTERS: Dict[Tuple[int, int], str] = {
    (-1, 0): "L",
    (1, 0): "R",
    (0, -1): "U",
    (0, 1): "D",
}


def reconstruct_path(came_from: Dict[Position, Position],
                     start: Position, goal: Position) -> List[Position]:
    """
    Walk predecessor links from goal back to start.
    Returns the path from start to goal, both inclusive.
    """
    current = goal
    path = [current]
    while current != start:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def calculate_path_cost(path: List[Position]) -> int:
    """Number of unit steps along a path."""
    return max(len(path) - 1, 0)


def validate_path(path: List[Position], grid: Grid) -> bool:
    """
    Validate that a path is walkable and connected.
    Returns True if every position is passable and consecutive positions are adjacent.
    """
    if not path:
        return False

    if not all(grid.is_passable(pos) for pos in path):
        return False

    return all(is_adjacent(a, b) for a, b in zip(path, path[1:]))


def get_path_directions(path: List[Position]) -> List[Tuple[int, int]]:
    """Direction vectors for each step of the path."""
    return [get_direction_vector(a, b) for a, b in zip(path, path[1:])]


def format_directions(path: List[Position]) -> str:
    """Compact move string such as 'DRRD'."""
    return "".join(DIRECTION_LETTERS[d] for d in get_path_directions(path))
