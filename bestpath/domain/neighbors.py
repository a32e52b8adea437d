"""Neighbor generation for 4-directional grid movement."""

from typing import List, Tuple

from .types import Grid, Position

# Exploration order: left, right, up, down
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def get_neighbors(grid: Grid, pos: Position) -> List[Position]:
    """
    Get passable, in-bounds neighbors of a position.
    Jagged rows are respected: a cell past the end of its row does not exist.
    """
    neighbors = []
    for dx, dy in DIRECTIONS:
        candidate = Position(pos.x + dx, pos.y + dy)
        if grid.is_passable(candidate):
            neighbors.append(candidate)
    return neighbors


def is_adjacent(a: Position, b: Position) -> bool:
    """Whether two positions are one orthogonal step apart."""
    return abs(a.x - b.x) + abs(a.y - b.y) == 1


def get_direction_vector(from_pos: Position, to_pos: Position) -> Tuple[int, int]:
    """Get the direction vector between two positions, normalized to -1, 0 or 1."""
    dx = to_pos.x - from_pos.x
    dy = to_pos.y - from_pos.y

    if dx != 0:
        dx = 1 if dx > 0 else -1
    if dy != 0:
        dy = 1 if dy > 0 else -1

    return (dx, dy)
