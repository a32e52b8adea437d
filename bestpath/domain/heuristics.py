"""Heuristic functions for A* pathfinding algorithm."""

import math
from typing import Callable, Union

from .types import HeuristicId, Position

Heuristic = Callable[[Position, Position], Union[int, float]]


def manhattan_distance(start: Position, target: Position) -> int:
    """
    Manhattan (L1) distance heuristic.
    Admissible and consistent for 4-directional unit-cost movement.
    """
    return abs(start.x - target.x) + abs(start.y - target.y)


def euclidean_distance(start: Position, target: Position) -> float:
    """
    Euclidean (L2) distance heuristic.
    Admissible but less informed than Manhattan on a 4-connected grid.
    """
    dx = start.x - target.x
    dy = start.y - target.y
    return math.sqrt(dx * dx + dy * dy)


def zero_heuristic(start: Position, target: Position) -> int:
    """Always 0; turns A* into uniform-cost search."""
    return 0


# Mapping from heuristic IDs to functions
HEURISTICS: dict[str, Heuristic] = {
    "manhattan": manhattan_distance,
    "euclidean": euclidean_distance,
    "zero": zero_heuristic,
}


def get_heuristic(heuristic_id: HeuristicId) -> Heuristic:
    """Get heuristic function by ID."""
    try:
        return HEURISTICS[heuristic_id]
    except KeyError:
        raise ValueError(
            f"Unknown heuristic {heuristic_id!r}, expected one of {sorted(HEURISTICS)}"
        ) from None


def is_admissible(heuristic_id: HeuristicId) -> bool:
    """
    Check if a heuristic is admissible for 4-directional movement.
    An admissible heuristic never overestimates the true cost; every
    registered heuristic is a lower bound on the Manhattan step count.
    """
    return heuristic_id in HEURISTICS
