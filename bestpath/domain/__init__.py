"""Framework-agnostic A* pathfinding over character grids."""

from .astar import AStarSearch, find_path, search
from .heuristics import get_heuristic, manhattan_distance
from .neighbors import get_neighbors
from .path import reconstruct_path, validate_path
from .render import format_grid, format_path_map
from .types import (
    AlgoConfig,
    BestPathError,
    Grid,
    InvalidCoordinatesError,
    MalformedPathError,
    PathfindingResult,
    Position,
)

__all__ = [
    "AStarSearch",
    "AlgoConfig",
    "BestPathError",
    "Grid",
    "InvalidCoordinatesError",
    "MalformedPathError",
    "PathfindingResult",
    "Position",
    "find_path",
    "format_grid",
    "format_path_map",
    "get_heuristic",
    "get_neighbors",
    "manhattan_distance",
    "reconstruct_path",
    "search",
    "validate_path",
]
