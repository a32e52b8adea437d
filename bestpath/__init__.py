"""bestpath - optimal 4-directional paths through character grids with A*.

The grid is a list of rows of single characters; a space is open floor and
any other character is an obstacle.
"""

from .domain import (
    AlgoConfig,
    AStarSearch,
    BestPathError,
    Grid,
    InvalidCoordinatesError,
    MalformedPathError,
    PathfindingResult,
    Position,
    find_path,
    format_grid,
    format_path_map,
    search,
)

__version__ = "1.0.0"

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
    "search",
]
