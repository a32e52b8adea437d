"""
Maze serialization utilities for saving and loading mazes.
A maze is a rectangular grid plus start and target positions, stored as JSON.
"""

import json
import logging
import os
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from ..domain.types import PASSABLE, WALL_MARKER, Grid, Position
from .grid_factory import create_empty_grid

logger = logging.getLogger(__name__)

MAZE_FORMAT_VERSION = "1.0"


def _coord_pair(value) -> Tuple[int, int]:
    """Read an [x, y] pair; raises ValueError or TypeError on anything else."""
    x, y = value
    return int(x), int(y)


class MazeData:
    """Container for maze data with metadata."""

    def __init__(self, width: int, height: int, walls: List[Tuple[int, int]],
                 start: Tuple[int, int], target: Tuple[int, int],
                 name: str = "", description: str = ""):
        self.width = width
        self.height = height
        self.walls = walls
        self.start = start
        self.target = target
        self.name = name
        self.description = description
        self.created_at = datetime.now().isoformat()

    def to_dict(self) -> Dict[str, Any]:
        """Convert maze data to dictionary for serialization."""
        return {
            'width': self.width,
            'height': self.height,
            'walls': [list(wall) for wall in self.walls],
            'start': list(self.start),
            'target': list(self.target),
            'name': self.name,
            'description': self.description,
            'created_at': self.created_at,
            'version': MAZE_FORMAT_VERSION,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MazeData':
        """Create maze data from dictionary."""
        maze = cls(
            width=int(data['width']),
            height=int(data['height']),
            walls=[_coord_pair(wall) for wall in data['walls']],
            start=_coord_pair(data['start']),
            target=_coord_pair(data['target']),
            name=data.get('name', ''),
            description=data.get('description', ''),
        )
        maze.created_at = data.get('created_at', maze.created_at)
        return maze

    def to_grid(self) -> Grid:
        """Build the grid, ignoring walls that fall outside it."""
        cells = create_empty_grid(self.width, self.height).to_lists()
        for x, y in self.walls:
            if 0 <= y < self.height and 0 <= x < self.width:
                cells[y][x] = WALL_MARKER
        return Grid.from_rows(cells)

    @property
    def start_position(self) -> Position:
        return Position.of(self.start)

    @property
    def target_position(self) -> Position:
        return Position.of(self.target)


def extract_maze_from_grid(grid: Grid, start: Position, target: Position,
                           name: str = "") -> MazeData:
    """
    Extract maze data from a grid.
    Jagged grids are padded to the longest row with walls.
    """
    walls = []
    for y in range(grid.height):
        for x in range(grid.width):
            pos = Position(x, y)
            if not grid.in_bounds(pos) or grid.cell(pos) != PASSABLE:
                walls.append((x, y))

    return MazeData(
        width=grid.width,
        height=grid.height,
        walls=walls,
        start=tuple(Position.of(start)),
        target=tuple(Position.of(target)),
        name=name,
    )


def save_maze(maze_data: MazeData, filepath: str) -> bool:
    """Save maze data to a JSON file."""
    try:
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(filepath, 'w') as f:
            json.dump(maze_data.to_dict(), f, indent=2)
        return True
    except OSError as e:
        logger.error("Error saving maze to %s: %s", filepath, e)
        return False


def load_maze(filepath: str) -> Optional[MazeData]:
    """Load maze data from a JSON file."""
    try:
        with open(filepath, 'r') as f:
            data = json.load(f)
        return MazeData.from_dict(data)
    except (OSError, ValueError, KeyError, TypeError) as e:
        logger.error("Error loading maze from %s: %s", filepath, e)
        return None
