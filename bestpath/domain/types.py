"""Core type definitions for grid A* pathfinding."""

from dataclasses import dataclass
from typing import Iterator, Literal, Optional, Sequence, Tuple

# Cell markers
PASSABLE = " "
WALL_MARKER = "#"
START_MARKER = "@"
GOAL_MARKER = "X"
PATH_MARKER = "o"

# Heuristic function identifiers
HeuristicId = Literal["manhattan", "euclidean", "zero"]


class BestPathError(Exception):
    """Base class for bestpath errors."""


class InvalidCoordinatesError(BestPathError, ValueError):
    """A coordinate lies outside the grid's outer dimensions."""


class MalformedPathError(BestPathError, ValueError):
    """A path is unusable for the requested operation (e.g. empty)."""


@dataclass(frozen=True)
class Position:
    """A grid position: x is the column, y is the row."""
    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x},{self.y})"

    @classmethod
    def of(cls, value) -> "Position":
        """Coerce an (x, y) pair or Position into a Position."""
        if isinstance(value, Position):
            return value
        x, y = value
        return cls(x, y)


Coord = Tuple[int, int]


class Grid:
    """
    Immutable 2D array of cell markers.

    A space is passable, anything else is an obstacle. Rows may have
    different lengths; a position is in bounds only if its column lies
    within its own row.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Tuple[Tuple[str, ...], ...]):
        self._rows = rows

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> "Grid":
        """Build a grid from any sequence of rows (strings are accepted as rows)."""
        return cls(tuple(tuple(row) for row in rows))

    @property
    def rows(self) -> Tuple[Tuple[str, ...], ...]:
        return self._rows

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def width(self) -> int:
        """Length of the longest row."""
        return max((len(row) for row in self._rows), default=0)

    def row_length(self, y: int) -> int:
        return len(self._rows[y])

    def in_bounds(self, pos: Position) -> bool:
        """Check if a position addresses an existing cell."""
        return 0 <= pos.y < len(self._rows) and 0 <= pos.x < len(self._rows[pos.y])

    def in_outer_bounds(self, pos: Position) -> bool:
        """Check if a position lies within the grid height and the longest row."""
        return 0 <= pos.y < self.height and 0 <= pos.x < self.width

    def cell(self, pos: Position) -> str:
        if not self.in_bounds(pos):
            raise InvalidCoordinatesError(f"Position {pos} is outside the grid")
        return self._rows[pos.y][pos.x]

    def is_passable(self, pos: Position) -> bool:
        return self.in_bounds(pos) and self._rows[pos.y][pos.x] == PASSABLE

    def to_lists(self) -> list[list[str]]:
        """Return a mutable copy of the cells."""
        return [list(row) for row in self._rows]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Grid(height={self.height}, width={self.width})"


@dataclass
class AlgoConfig:
    """Configuration for the A* algorithm."""
    heuristic: HeuristicId = "manhattan"
    use_closed_set: bool = False
    max_iterations: Optional[int] = None


@dataclass
class PathfindingResult:
    """Result of a pathfinding operation."""
    path: Optional[list[Position]] = None
    path_cost: int = 0
    nodes_explored: int = 0
    found: bool = False

    @property
    def success(self) -> bool:
        """Whether pathfinding was successful."""
        return self.found and self.path is not None and len(self.path) > 0
