"""Core A* pathfinding algorithm implementation."""

import logging
from numbers import Integral
from typing import Dict, List, Optional, Set

from .heuristics import Heuristic, get_heuristic
from .neighbors import get_neighbors
from .path import calculate_path_cost, reconstruct_path
from .priority_queue import PriorityQueue
from .types import AlgoConfig, Grid, InvalidCoordinatesError, PathfindingResult, Position

logger = logging.getLogger(__name__)


def _check_coordinates(grid: Grid, pos: Position, label: str):
    if any(isinstance(c, bool) or not isinstance(c, Integral) for c in pos):
        raise InvalidCoordinatesError(f"{label} coordinate {pos} must be integers")
    if not grid.in_outer_bounds(pos):
        raise InvalidCoordinatesError(
            f"{label} coordinate {pos} is outside the {grid.width}x{grid.height} grid"
        )


class AStarSearch:
    """
    A* search over a grid with 4-directional unit-cost moves.

    Can be driven one frontier pop at a time with step(), or to completion
    with run(). All search state belongs to this instance.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Reset the algorithm state."""
        self.grid: Optional[Grid] = None
        self.start: Optional[Position] = None
        self.goal: Optional[Position] = None
        self.config = AlgoConfig()
        self.frontier = PriorityQueue()
        self.cost_so_far: Dict[Position, int] = {}
        self.came_from: Dict[Position, Position] = {}
        self.closed_set: Set[Position] = set()
        self.nodes_explored = 0
        self.current: Optional[Position] = None
        self.result: Optional[PathfindingResult] = None
        self._heuristic: Heuristic = get_heuristic(self.config.heuristic)

    def initialize(self, grid: Grid, start, goal, config: Optional[AlgoConfig] = None):
        """
        Prepare a search from start to goal.

        Raises InvalidCoordinatesError if either endpoint lies outside the
        grid's outer dimensions.
        """
        if not isinstance(grid, Grid):
            grid = Grid.from_rows(grid)
        start = Position.of(start)
        goal = Position.of(goal)
        _check_coordinates(grid, start, "Start")
        _check_coordinates(grid, goal, "Goal")

        self.reset()
        self.grid = grid
        self.start = start
        self.goal = goal
        self.config = config or AlgoConfig()
        self._heuristic = get_heuristic(self.config.heuristic)

        # A blocked start, or one in the gap past a short row, reaches nothing
        if not grid.is_passable(start):
            logger.debug("Start %s is not a passable cell", start)
            return

        self.cost_so_far[start] = 0
        h_cost = self._heuristic(start, goal)
        self.frontier.put(start, h_cost, h_cost)
        logger.debug("A* search from %s to %s (heuristic=%s)",
                     start, goal, self.config.heuristic)

    def step(self) -> Optional[PathfindingResult]:
        """
        Execute one step of the A* algorithm.
        Returns PathfindingResult if the search is complete, None otherwise.
        """
        if self.grid is None:
            raise RuntimeError("Search not initialized")
        if self.result is not None:
            return self.result

        popped = self.frontier.get()
        if popped is None:
            return self._finish(None)

        current, _ = popped
        self.current = current
        self.nodes_explored += 1

        if current == self.goal:
            return self._finish(reconstruct_path(self.came_from, self.start, self.goal))

        if self.config.use_closed_set:
            self.closed_set.add(current)

        new_cost = self.cost_so_far[current] + 1
        for neighbor in get_neighbors(self.grid, current):
            if neighbor in self.closed_set:
                continue
            existing = self.cost_so_far.get(neighbor)
            if existing is not None and new_cost >= existing:
                continue

            self.cost_so_far[neighbor] = new_cost
            self.came_from[neighbor] = current
            h_cost = self._heuristic(neighbor, self.goal)
            self.frontier.put(neighbor, new_cost + h_cost, h_cost)

        return None

    def run(self) -> PathfindingResult:
        """Run the search until a path is found or the frontier is exhausted."""
        limit = self.config.max_iterations
        iterations = 0
        while True:
            result = self.step()
            if result is not None:
                return result
            iterations += 1
            if limit is not None and iterations >= limit:
                logger.warning("A* search stopped after %d iterations without reaching %s",
                               iterations, self.goal)
                return self._finish(None)

    def _finish(self, path: Optional[List[Position]]) -> PathfindingResult:
        if path is None:
            self.result = PathfindingResult(found=False, nodes_explored=self.nodes_explored)
            logger.debug("No path from %s to %s (%d nodes explored)",
                         self.start, self.goal, self.nodes_explored)
        else:
            self.result = PathfindingResult(
                path=path,
                path_cost=calculate_path_cost(path),
                found=True,
                nodes_explored=self.nodes_explored,
            )
            logger.debug("Path from %s to %s with cost %d (%d nodes explored)",
                         self.start, self.goal, self.result.path_cost, self.nodes_explored)
        return self.result

    def is_complete(self) -> bool:
        """Check if the search has completed (success or failure)."""
        return self.result is not None

    def get_open_positions(self) -> List[Position]:
        """Positions currently waiting in the frontier."""
        return list(self.frontier)

    def get_explored_positions(self) -> List[Position]:
        """Positions with a recorded cost, in discovery order."""
        return list(self.cost_so_far)


def search(grid: Grid, start, goal, config: Optional[AlgoConfig] = None) -> PathfindingResult:
    """
    Run A* from start to goal and return the full result with statistics.

    Args:
        grid: Grid to search in
        start: Starting position
        goal: Goal position
        config: Algorithm configuration

    Returns:
        PathfindingResult with path and statistics

    Raises:
        InvalidCoordinatesError: If start or goal is outside the grid
    """
    algorithm = AStarSearch()
    algorithm.initialize(grid, start, goal, config)
    return algorithm.run()


def find_path(grid: Grid, start, goal,
              config: Optional[AlgoConfig] = None) -> Optional[List[Position]]:
    """
    Find the optimal path from start to goal.

    Returns the positions from start to goal inclusive, or None if the goal
    cannot be reached. Any marker other than a space is an obstacle.
    """
    return search(grid, start, goal, config).path
