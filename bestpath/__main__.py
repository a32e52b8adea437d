"""Command line entry point: find and draw the best path through a grid."""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from .domain.astar import search
from .domain.heuristics import HEURISTICS
from .domain.path import format_directions
from .domain.render import format_grid, format_path_map
from .domain.types import AlgoConfig, BestPathError, Grid, Position
from .utils.grid_factory import generate_random_grid, parse_grid
from .utils.maze_serialization import extract_maze_from_grid, load_maze, save_maze

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_INVALID = 2


def parse_position(text: str) -> Position:
    """Parse 'X,Y' into a Position."""
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {text!r}") from None
    return Position(x, y)


def parse_size(text: str) -> Tuple[int, int]:
    """Parse 'WxH' into (width, height)."""
    try:
        width, height = (int(part) for part in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH but got {text!r}") from None
    return width, height


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bestpath",
        description="Find the shortest 4-directional path through a grid with A*",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("grid_file", nargs="?",
                        help="Text grid, one row per line; spaces are open cells")
    source.add_argument("--maze", help="JSON maze file with walls, start and target")
    source.add_argument("--random", type=parse_size, metavar="WxH",
                        help="Generate a random grid of the given size")
    parser.add_argument("--density", type=float, default=0.25,
                        help="Wall density for --random (0.0 to 1.0)")
    parser.add_argument("--seed", type=int, help="Random seed for --random")
    parser.add_argument("--start", type=parse_position, metavar="X,Y",
                        help="Start position (default: maze start or top-left)")
    parser.add_argument("--goal", type=parse_position, metavar="X,Y",
                        help="Goal position (default: maze target or bottom-right)")
    parser.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    parser.add_argument("--closed-set", action="store_true",
                        help="Never expand a position twice")
    parser.add_argument("--save-maze", metavar="FILE",
                        help="Save the grid and endpoints as a JSON maze")
    parser.add_argument("--gui", action="store_true",
                        help="Show the result in a window (requires PySide6)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def load_grid(args) -> Tuple[Grid, Position, Position, str]:
    """Load or generate the grid named by the arguments."""
    if args.maze:
        maze = load_maze(args.maze)
        if maze is None:
            raise BestPathError(f"Could not load maze from {args.maze}")
        start = args.start or maze.start_position
        goal = args.goal or maze.target_position
        return maze.to_grid(), start, goal, maze.name

    if args.random:
        width, height = args.random
        start = args.start or Position(0, 0)
        goal = args.goal or Position(width - 1, height - 1)
        grid = generate_random_grid(width, height, args.density, args.seed, keep=(start, goal))
        return grid, start, goal, f"random_{width}x{height}"

    try:
        with open(args.grid_file, encoding="utf-8") as f:
            grid = parse_grid(f.read())
    except OSError as e:
        raise BestPathError(f"Could not read grid from {args.grid_file}: {e}") from e
    if grid.height == 0:
        raise BestPathError(f"Grid file {args.grid_file} is empty")
    start = args.start or Position(0, 0)
    goal = args.goal or Position(grid.row_length(grid.height - 1) - 1, grid.height - 1)
    return grid, start, goal, args.grid_file


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        grid, start, goal, name = load_grid(args)
        config = AlgoConfig(heuristic=args.heuristic, use_closed_set=args.closed_set)
        result = search(grid, start, goal, config)
    except (BestPathError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID

    if args.save_maze:
        maze = extract_maze_from_grid(grid, start, goal, name=name)
        if not save_maze(maze, args.save_maze):
            return EXIT_INVALID

    print(f"Grid: {grid.width}x{grid.height}  start {start}  goal {goal}")
    if not result.success:
        print(format_grid(grid))
        print(f"No path found ({result.nodes_explored} nodes explored)")
        return EXIT_NO_PATH

    path_map = format_path_map(grid, result.path)
    print(format_grid(path_map))
    print(f"Path length: {result.path_cost} steps, {result.nodes_explored} nodes explored")
    print(f"Moves: {format_directions(result.path)}")

    if args.gui:
        # Import UI components only when asked for
        from .ui.grid_view import show_grid
        show_grid(path_map, title=f"bestpath - {name}")

    return EXIT_FOUND


if __name__ == "__main__":
    sys.exit(main())
