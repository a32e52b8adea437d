"""Unit tests for the A* search engine."""

import pytest

from bestpath.domain.astar import AStarSearch, find_path, search
from bestpath.domain.path import validate_path
from bestpath.domain.render import format_path_map
from bestpath.domain.types import AlgoConfig, InvalidCoordinatesError, Position

from conftest import as_cells, make_grid


def P(x, y):
    return Position(x, y)


class TestKnownScenarios:
    """Grids with a known answer."""

    def test_small_grid_path(self, small_grid):
        path = find_path(small_grid, P(0, 0), P(2, 2))
        assert path == [P(0, 0), P(0, 1), P(1, 1), P(2, 1), P(2, 2)]

    def test_small_grid_unreachable_corner(self, small_grid):
        assert find_path(small_grid, P(0, 0), P(3, 0)) is None

    def test_open_grid_many_equivalent_paths(self, open_grid):
        path = find_path(open_grid, P(0, 0), P(6, 6))
        assert len(path) == 13

    def test_horizontal_map(self):
        grid = make_grid("    ")
        path = find_path(grid, P(0, 0), P(3, 0))
        assert path == [P(0, 0), P(1, 0), P(2, 0), P(3, 0)]
        assert format_path_map(grid, path) == as_cells("@ooX")

    def test_vertical_map(self):
        grid = make_grid(" ", " ", " ", " ")
        path = find_path(grid, P(0, 0), P(0, 3))
        assert format_path_map(grid, path) == as_cells("@", "o", "o", "X")

    def test_no_path(self):
        grid = make_grid(
            "  █    ",
            "██  ██ ",
            " █ ██ █",
            "   █ █ ",
            "█    █ ",
            " ████  ",
            "       ",
        )
        assert find_path(grid, P(0, 0), P(6, 6)) is None

    def test_single_walled_path(self):
        grid = make_grid(
            "       ",
            "██████ ",
            "       ",
            " ██████",
            "       ",
            "██████ ",
            "       ",
        )
        path = find_path(grid, P(0, 0), P(0, 6))
        assert format_path_map(grid, path) == as_cells(
            "@oooooo",
            "██████o",
            "ooooooo",
            "o██████",
            "ooooooo",
            "██████o",
            "Xoooooo",
        )

    def test_spiral_path(self, spiral_grid):
        path = find_path(spiral_grid, P(0, 0), P(4, 4))
        assert format_path_map(spiral_grid, path) == as_cells(
            "@       ",
            "o███████",
            "o█oooooo",
            "o█o████o",
            "o█o█Xo█o",
            "o█o██o█o",
            "o█oooo█o",
            "o██████o",
            "oooooooo",
        )

    def test_multiple_complex_routes(self):
        grid = make_grid(
            "       ",
            "██ ██  ",
            " █ ██ █",
            " █ █   ",
            " █ ██ █",
            " ██    ",
            "██  ██ ",
            "    ██ ",
            "    █  ",
        )
        path = find_path(grid, P(0, 0), P(6, 8))
        assert format_path_map(grid, path) == as_cells(
            "@ooooo ",
            "██ ██o ",
            " █ ██o█",
            " █ █ o ",
            " █ ██o█",
            " ██  oo",
            "██  ██o",
            "    ██o",
            "    █ X",
        )

    def test_accepts_plain_lists_and_tuples(self):
        grid = [[" ", " "], [" ", " "]]
        assert find_path(grid, (0, 0), (1, 1)) is not None


class TestEdgeCases:
    """Degenerate inputs."""

    def test_start_equals_goal(self, small_grid):
        assert find_path(small_grid, P(2, 2), P(2, 2)) == [P(2, 2)]

    def test_start_on_wall_has_no_path(self, small_grid):
        assert find_path(small_grid, P(1, 0), P(0, 0)) is None

    def test_start_on_wall_equal_to_goal_has_no_path(self, small_grid):
        assert find_path(small_grid, P(1, 0), P(1, 0)) is None

    def test_goal_on_wall_has_no_path(self, small_grid):
        assert find_path(small_grid, P(0, 0), P(1, 0)) is None

    def test_jagged_rows_are_respected(self, jagged_grid):
        path = find_path(jagged_grid, P(0, 0), P(3, 1))
        assert len(path) == 5
        assert validate_path(path, jagged_grid)
        assert path[-1] == P(3, 1)

    def test_jagged_rows_route_around_missing_cells(self):
        grid = make_grid(
            "     ",
            " ",
            "     ",
        )
        path = find_path(grid, P(4, 0), P(4, 2))
        assert path == [P(4, 0), P(3, 0), P(2, 0), P(1, 0), P(0, 0),
                        P(0, 1),
                        P(0, 2), P(1, 2), P(2, 2), P(3, 2), P(4, 2)]

    def test_goal_past_short_row_is_unreachable(self, jagged_grid):
        # Within the longest row, but row 0 has only three cells
        assert find_path(jagged_grid, P(0, 0), P(3, 0)) is None

    def test_start_past_short_row_is_unreachable(self, jagged_grid):
        assert find_path(jagged_grid, P(3, 2), P(0, 0)) is None


class TestInvalidCoordinates:
    """Coordinates outside the grid fail fast."""

    @pytest.mark.parametrize("goal", [(4, 0), (0, 4), (-1, 0), (0, -1), (10, 10)])
    def test_goal_out_of_bounds(self, small_grid, goal):
        with pytest.raises(InvalidCoordinatesError):
            find_path(small_grid, P(0, 0), P(*goal))

    def test_start_out_of_bounds(self, small_grid):
        with pytest.raises(InvalidCoordinatesError):
            find_path(small_grid, P(0, 7), P(0, 0))

    def test_error_is_a_value_error(self, small_grid):
        with pytest.raises(ValueError, match="Goal"):
            find_path(small_grid, P(0, 0), P(5, 0))

    def test_non_integer_coordinates(self, small_grid):
        with pytest.raises(InvalidCoordinatesError):
            find_path(small_grid, P(0.5, 0), P(0, 0))

    @pytest.mark.parametrize("start", [(True, 0), (0, False)])
    def test_bool_coordinates(self, small_grid, start):
        with pytest.raises(InvalidCoordinatesError, match="integers"):
            find_path(small_grid, P(*start), P(0, 0))

    def test_empty_grid(self):
        with pytest.raises(InvalidCoordinatesError):
            find_path(make_grid(), P(0, 0), P(0, 0))


class TestSearchResult:
    """Statistics and configuration."""

    def test_result_fields(self, small_grid):
        result = search(small_grid, P(0, 0), P(2, 2))
        assert result.found
        assert result.success
        assert result.path_cost == 4
        assert result.nodes_explored >= 5

    def test_no_path_result(self, small_grid):
        result = search(small_grid, P(0, 0), P(3, 0))
        assert not result.found
        assert not result.success
        assert result.path is None
        assert result.nodes_explored > 0

    @pytest.mark.parametrize("heuristic", ["manhattan", "euclidean", "zero"])
    def test_heuristics_agree_on_length(self, spiral_grid, heuristic):
        result = search(spiral_grid, P(0, 0), P(4, 4), AlgoConfig(heuristic=heuristic))
        assert result.path_cost == 36

    def test_manhattan_explores_less_than_zero(self, open_grid):
        informed = search(open_grid, P(0, 0), P(6, 6), AlgoConfig(heuristic="manhattan"))
        uniform = search(open_grid, P(0, 0), P(6, 6), AlgoConfig(heuristic="zero"))
        assert informed.nodes_explored < uniform.nodes_explored

    def test_closed_set_gives_same_length(self, spiral_grid):
        result = search(spiral_grid, P(0, 0), P(4, 4), AlgoConfig(use_closed_set=True))
        assert result.path_cost == 36

    def test_unknown_heuristic(self, small_grid):
        with pytest.raises(ValueError):
            search(small_grid, P(0, 0), P(2, 2), AlgoConfig(heuristic="chebyshev"))

    def test_max_iterations_stops_search(self, open_grid):
        result = search(open_grid, P(0, 0), P(6, 6), AlgoConfig(max_iterations=3))
        assert not result.found
        assert result.nodes_explored == 3


class TestStepping:
    """Driving the engine one frontier pop at a time."""

    def test_step_before_initialize(self):
        with pytest.raises(RuntimeError):
            AStarSearch().step()

    def test_step_until_complete(self, small_grid):
        algorithm = AStarSearch()
        algorithm.initialize(small_grid, P(0, 0), P(2, 2))
        assert algorithm.get_open_positions() == [P(0, 0)]

        steps = 0
        result = None
        while result is None:
            result = algorithm.step()
            steps += 1

        assert algorithm.is_complete()
        assert result.path[-1] == P(2, 2)
        assert steps == result.nodes_explored
        # Further steps return the same result
        assert algorithm.step() is result

    def test_explored_positions_start_with_start(self, small_grid):
        algorithm = AStarSearch()
        algorithm.initialize(small_grid, P(0, 0), P(2, 2))
        algorithm.step()
        assert algorithm.get_explored_positions() == [P(0, 0), P(0, 1)]
        assert algorithm.current == P(0, 0)

    def test_reinitialize_clears_state(self, small_grid):
        algorithm = AStarSearch()
        algorithm.initialize(small_grid, P(0, 0), P(2, 2))
        algorithm.run()
        algorithm.initialize(small_grid, P(3, 3), P(2, 3))
        result = algorithm.run()
        assert result.path == [P(3, 3), P(2, 3)]
