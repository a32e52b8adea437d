"""
Pytest configuration and shared fixtures.

Grids are written as lists of strings; every character is one cell and a
space is the only passable marker.
"""

import pytest

from bestpath.domain.types import Grid


def make_grid(*rows: str) -> Grid:
    return Grid.from_rows(rows)


def as_cells(*rows: str) -> list[list[str]]:
    return [list(row) for row in rows]


@pytest.fixture
def small_grid() -> Grid:
    """The 4x4 grid with a walled-off top-right corner."""
    return make_grid(
        " ** ",
        "   *",
        "**  ",
        " *  ",
    )


@pytest.fixture
def open_grid() -> Grid:
    """A fully open 7x7 grid."""
    return make_grid(*["       "] * 7)


@pytest.fixture
def spiral_grid() -> Grid:
    return make_grid(
        "        ",
        " ███████",
        " █      ",
        " █ ████ ",
        " █ █  █ ",
        " █ ██ █ ",
        " █    █ ",
        " ██████ ",
        "        ",
    )


@pytest.fixture
def jagged_grid() -> Grid:
    """Rows of different lengths; (3,0) and (3,2) do not exist."""
    return make_grid(
        "   ",
        "    ",
        " ",
    )
