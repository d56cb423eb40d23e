"""
Pytest fixtures for TicTacToe tests.
"""

import pytest

from logic.game_state import Grid, Marker


def grid_from(layout: str) -> Grid:
    """Build a Grid from a row-major layout like "xxo/oxo/ox-"."""
    tokens = layout.replace("/", "")
    assert len(tokens) == 9, f"Layout needs 9 cells, got {len(tokens)}"

    grid = Grid()
    for position, token in enumerate(tokens):
        grid.set(position, Marker(token))
    return grid


@pytest.fixture
def make_grid():
    """Factory fixture for boards written as "xxo/oxo/ox-"."""
    return grid_from


@pytest.fixture
def full_board_no_winner() -> Grid:
    """A full board where nobody has three in a row."""
    return grid_from("xox/xox/oxo")
