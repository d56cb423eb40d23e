"""
Game state for TicTacToe.
Holds the 3x3 board as 9 cells, indexed 0 (top-left) to 8 (bottom-right).
"""

import logging
import os
from enum import Enum
from typing import Optional

import numpy as np

from .config import GameConfig
from .win_checker import WinChecker


logger = logging.getLogger(__name__)


class Marker(Enum):
    """What can occupy a cell. The value is the display token."""
    EMPTY = GameConfig.EMPTY_TOKEN
    X = GameConfig.X_TOKEN
    O = GameConfig.O_TOKEN

    @property
    def token(self) -> str:
        return self.value


class InvalidPositionError(IndexError):
    """Raised when a cell index is outside 0-8."""


class Grid:
    """
    The TicTacToe board.

    Cells are stored row by row in a fixed-length array, so position p
    sits at row p // 3, column p % 3. Every cell always holds a Marker
    (EMPTY on creation).
    """

    def __init__(self):
        """Initialize an empty board."""
        self._cells = np.full(GameConfig.CELL_COUNT, Marker.EMPTY, dtype=object)
        self._win_checker = WinChecker(Marker.EMPTY)

    def set(self, position: int, marker: Marker):
        """
        Put a marker on a cell.

        Args:
            position: Cell index (0-8).
            marker: The marker to place there.

        Raises:
            InvalidPositionError: If position is outside 0-8.
        """
        self._check_position(position)
        self._cells[position] = marker

    def get(self, position: int) -> Marker:
        """Get the marker on a cell (0-8)."""
        self._check_position(position)
        return self._cells[position]

    def copy(self) -> "Grid":
        """Create an independent copy of the board."""
        grid = Grid()
        grid._cells[:] = self._cells
        return grid

    def has_empty(self) -> bool:
        """Check if any cell is still EMPTY."""
        return bool(np.any(self._cells == Marker.EMPTY))

    def get_same_in_line(self) -> Optional[Marker]:
        """
        Get the marker that covers a whole row, column or diagonal.

        Only the first line found is reported (see WinChecker for the
        search order). Never returns EMPTY.

        Returns:
            The line-completing Marker, or None if there is none.
        """
        return self._win_checker.get_same_in_line(self._cells)

    def get_winning_index(self, marker: Marker) -> Optional[int]:
        """
        Find the cell where marker would complete a line.

        Each empty cell is tried in ascending order: the marker is placed
        there, the board is checked, and the cell is emptied again. The
        board is left unchanged afterwards.

        Args:
            marker: The marker to try.

        Returns:
            The lowest winning cell index, or None if no single move wins.
        """
        for position in range(GameConfig.CELL_COUNT):
            if self._cells[position] != Marker.EMPTY:
                continue

            self._cells[position] = marker
            try:
                has_won = self.get_same_in_line() == marker
            finally:
                self._cells[position] = Marker.EMPTY

            if has_won:
                logger.debug("%s wins at %d", marker.token, position)
                return position

        return None

    @staticmethod
    def _check_position(position: int):
        if not GameConfig.MIN_POSITION <= position <= GameConfig.MAX_POSITION:
            raise InvalidPositionError(
                f"Invalid position {position}. Must be "
                f"{GameConfig.MIN_POSITION}-{GameConfig.MAX_POSITION}."
            )

    def __str__(self) -> str:
        size = GameConfig.BOARD_SIZE
        rows = []
        for row in range(size):
            cells = self._cells[row * size:(row + 1) * size]
            rows.append("".join(marker.token for marker in cells))
        return os.linesep.join(rows)
