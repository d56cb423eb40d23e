"""
Win checker for TicTacToe.
Finds the marker that covers a whole line (row, column or diagonal).
"""

from typing import Optional, Sequence

from .config import GameConfig


SIZE = GameConfig.BOARD_SIZE
CELL_COUNT = GameConfig.CELL_COUNT
MIDDLE = CELL_COUNT // 2  # 4
LAST = CELL_COUNT - 1     # 8


class WinChecker:
    """
    Checks for line completion on a flat 3x3 board.

    The search runs in a fixed order and reports only the first line
    found, even if the board holds more than one:

    1. The middle cell paired with each opposite pair passing through it
       (both diagonals, middle column, middle row).
    2. Lines anchored at the top-left and bottom-right corners, checked as
       top-vertical, top-horizontal, bottom-vertical, bottom-horizontal.
    """

    def __init__(self, empty):
        """
        Args:
            empty: The value that marks an unoccupied cell. It is never
                reported as a winner.
        """
        self.empty = empty

    def get_same_in_line(self, cells: Sequence) -> Optional[object]:
        """
        Get the value that covers a whole line.

        Args:
            cells: The 9 cell values in row-major order.

        Returns:
            The line-completing value, or None if there is no such line.
        """
        middle = self._same_from_middle(cells)
        if middle is not None:
            return middle

        return self._same_from_corners(cells)

    def _same_from_middle(self, cells: Sequence) -> Optional[object]:
        middle = cells[MIDDLE]
        if middle == self.empty:
            return None

        # i and LAST - i are opposite each other through the middle
        for i in range(SIZE + 1):
            if cells[i] == middle and cells[LAST - i] == middle:
                return middle

        return None

    def _same_from_corners(self, cells: Sequence) -> Optional[object]:
        top_left = cells[0]
        bottom_right = cells[LAST]
        if top_left == self.empty and bottom_right == self.empty:
            return None

        # Each running value drops to None as soon as the line breaks
        top_vertical = top_left
        top_horizontal = top_left
        bottom_vertical = bottom_right
        bottom_horizontal = bottom_right

        for i in range(1, SIZE):
            top_vertical = self._if_same(cells, top_vertical, i * SIZE)
            top_horizontal = self._if_same(cells, top_horizontal, i)
            bottom_vertical = self._if_same(cells, bottom_vertical, LAST - i * SIZE)
            bottom_horizontal = self._if_same(cells, bottom_horizontal, LAST - i)

        for candidate in (top_vertical, top_horizontal, bottom_vertical, bottom_horizontal):
            if candidate is not None and candidate != self.empty:
                return candidate

        return None

    @staticmethod
    def _if_same(cells: Sequence, value, position: int):
        if value is None:
            return None
        return value if cells[position] == value else None
