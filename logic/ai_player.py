"""
AI player for TicTacToe.
Uses a fixed rule order to choose its move: win, block, then take the
best free cell.
"""

import logging

from .config import GameConfig
from .game_state import Grid, Marker
from .players import Participant


logger = logging.getLogger(__name__)

ERROR_BOARD_IS_FULL = "The board has no empty cells."


class BoardFullError(RuntimeError):
    """Raised when the AI is asked to move on a full board."""


class AIPlayer:
    """
    An AI that plays TicTacToe by simple rules.

    The AI plays on the same Grid the match writes to, so it always sees
    the latest position. It keeps no state of its own between moves.
    """

    def __init__(self, marker: Marker, opponent: Participant, grid: Grid):
        """
        Initialize the AI player.

        Args:
            marker: The marker the AI places.
            opponent: The player the AI tries to stop from winning.
            grid: The live board of the match (not a copy).
        """
        self._marker = marker
        self._opponent = opponent
        self._grid = grid

    @property
    def marker(self) -> Marker:
        return self._marker

    @property
    def opponent(self) -> Participant:
        return self._opponent

    @property
    def grid(self) -> Grid:
        return self._grid

    def next_move(self) -> int:
        """
        Choose the next cell to play.

        Rules, in order:
        1. Complete a line of our own.
        2. Block a line the opponent would complete next turn.
        3. Take the first free cell of center, corners (0, 2, 6, 8),
           edges (1, 3, 5, 7).

        Returns:
            The chosen cell index (0-8).

        Raises:
            BoardFullError: If there is no empty cell.
        """
        winning_index = self.grid.get_winning_index(self._marker)
        if winning_index is not None:
            logger.debug("AI %s takes the win at %d", self, winning_index)
            return winning_index

        blocking_index = self.grid.get_winning_index(self.opponent.marker)
        if blocking_index is not None:
            logger.debug("AI %s blocks at %d", self, blocking_index)
            return blocking_index

        for position in GameConfig.INDEX_PRIORITIES:
            if self.grid.get(position) == Marker.EMPTY:
                logger.debug("AI %s picks free cell %d", self, position)
                return position

        raise BoardFullError(ERROR_BOARD_IS_FULL)

    def __str__(self) -> str:
        return self._marker.token


# Quick test
if __name__ == "__main__":
    from .players import HumanPlayer

    print("Testing AIPlayer...")

    grid = Grid()
    ai = AIPlayer(Marker.O, HumanPlayer(Marker.X), grid)

    # Test 1: empty board, AI takes the center
    move = ai.next_move()
    assert move == 4, f"Expected 4, got {move}"
    print("✓ AI takes the center!")

    # Test 2: X is about to win with 2, AI must block
    grid.set(0, Marker.X)
    grid.set(1, Marker.X)
    grid.set(4, Marker.O)
    print(grid)

    move = ai.next_move()
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly blocks the win!")

    print("\nAIPlayer test done!")
