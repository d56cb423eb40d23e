"""
Match controller for TicTacToe.
Owns the board and the two players, and tracks whose turn it is.
"""

import logging
from typing import List, Optional

from .ai_player import AIPlayer
from .game_state import Grid, Marker
from .players import HumanPlayer, Participant


logger = logging.getLogger(__name__)


class Match:
    """
    A single game of TicTacToe.

    X always moves first. Moves are not validated here; callers check
    the position with MoveValidator before calling set().
    """

    def __init__(self):
        self._grid = Grid()
        self._players: List[Participant] = [
            HumanPlayer(Marker.X),
            HumanPlayer(Marker.O),
        ]
        self._current_index = 0

    def use_ai(self):
        """
        Replace the second player with an AI.

        The AI shares this match's board. Call it before the first move;
        moves already played are not affected.
        """
        second = self._players[1]
        self._players[1] = AIPlayer(second.marker, self._players[0], self._grid)
        logger.debug("Second player %s is now an AI", second)

    @property
    def players(self) -> List[Participant]:
        return list(self._players)

    def get_board(self) -> Grid:
        """Get a copy of the board. Changing it does not affect the match."""
        return self._grid.copy()

    def get_current_player(self) -> Participant:
        """Get the player whose turn it is."""
        return self._players[self._current_index]

    def set(self, position: int):
        """
        Place the current player's marker and pass the turn.

        Args:
            position: Cell index (0-8), assumed valid and empty.
        """
        player = self.get_current_player()
        self._grid.set(position, player.marker)
        logger.debug("%s played %d", player, position)

        self._current_index = (self._current_index + 1) % len(self._players)

    def is_empty(self, position: int) -> bool:
        """Check if a cell (0-8) is unoccupied."""
        return self._grid.get(position) == Marker.EMPTY

    def has_empty(self) -> bool:
        """Check if any cell is still unoccupied."""
        return self._grid.has_empty()

    def evaluate_winner(self) -> Optional[Participant]:
        """
        Get the player who completed a line.

        Returns:
            The winning player, or None if nobody has won yet.
        """
        winner_marker = self._grid.get_same_in_line()
        if winner_marker is None:
            return None

        for player in self._players:
            if player.marker == winner_marker:
                return player

        return None
