"""
Players for TicTacToe.
A player is anything that holds a Marker; the AI player adds next_move().
"""

from dataclasses import dataclass
from typing import Protocol

from .game_state import Marker


class Participant(Protocol):
    """Protocol for anything that takes turns on the board."""

    @property
    def marker(self) -> Marker:
        ...


@dataclass(frozen=True)
class HumanPlayer:
    """A player whose moves come from the console."""
    marker: Marker

    def __str__(self) -> str:
        return self.marker.token
