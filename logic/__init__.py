"""
Logic module for TicTacToe.
Handles the board, turn order, and the AI opponent.
"""

from .config import GameConfig
from .game_state import Grid, Marker, InvalidPositionError
from .win_checker import WinChecker
from .players import Participant, HumanPlayer
from .ai_player import AIPlayer, BoardFullError
from .match import Match
from .move_validator import MoveValidator, ValidationResult, ParseResult, parse_position

__version__ = "1.0.0"
