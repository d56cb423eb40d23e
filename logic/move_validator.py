"""
Move validator for TicTacToe.
Parses raw console input and validates that moves follow the rules.
"""

from dataclasses import dataclass
from typing import Optional

from .config import GameConfig
from .match import Match


@dataclass
class ParseResult:
    """Result of parsing a position from raw input."""
    is_valid: bool
    position: Optional[int] = None


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


def parse_position(raw: str) -> ParseResult:
    """
    Parse a cell index from a line of input.

    Args:
        raw: The line the player typed. Only the line ending is dropped;
            any other whitespace makes the input invalid.

    Returns:
        ParseResult with the integer position, or is_valid=False if the
        text is not a whole number. Range is not checked here.
    """
    text = raw.rstrip("\r\n")
    if text.startswith(("+", "-")):
        digits = text[1:]
    else:
        digits = text

    # isdecimal() also accepts non-ASCII digits, which int() handles
    if not digits.isdecimal():
        return ParseResult(is_valid=False)

    return ParseResult(is_valid=True, position=int(text))


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Position must be between 0 and 8
    2. Can only place on empty cells
    """

    def validate_move(self, match: Match, position: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            match: The match being played.
            position: Cell index to place a marker on.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not GameConfig.MIN_POSITION <= position <= GameConfig.MAX_POSITION:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Invalid position {position}. Must be "
                    f"{GameConfig.MIN_POSITION}-{GameConfig.MAX_POSITION}."
                ),
            )

        if not match.is_empty(position):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {position} is already occupied!",
            )

        return ValidationResult(is_valid=True)

