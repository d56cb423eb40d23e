"""
Console entry point for TicTacToe.

Two ways to play:
- pvp: two humans take turns at the same keyboard
- ki / ai: a human (X) plays against the AI (O)

Players type the index of a cell, 0 (top-left) to 8 (bottom-right).
Run this script to play TicTacToe in the terminal!
"""

import logging
import sys
from typing import Optional, TextIO

from logic.ai_player import AIPlayer
from logic.config import GameConfig
from logic.match import Match
from logic.move_validator import MoveValidator, parse_position
from logic.players import Participant


logger = logging.getLogger("tictactoe")


class TicTacToeConsole:
    """
    Console loop for a TicTacToe match.

    Game flow:
    1. Show the board
    2. Ask the current player for a move (the AI answers for itself)
    3. Apply the move and show the board
    4. Repeat until someone wins or the board is full
    """

    def __init__(
        self,
        match: Match,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
    ):
        """
        Initialize the console.

        Args:
            match: The match to play. Turns of an AIPlayer are answered
                by the AI, all others are read from input_stream.
            input_stream: Where human moves are read from (default stdin).
            output_stream: Where the board and prompts go (default stdout).
        """
        self.match = match
        self.input_stream = input_stream or sys.stdin
        self.output_stream = output_stream or sys.stdout
        self.validator = MoveValidator()

    def interact(self) -> Optional[Participant]:
        """
        Play the match to the end.

        Returns:
            The winning player, or None for a draw.

        Raises:
            EOFError: If the input ends while waiting for a move.
        """
        self._print(self.match.get_board())
        move = 1

        while True:
            position = self._get_input(move)
            self.match.set(position)
            self._print(self.match.get_board())

            winner = self.match.evaluate_winner()
            if winner is not None:
                self._print(GameConfig.WINNER_FORMAT.format(player=winner))
                return winner

            if not self.match.has_empty():
                self._print(GameConfig.NO_WINNER_TEXT)
                return None

            move += 1

    def _get_input(self, move: int) -> int:
        """
        Ask for a move until a valid one is given.

        Args:
            move: The move number, starting at 1.

        Returns:
            A position that is in range and empty.
        """
        while True:
            player = self.match.get_current_player()
            self._print(GameConfig.INPUT_REQUEST_FORMAT.format(move=move, player=player))

            if isinstance(player, AIPlayer):
                position = player.next_move()
            else:
                line = self.input_stream.readline()
                if not line:
                    raise EOFError("Input ended before the game was over")

                result = parse_position(line)
                if not result.is_valid:
                    continue
                position = result.position

            validation = self.validator.validate_move(self.match, position)
            if validation.is_valid:
                return position

            logger.debug("Rejected move: %s", validation.error_message)

    def _print(self, value):
        print(value, file=self.output_stream)


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "mode",
        nargs="?",
        help="'pvp' for two players, 'ki' or 'ai' to play against the computer",
    )
    parser.add_argument(
        "--log-level",
        default=GameConfig.LOG_LEVEL,
        help="Python logging level (e.g., INFO, DEBUG)",
    )

    args, extra = parser.parse_known_args(argv)

    # Exactly one mode and nothing else, otherwise do nothing
    if extra:
        return 0

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Unknown or missing mode: nothing to do
    if args.mode == GameConfig.MODE_PVP:
        use_ai = False
    elif args.mode in GameConfig.MODE_AI:
        use_ai = True
    else:
        return 0

    match = Match()
    if use_ai:
        match.use_ai()

    console = TicTacToeConsole(match)

    try:
        console.interact()
    except EOFError:
        print("\nInput closed, game aborted.")
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
