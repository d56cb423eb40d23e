"""
Tests for the match controller (turn order, board access, winner).
"""

import pytest

from logic.ai_player import AIPlayer
from logic.game_state import Marker, InvalidPositionError
from logic.match import Match
from logic.players import HumanPlayer


@pytest.fixture
def match() -> Match:
    return Match()


def occupied(match: Match) -> int:
    board = match.get_board()
    return sum(1 for position in range(9) if board.get(position) != Marker.EMPTY)


class TestTurnOrder:
    """Tests for whose turn it is."""

    def test_x_starts(self, match):
        assert match.get_current_player().marker == Marker.X

    def test_turns_alternate(self, match):
        match.set(0)
        assert match.get_current_player().marker == Marker.O
        match.set(1)
        assert match.get_current_player().marker == Marker.X

    def test_set_places_current_marker(self, match):
        match.set(4)
        match.set(0)
        board = match.get_board()
        assert board.get(4) == Marker.X
        assert board.get(0) == Marker.O

    def test_cell_count_matches_moves(self, match):
        """After N moves exactly N cells are filled."""
        for count, position in enumerate([4, 0, 8, 2, 1, 7], start=1):
            match.set(position)
            assert occupied(match) == count

    def test_players_are_humans_by_default(self, match):
        players = match.players
        assert players == [HumanPlayer(Marker.X), HumanPlayer(Marker.O)]


class TestBoardAccess:
    """Tests for the board queries."""

    def test_get_board_is_a_copy(self, match):
        board = match.get_board()
        board.set(3, Marker.X)

        assert match.is_empty(3)
        assert match.get_board().get(3) == Marker.EMPTY

    def test_is_empty(self, match):
        match.set(5)
        assert not match.is_empty(5)
        assert match.is_empty(6)

    def test_is_empty_out_of_range(self, match):
        with pytest.raises(InvalidPositionError):
            match.is_empty(9)

    def test_has_empty(self, match):
        for position in [0, 1, 2, 4, 3, 5, 7, 6]:
            match.set(position)
            assert match.has_empty()

        match.set(8)
        assert not match.has_empty()


class TestWinner:
    """Tests for evaluate_winner()."""

    def test_no_winner_at_start(self, match):
        assert match.evaluate_winner() is None

    def test_x_wins_top_row(self, match):
        for position in [0, 3, 1, 4, 2]:
            match.set(position)

        winner = match.evaluate_winner()
        assert winner is match.players[0]
        assert str(winner) == "x"

    def test_o_wins_middle_column(self, match):
        for position in [0, 1, 2, 4, 3, 7]:
            match.set(position)

        assert match.evaluate_winner() is match.players[1]

    def test_draw_has_no_winner(self, match):
        # x o x / x o o / o x x
        for position in [0, 1, 2, 4, 3, 5, 7, 6, 8]:
            match.set(position)

        assert not match.has_empty()
        assert match.evaluate_winner() is None


class TestUseAI:
    """Tests for swapping in the AI."""

    def test_second_player_becomes_ai(self, match):
        match.use_ai()

        first, second = match.players
        assert isinstance(first, HumanPlayer)
        assert isinstance(second, AIPlayer)
        assert second.marker == Marker.O
        assert second.opponent is first

    def test_ai_wins_are_reported(self, match):
        match.use_ai()
        for position in [0, 4, 1, 2, 8, 6]:
            match.set(position)

        assert match.evaluate_winner() is match.players[1]
