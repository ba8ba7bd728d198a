"""
Tests for tabletop_ai.games.tic_tac_toe

Tests TicTacToe game implementation.
"""

import numpy as np
import pytest

from tabletop_ai.core.errors import HistoryMismatch, InvalidMove
from tabletop_ai.core.types import Move, Player
from tabletop_ai.games.game_state import GameState
from tabletop_ai.games.tic_tac_toe import TicTacToe


@pytest.fixture
def game() -> TicTacToe:
    """Fresh TicTacToe game."""
    return TicTacToe()


def play(game: TicTacToe, cells, first: Player = Player.HUMAN) -> None:
    """Apply cells alternately, starting with `first`."""
    player = first
    for r, c in cells:
        game.apply_move(Move(r, c), player)
        player = player.opponent


# X O X / X X O / O X O
DRAW_SEQUENCE = [(0, 0), (0, 1), (0, 2), (1, 2), (1, 0), (2, 0), (1, 1), (2, 2), (2, 1)]


class TestInitialization:
    """Initial game state tests."""

    def test_initial_state(self, game: TicTacToe):
        """Game starts with empty board, HUMAN to move, not over."""
        assert np.all(game.get_state().board == 0)
        assert game.current_player() == Player.HUMAN
        assert game.get_winner() == Player.NONE
        assert game.is_over() is False

    def test_all_cells_empty(self, game: TicTacToe):
        for r in range(3):
            for c in range(3):
                assert game.get_cell(r, c) == Player.NONE

    def test_metadata(self, game: TicTacToe):
        assert game.game_id() == "tic_tac_toe"


class TestGetCell:

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3)])
    def test_out_of_range_raises(self, game: TicTacToe, row, col):
        with pytest.raises(IndexError):
            game.get_cell(row, col)


class TestValidMoves:
    """Valid moves tests."""

    def test_initial_nine_moves_row_major(self, game: TicTacToe):
        """All 9 cells are valid initially, scanned row by row."""
        assert game.valid_moves() == [Move(r, c) for r in range(3) for c in range(3)]

    def test_moves_decrease_after_play(self, game: TicTacToe):
        game.apply_move(Move(0, 0), Player.HUMAN)
        assert len(game.valid_moves()) == 8

    def test_occupied_not_in_moves(self, game: TicTacToe):
        game.apply_move(Move(1, 1), Player.HUMAN)
        assert Move(1, 1) not in game.valid_moves()


class TestApplyMove:
    """Move application tests."""

    def test_places_marker_and_switches_player(self, game: TicTacToe):
        """HUMAN then AI; turn flips after each."""
        game.apply_move(Move(0, 0), Player.HUMAN)
        assert game.get_cell(0, 0) == Player.HUMAN
        assert game.current_player() == Player.AI

        game.apply_move(Move(1, 1), Player.AI)
        assert game.get_cell(1, 1) == Player.AI
        assert game.current_player() == Player.HUMAN

    def test_returns_resolved_move(self, game: TicTacToe):
        assert game.apply_move(Move(2, 1), Player.HUMAN) == Move(2, 1)

    def test_records_history(self, game: TicTacToe):
        game.apply_move(Move(0, 0), Player.HUMAN)
        game.apply_move(Move(1, 1), Player.AI)
        assert game.get_state().history == [Move(0, 0), Move(1, 1)]

    def test_occupied_raises(self, game: TicTacToe):
        """Moving to occupied cell raises InvalidMove."""
        game.apply_move(Move(0, 0), Player.HUMAN)
        with pytest.raises(InvalidMove):
            game.apply_move(Move(0, 0), Player.AI)

    @pytest.mark.parametrize("move", [Move(3, 0), Move(0, 3), Move(-1, 0), Move(0, -1)])
    def test_off_board_raises(self, game: TicTacToe, move):
        with pytest.raises(InvalidMove):
            game.apply_move(move, Player.HUMAN)

    def test_invalid_move_leaves_state_unchanged(self, game: TicTacToe):
        game.apply_move(Move(0, 0), Player.HUMAN)
        board = game.get_state().board.copy()

        with pytest.raises(InvalidMove):
            game.apply_move(Move(0, 0), Player.AI)

        assert np.array_equal(game.get_state().board, board)
        assert game.current_player() == Player.AI
        assert game.get_state().history == [Move(0, 0)]

    def test_none_cannot_move(self, game: TicTacToe):
        with pytest.raises(ValueError):
            game.apply_move(Move(0, 0), Player.NONE)


class TestUndoMove:
    """Undo tests."""

    def test_undo_restores_cell_and_player(self, game: TicTacToe):
        move = game.apply_move(Move(0, 0), Player.HUMAN)
        game.undo_move(move)

        assert game.get_cell(0, 0) == Player.NONE
        assert game.current_player() == Player.HUMAN
        assert game.get_state().history == []

    def test_undo_clears_winner(self, game: TicTacToe):
        play(game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
        assert game.get_winner() == Player.HUMAN

        game.undo_move(Move(0, 2))
        assert game.get_winner() == Player.NONE
        assert game.is_over() is False

    def test_every_legal_move_round_trips(self, game: TicTacToe):
        play(game, [(1, 1), (0, 0), (2, 2)])
        before = game.get_state().copy()

        for move in game.valid_moves():
            resolved = game.apply_move(move, game.current_player())
            game.undo_move(resolved)
            assert np.array_equal(game.get_state().board, before.board)
            assert game.current_player() == before.current_player
            assert game.get_state().history == before.history

    def test_undo_not_last_raises(self, game: TicTacToe):
        play(game, [(0, 0), (1, 1)])
        with pytest.raises(HistoryMismatch):
            game.undo_move(Move(0, 0))
        assert game.get_cell(0, 0) == Player.HUMAN

    def test_undo_empty_history_raises(self, game: TicTacToe):
        with pytest.raises(HistoryMismatch):
            game.undo_move(Move(0, 0))


class TestWinDetection:
    """Win detection tests."""

    @pytest.mark.parametrize("winning_cells", [
        [(0, 0), (0, 1), (0, 2)],  # Top row
        [(1, 0), (1, 1), (1, 2)],  # Middle row
        [(2, 0), (2, 1), (2, 2)],  # Bottom row
        [(0, 0), (1, 0), (2, 0)],  # Left column
        [(0, 1), (1, 1), (2, 1)],  # Middle column
        [(0, 2), (1, 2), (2, 2)],  # Right column
        [(0, 0), (1, 1), (2, 2)],  # Main diagonal
        [(0, 2), (1, 1), (2, 0)],  # Anti-diagonal
    ])
    def test_all_win_lines(self, game: TicTacToe, winning_cells):
        """All 8 win lines are detected."""
        # HUMAN plays winning cells, AI plays elsewhere
        ai_cells = [(r, c) for r in range(3) for c in range(3)
                    if (r, c) not in winning_cells]

        for i, (r, c) in enumerate(winning_cells[:2]):
            game.apply_move(Move(r, c), Player.HUMAN)
            game.apply_move(Move(*ai_cells[i]), Player.AI)

        r, c = winning_cells[2]
        game.apply_move(Move(r, c), Player.HUMAN)

        assert game.is_over()
        assert game.get_winner() == Player.HUMAN

    def test_human_wins_top_row(self, game: TicTacToe):
        """HUMAN takes row 0 while AI plays row 1 without blocking."""
        play(game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])

        assert game.is_over() is True
        assert game.get_winner() == Player.HUMAN

    def test_ai_can_win_diagonal(self, game: TicTacToe):
        game.set_current_player(Player.AI)
        play(game, [(0, 0), (0, 1), (1, 1), (0, 2), (2, 2)], first=Player.AI)

        assert game.is_over()
        assert game.get_winner() == Player.AI


class TestDrawDetection:
    """Draw detection tests."""

    def test_full_board_no_winner_is_draw(self, game: TicTacToe):
        play(game, DRAW_SEQUENCE)

        assert game.valid_moves() == []
        assert game.is_over()
        assert game.get_winner() == Player.NONE


class TestEvaluate:
    """Evaluation tests."""

    def test_ai_win(self, game: TicTacToe):
        play(game, [(0, 0), (1, 0), (0, 1), (1, 1), (2, 2), (1, 2)])
        assert game.get_winner() == Player.AI
        assert game.evaluate() == 10

    def test_human_win(self, game: TicTacToe):
        play(game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
        assert game.evaluate() == -10

    def test_ongoing_is_neutral(self, game: TicTacToe):
        play(game, [(0, 0), (1, 1)])
        assert game.evaluate() == 0

    def test_draw_is_neutral(self, game: TicTacToe):
        play(game, DRAW_SEQUENCE)
        assert game.evaluate() == 0


class TestCloning:
    """Game cloning tests."""

    def test_clone_independent(self, game: TicTacToe):
        """Clone has independent board and history."""
        game.apply_move(Move(0, 0), Player.HUMAN)
        clone = game.clone()

        clone.apply_move(Move(1, 1), Player.AI)

        assert game.get_cell(1, 1) == Player.NONE  # Original unchanged
        assert clone.get_cell(1, 1) == Player.AI
        assert game.get_state().history == [Move(0, 0)]
        assert game.current_player() == Player.AI

    def test_clone_shares_no_storage(self, game: TicTacToe):
        clone = game.clone()
        assert not np.shares_memory(clone.get_state().board, game.get_state().board)
        assert clone.get_state().history is not game.get_state().history


class TestSetState:
    """State setting tests."""

    def test_set_state_recomputes_winner(self, game: TicTacToe):
        winning_board = np.array([[1, 1, 1], [2, 2, 0], [0, 0, 0]], dtype=np.int8)
        game.set_state(GameState(winning_board, current_player=Player.AI))

        assert game.get_winner() == Player.HUMAN
        assert game.is_over()

    def test_winner_agrees_after_play_past_end(self, game: TicTacToe):
        """A move after the game ends is judged the same as an installed copy."""
        board = np.array([[2, 2, 0], [0, 0, 0], [1, 1, 1]], dtype=np.int8)
        game.set_state(GameState(board, current_player=Player.AI))
        assert game.get_winner() == Player.HUMAN

        game.apply_move(Move(0, 2), Player.AI)

        copy = TicTacToe()
        copy.set_state(game.get_state().copy())
        assert game.get_winner() == copy.get_winner() == Player.AI

    def test_set_current_player(self, game: TicTacToe):
        game.set_current_player(Player.AI)
        assert game.current_player() == Player.AI


class TestStateString:

    def test_renders_marks(self, game: TicTacToe):
        play(game, [(0, 0), (1, 1)])
        text = game.state_string()
        assert "X" in text
        assert "O" in text
        assert len(text.splitlines()) == 7
