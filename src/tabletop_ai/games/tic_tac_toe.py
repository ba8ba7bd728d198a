"""
TicTacToe game implementation.

Uses int8 board:
    0 = empty
    1 = Player.HUMAN (X)
    2 = Player.AI (O)
"""

from __future__ import annotations

from typing import List

import numpy as np

from tabletop_ai.core.errors import HistoryMismatch, InvalidMove
from tabletop_ai.core.types import Move, Player
from tabletop_ai.games.game_base import GameBase
from tabletop_ai.games.game_rules import board_full, first_complete_line, in_bounds, line_windows
from tabletop_ai.games.game_state import GameState

BOARD_SIZE = 3

# Terminal scores; the tree is small enough that no heuristic is needed
WIN_SCORE = 10
LOSS_SCORE = -10

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {0: " ", 1: "X", 2: "O"}

# Rows, then columns, then the two diagonals
_WIN_LINES = line_windows(BOARD_SIZE, BOARD_SIZE, BOARD_SIZE)


class TicTacToe(GameBase):
    """3x3 TicTacToe, HUMAN to move first."""

    __slots__ = ('state', 'winner')

    def __init__(self):
        self.state = GameState(
            np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8),
            current_player=Player.HUMAN,
        )
        self.winner = Player.NONE

    def game_id(self) -> str:
        return "tic_tac_toe"

    def clone(self) -> "TicTacToe":
        g = TicTacToe.__new__(TicTacToe)
        g.state = self.state.copy()
        g.winner = self.winner
        return g

    def get_state(self) -> GameState:
        return self.state

    def set_state(self, game_state: GameState) -> None:
        self.state = game_state
        # Recompute winner from state
        self.winner = self._compute_winner()

    def current_player(self) -> Player:
        return self.state.current_player

    def set_current_player(self, player: Player) -> None:
        self.state.current_player = Player(player)

    def get_cell(self, row: int, col: int) -> Player:
        if not in_bounds(self.state.board.shape, row, col):
            raise IndexError(f"Invalid cell coordinates: ({row}, {col})")
        return Player(int(self.state.board[row, col]))

    def valid_moves(self) -> List[Move]:
        """Empty cells in row-major order."""
        return [Move(int(r), int(c)) for r, c in np.argwhere(self.state.board == 0)]

    def apply_move(self, move: Move, player: Player) -> Move:
        player = Player(player)
        if player == Player.NONE:
            raise ValueError("Player.NONE cannot move")

        r, c = int(move[0]), int(move[1])
        resolved = Move(r, c)

        if not in_bounds(self.state.board.shape, r, c):
            raise InvalidMove(resolved, "cell is off the board")
        if self.state.board[r, c] != 0:
            raise InvalidMove(resolved, "cell is occupied")

        self.state.board[r, c] = player
        self.state.history.append(resolved)
        self.state.current_player = player.opponent

        self.winner = self._compute_winner()
        return resolved

    def undo_move(self, move: Move) -> None:
        last = self.state.last_move
        if last is None or tuple(move) != last:
            raise HistoryMismatch(Move(*move), last)

        self.state.board[last.row, last.col] = 0
        self.state.history.pop()
        self.state.current_player = self.state.current_player.opponent
        self.winner = self._compute_winner()

    def is_over(self) -> bool:
        return self.winner != Player.NONE or board_full(self.state.board)

    def get_winner(self) -> Player:
        return self.winner

    def evaluate(self) -> int:
        if self.winner == Player.AI:
            return WIN_SCORE
        if self.winner == Player.HUMAN:
            return LOSS_SCORE
        return 0  # Draw or still in progress

    def _compute_winner(self) -> Player:
        """Recompute winner from current board state."""
        return Player(first_complete_line(self.state.board.ravel(), _WIN_LINES))

    def state_string(self) -> str:
        board = self.state.board
        lines = ["╭───┬───┬───╮"]
        for i in range(BOARD_SIZE):
            row = "│ " + " │ ".join(CELL_STRINGS[board[i, j]] for j in range(BOARD_SIZE)) + " │"
            lines.append(row)
            if i < BOARD_SIZE - 1:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        return "\n".join(lines)
