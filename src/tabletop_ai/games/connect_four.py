"""
Connect Four game implementation.

6 rows x 7 columns with gravity: a piece dropped in a column lands on the
lowest empty row. Row 0 is the top of the board.

Uses int8 board:
    0 = empty
    1 = Player.HUMAN (X)
    2 = Player.AI (O)

Evaluation
----------
A decided position scores +/-WIN_SCORE. Otherwise every 4-cell window
(horizontal, vertical and both diagonals) is scored for each player:

    opponent piece present   -> 0
    3 own + 1 empty          -> 100
    2 own + 2 empty          -> 10
    1 own + 3 empty          -> 1

plus CENTER_WEIGHT per piece in the middle column. The result is the AI
total minus the HUMAN total.
"""

from __future__ import annotations

from typing import List

import numpy as np

from tabletop_ai.core.errors import HistoryMismatch, InvalidMove
from tabletop_ai.core.types import Move, Player, UNKNOWN_ROW
from tabletop_ai.games.game_base import GameBase
from tabletop_ai.games.game_rules import line_windows, winning_value
from tabletop_ai.games.game_state import GameState

ROWS = 6
COLS = 7
CONNECT_N = 4
CENTER_COL = COLS // 2

WIN_SCORE = 1_000_000
CENTER_WEIGHT = 5

# Score of an unblocked window, indexed by own piece count
_SEGMENT_SCORES = np.array([0, 1, 10, 100, 0], dtype=np.int64)

CELL_STRINGS = {0: " ", 1: "X", 2: "O"}

# All 69 four-cell windows as flat indices
_WINDOWS = line_windows(ROWS, COLS, CONNECT_N)


class ConnectFour(GameBase):
    """6x7 Connect Four, HUMAN to move first."""

    __slots__ = ('state',)

    def __init__(self):
        self.state = GameState(
            np.zeros((ROWS, COLS), dtype=np.int8),
            current_player=Player.HUMAN,
        )

    def game_id(self) -> str:
        return "connect_four"

    def clone(self) -> "ConnectFour":
        g = ConnectFour.__new__(ConnectFour)
        g.state = self.state.copy()
        return g

    def get_state(self) -> GameState:
        return self.state

    def set_state(self, game_state: GameState) -> None:
        self.state = game_state

    def current_player(self) -> Player:
        return self.state.current_player

    def set_current_player(self, player: Player) -> None:
        self.state.current_player = Player(player)

    def get_cell(self, row: int, col: int) -> Player:
        if not (0 <= row < ROWS and 0 <= col < COLS):
            raise IndexError(f"Invalid cell coordinates: ({row}, {col})")
        return Player(int(self.state.board[row, col]))

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def is_valid_column(self, col: int) -> bool:
        """Column is on the board and its top cell is empty."""
        return 0 <= col < COLS and self.state.board[0, col] == 0

    def find_next_available_row(self, col: int) -> int:
        """Landing row for a piece dropped in `col`, or -1 if it is full."""
        empty = np.flatnonzero(self.state.board[:, col] == 0)
        return int(empty[-1]) if empty.size else UNKNOWN_ROW

    def valid_moves(self) -> List[Move]:
        """Open columns left to right; row is left for gravity to resolve."""
        return [Move(UNKNOWN_ROW, int(c)) for c in np.flatnonzero(self.state.board[0] == 0)]

    def apply_move(self, move: Move, player: Player) -> Move:
        """
        Drop `player`'s piece into move.col. The supplied row is ignored.

        Returns:
            The (row, col) the piece landed on.
        """
        player = Player(player)
        if player == Player.NONE:
            raise ValueError("Player.NONE cannot move")

        col = int(move[1])
        if not 0 <= col < COLS:
            raise InvalidMove(Move(int(move[0]), col), f"column {col} is out of bounds")

        row = self.find_next_available_row(col)
        if row == UNKNOWN_ROW:
            raise InvalidMove(Move(int(move[0]), col), f"column {col} is full")

        resolved = Move(row, col)
        self.state.board[row, col] = player
        self.state.history.append(resolved)
        self.state.current_player = player.opponent
        return resolved

    def undo_move(self, move: Move) -> None:
        """Lift the last dropped piece. `move` must be its resolved coordinate."""
        last = self.state.last_move
        if last is None or tuple(move) != last:
            raise HistoryMismatch(Move(*move), last)

        self.state.board[last.row, last.col] = 0
        self.state.history.pop()
        self.state.current_player = self.state.current_player.opponent

    # ------------------------------------------------------------------
    # Outcome
    # ------------------------------------------------------------------

    def get_winner(self) -> Player:
        flat = self.state.board.ravel()
        if winning_value(flat, _WINDOWS, Player.HUMAN):
            return Player.HUMAN
        if winning_value(flat, _WINDOWS, Player.AI):
            return Player.AI
        return Player.NONE

    def is_over(self) -> bool:
        return self.get_winner() != Player.NONE or not np.any(self.state.board[0] == 0)

    def evaluate(self) -> int:
        winner = self.get_winner()
        if winner == Player.AI:
            return WIN_SCORE
        if winner == Player.HUMAN:
            return -WIN_SCORE

        cells = self.state.board.ravel()[_WINDOWS]
        ai = self._threat_score(cells, Player.AI) + self._center_score(Player.AI)
        human = self._threat_score(cells, Player.HUMAN) + self._center_score(Player.HUMAN)
        return ai - human

    def _threat_score(self, cells: np.ndarray, player: Player) -> int:
        """Sum of window scores for `player` over precomputed window cells."""
        own = np.count_nonzero(cells == player, axis=1)
        blocked = np.any(cells == player.opponent, axis=1)
        return int(_SEGMENT_SCORES[own][~blocked].sum())

    def _center_score(self, player: Player) -> int:
        return CENTER_WEIGHT * int(np.count_nonzero(self.state.board[:, CENTER_COL] == player))

    def state_string(self) -> str:
        board = self.state.board
        lines = ["╭" + "┬".join("───" for _ in range(COLS)) + "╮"]
        for i in range(ROWS):
            lines.append("│ " + " │ ".join(CELL_STRINGS[board[i, j]] for j in range(COLS)) + " │")
        lines.append("╰" + "┴".join("───" for _ in range(COLS)) + "╯")
        lines.append("  " + "   ".join(str(c) for c in range(COLS)))
        return "\n".join(lines)
