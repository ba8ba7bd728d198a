"""
GameState - mutable game state container.

Optimized for fast copying.
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from tabletop_ai.core.types import Move, Player


class GameState:
    """
    Lightweight game state container.

    Uses int8 board:
        0 = empty (Player.NONE)
        1 = Player.HUMAN
        2 = Player.AI

    history holds the resolved moves applied so far, oldest first.
    """
    __slots__ = ('board', 'current_player', 'history')

    def __init__(
        self,
        board: np.ndarray,
        current_player: Player = Player.HUMAN,
        history: Optional[List[Move]] = None,
    ):
        self.board = board
        self.current_player = current_player
        self.history = history if history is not None else []

    def copy(self) -> "GameState":
        """Deep copy - board.copy() is optimized for contiguous int arrays."""
        return GameState(self.board.copy(), self.current_player, list(self.history))

    @property
    def last_move(self) -> Optional[Move]:
        return self.history[-1] if self.history else None
