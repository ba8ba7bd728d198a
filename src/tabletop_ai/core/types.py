"""
Core types shared by the games and the search engine.

- Player: cell/mover identity, stored directly in int8 boards
- Move: immutable (row, col) pair
- Score constants used by the search
"""

from __future__ import annotations

import math
from enum import IntEnum
from typing import NamedTuple


class Player(IntEnum):
    """
    Board cell value and mover identity.

    NONE marks an empty cell and "no winner"; it is never a mover.
    """

    NONE = 0
    HUMAN = 1
    AI = 2

    @property
    def opponent(self) -> "Player":
        if self is Player.NONE:
            raise ValueError("Player.NONE has no opponent")
        return Player(3 - self.value)  # Toggle 1↔2


class Move(NamedTuple):
    """
    A board coordinate.

    For drop games the row may be UNKNOWN_ROW when requesting a move;
    the game resolves it and returns the landing coordinate.
    """

    row: int
    col: int

    def __str__(self) -> str:
        return f"{self.row},{self.col}"


# Placeholder row for gravity-resolved moves
UNKNOWN_ROW = -1

# Search window bounds
NEG_INF = -math.inf
POS_INF = math.inf
