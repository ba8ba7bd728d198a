"""
Exceptions raised by the game state machines.
"""

from __future__ import annotations

from typing import Optional

from tabletop_ai.core.types import Move


class TabletopError(Exception):
    """Base class for all tabletop_ai errors."""


class InvalidMove(TabletopError, ValueError):
    """A move targets an occupied cell, a full column, or lies off the board."""

    def __init__(self, move: Move, reason: str):
        self.move = move
        self.reason = reason
        super().__init__(f"Invalid move ({move}): {reason}")


class HistoryMismatch(TabletopError, RuntimeError):
    """undo_move() was called with something other than the last applied move."""

    def __init__(self, move: Move, last: Optional[Move]):
        self.move = move
        self.last = last
        expected = "no moves to undo" if last is None else f"last move was ({last})"
        super().__init__(f"Cannot undo ({move}): {expected}")
