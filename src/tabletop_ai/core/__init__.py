"""
Core module - fundamental types and errors.

This module provides the building blocks used throughout the package.
"""

from tabletop_ai.core.types import (
    Player,
    Move,
    UNKNOWN_ROW,
    NEG_INF,
    POS_INF,
)
from tabletop_ai.core.errors import TabletopError, InvalidMove, HistoryMismatch

__all__ = [
    # Types
    "Player",
    "Move",
    # Constants
    "UNKNOWN_ROW",
    "NEG_INF",
    "POS_INF",
    # Errors
    "TabletopError",
    "InvalidMove",
    "HistoryMismatch",
]
