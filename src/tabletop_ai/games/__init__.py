"""
Games module - board game implementations.
"""

from tabletop_ai.games.game_state import GameState
from tabletop_ai.games.game_base import GameBase
from tabletop_ai.games.game_rules import in_bounds, board_full, line_windows
from tabletop_ai.games.tic_tac_toe import TicTacToe
from tabletop_ai.games.connect_four import ConnectFour

__all__ = [
    "GameState",
    "GameBase",
    "TicTacToe",
    "ConnectFour",
    "in_bounds",
    "board_full",
    "line_windows",
]
