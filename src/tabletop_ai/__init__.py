"""
Tabletop AI - minimax with alpha-beta pruning for two-player board games.

This package provides a generic game-tree search engine and two games
that implement the interface it searches through.

Quick Start:
    from tabletop_ai import create_game, find_best_move, Move, Player

    game = create_game("tic_tac_toe")
    game.apply_move(Move(1, 1), Player.HUMAN)
    reply = find_best_move(game, depth=6, maximizing_player=Player.AI)
    game.apply_move(reply, Player.AI)

Modules:
    core    - Player, Move and the error types
    games   - GameBase interface, TicTacToe and ConnectFour
    search  - Minimax search and the background search runner
    api     - Console play loop
"""

from tabletop_ai.core import Player, Move, UNKNOWN_ROW, InvalidMove, HistoryMismatch
from tabletop_ai.games import GameBase, TicTacToe, ConnectFour
from tabletop_ai.search import MinimaxSearch, SearchRunner, find_best_move
from tabletop_ai.utils.factory import create_game

__version__ = "1.0.0"

__all__ = [
    # Main API
    "find_best_move",
    "create_game",
    "MinimaxSearch",
    "SearchRunner",
    # Games
    "GameBase",
    "TicTacToe",
    "ConnectFour",
    # Types
    "Player",
    "Move",
    "UNKNOWN_ROW",
    "InvalidMove",
    "HistoryMismatch",
]
