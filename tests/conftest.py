"""
Shared test fixtures for tabletop_ai tests.

Design principles:
- Game-agnostic fixtures where possible
- Boards written as strings: X = HUMAN, O = AI, . = empty
- Minimal, focused fixtures
"""

import random
from typing import Callable, List

import numpy as np
import pytest

from tabletop_ai.core.types import Player
from tabletop_ai.games.connect_four import ConnectFour
from tabletop_ai.games.game_base import GameBase
from tabletop_ai.games.game_state import GameState
from tabletop_ai.games.tic_tac_toe import TicTacToe
from tabletop_ai.utils.config import GAMES


_SYMBOLS = {".": Player.NONE, "X": Player.HUMAN, "O": Player.AI}


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def tic_tac_toe() -> TicTacToe:
    """Fresh TicTacToe game."""
    return TicTacToe()


@pytest.fixture
def connect_four() -> ConnectFour:
    """Fresh ConnectFour game."""
    return ConnectFour()


@pytest.fixture(params=sorted(GAMES))
def any_game(request) -> GameBase:
    """Each registered game in turn."""
    return GAMES[request.param]()


# =============================================================================
# Position Builders
# =============================================================================

@pytest.fixture
def make_board() -> Callable[[List[str]], np.ndarray]:
    """Build an int8 board from rows of X/O/. characters."""
    def _make(rows: List[str]) -> np.ndarray:
        return np.array(
            [[_SYMBOLS[ch] for ch in row] for row in rows],
            dtype=np.int8,
        )
    return _make


@pytest.fixture
def make_game(make_board) -> Callable[..., GameBase]:
    """Install a drawn position into a fresh game of the given class."""
    def _make(game_class, rows: List[str], to_move: Player) -> GameBase:
        game = game_class()
        game.set_state(GameState(make_board(rows), current_player=to_move))
        return game
    return _make


@pytest.fixture
def random_position() -> Callable[[GameBase, int, int], GameBase]:
    """Play `plies` random legal moves from a seed; stops early at game end."""
    def _play(game: GameBase, plies: int, seed: int) -> GameBase:
        rng = random.Random(seed)
        for _ in range(plies):
            if game.is_over():
                break
            move = rng.choice(game.valid_moves())
            game.apply_move(move, game.current_player())
        return game
    return _play
