"""
Configuration and game registry.
"""

from tabletop_ai.games import TicTacToe, ConnectFour


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

# Each constructor builds an empty board with HUMAN to move
GAMES = {
    "tic_tac_toe": TicTacToe,
    "connect_four": ConnectFour,
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

# TicTacToe is solved near-exhaustively at this depth.
# Connect Four relies on the heuristic between lookaheads; deeper is
# stronger but each extra ply costs roughly 4-7x the time.
DEFAULT_DEPTHS = {
    "tic_tac_toe": 6,
    "connect_four": 5,
}


class Config:
    """Play configuration with sensible defaults."""

    def __init__(
        self,
        game_name: str = "tic_tac_toe",
        depth: int = None,
        human_first: bool = True,
    ):
        if game_name not in GAMES:
            raise KeyError(game_name)

        self.game_name = game_name
        self.depth = DEFAULT_DEPTHS[game_name] if depth is None else depth
        self.human_first = human_first

        if self.depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {self.depth}")
