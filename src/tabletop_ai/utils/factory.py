"""
Factory functions for creating games.
"""

from tabletop_ai.games.game_base import GameBase
from tabletop_ai.utils.config import GAMES


def create_game(game_name: str) -> GameBase:
    """
    Create a fresh game by registry name.

    Raises:
        ValueError: `game_name` is not in GAMES; the message lists the
                    registered names.
    """
    try:
        game_class = GAMES[game_name]
    except KeyError:
        available = ", ".join(GAMES)
        raise ValueError(f"Unknown game: {game_name}. Available: {available}") from None
    return game_class()
