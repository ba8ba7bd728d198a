"""
Public API for playing against the search engine.

Usage:
    from tabletop_ai import create_game, find_best_move, Move, Player, UNKNOWN_ROW

    game = create_game("connect_four")
    game.apply_move(Move(UNKNOWN_ROW, 3), Player.HUMAN)
    reply = find_best_move(game, depth=5, maximizing_player=Player.AI)
"""

from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

from tabletop_ai.core.errors import InvalidMove
from tabletop_ai.core.types import Move, Player, UNKNOWN_ROW
from tabletop_ai.search import SearchRunner, find_best_move

if TYPE_CHECKING:
    from tabletop_ai.games.game_base import GameBase

logger = logging.getLogger(__name__)

PLAYER_NAMES = {Player.HUMAN: "You (X)", Player.AI: "AI (O)"}


def parse_move(raw: str) -> Move:
    """
    Parse console input into a Move.

    "r,c" names a cell; a single number names a column and leaves the row
    for gravity to resolve.
    """
    try:
        values = [int(x.strip()) for x in raw.split(",") if x.strip()]
    except ValueError as e:
        raise ValueError(f"Expected integers, got '{raw}'") from e

    if len(values) == 1:
        return Move(UNKNOWN_ROW, values[0])
    if len(values) == 2:
        return Move(values[0], values[1])
    raise ValueError(f"Expected 'row,col' or 'col', got '{raw}'")


def _ai_turn(
    game: "GameBase",
    runner: SearchRunner,
    depth: int,
    player: Player,
) -> Optional[Move]:
    """AI searches and applies its move. Returns the resolved move or None."""
    move = runner.submit(game, depth, player).result()
    if move is None:
        return None
    return game.apply_move(move, player)


def _human_turn(game: "GameBase", player: Player) -> Move:
    """Prompt human for move, apply it, return the resolved move."""
    valid = game.valid_moves()
    if valid and valid[0].row == UNKNOWN_ROW:
        print(f"\nYour turn - enter a column ({', '.join(str(m.col) for m in valid)})")
    else:
        print("\nYour turn - enter row,col (e.g., 1,1)")

    while True:
        try:
            move = parse_move(input("Move: "))
            return game.apply_move(move, player)
        except InvalidMove as e:
            print(f"Illegal move: {e.reason}")
        except ValueError as e:
            print(f"Invalid input: {e}")


def play(
    game: "GameBase",
    depth: int,
    human_first: bool = True,
    self_play: bool = False,
) -> Player:
    """
    Main entry point: alternate human and AI turns until the game ends.

    Parameters
    ----------
    game : GameBase
        The game instance to play.
    depth : int
        Search depth for AI turns.
    human_first : bool
        If False, the AI makes the opening move.
    self_play : bool
        If True, the AI plays both sides.

    Returns
    -------
    Player
        The winner, or Player.NONE for a draw.
    """
    game.set_current_player(Player.HUMAN if human_first else Player.AI)

    print(f"Starting {game.game_id()} (search depth {depth})")
    print(game.state_string())

    try:
        with SearchRunner() as runner:
            while not game.is_over():
                current = game.current_player()
                if current == Player.HUMAN and not self_play:
                    move = _human_turn(game, current)
                    print(f"\nYou played: {move}")
                else:
                    move = _ai_turn(game, runner, depth, current)
                    if move is None:
                        break
                    print(f"\n{PLAYER_NAMES[current]} played: {move}")

                print(game.state_string())

    except KeyboardInterrupt:
        print("\nInterrupted")
        raise
    except Exception:
        logger.exception("Fatal error in play loop")
        raise

    winner = game.get_winner()
    print("\n" + "=" * 40)
    print("GAME OVER - " + ("Draw" if winner == Player.NONE else f"{PLAYER_NAMES[winner]} wins"))
    print("=" * 40)
    return winner


__all__ = [
    "play",
    "parse_move",
    "find_best_move",
    "SearchRunner",
]
