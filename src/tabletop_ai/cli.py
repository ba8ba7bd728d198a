"""
Command-line interface for playing against the minimax AI.
"""

import argparse
import logging
from typing import List, Optional

from tabletop_ai.api import play
from tabletop_ai.utils.config import Config, DEFAULT_DEPTHS, GAMES
from tabletop_ai.utils.factory import create_game


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play TicTacToe or Connect Four against a minimax AI"
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default="tic_tac_toe",
        help="Game to play (default: tic_tac_toe)",
    )
    parser.add_argument(
        "--depth", "-d",
        type=int,
        default=None,
        help="Search depth in plies (default: "
             + ", ".join(f"{k}={v}" for k, v in DEFAULT_DEPTHS.items()) + ")",
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="AI makes the opening move",
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="AI plays both sides (no human input)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = Config(
        game_name=args.game,
        depth=args.depth,
        human_first=not args.ai_first,
    )

    game = create_game(config.game_name)

    try:
        play(
            game,
            depth=config.depth,
            human_first=config.human_first,
            self_play=args.self_play,
        )
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
