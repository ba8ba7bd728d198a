"""
Background search runner.

Lets an interactive caller run a whole find_best_move() off its main
thread and collect the answer through a single Future.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional, TYPE_CHECKING

from tabletop_ai.core.types import Move, Player
from tabletop_ai.search.minimax import MinimaxSearch

if TYPE_CHECKING:
    from tabletop_ai.games.game_base import GameBase

logger = logging.getLogger(__name__)


class SearchRunner:
    """
    Runs searches on a small thread pool.

    The game is cloned at submission, so the caller may keep playing on
    its own instance while the search is outstanding. A started search
    always runs to completion.
    """

    def __init__(self, max_workers: int = 1, prune: bool = True):
        self.max_workers = max_workers
        self.prune = prune
        self._executor: Optional[ThreadPoolExecutor] = None

    def __enter__(self):
        self._ensure_executor()
        return self

    def __exit__(self, exc_type, *_):
        self.shutdown(wait=exc_type is None)

    def _ensure_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.max_workers,
                thread_name_prefix="search",
            )
        return self._executor

    def submit(
        self,
        game: "GameBase",
        depth: int,
        maximizing_player: Player,
    ) -> "Future[Optional[Move]]":
        """Schedule a search on a snapshot of `game`."""
        snapshot = game.clone()
        logger.debug("Submitting %s search at depth %d", game.game_id(), depth)
        return self._ensure_executor().submit(
            self._run, snapshot, depth, maximizing_player
        )

    def _run(self, game: "GameBase", depth: int, maximizing_player: Player) -> Optional[Move]:
        # One MinimaxSearch per job; its node counter is not shared
        return MinimaxSearch(prune=self.prune).find_best_move(game, depth, maximizing_player)

    def shutdown(self, wait: bool = True) -> None:
        if self._executor is None:
            return

        executor, self._executor = self._executor, None
        executor.shutdown(wait=wait)
