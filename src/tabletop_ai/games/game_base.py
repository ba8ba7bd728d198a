"""
GameBase - abstract base class for all searchable board games.
"""

from abc import ABC, abstractmethod
from typing import List

from tabletop_ai.core.types import Move, Player
from tabletop_ai.games.game_state import GameState


class GameBase(ABC):
    """
    Abstract base class for all board games.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - The search engine only ever talks to this interface.
    - Search explores through clone(); it never touches the caller's game.
    - apply_move() is the single source of truth for the coordinates a
      move actually occupies. Keep the Move it returns for undo_move().
    """

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'tic_tac_toe')."""
        pass

    @abstractmethod
    def clone(self) -> "GameBase":
        """
        Deep copy of game + state.
        Shares no mutable storage with the original; used for every
        search branch.
        """
        pass

    @abstractmethod
    def get_state(self) -> GameState:
        """Return the current game state."""
        pass

    @abstractmethod
    def set_state(self, game_state: GameState) -> None:
        """Replace the current game state (the game takes ownership)."""
        pass

    @abstractmethod
    def current_player(self) -> Player:
        """Return the player to act."""
        pass

    @abstractmethod
    def set_current_player(self, player: Player) -> None:
        """Pin the player to act without making a move."""
        pass

    @abstractmethod
    def valid_moves(self) -> List[Move]:
        """
        Return all legal moves from the current state, in a fixed,
        deterministic order. The search uses this order to break ties.
        """
        pass

    @abstractmethod
    def apply_move(self, move: Move, player: Player) -> Move:
        """
        Place `player`'s mark and hand the turn to the opponent.

        Returns:
            The resolved move actually applied.

        Raises:
            InvalidMove: The move is illegal. State is left unchanged.
        """
        pass

    @abstractmethod
    def undo_move(self, move: Move) -> None:
        """
        Revert the most recently applied move and hand the turn back.

        Raises:
            HistoryMismatch: `move` is not the last resolved move.
        """
        pass

    @abstractmethod
    def is_over(self) -> bool:
        """Return True if a line is complete or no legal move remains."""
        pass

    @abstractmethod
    def get_winner(self) -> Player:
        """Return the player owning a complete line, or Player.NONE."""
        pass

    @abstractmethod
    def evaluate(self) -> int:
        """
        Score the position from Player.AI's point of view.

        Positive favours AI, negative favours HUMAN. A decided position
        returns the game's fixed terminal magnitude.
        """
        pass

    @abstractmethod
    def get_cell(self, row: int, col: int) -> Player:
        """Return the occupant of (row, col)."""
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass
