"""
GameBase - abstract base class for turn-based board games.
"""

from abc import ABC, abstractmethod
from typing import Any, List

from checkers_ai.core.types import Player, State
from checkers_ai.games.game_state import GameState


class GameBase(ABC):
    """
    Abstract base class for board games played by the engine.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - Games expose MOVES; successor positions are DERIVED by simulating moves
      on a deep clone.
    - A clone never aliases the board of its origin, so search branches and
      the live game can never corrupt each other.
    """

    @abstractmethod
    def deep_clone(self) -> "GameBase":
        """
        Deep copy of game + state.
        Used heavily for search branches.
        """
        pass

    @abstractmethod
    def get_state(self) -> GameState:
        """Return the current game state."""
        pass

    @abstractmethod
    def set_state(self, game_state: GameState) -> None:
        """Adopt a copy of `game_state` as the current position."""
        pass

    @abstractmethod
    def current_player(self) -> Player:
        """Return the side to act."""
        pass

    @abstractmethod
    def valid_moves(self) -> List[Any]:
        """Return all legal moves for the side to act."""
        pass

    @abstractmethod
    def apply_move(self, move: Any, *, validated: bool = False) -> None:
        """
        Apply a move to the game. Mutates internal state.

        Args:
            move: The move to apply.
            validated:  If True, skip the legality lookup (caller guarantees
                        the move came from valid_moves() on this position).
        """
        pass

    @abstractmethod
    def is_over(self) -> bool:
        """Return True if the game has ended."""
        pass

    @abstractmethod
    def get_result(self, player: Player) -> State:
        """
        Return the result for one side:
            WIN / TIE / NEUTRAL / LOSS
        """
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass
