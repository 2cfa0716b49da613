"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    Each player is responsible for returning the next command given the
    current game state.
    """

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return the next command given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT", "QUIT", or None for no input
        """
        raise NotImplementedError
