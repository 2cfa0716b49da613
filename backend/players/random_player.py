"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import DIRECTION_DELTAS, VALID_MOVES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that does not run into its own body.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        snake_positions = game_state.snake_positions
        head_x, head_y = snake_positions[0]
        size = game_state.size

        # The tail counts as occupied: the engine rejects moves onto it too
        valid_moves: List[str] = []
        for move in sorted(VALID_MOVES):
            dx, dy = DIRECTION_DELTAS[move]
            target = ((head_x + dx) % size, (head_y + dy) % size)
            if target in snake_positions:
                continue
            valid_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(valid_moves)
