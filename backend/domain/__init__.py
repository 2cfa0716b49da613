"""
Domain entities for the TermSnake game engine.

This module contains the core game entities that are independent of
the terminal (rendering, keyboard input, process setup).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, QUIT, VALID_MOVES, DIRECTION_DELTAS,
    CONTINUED, COLLIDED,
    CELL_EMPTY, CELL_BODY, CELL_FOOD,
)
from .errors import SnakeGameError, NoSpaceForFood, TerminalTooSmall
from .board import Board
from .snake import Snake
from .food import place_food
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'QUIT', 'VALID_MOVES', 'DIRECTION_DELTAS',
    'CONTINUED', 'COLLIDED',
    'CELL_EMPTY', 'CELL_BODY', 'CELL_FOOD',
    'SnakeGameError', 'NoSpaceForFood', 'TerminalTooSmall',
    'Board',
    'Snake',
    'place_food',
    'GameState',
]
