"""
Player implementations for TermSnake.

A player turns the current game state into the next command for the
session: a direction, QUIT, or None for "no input this tick".
"""

from .base import Player
from .random_player import RandomPlayer
from .keyboard_player import KeyboardPlayer

__all__ = [
    'Player',
    'RandomPlayer',
    'KeyboardPlayer',
]
