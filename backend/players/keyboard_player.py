"""
Keyboard player - reads the next command from a curses window.
"""

import curses
import logging
from typing import Dict, Optional

from domain.constants import DEFAULT_TICK_MS, DOWN, LEFT, QUIT, RIGHT, UP
from domain.game_state import GameState
from .base import Player

logger = logging.getLogger(__name__)

CTRL_C = 3

KEY_BINDINGS: Dict[int, str] = {
    ord('w'): UP,
    ord('s'): DOWN,
    ord('a'): LEFT,
    ord('d'): RIGHT,
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
    ord('q'): QUIT,
    CTRL_C: QUIT,
}


class KeyboardPlayer(Player):
    """
    Human player at the terminal.

    Each call waits up to tick_ms for a key. Keys that piled up behind the
    first one are read and thrown away, so a burst of presses moves the snake
    only once.
    """

    def __init__(self, window, tick_ms: int = DEFAULT_TICK_MS):
        self.window = window
        self.tick_ms = tick_ms

    def get_move(self, game_state: GameState) -> Optional[str]:
        self.window.timeout(self.tick_ms)
        key = self.window.getch()
        if key == -1:
            return None

        self._drain()
        command = KEY_BINDINGS.get(key)
        if command is None:
            logger.debug("Ignoring unbound key %r", key)
        return command

    def _drain(self):
        self.window.timeout(0)
        while self.window.getch() != -1:
            pass
        self.window.timeout(self.tick_ms)
