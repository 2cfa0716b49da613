"""
Snake entity for the game engine.
"""

import logging
from collections import deque
from typing import List, Optional, Tuple

from .board import Board
from .constants import COLLIDED, CONTINUED, DIRECTION_DELTAS

logger = logging.getLogger(__name__)


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        pending_growth: the tail cell dropped by the last move, kept so that
            eating can put it back; None once consumed
    """

    def __init__(self, positions: List[Tuple[int, int]]):
        if not positions:
            raise ValueError("Snake needs at least one segment")
        if len(set(positions)) != len(positions):
            raise ValueError(f"Snake segments overlap: {positions}")
        self.positions = deque(positions)
        self.pending_growth: Optional[Tuple[int, int]] = None

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, point) -> bool:
        return point in self.positions

    def next_head(self, direction: str, board: Board) -> Tuple[int, int]:
        """
        Compute where the head would land after moving one cell.

        Args:
            direction: One of "UP", "DOWN", "LEFT", "RIGHT"
            board: Board used to wrap the coordinate

        Returns:
            The wrapped candidate head coordinate.

        Raises:
            ValueError: If direction is not a valid move.
        """
        try:
            dx, dy = DIRECTION_DELTAS[direction]
        except KeyError:
            raise ValueError(f"Unknown direction: {direction!r}") from None
        hx, hy = self.head
        return board.normalize((hx + dx, hy + dy))

    def move(self, direction: str, board: Board) -> str:
        """
        Try to advance the snake one cell.

        The candidate head is checked against the whole body before anything
        changes, tail included, so stepping onto the cell the tail is about to
        leave counts as a collision.

        Returns:
            "continued" if the move was committed, "collided" if it was
            rejected. A rejected move leaves the snake untouched.
        """
        new_head = self.next_head(direction, board)
        if new_head in self.positions:
            logger.debug("Move %s from %s hits body at %s", direction, self.head, new_head)
            return COLLIDED

        self.positions.appendleft(new_head)
        self.pending_growth = self.positions.pop()
        return CONTINUED

    def grow(self) -> bool:
        """
        Restore the tail segment dropped by the last move.

        Returns:
            True if the snake grew, False if there was nothing to restore.
        """
        if self.pending_growth is None:
            return False
        self.positions.append(self.pending_growth)
        self.pending_growth = None
        return True

    def __repr__(self):
        return f"<Snake head={self.head} length={len(self.positions)}>"
