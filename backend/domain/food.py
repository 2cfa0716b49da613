"""
Food placement.

Food goes on a uniformly random cell that the snake does not occupy and that
differs from where the previous food was.
"""

import logging
import random
from typing import Iterable, Optional, Tuple

from .board import Board
from .errors import NoSpaceForFood

logger = logging.getLogger(__name__)


def place_food(
    board: Board,
    occupied: Iterable[Tuple[int, int]],
    previous: Tuple[int, int],
    rng: Optional[random.Random] = None,
    max_attempts: Optional[int] = None,
) -> Tuple[int, int]:
    """
    Pick a new food cell.

    Draws random cells until one is free. When max_attempts is set and every
    draw was rejected, picks directly from the remaining free cells instead.

    Args:
        board: the board to place on
        occupied: cells covered by the snake
        previous: the food position being replaced
        rng: random source, defaults to the module-level generator
        max_attempts: cap on random draws before switching strategy

    Returns:
        (x, y) of the new food.

    Raises:
        NoSpaceForFood: If the snake and the previous food cover the board.
    """
    rng = rng or random
    blocked = set(occupied)
    blocked.add(previous)

    unavailable = sum(1 for cell in blocked if board.contains(cell))
    if unavailable >= board.area:
        raise NoSpaceForFood(board.size, unavailable)

    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        cell = (rng.randrange(board.size), rng.randrange(board.size))
        if cell not in blocked:
            return cell

    logger.debug("Food sampling gave up after %d draws, using free-cell list", attempts)
    free_cells = [cell for cell in board.cells() if cell not in blocked]
    return rng.choice(free_cells)
