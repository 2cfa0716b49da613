"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Optional, Tuple

from .constants import CELL_BODY, CELL_EMPTY, CELL_FOOD


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        round_number: how many ticks have been played (0-based)
        snake_positions: list of (x, y), head first
        food: (x, y) of the current food
        size: board size (the board is size x size)
        score: food eaten so far
        alive: False once the game has ended
        end_reason: "quit", "collision", "no_space" or None while running
    """

    def __init__(
        self,
        round_number: int,
        snake_positions: List[Tuple[int, int]],
        food: Tuple[int, int],
        size: int,
        score: int,
        alive: bool = True,
        end_reason: Optional[str] = None
    ):
        self.round_number = round_number
        self.snake_positions = snake_positions
        self.food = food
        self.size = size
        self.score = score
        self.alive = alive
        self.end_reason = end_reason

    def to_grid(self) -> List[List[int]]:
        """
        Classify every cell for the renderer.

        Returns:
            size x size rows of ints indexed grid[y][x]:
            0 = empty, 1 = snake body, 2 = food
        """
        grid = [[CELL_EMPTY] * self.size for _ in range(self.size)]
        for x, y in self.snake_positions:
            grid[y][x] = CELL_BODY
        fx, fy = self.food
        grid[fy][fx] = CELL_FOOD
        return grid

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        o = snake body
        Row 0 is printed first, matching the terminal layout.
        """
        board = [['.' for _ in range(self.size)] for _ in range(self.size)]

        fx, fy = self.food
        board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake_positions):
            board[y][x] = 'H' if pos_idx == 0 else 'o'

        return "\n".join(' '.join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState round={self.round_number}, food={self.food}, "
            f"length={len(self.snake_positions)}, score={self.score}>"
        )
