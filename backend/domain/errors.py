"""
Exceptions raised by the game engine.
"""


class SnakeGameError(Exception):
    """Base class for game engine errors."""


class NoSpaceForFood(SnakeGameError):
    """Raised when every cell on the board is unavailable for food."""

    def __init__(self, board_size: int, occupied: int):
        self.board_size = board_size
        self.occupied = occupied
        super().__init__(
            f"No free cell for food on a {board_size}x{board_size} board "
            f"({occupied} cells unavailable)"
        )


class TerminalTooSmall(SnakeGameError, ValueError):
    """Raised when the terminal cannot fit a single board cell."""

    def __init__(self, columns: int, rows: int):
        self.columns = columns
        self.rows = rows
        super().__init__(f"Terminal {columns}x{rows} is too small for the board")
