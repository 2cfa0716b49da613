"""
Board entity - a square, wrap-around coordinate space.
"""

from typing import Iterator, Tuple

from .constants import CELL_WIDTH, HEADER_ROWS
from .errors import TerminalTooSmall

Point = Tuple[int, int]


class Board:
    """
    A toroidal square board.

    Moving off one edge reappears on the opposite edge. The board holds no
    state beyond its size and never changes during a session.

    Attributes:
        size: number of columns (and rows)
    """

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")
        self.size = size

    @classmethod
    def from_terminal(cls, columns: int, rows: int) -> "Board":
        """
        Build the largest square board that fits in a terminal.

        Args:
            columns: terminal width in characters
            rows: terminal height in lines

        Returns:
            A Board sized to min(usable columns, usable rows).

        Raises:
            TerminalTooSmall: If the terminal is too small for a single cell.
        """
        usable_cols = (columns - CELL_WIDTH) // CELL_WIDTH
        usable_rows = rows - HEADER_ROWS
        size = min(usable_cols, usable_rows)
        if size < 1:
            raise TerminalTooSmall(columns, rows)
        return cls(size)

    def normalize(self, point: Point) -> Point:
        """Wrap a coordinate onto [0, size) on both axes."""
        x, y = point
        # Python's % already returns a non-negative result for a positive modulus
        return (x % self.size, y % self.size)

    def contains(self, point: Point) -> bool:
        x, y = point
        return 0 <= x < self.size and 0 <= y < self.size

    def cells(self) -> Iterator[Point]:
        """Yield every coordinate on the board, row by row."""
        for y in range(self.size):
            for x in range(self.size):
                yield (x, y)

    @property
    def area(self) -> int:
        return self.size * self.size

    def __repr__(self):
        return f"<Board size={self.size}>"
