"""
Curses renderer - draws the classified grid as coloured blocks.
"""

import curses
from typing import List

from domain.constants import CELL_BODY, CELL_FOOD, CELL_WIDTH, HEADER_ROWS
from domain.game_state import GameState

SQUARE = "█" * CELL_WIDTH

# Color pairs (curses color pairs start at 1)
COLOR_EMPTY = 1
COLOR_BODY = 2
COLOR_FOOD = 3
COLOR_HEADER = 4

HELP_TEXT = "wasd/arrows: move  q: quit"


class TerminalRenderer:
    """
    Draws game snapshots onto a curses window.

    The header sits on row 0 and the board starts at HEADER_ROWS, one
    CELL_WIDTH-wide block per cell.
    """

    def __init__(self, stdscr):
        self.stdscr = stdscr
        curses.curs_set(0)
        curses.start_color()
        curses.init_pair(COLOR_EMPTY, curses.COLOR_GREEN, curses.COLOR_BLACK)
        curses.init_pair(COLOR_BODY, curses.COLOR_BLUE, curses.COLOR_BLACK)
        curses.init_pair(COLOR_FOOD, curses.COLOR_RED, curses.COLOR_BLACK)
        curses.init_pair(COLOR_HEADER, curses.COLOR_WHITE, curses.COLOR_BLACK)
        self.stdscr.keypad(True)
        self.stdscr.clear()

    def draw(self, game_state: GameState):
        self._draw_header(f"Score: {game_state.score}  Length: {len(game_state.snake_positions)}  {HELP_TEXT}")
        self._draw_grid(game_state.to_grid())
        self.stdscr.refresh()

    def draw_game_over(self, game_state: GameState):
        self._draw_header(
            f"Game over ({game_state.end_reason}). Score: {game_state.score}. Press any key."
        )
        self.stdscr.refresh()
        self.stdscr.timeout(-1)
        self.stdscr.getch()

    def _draw_header(self, text: str):
        _, width = self.stdscr.getmaxyx()
        self.stdscr.move(0, 0)
        self.stdscr.clrtoeol()
        self._put(0, 0, text[:max(width - 1, 0)], curses.color_pair(COLOR_HEADER) | curses.A_BOLD)

    def _draw_grid(self, grid: List[List[int]]):
        colors = {
            CELL_BODY: curses.color_pair(COLOR_BODY),
            CELL_FOOD: curses.color_pair(COLOR_FOOD),
        }
        empty = curses.color_pair(COLOR_EMPTY)
        for y, row in enumerate(grid):
            for x, cell in enumerate(row):
                self._put(HEADER_ROWS + y, x * CELL_WIDTH, SQUARE, colors.get(cell, empty))

    def _put(self, y: int, x: int, text: str, attr: int):
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off-screen
            pass
