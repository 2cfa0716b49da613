"""
Game constants for TermSnake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen y grows downward, so UP decreases y
DIRECTION_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Non-directional commands from the input side
QUIT = "QUIT"

# Move outcomes
CONTINUED = "continued"
COLLIDED = "collided"

# Session end reasons
END_QUIT = "quit"
END_COLLISION = "collision"
END_NO_SPACE = "no_space"

# Per-cell render codes
CELL_EMPTY = 0
CELL_BODY = 1
CELL_FOOD = 2

# Starting positions (normalized onto the board at session start)
SNAKE_START = (10, 10)
FOOD_START = (5, 5)

# Terminal layout: each cell is two characters wide, board drawn below the header
CELL_WIDTH = 2
HEADER_ROWS = 2
FALLBACK_TERMINAL_SIZE = (30, 30)

# Input poll timeout per tick
DEFAULT_TICK_MS = 100
