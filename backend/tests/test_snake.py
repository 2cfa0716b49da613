"""
Tests for domain/snake.py - movement, self-collision and growth.
"""

import pytest
import sys
import os
from collections import deque

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.board import Board
from domain.constants import UP, DOWN, LEFT, RIGHT, CONTINUED, COLLIDED
from domain.snake import Snake


class TestSnakeInit:
    """Tests for constructing a Snake."""

    def test_snake_initialization_with_single_position(self):
        """Snake initializes with a single position and no pending growth."""
        snake = Snake([(10, 10)])
        assert list(snake.positions) == [(10, 10)]
        assert snake.pending_growth is None
        assert len(snake) == 1

    def test_snake_positions_is_deque(self):
        """Snake positions are stored as a deque for efficient operations."""
        snake = Snake([(5, 5)])
        assert isinstance(snake.positions, deque)

    def test_snake_head_and_tail(self):
        """head is the first position, tail the last."""
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.head == (5, 5)
        assert snake.tail == (3, 5)

    def test_empty_snake_rejected(self):
        with pytest.raises(ValueError):
            Snake([])

    def test_overlapping_segments_rejected(self):
        with pytest.raises(ValueError):
            Snake([(1, 1), (1, 2), (1, 1)])


class TestSnakeMove:
    """Tests for Snake.move()."""

    def test_move_right_five_times(self):
        """A single segment walks right without growing."""
        board = Board(20)
        snake = Snake([(10, 10)])
        for _ in range(5):
            assert snake.move(RIGHT, board) == CONTINUED
        assert list(snake.positions) == [(15, 10)]

    @pytest.mark.parametrize("direction,expected", [
        (UP, (10, 9)),
        (DOWN, (10, 11)),
        (LEFT, (9, 10)),
        (RIGHT, (11, 10)),
    ])
    def test_direction_deltas(self, direction, expected):
        """UP decreases y, DOWN increases y, LEFT/RIGHT change x."""
        board = Board(20)
        snake = Snake([(10, 10)])
        snake.move(direction, board)
        assert snake.head == expected

    def test_move_wraps_around_edge(self):
        """Moving off the right edge reappears on the left."""
        board = Board(20)
        snake = Snake([(19, 10)])
        assert snake.move(RIGHT, board) == CONTINUED
        assert list(snake.positions) == [(0, 10)]

    def test_move_up_from_top_row_wraps_to_bottom(self):
        board = Board(20)
        snake = Snake([(4, 0)])
        snake.move(UP, board)
        assert snake.head == (4, 19)

    def test_move_into_body_collides_and_leaves_state_unchanged(self):
        """Reversing into the second segment is a collision."""
        board = Board(5)
        snake = Snake([(1, 0), (0, 0)])
        assert snake.move(LEFT, board) == COLLIDED
        assert list(snake.positions) == [(1, 0), (0, 0)]
        assert snake.pending_growth is None

    def test_move_onto_vacating_tail_collides(self):
        """The tail cell still counts as occupied when the move is checked."""
        board = Board(10)
        # Head at (1, 1), tail at (1, 2) directly below it
        snake = Snake([(1, 1), (2, 1), (2, 2), (1, 2)])
        assert snake.move(DOWN, board) == COLLIDED
        assert list(snake.positions) == [(1, 1), (2, 1), (2, 2), (1, 2)]

    def test_reversal_on_single_segment_is_allowed(self):
        """With one segment there is nothing behind the head to hit."""
        board = Board(10)
        snake = Snake([(5, 5)])
        assert snake.move(LEFT, board) == CONTINUED
        assert snake.move(RIGHT, board) == CONTINUED
        assert list(snake.positions) == [(5, 5)]

    def test_move_records_popped_tail(self):
        """The dropped tail cell is kept as pending growth."""
        board = Board(10)
        snake = Snake([(3, 3), (2, 3)])
        snake.move(RIGHT, board)
        assert list(snake.positions) == [(4, 3), (3, 3)]
        assert snake.pending_growth == (2, 3)

    def test_move_overwrites_unconsumed_marker(self):
        board = Board(10)
        snake = Snake([(3, 3)])
        snake.move(RIGHT, board)
        snake.move(RIGHT, board)
        assert snake.pending_growth == (4, 3)

    def test_length_constant_across_moves(self):
        """Non-eating moves never change the length."""
        board = Board(8)
        snake = Snake([(3, 3), (2, 3), (1, 3)])
        for direction in [RIGHT, RIGHT, DOWN, DOWN, LEFT, DOWN, RIGHT, RIGHT, RIGHT]:
            assert snake.move(direction, board) == CONTINUED
            assert len(snake) == 3
            assert len(set(snake.positions)) == 3

    def test_unknown_direction_raises(self):
        board = Board(10)
        snake = Snake([(3, 3)])
        with pytest.raises(ValueError):
            snake.move("NORTH", board)


class TestSnakeGrow:
    """Tests for Snake.grow()."""

    def test_grow_restores_popped_tail(self):
        board = Board(10)
        snake = Snake([(3, 3), (2, 3)])
        snake.move(RIGHT, board)
        assert snake.grow() is True
        assert list(snake.positions) == [(4, 3), (3, 3), (2, 3)]
        assert snake.pending_growth is None

    def test_grow_without_marker_is_no_op(self):
        """A fresh snake has nothing to restore."""
        snake = Snake([(3, 3)])
        assert snake.grow() is False
        assert list(snake.positions) == [(3, 3)]

    def test_grow_twice_only_grows_once(self):
        board = Board(10)
        snake = Snake([(3, 3)])
        snake.move(DOWN, board)
        snake.grow()
        assert snake.grow() is False
        assert len(snake) == 2

    def test_length_after_k_growths(self):
        """k growths add exactly k segments regardless of plain moves in between."""
        board = Board(20)
        snake = Snake([(10, 10)])
        for step in range(12):
            snake.move(RIGHT, board)
            if step % 3 == 0:
                snake.grow()
        assert len(snake) == 1 + 4
        assert len(set(snake.positions)) == len(snake)
