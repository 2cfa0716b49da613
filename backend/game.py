"""
Game session - owns the board, the snake and the food, and advances them one
tick at a time.
"""

import logging
import random
from typing import Any, Dict, List, Optional

from domain.board import Board
from domain.constants import (
    COLLIDED,
    CONTINUED,
    END_COLLISION,
    END_NO_SPACE,
    END_QUIT,
    FOOD_START,
    QUIT,
    SNAKE_START,
    VALID_MOVES,
)
from domain.errors import NoSpaceForFood
from domain.food import place_food
from domain.game_state import GameState
from domain.snake import Snake

logger = logging.getLogger(__name__)


class TickResult:
    """
    What happened during one tick.

    Attributes:
        outcome: "continued", "collided", or None when no move was attempted
        ate: whether the snake ate food this tick
        game_over: whether the session has ended
    """

    def __init__(self, outcome: Optional[str], ate: bool, game_over: bool):
        self.outcome = outcome
        self.ate = ate
        self.game_over = game_over

    def __repr__(self):
        return f"<TickResult outcome={self.outcome} ate={self.ate} game_over={self.game_over}>"


class GameSession:
    """
    Manages:
      - Board (fixed size, wrap-around)
      - Snake
      - Food
      - Score
      - Rounds
    """

    def __init__(
        self,
        board: Board,
        rng: Optional[random.Random] = None,
        food_max_attempts: Optional[int] = None,
        snake_start=SNAKE_START,
        food_start=FOOD_START,
    ):
        self.board = board
        self.rng = rng or random.Random()
        self.food_max_attempts = food_max_attempts
        self.snake = Snake([board.normalize(snake_start)])
        self.score = 0
        self.round_number = 0
        self.game_over = False
        self.end_reason: Optional[str] = None
        self.last_result: Optional[TickResult] = None

        self.food = board.normalize(food_start)
        if self.food in self.snake:
            # Small boards can fold both start cells onto each other
            self._respawn_food()

        logger.info(
            "New game on %dx%d board, snake at %s, food at %s",
            board.size, board.size, self.snake.head, self.food
        )

    def tick(self, command: Optional[str]) -> TickResult:
        """
        Execute one tick:
          1) QUIT ends the session without moving
          2) No command means no move this tick
          3) A direction attempts a move; a collision ends the session
          4) Landing on the food grows the snake and respawns the food

        Once the game is over, further ticks change nothing and return the
        result of the tick that ended it.
        """
        if self.game_over:
            logger.warning("Game is already over (%s). Ignoring tick.", self.end_reason)
            return self.last_result or TickResult(None, False, True)

        self.last_result = self._advance(command)
        return self.last_result

    def _advance(self, command: Optional[str]) -> TickResult:
        self.round_number += 1

        if command == QUIT:
            self.end_game(END_QUIT)
            return TickResult(None, False, True)

        if command is None:
            return TickResult(None, False, False)

        if command not in VALID_MOVES:
            raise ValueError(f"Unknown command: {command!r}")

        outcome = self.snake.move(command, self.board)
        if outcome == COLLIDED:
            self.end_game(END_COLLISION)
            return TickResult(COLLIDED, False, True)

        ate = False
        if self.snake.head == self.food:
            ate = True
            self.snake.grow()
            self.score += 1
            logger.debug("Ate food at %s, length now %d", self.food, len(self.snake))
            self._respawn_food()

        return TickResult(CONTINUED, ate, self.game_over)

    def _respawn_food(self):
        try:
            self.food = place_food(
                self.board,
                self.snake.positions,
                self.food,
                rng=self.rng,
                max_attempts=self.food_max_attempts,
            )
        except NoSpaceForFood as exc:
            logger.info("%s", exc)
            self.end_game(END_NO_SPACE)
            return
        logger.debug("Food placed at %s", self.food)

    def end_game(self, reason: str):
        self.game_over = True
        self.end_reason = reason
        logger.info(
            "Game Over: %s after %d rounds, score %d, length %d",
            reason, self.round_number, self.score, len(self.snake)
        )

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            round_number=self.round_number,
            snake_positions=list(self.snake.positions),
            food=self.food,
            size=self.board.size,
            score=self.score,
            alive=not self.game_over,
            end_reason=self.end_reason,
        )

    def render_grid(self) -> List[List[int]]:
        return self.get_current_state().to_grid()

    def summary(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "length": len(self.snake),
            "rounds": self.round_number,
            "end_reason": self.end_reason,
            "board_size": self.board.size,
        }
