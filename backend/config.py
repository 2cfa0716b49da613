"""
Runtime settings for TermSnake.

Values come from environment variables (a local .env file is loaded first):
    SNAKE_TICK_MS            input wait per tick in milliseconds (default 100)
    SNAKE_BOARD_SIZE         fixed board size instead of fitting the terminal
    SNAKE_FOOD_MAX_ATTEMPTS  random draws before food falls back to the free-cell list
    SNAKE_SEED               seed for food placement
    SNAKE_LOG_LEVEL          logging level name (default INFO)
    SNAKE_LOG_FILE           write logs here; interactive play discards logs otherwise
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.constants import DEFAULT_TICK_MS


@dataclass
class GameConfig:
    tick_ms: int = DEFAULT_TICK_MS
    board_size: Optional[int] = None
    food_max_attempts: Optional[int] = None
    seed: Optional[int] = None
    log_level: str = "INFO"
    log_file: Optional[str] = None


def _int_env(name: str, minimum: Optional[int] = None) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if minimum is not None and value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def _log_level_env(name: str) -> str:
    raw = os.getenv(name)
    level = (raw or "INFO").strip().upper() or "INFO"
    # getLevelName maps known names to ints and echoes anything else back as a string
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{name} must be a logging level name, got {raw!r}")
    return level


def load_config() -> GameConfig:
    """
    Build a GameConfig from the environment.

    Raises:
        ValueError: If a numeric setting is malformed or out of range, or the
            log level is not a logging level name.
    """
    load_dotenv()

    tick_ms = _int_env("SNAKE_TICK_MS", minimum=1)
    log_file = (os.getenv("SNAKE_LOG_FILE") or "").strip() or None

    return GameConfig(
        tick_ms=DEFAULT_TICK_MS if tick_ms is None else tick_ms,
        board_size=_int_env("SNAKE_BOARD_SIZE", minimum=1),
        food_max_attempts=_int_env("SNAKE_FOOD_MAX_ATTEMPTS", minimum=1),
        seed=_int_env("SNAKE_SEED"),
        log_level=_log_level_env("SNAKE_LOG_LEVEL"),
        log_file=log_file,
    )
