"""
Tests for config.py - environment-driven settings.
"""

import pytest
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config
from config import GameConfig, load_config

ENV_VARS = [
    "SNAKE_TICK_MS",
    "SNAKE_BOARD_SIZE",
    "SNAKE_FOOD_MAX_ATTEMPTS",
    "SNAKE_SEED",
    "SNAKE_LOG_LEVEL",
    "SNAKE_LOG_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    """Tests for load_config()."""

    def test_defaults(self):
        assert load_config() == GameConfig()
        assert load_config().tick_ms == 100

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SNAKE_TICK_MS", "50")
        monkeypatch.setenv("SNAKE_BOARD_SIZE", "12")
        monkeypatch.setenv("SNAKE_FOOD_MAX_ATTEMPTS", "1000")
        monkeypatch.setenv("SNAKE_SEED", "7")
        monkeypatch.setenv("SNAKE_LOG_LEVEL", "debug")
        monkeypatch.setenv("SNAKE_LOG_FILE", "snake.log")

        cfg = load_config()
        assert cfg.tick_ms == 50
        assert cfg.board_size == 12
        assert cfg.food_max_attempts == 1000
        assert cfg.seed == 7
        assert cfg.log_level == "DEBUG"
        assert cfg.log_file == "snake.log"

    def test_blank_values_are_ignored(self, monkeypatch):
        monkeypatch.setenv("SNAKE_BOARD_SIZE", "  ")
        monkeypatch.setenv("SNAKE_LOG_FILE", "")
        cfg = load_config()
        assert cfg.board_size is None
        assert cfg.log_file is None

    def test_non_integer_raises(self, monkeypatch):
        monkeypatch.setenv("SNAKE_TICK_MS", "fast")
        with pytest.raises(ValueError, match="SNAKE_TICK_MS"):
            load_config()

    def test_non_positive_size_raises(self, monkeypatch):
        monkeypatch.setenv("SNAKE_BOARD_SIZE", "0")
        with pytest.raises(ValueError, match="SNAKE_BOARD_SIZE"):
            load_config()

    def test_negative_seed_is_allowed(self, monkeypatch):
        monkeypatch.setenv("SNAKE_SEED", "-3")
        assert load_config().seed == -3

    def test_log_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("SNAKE_LOG_LEVEL", " warning ")
        assert load_config().log_level == "WARNING"

    def test_unknown_log_level_raises(self, monkeypatch):
        """A level logging does not know is rejected at load time."""
        monkeypatch.setenv("SNAKE_LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError, match="SNAKE_LOG_LEVEL must be a logging level name"):
            load_config()
