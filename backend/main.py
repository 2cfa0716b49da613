"""
TermSnake entry point.

    python main.py play                  interactive game in the terminal
    python main.py simulate --seed 7     headless game driven by RandomPlayer
"""

import argparse
import curses
import json
import logging
import random
from typing import Callable, Dict, Optional

from config import GameConfig, load_config
from domain.board import Board
from domain.constants import END_QUIT, FALLBACK_TERMINAL_SIZE, QUIT
from domain.errors import TerminalTooSmall
from domain.game_state import GameState
from game import GameSession
from players import KeyboardPlayer, Player, RandomPlayer
from render import TerminalRenderer

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(config: GameConfig, interactive: bool):
    """Log to SNAKE_LOG_FILE if set; interactive play otherwise stays silent."""
    if config.log_file:
        logging.basicConfig(level=config.log_level, format=LOG_FORMAT, filename=config.log_file)
    elif interactive:
        logging.basicConfig(level=config.log_level, handlers=[logging.NullHandler()])
    else:
        logging.basicConfig(level=config.log_level, format=LOG_FORMAT)


def build_session(config: GameConfig, columns: int, rows: int) -> GameSession:
    if config.board_size:
        board = Board(config.board_size)
    else:
        board = Board.from_terminal(columns, rows)
    return GameSession(
        board,
        rng=random.Random(config.seed),
        food_max_attempts=config.food_max_attempts,
    )


def run_game(
    session: GameSession,
    player: Player,
    max_rounds: Optional[int] = None,
    on_tick: Optional[Callable[[GameState], None]] = None,
) -> Dict:
    """
    Drive a session until it ends or max_rounds ticks have been played.

    Args:
        session: the game to advance
        player: supplies one command per tick
        max_rounds: stop after this many ticks even if the game is still running
        on_tick: called with a fresh snapshot after every tick that leaves the game running

    Returns:
        The session summary.
    """
    while not session.game_over:
        if max_rounds is not None and session.round_number >= max_rounds:
            logger.info("Reached max rounds (%d).", max_rounds)
            break

        try:
            command = player.get_move(session.get_current_state())
            result = session.tick(command)
            if not result.game_over and on_tick is not None:
                on_tick(session.get_current_state())
        except KeyboardInterrupt:
            if not session.game_over:
                session.tick(QUIT)

    return session.summary()


def run_terminal(stdscr, config: GameConfig) -> Dict:
    rows, columns = stdscr.getmaxyx()
    if not rows or not columns:
        columns, rows = FALLBACK_TERMINAL_SIZE

    session = build_session(config, columns, rows)
    renderer = TerminalRenderer(stdscr)
    player = KeyboardPlayer(stdscr, tick_ms=config.tick_ms)

    renderer.draw(session.get_current_state())
    summary = run_game(session, player, on_tick=renderer.draw)

    if session.end_reason != END_QUIT:
        renderer.draw_game_over(session.get_current_state())
    return summary


def run_simulation(config: GameConfig, max_rounds: int, print_board: bool = False) -> Dict:
    """
    Runs a single headless game with a RandomPlayer.

    Returns:
        A dictionary summarizing the game (score, length, rounds, end_reason, board_size).
    """
    size = config.board_size or 20
    session = GameSession(
        Board(size),
        rng=random.Random(config.seed),
        food_max_attempts=config.food_max_attempts,
    )
    player = RandomPlayer(rng=random.Random(config.seed))

    def show(state: GameState):
        print(f"\nRound {state.round_number}, score {state.score}")
        print(state.print_board())

    return run_game(session, player, max_rounds=max_rounds, on_tick=show if print_board else None)


def apply_overrides(config: GameConfig, args: argparse.Namespace) -> GameConfig:
    if args.size is not None:
        config.board_size = args.size
    if args.seed is not None:
        config.seed = args.seed
    if args.food_max_attempts is not None:
        config.food_max_attempts = args.food_max_attempts
    if getattr(args, "tick_ms", None) is not None:
        config.tick_ms = args.tick_ms
    return config


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Snake on a wrap-around board, in your terminal.")
    subparsers = parser.add_subparsers(dest="command")

    def add_common(sub):
        sub.add_argument("--size", type=_positive_int, default=None,
                         help="Board size (defaults to SNAKE_BOARD_SIZE or the terminal size)")
        sub.add_argument("--seed", type=int, default=None,
                         help="Seed for food placement")
        sub.add_argument("--food-max-attempts", type=_positive_int, default=None,
                         help="Random draws before food falls back to the free-cell list")

    play = subparsers.add_parser("play", help="Play interactively (default)")
    add_common(play)
    play.add_argument("--tick-ms", type=_positive_int, default=None,
                      help="How long each tick waits for a key, in milliseconds")

    simulate = subparsers.add_parser("simulate", help="Run a headless game with a random player")
    add_common(simulate)
    simulate.add_argument("--max-rounds", type=_positive_int, default=500,
                          help="Maximum number of rounds")
    simulate.add_argument("--print-board", action="store_true",
                          help="Print the board after every round")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        args = parser.parse_args(["play"])

    try:
        config = apply_overrides(load_config(), args)
    except ValueError as exc:
        parser.error(str(exc))

    if args.command == "simulate":
        setup_logging(config, interactive=False)
        result = run_simulation(config, args.max_rounds, print_board=args.print_board)
        print(json.dumps(result, indent=2))
        return result

    setup_logging(config, interactive=True)
    try:
        result = curses.wrapper(run_terminal, config)
    except TerminalTooSmall as exc:
        parser.error(str(exc))
    print(f"Final score: {result['score']} (length {result['length']}, {result['end_reason']})")
    return result


if __name__ == "__main__":
    main()
