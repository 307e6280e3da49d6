"""
Command line interface.

Usage:
    python main.py play WIDTH HEIGHT [--mines N] [--seed S] [--verbose]
    python main.py demo [--preset {beginner,intermediate,expert}] [--seed S]
"""
import argparse
import logging
import random
import sys
import time
from typing import Callable, List, Optional

import numpy as np

from .actions import CommandError, apply_action, parse_command
from .board import Board, BoardConfig, PRESETS
from .environment import MinesweeperEnv
from .errors import GenerationError, MineOpenedError, OutOfBoundsError
from .render import render_board


logger = logging.getLogger(__name__)

HELP_TEXT = "Enter 'x y' to reveal, 'f x y' to flag, 'c x y' to chord (1-based)."


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def play(
    args: argparse.Namespace, read_line: Callable[[], str] = input
) -> int:
    """Run an interactive game on stdin/stdout."""
    config = BoardConfig(args.width, args.height, args.mines)
    rng = random.Random(args.seed) if args.seed is not None else None
    board = Board.from_config(config, rng)
    logger.info(
        "Starting %dx%d game with %d mines",
        config.width, config.height, config.num_mines,
    )

    print(HELP_TEXT)
    print(render_board(board))
    while True:
        try:
            line = read_line()
        except EOFError:
            return 1

        try:
            apply_action(board, parse_command(line))
        except CommandError as error:
            print(error)
            continue
        except OutOfBoundsError as error:
            print(error)
            continue
        except MineOpenedError:
            board.reveal_all_mines()
            print()
            print(render_board(board))
            print("You lost!")
            return 1

        print()
        print(render_board(board))
        print()
        if board.is_won():
            print("You won!")
            return 0


def demo(args: argparse.Namespace) -> int:
    """Play random valid actions in the environment and show each step."""
    env = MinesweeperEnv(config=PRESETS[args.preset], render_mode="human")
    _, info = env.reset(seed=args.seed)
    rng = np.random.default_rng(args.seed)

    terminated = False
    while not terminated:
        # Reveal block of the mask only.
        reveal_mask = env.get_action_mask()[:env.board.width * env.board.height]
        action = int(rng.choice(np.flatnonzero(reveal_mask)))
        _, reward, terminated, _, info = env.step(action)
        env.render()
        print(f"Step {info['steps']} | Reward: {reward:.1f}\n")
        time.sleep(args.delay)

    print(f"Result: {info['game_state']}")
    return 0 if info["game_state"] == "WON" else 1


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Minefield - clear the board without opening a mine"
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser(
        "play", help="Play in the terminal", parents=[common]
    )
    play_parser.add_argument("width", type=int, help="Number of columns")
    play_parser.add_argument("height", type=int, help="Number of rows")
    play_parser.add_argument(
        "--mines", type=int, default=None,
        help="Number of mines (default: one per ten cells)",
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed"
    )

    # Demo command
    demo_parser = subparsers.add_parser(
        "demo", help="Watch random moves in the environment",
        parents=[common],
    )
    demo_parser.add_argument(
        "--preset", choices=sorted(PRESETS), default="beginner",
        help="Board size preset",
    )
    demo_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Seconds between moves"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(getattr(args, "verbose", False))

    try:
        if args.command == "play":
            return play(args)
        if args.command == "demo":
            return demo(args)
    except GenerationError as error:
        print(error, file=sys.stderr)
        return 2

    parser.print_help()
    return 0
