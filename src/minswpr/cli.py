"""
Minesweeper - command line entry point.

Usage:
    minswpr play [--config PATH] [--width W] [--height H] [--num-mines N]
                 [--difficulty {beginner,intermediate,expert}] [--seed N]
    minswpr difficulties
"""
import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .config import (
    DIFFICULTIES,
    ConfigError,
    GameConfig,
    apply_difficulty,
    board_config,
    read_config,
    resolve,
)
from .render import render_board, render_status
from .session import Game, GameState


logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  r X Y   reveal the cell at column X, row Y
  f X Y   toggle a flag
  c X Y   reveal the unflagged neighbors of a numbered cell
  n       new game
  q       quit"""


def load_config(args: argparse.Namespace) -> GameConfig:
    """
    Build the configuration for a game from the file and CLI overrides.

    Overrides are applied in order: file, explicit dimensions and mine
    count, then difficulty. A difficulty replaces the other values
    before they are validated. An explicit ``--config`` must exist; a
    resolved default that is missing falls back to the built-in board.
    """
    if args.config:
        path = Path(args.config)
    else:
        path = resolve()
        if not path.exists():
            logger.debug("No configuration file at %s, using defaults", path)
            if args.difficulty:
                return apply_difficulty(GameConfig(), args.difficulty)
            return _with_overrides(GameConfig(), args)

    print(f"using config: `{path}`")
    config = read_config(path, args.difficulty)
    if args.difficulty:
        return config
    return _with_overrides(config, args)


def _with_overrides(config: GameConfig, args: argparse.Namespace) -> GameConfig:
    board = config.board
    config.board = board_config(
        args.width if args.width is not None else board.width,
        args.height if args.height is not None else board.height,
        args.num_mines if args.num_mines is not None else board.num_mines,
    )
    return config


def run_game(game: Game, stdin: TextIO, stdout: TextIO) -> None:
    """
    Interactive terminal loop.

    Reads one command per line until ``q`` or end of input.
    """
    def show() -> None:
        print(render_board(game.board, show_mines=game.is_over), file=stdout)
        print(render_status(game), file=stdout)

    show()
    for line in stdin:
        parts = line.split()
        if not parts:
            continue

        command = parts[0].lower()
        if command == "q":
            break
        if command == "n":
            game.reset()
            show()
            continue
        if command not in ("r", "f", "c") or len(parts) != 3:
            print(HELP_TEXT, file=stdout)
            continue

        try:
            x, y = int(parts[1]), int(parts[2])
        except ValueError:
            print(f"Invalid position: {parts[1]} {parts[2]}", file=stdout)
            continue

        if command == "r":
            game.reveal(x, y)
        elif command == "f":
            game.toggle_flag(x, y)
        else:
            game.chord(x, y)
        show()

        if game.is_over:
            banner = "*** WIN! ***" if game.state == GameState.WON else "*** BOOM ***"
            print(banner, file=stdout)
            print("Type `n` for a new game or `q` to quit.", file=stdout)


def play(args: argparse.Namespace) -> int:
    """Play an interactive game in the terminal."""
    try:
        config = load_config(args)
    except ConfigError as e:
        print(f"could not load configuration: {e}", file=sys.stderr)
        return 1

    board = config.board
    print(f"Board: {board.width}x{board.height} with {board.num_mines} mines")
    print(HELP_TEXT)

    rng = random.Random(args.seed) if args.seed is not None else None
    run_game(Game(board, rng=rng), sys.stdin, sys.stdout)
    return 0


def difficulties(args: argparse.Namespace) -> int:
    """List the difficulty presets."""
    print(f"{'Difficulty':<14} {'Size':<8} {'Mines':>5}")
    print("-" * 29)
    for name, preset in DIFFICULTIES.items():
        size = f"{preset.width}x{preset.height}"
        print(f"{name:<14} {size:<8} {preset.num_mines:>5}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minswpr",
        description="A clone of the classic Minesweeper for the terminal",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--config",
        help="Configuration file, resolved automatically if not specified",
    )
    play_parser.add_argument(
        "-W", "--width", type=int, help="Cell-width of the board (overrides config)"
    )
    play_parser.add_argument(
        "-H", "--height", type=int, help="Cell-height of the board (overrides config)"
    )
    play_parser.add_argument(
        "-m", "--num-mines", type=int, help="Mines to place (overrides config)"
    )
    play_parser.add_argument(
        "--difficulty",
        choices=list(DIFFICULTIES),
        help="Difficulty preset (overrides width, height and num-mines)",
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )

    subparsers.add_parser("difficulties", help="List difficulty presets")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command == "play":
        return play(args)
    if args.command == "difficulties":
        return difficulties(args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
