"""
Command-line front end for Minesweeper.

Usage:
    minesweeper play [--rows R] [--cols C] [--mines M] [--seed S]
    minesweeper demo [--games N] [--delay D] [--seed S]
"""
import argparse
import logging
import os
import random
import time
from typing import List, Optional, Tuple

import numpy as np

from .board import BoardConfig, render_text
from .environment import MinesweeperEnv
from .session import GameSession


logger = logging.getLogger(__name__)

HELP_TEXT = "Commands: r ROW COL (reveal), f ROW COL (flag), n (new game), q (quit)"


def clear_screen() -> None:
    os.system('cls' if os.name == 'nt' else 'clear')


# ============================================================================
# Interactive Play
# ============================================================================

def parse_command(line: str) -> Optional[Tuple[str, int, int]]:
    """
    Parse a line of player input.

    Returns:
        (action, row, col) where action is one of "reveal", "flag", "new"
        or "quit" (row and col are -1 for the last two), or None if the
        line is not a valid command.
    """
    parts = line.strip().lower().split()
    if not parts:
        return None

    verb = parts[0]
    if verb in ("q", "quit") and len(parts) == 1:
        return "quit", -1, -1
    if verb in ("n", "new") and len(parts) == 1:
        return "new", -1, -1
    if verb in ("r", "f") and len(parts) == 3:
        try:
            row, col = int(parts[1]), int(parts[2])
        except ValueError:
            return None
        return ("reveal" if verb == "r" else "flag"), row, col
    return None


class WallClock:
    """Drives ``GameSession.tick`` from wall-clock time."""

    def __init__(self, session: GameSession) -> None:
        self.session = session
        self.restart()

    def restart(self) -> None:
        self._last = time.monotonic()

    def advance(self) -> None:
        """Tick once for every whole second since the last call."""
        now = time.monotonic()
        seconds = int(now - self._last)
        for _ in range(seconds):
            self.session.tick()
        self._last += seconds


def status_line(session: GameSession) -> str:
    return (
        f"Flags: {session.flags_remaining} | "
        f"Time: {session.elapsed_seconds}s | "
        f"{session.phase.name}"
    )


def play(args: argparse.Namespace) -> None:
    """Play a game in the terminal."""
    config = BoardConfig(args.rows, args.cols, args.mines)
    rng = random.Random(args.seed) if args.seed is not None else None
    session = GameSession(config, rng=rng)
    clock = WallClock(session)

    print(HELP_TEXT)
    while True:
        print()
        print(render_text(session.board, show_coordinates=True))
        print(status_line(session))
        if session.is_won:
            print("Congratulations! You won. Enter n to play again.")
        elif session.is_lost:
            print("Game over! You hit a mine. Enter n to try again.")

        try:
            line = input("> ")
        except EOFError:
            break
        clock.advance()

        command = parse_command(line)
        if command is None:
            print(HELP_TEXT)
            continue

        action, row, col = command
        if action == "quit":
            break
        if action == "new":
            session.reset()
            clock.restart()
        elif action == "reveal":
            session.reveal(row, col)
        elif action == "flag":
            session.toggle_flag(row, col)


# ============================================================================
# Autoplay Demo
# ============================================================================

def demo(args: argparse.Namespace) -> None:
    """Watch random moves play Minesweeper."""
    config = BoardConfig(args.rows, args.cols, args.mines)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(args.seed)

    wins = 0
    for game in range(args.games):
        obs, info = env.reset(seed=None if args.seed is None else args.seed + game)
        done = False
        step = 0

        while not done:
            valid = np.flatnonzero(env.get_action_mask())
            action = int(rng.choice(valid))
            row, col = divmod(action, config.cols)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{args.games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({row}, {col})\n")
            print(env.render())

            if done:
                if info["game_state"] == "WON":
                    wins += 1
                    print("\n*** WIN! ***")
                else:
                    print("\n*** LOST (hit mine) ***")

            time.sleep(args.delay)

        logger.debug("Game %d finished after %d steps: %s", game + 1, step, info["game_state"])

    print(f"\n=== Final: {wins}/{args.games} wins ({100 * wins / args.games:.0f}%) ===")


# ============================================================================
# Entry Point
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game")
    demo_parser = subparsers.add_parser("demo", help="Watch random moves play")
    for sub in (play_parser, demo_parser):
        sub.add_argument("--rows", type=int, default=9, help="Number of rows")
        sub.add_argument("--cols", type=int, default=9, help="Number of columns")
        sub.add_argument("--mines", type=int, default=10, help="Number of mines")
        sub.add_argument("--seed", type=int, default=None, help="Random seed")

    demo_parser.add_argument("--games", type=int, default=5, help="Number of games")
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return

    try:
        BoardConfig(args.rows, args.cols, args.mines)
    except ValueError as error:
        parser.error(str(error))

    if args.command == "demo":
        if args.games < 1:
            parser.error("--games must be at least 1")
        if args.delay < 0:
            parser.error("--delay cannot be negative")

    if args.command == "play":
        play(args)
    elif args.command == "demo":
        demo(args)
