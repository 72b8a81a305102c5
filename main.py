#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty {easy,medium,hard}] [--seed N]
    python main.py demo [--games N] [--delay S]
"""
import argparse
import logging
import time

import numpy as np

from minesweeper import (
    BoardConfig,
    BoardGenerator,
    Game,
    GameStatus,
    MinesweeperError,
)
from minesweeper.console import TickClock, parse_command, render
from minesweeper.environment import MinesweeperEnv


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Build the board config from a preset and optional overrides."""
    preset = BoardConfig.from_difficulty(args.difficulty)
    return BoardConfig(
        rows=args.rows if args.rows is not None else preset.rows,
        cols=args.cols if args.cols is not None else preset.cols,
        mine_count=args.mines if args.mines is not None else preset.mine_count,
    )


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    game = Game(build_config(args), BoardGenerator(seed=args.seed))
    clock = TickClock()

    print("Commands: r ROW COL (reveal), f ROW COL (flag), n (new), q (quit)")
    print(render(game.snapshot()))

    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        clock.catch_up(game)

        command = parse_command(line)
        if command is None:
            print("Unknown command")
            continue
        if command.action == "quit":
            break

        try:
            if command.action == "new":
                snapshot = game.new_game()
                clock.restart()
            elif command.action == "reveal":
                snapshot = game.reveal(command.row, command.col).snapshot
            else:
                snapshot = game.toggle_flag(command.row, command.col).snapshot
        except MinesweeperError as error:
            print(f"Error: {error}")
            continue

        print(render(snapshot))
        if snapshot.status == GameStatus.WON:
            print("\n*** WIN! *** (n for a new game, q to quit)")
        elif snapshot.status == GameStatus.LOST:
            print("\n*** LOST (hit mine) *** (n for a new game, q to quit)")


def demo(args: argparse.Namespace) -> None:
    """Watch random valid moves play through the gymnasium environment."""
    env = MinesweeperEnv(config=build_config(args), render_mode="ansi")
    rng = np.random.default_rng(args.seed)
    wins = 0

    for game in range(args.games):
        seed = args.seed + game if args.seed is not None else None
        env.reset(seed=seed)
        done = False
        step = 0

        while not done:
            mask = env.get_action_mask()
            reveal_actions = np.flatnonzero(mask[: env.action_space.n // 2])
            action = int(rng.choice(reveal_actions))
            _, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            print(f"=== Game {game + 1}/{args.games} | Step {step} ===")
            print(env.render())
            time.sleep(args.delay)

        if info.get("game_state") == "WON":
            wins += 1
            print("\n*** WIN! ***\n")
        else:
            print("\n*** LOST (hit mine) ***\n")

    print(f"=== Final: {wins}/{args.games} wins ===")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine debug output"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    def add_board_arguments(subparser: argparse.ArgumentParser) -> None:
        subparser.add_argument(
            "--difficulty",
            choices=["easy", "medium", "hard"],
            default="easy",
            help="Board preset",
        )
        subparser.add_argument("--rows", type=int, help="Override rows")
        subparser.add_argument("--cols", type=int, help="Override columns")
        subparser.add_argument("--mines", type=int, help="Override mine count")
        subparser.add_argument(
            "--seed", type=int, default=None, help="Random seed"
        )

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    demo_parser = subparsers.add_parser("demo", help="Watch random play")
    add_board_arguments(demo_parser)
    demo_parser.add_argument(
        "--games", type=int, default=3, help="Number of games"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "demo":
            demo(args)
        else:
            parser.print_help()
    except MinesweeperError as error:
        parser.error(str(error))


if __name__ == "__main__":
    main()
