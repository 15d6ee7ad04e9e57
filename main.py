#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--preset {beginner,intermediate,expert}]
                        [--width W] [--height H] [--mines M]
                        [--seed S] [--placement {sample,rejection}]
    python main.py presets
"""
import argparse
import logging
from dataclasses import replace
from typing import List, Optional

from minefield import PRESETS, Field, FieldConfig, GameState
from minefield.console import run_game
from minefield.placement import STRATEGIES


def build_config(args: argparse.Namespace) -> FieldConfig:
    """Start from the chosen preset and apply explicit overrides."""
    config = PRESETS[args.preset]
    overrides = {
        "width": args.width,
        "height": args.height,
        "num_mines": args.mines,
    }
    overrides = {
        key: value for key, value in overrides.items() if value is not None
    }
    return replace(config, **overrides)


def play(args: argparse.Namespace) -> int:
    """Play one game in the terminal."""
    try:
        config = build_config(args)
    except ValueError as error:
        print(f"Invalid field: {error}")
        return 2

    field = Field(config, seed=args.seed, placement=args.placement)
    print(
        f"Field: {config.width}x{config.height} with {config.num_mines} mines"
    )
    state = run_game(field)
    return 0 if state == GameState.WON else 1


def presets(args: argparse.Namespace) -> int:
    """List the preset difficulty levels."""
    print(f"{'Preset':<14} {'Width':>6} {'Height':>7} {'Mines':>6}")
    print("-" * 36)
    for name, config in PRESETS.items():
        print(
            f"{name:<14} {config.width:>6} {config.height:>7} "
            f"{config.num_mines:>6}"
        )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - Clear the field without hitting a mine"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default="beginner",
        help="Difficulty preset",
    )
    play_parser.add_argument("--width", type=int, help="Number of columns")
    play_parser.add_argument("--height", type=int, help="Number of rows")
    play_parser.add_argument("--mines", type=int, help="Number of mines")
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible fields"
    )
    play_parser.add_argument(
        "--placement",
        choices=sorted(STRATEGIES),
        default="sample",
        help="Mine placement strategy",
    )

    # Presets command
    subparsers.add_parser("presets", help="List difficulty presets")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command == "play":
        return play(args)
    if args.command == "presets":
        return presets(args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
